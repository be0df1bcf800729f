from pathlib import Path
from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse
from ..config import Settings
from ..dependencies import get_settings
from ..errors import NotFoundError

router = APIRouter()


def resolve_static(static_dir: Path, path: str) -> Path:
    """
    Map a request path to a file of the front-end build.

    Existing files are served as they are; anything else falls back to
    index.html so the single-page app can route it. Paths escaping the
    build directory also get index.html.
    """
    root = static_dir.resolve()
    if path:
        candidate = (root / path).resolve()
        if candidate.is_relative_to(root) and candidate.is_file():
            return candidate
    return root / 'index.html'


@router.get("/{full_path:path}", include_in_schema=False)
async def serve_frontend(full_path: str, settings: Settings = Depends(get_settings)):
    if full_path == 'api' or full_path.startswith('api/'):
        raise NotFoundError()
    target = resolve_static(settings.static_dir, full_path)
    if not target.is_file():
        raise NotFoundError("Front-end build not found")
    return FileResponse(target)
