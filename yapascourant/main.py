import sys
from contextlib import asynccontextmanager
from typing import Optional

import pydantic
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from . import __version__
from .config import Settings
from .core.events import shutdown_event, startup_event
from .database import DatabaseManager
from .errors import ServiceError, ValidationError
from .logger import get_logger, set_level
from .routes import comment, debug, frontend, health, score, vote

logger = get_logger()


def create_app(settings: Optional[Settings] = None, db: Optional[DatabaseManager] = None) -> FastAPI:
    """
    Build the API application.

    - **settings**: loaded from the environment when omitted
    - **db**: database manager; built from the settings when omitted
    """
    if settings is None:
        settings = Settings()
    if db is None:
        db = DatabaseManager(settings)
    set_level(settings.log_level)
    logger.info(f"Starting server with configuration: {settings.summary()}")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await startup_event(db)
        yield
        await shutdown_event(db)

    app = FastAPI(
        default_response_class=ORJSONResponse,
        title="Ya Pas Courant API",
        description="Scores, votes and comments for the Ya Pas Courant games",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = db

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(f"{request.method} {request.url.path} failed: {exc.__class__.__name__}: {exc}")
        return ORJSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(development=settings.is_development),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.errors()}")
        return ORJSONResponse(status_code=400, content=ValidationError().to_dict())

    app.include_router(health.router, prefix="/api")
    app.include_router(score.router, prefix="/api")
    app.include_router(vote.router, prefix="/api")
    app.include_router(comment.router, prefix="/api")
    if settings.enable_debug_routes:
        logger.warning("Debug routes enabled: /debug/scores and /debug/reset-scores are not protected")
        app.include_router(debug.router, prefix="/debug")
    # Catch-all, must stay last
    app.include_router(frontend.router)

    return app


def run():
    try:
        settings = Settings()
    except pydantic.ValidationError as e:
        missing = [str(err['loc'][0]).upper() for err in e.errors() if err['type'] == 'missing']
        if missing:
            logger.error(f"Missing required environment variable: {', '.join(missing)}")
        else:
            logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    import uvicorn

    app = create_app(settings)
    # uvicorn exits when the lifespan startup fails, so an unreachable database stops the process
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        lifespan="on",
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
