import time
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, Request
from ..config import Settings
from ..dependencies import get_settings
from ..models.response import HealthResponse, ServiceDescriptor
from ..logger import get_logger

logger = get_logger()
router = APIRouter()

# Track application start time
start_time = time.time()

ENDPOINTS = {
    'health': '/api/health',
    'scores': '/api/scores',
    'scoresByGame': '/api/scores/:game',
    'votes': '/api/votes',
    'comments': '/api/comments',
}


@router.get("", response_model=ServiceDescriptor)
async def describe_service():
    return ServiceDescriptor(message="Ya Pas Courant API", endpoints=ENDPOINTS)


@router.get("/health", response_model=HealthResponse)
@router.head("/health")
async def health_check(request: Request, settings: Settings = Depends(get_settings)):
    """Health check endpoint, reports whether the database is connected"""
    db = request.app.state.db
    response = HealthResponse(
        db="connected" if db is not None and db.connected else "disconnected",
        timestamp=datetime.now(timezone.utc),
        environment=settings.environment,
        uptime=time.time() - start_time
    )
    logger.debug(f"Health check response: {response.model_dump()}")
    return response
