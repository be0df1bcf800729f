from fastapi import Request
from .config import Settings
from .database import DatabaseManager
from .errors import DatabaseConnectionError


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> DatabaseManager:
    """The application's database manager; rejects requests until it is connected"""
    db = request.app.state.db
    if db is None or not db.connected:
        raise DatabaseConnectionError()
    return db


def get_client_id(request: Request) -> str:
    """Coarse voter identity taken from the request address"""
    settings = request.app.state.settings
    if settings.trust_forwarded_for:
        forwarded = request.headers.get('x-forwarded-for')
        if forwarded:
            return forwarded.split(',')[0].strip()
    if request.client is not None:
        return request.client.host
    return 'unknown'
