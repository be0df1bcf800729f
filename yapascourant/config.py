from pathlib import Path
from typing import List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CORS_ORIGINS = [
    'https://yapascourant.gombonumerique.com',
    'https://yapascourant-main.vercel.app',
    'http://localhost:3000',
]

DEFAULT_VOTE_GAMES = ['delestage', 'panne', 'detective']


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

    mongodb_uri: str
    database_name: str = 'ya-pas-courant'
    server_selection_timeout_ms: int = 5000

    environment: str = Field(
        'production',
        validation_alias=AliasChoices('ENVIRONMENT', 'NODE_ENV', 'environment'),
    )
    host: str = '0.0.0.0'
    port: int = 3001
    log_level: str = 'INFO'

    cors_origins: List[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    static_dir: Path = Path('build')

    vote_games: List[str] = Field(default_factory=lambda: list(DEFAULT_VOTE_GAMES))
    comments_limit: int = Field(50, ge=1)
    enable_debug_routes: bool = False
    # Only enable behind a proxy that overwrites X-Forwarded-For
    trust_forwarded_for: bool = False

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == 'development'

    def summary(self) -> dict:
        """Configuration safe to log: the connection string is masked."""
        return {
            'ENVIRONMENT': self.environment,
            'PORT': self.port,
            'MONGODB_URI': '[SET]' if self.mongodb_uri else '[NOT SET]',
            'DATABASE_NAME': self.database_name,
            'CORS_ORIGINS': self.cors_origins,
            'DEBUG_ROUTES': self.enable_debug_routes,
        }
