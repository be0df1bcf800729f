from datetime import datetime
from pydantic import BaseModel
from typing import Dict, Literal, Optional, Union


class ScoreEntry(BaseModel):
    id: Optional[str] = None
    name: str
    location: str
    game: str
    score: Optional[Union[int, float]] = None
    date: Optional[datetime] = None


class LeaderboardEntry(ScoreEntry):
    rank: int


class CommentEntry(BaseModel):
    id: Optional[str] = None
    name: str
    comment: str
    timestamp: datetime


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    db: Literal["connected", "disconnected"]
    timestamp: datetime
    environment: str
    uptime: float


class ServiceDescriptor(BaseModel):
    message: str
    status: Literal["running"] = "running"
    endpoints: Dict[str, str]


class ResetResponse(BaseModel):
    message: str
    deleted: int
