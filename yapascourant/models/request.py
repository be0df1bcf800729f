# --- Pydantic Models ---
from pydantic import BaseModel
from typing import Optional, Union


class ScoreRequest(BaseModel):
    name: Optional[str] = None
    location: Optional[str] = None
    game: Optional[str] = None
    score: Optional[Union[int, float]] = None


class VoteRequest(BaseModel):
    game: Optional[str] = None


class CommentRequest(BaseModel):
    name: Optional[str] = None
    comment: Optional[str] = None
