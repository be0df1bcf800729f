from typing import List
from fastapi import APIRouter, Depends, Path
from pymongo.errors import ConnectionFailure
from ..database import DatabaseManager
from ..dependencies import get_db
from ..errors import DatabaseConnectionError, ServiceError, UnexpectedError
from ..models.data import ScoreRec
from ..models.response import LeaderboardEntry, ScoreEntry
from ..models.request import ScoreRequest
from .validation import require_fields
from ..logger import get_logger

logger = get_logger()
router = APIRouter()

SCORE_FIELDS = ('name', 'location', 'game', 'score')


@router.post("/scores", response_model=ScoreEntry, status_code=201)
async def submit_score(data: ScoreRequest, db: DatabaseManager = Depends(get_db)):
    """
    Record a score submission.

    - **name**: player name
    - **location**: player location, part of the player identity
    - **game**: game identifier
    - **score**: numeric score
    """
    try:
        require_fields(data, SCORE_FIELDS, "Tous les champs sont requis pour enregistrer un score")
        rec = await db.add_score(ScoreRec(data.name, data.location, data.game, data.score))
        return rec.to_dict()
    except ServiceError:
        raise
    except ConnectionFailure as e:
        logger.error(f"Database unreachable while saving score: {e}")
        raise DatabaseConnectionError()
    except Exception as e:
        logger.error(f"Error saving score: {e}")
        raise UnexpectedError(str(e))


@router.get("/scores", response_model=List[LeaderboardEntry])
async def get_all_scores(db: DatabaseManager = Depends(get_db)):
    """Leaderboard across all games: latest score per player and game, best first."""
    try:
        leaders = await db.get_leaderboard()
        return [leader.to_dict() for leader in leaders]
    except ServiceError:
        raise
    except ConnectionFailure as e:
        logger.error(f"Database unreachable while fetching scores: {e}")
        raise DatabaseConnectionError()
    except Exception as e:
        logger.error(f"Error fetching scores: {e}")
        raise UnexpectedError(str(e))


@router.get("/scores/{game}", response_model=List[LeaderboardEntry])
async def get_game_scores(
    game: str = Path(..., min_length=1),
    db: DatabaseManager = Depends(get_db)
):
    """
    Leaderboard for one game.

    Each player (name + location) appears once with their most recent
    score, even if an earlier attempt scored higher.
    """
    try:
        leaders = await db.get_leaderboard(game)
        logger.info(f"Leaderboard for {game!r}: {len(leaders)} players")
        return [leader.to_dict() for leader in leaders]
    except ServiceError:
        raise
    except ConnectionFailure as e:
        logger.error(f"Database unreachable while fetching scores for {game!r}: {e}")
        raise DatabaseConnectionError()
    except Exception as e:
        logger.error(f"Error fetching scores for {game!r}: {e}")
        raise UnexpectedError(str(e))
