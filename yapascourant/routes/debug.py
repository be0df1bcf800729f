from typing import List
from fastapi import APIRouter, Depends
from pymongo.errors import ConnectionFailure
from ..database import DatabaseManager
from ..dependencies import get_db
from ..errors import DatabaseConnectionError, ServiceError, UnexpectedError
from ..models.response import ResetResponse, ScoreEntry
from ..logger import get_logger

logger = get_logger()
router = APIRouter()

# Only mounted when ENABLE_DEBUG_ROUTES is set


@router.get("/scores", response_model=List[ScoreEntry])
async def dump_scores(db: DatabaseManager = Depends(get_db)):
    """Every stored score record, newest first, without deduplication."""
    try:
        records = await db.get_raw_scores()
        return [rec.to_dict() for rec in records]
    except ServiceError:
        raise
    except ConnectionFailure as e:
        logger.error(f"Database unreachable while fetching raw scores: {e}")
        raise DatabaseConnectionError()
    except Exception as e:
        logger.error(f"Error fetching raw scores: {e}")
        raise UnexpectedError(str(e))


@router.post("/reset-scores", response_model=ResetResponse)
async def reset_scores(db: DatabaseManager = Depends(get_db)):
    try:
        deleted = await db.reset_scores()
        return ResetResponse(message="All scores have been reset successfully", deleted=deleted)
    except ServiceError:
        raise
    except ConnectionFailure as e:
        logger.error(f"Database unreachable while resetting scores: {e}")
        raise DatabaseConnectionError()
    except Exception as e:
        logger.error(f"Error resetting scores: {e}")
        raise UnexpectedError(str(e))
