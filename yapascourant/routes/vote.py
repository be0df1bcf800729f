from typing import Dict
from fastapi import APIRouter, Depends
from pymongo.errors import ConnectionFailure
from ..database import DatabaseManager
from ..dependencies import get_client_id, get_db
from ..errors import DatabaseConnectionError, ServiceError, UnexpectedError
from ..models.data import VoteRec
from ..models.request import VoteRequest
from .validation import require_fields
from ..logger import get_logger

logger = get_logger()
router = APIRouter()


@router.post("/votes", response_model=Dict[str, int], status_code=201)
async def submit_vote(
    data: VoteRequest,
    db: DatabaseManager = Depends(get_db),
    client_id: str = Depends(get_client_id)
):
    """Vote for a game, once per client. Returns the updated tally."""
    try:
        require_fields(data, ('game',), "Le jeu est requis pour voter")
        return await db.cast_vote(VoteRec(data.game, client_id))
    except ServiceError:
        raise
    except ConnectionFailure as e:
        logger.error(f"Database unreachable while saving vote: {e}")
        raise DatabaseConnectionError()
    except Exception as e:
        logger.error(f"Error saving vote: {e}")
        raise UnexpectedError(str(e))


@router.get("/votes", response_model=Dict[str, int])
async def get_votes(db: DatabaseManager = Depends(get_db)):
    try:
        return await db.get_votes()
    except ServiceError:
        raise
    except ConnectionFailure as e:
        logger.error(f"Database unreachable while fetching votes: {e}")
        raise DatabaseConnectionError()
    except Exception as e:
        logger.error(f"Error fetching votes: {e}")
        raise UnexpectedError(str(e))
