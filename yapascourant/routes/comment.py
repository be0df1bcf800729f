from typing import List
from fastapi import APIRouter, Depends
from pymongo.errors import ConnectionFailure
from ..database import DatabaseManager
from ..dependencies import get_db
from ..errors import DatabaseConnectionError, ServiceError, UnexpectedError
from ..models.data import CommentRec
from ..models.response import CommentEntry
from ..models.request import CommentRequest
from .validation import require_fields
from ..logger import get_logger

logger = get_logger()
router = APIRouter()


@router.post("/comments", response_model=CommentEntry, status_code=201)
async def submit_comment(data: CommentRequest, db: DatabaseManager = Depends(get_db)):
    try:
        require_fields(data, ('name', 'comment'), "Nom et commentaire requis.")
        rec = await db.add_comment(CommentRec(data.name, data.comment))
        return rec.to_dict()
    except ServiceError:
        raise
    except ConnectionFailure as e:
        logger.error(f"Database unreachable while saving comment: {e}")
        raise DatabaseConnectionError()
    except Exception as e:
        logger.error(f"Erreur POST commentaire: {e}")
        raise UnexpectedError(str(e))


@router.get("/comments", response_model=List[CommentEntry])
async def get_comments(db: DatabaseManager = Depends(get_db)):
    """The 50 most recent comments, newest first."""
    try:
        comments = await db.get_comments()
        return [comment.to_dict() for comment in comments]
    except ServiceError:
        raise
    except ConnectionFailure as e:
        logger.error(f"Database unreachable while fetching comments: {e}")
        raise DatabaseConnectionError()
    except Exception as e:
        logger.error(f"Error fetching comments: {e}")
        raise UnexpectedError(str(e))
