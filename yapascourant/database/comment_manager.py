from typing import List
from pymongo import DESCENDING
from ..models.data import CommentRec
from ..logger import get_logger

logger = get_logger()


class CommentManager:
    def __init__(self, db_connection, limit: int = 50):
        self.db = db_connection
        self.limit = limit

    @property
    def collection(self):
        return self.db.collection('comments')

    async def add_comment(self, rec: CommentRec) -> CommentRec:
        result = await self.collection.insert_one(rec.to_document())
        rec.id = str(result.inserted_id)
        logger.info(f"Saved comment from {rec.name!r}")
        return rec

    async def get_recent(self) -> List[CommentRec]:
        """Most recent comments, newest first"""
        cursor = self.collection.find().sort([('timestamp', DESCENDING), ('_id', DESCENDING)]).limit(self.limit)
        docs = await cursor.to_list(length=self.limit)
        return [CommentRec.from_document(doc) for doc in docs]
