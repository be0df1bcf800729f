from typing import List, Optional
from pymongo import DESCENDING
from ..core.leaderboard import build_leaderboard
from ..models.data import Leader, ScoreRec
from ..logger import get_logger

logger = get_logger()

# Insertion id breaks ties between records saved in the same millisecond
NEWEST_FIRST = [('date', DESCENDING), ('_id', DESCENDING)]


class ScoreManager:
    def __init__(self, db_connection):
        self.db = db_connection

    @property
    def collection(self):
        return self.db.collection('scores')

    async def insert_score(self, rec: ScoreRec) -> ScoreRec:
        """Append a score submission"""
        result = await self.collection.insert_one(rec.to_document())
        rec.id = str(result.inserted_id)
        logger.info(f"Saved score {rec.score} for {rec.name!r} ({rec.location!r}) on {rec.game!r}")
        return rec

    async def get_records(self, game: Optional[str] = None) -> List[ScoreRec]:
        """Raw score records, newest first, optionally for one game"""
        query = {'game': game} if game is not None else {}
        docs = await self.collection.find(query).sort(NEWEST_FIRST).to_list(length=None)
        return [ScoreRec.from_document(doc) for doc in docs]

    async def get_leaderboard(self, game: Optional[str] = None) -> List[Leader]:
        """Deduplicated leaderboard for one game, or across all games when game is None"""
        records = await self.get_records(game)
        leaders = build_leaderboard(records, per_game=game is None)
        logger.debug(f"Leaderboard for {game or 'all games'}: {len(records)} records, {len(leaders)} players")
        return leaders

    async def reset(self) -> int:
        """Delete every score record"""
        result = await self.collection.delete_many({})
        logger.warning(f"All scores have been reset ({result.deleted_count} deleted)")
        return result.deleted_count
