from typing import Dict, List
from ..errors import ConflictError
from ..models.data import VoteRec
from ..logger import get_logger

logger = get_logger()


class VoteManager:
    def __init__(self, db_connection, games: List[str]):
        self.db = db_connection
        self.games = list(games)

    @property
    def collection(self):
        return self.db.collection('votes')

    async def cast_vote(self, rec: VoteRec) -> None:
        """
        Record one vote per client and game.

        The lookup and the insert are two separate operations, so two
        simultaneous requests from one client can both get through.
        """
        existing = await self.collection.find_one({'game': rec.game, 'client': rec.client})
        if existing is not None:
            logger.info(f"Rejected duplicate vote for {rec.game!r} from {rec.client}")
            raise ConflictError()
        await self.collection.insert_one(rec.to_document())
        logger.info(f"Recorded vote for {rec.game!r} from {rec.client}")

    async def get_tally(self) -> Dict[str, int]:
        """Vote counts for the known games, zero when a game has no votes"""
        counts = {game: 0 for game in self.games}
        rows = await self.collection.aggregate([
            {'$group': {'_id': '$game', 'count': {'$sum': 1}}}
        ]).to_list(length=None)
        for row in rows:
            if row['_id'] in counts:
                counts[row['_id']] = row['count']
        return counts
