from typing import Dict, List, Optional
from ..config import Settings
from ..models.data import CommentRec, Leader, ScoreRec, VoteRec
from .connection import DatabaseConnection
from .comment_manager import CommentManager
from .score_manager import ScoreManager
from .vote_manager import VoteManager
from ..logger import get_logger

logger = get_logger()


class DatabaseManager:
    """Entry point for request handlers: one instance per application, held on app.state."""

    def __init__(self, settings: Settings, client=None):
        self.db_connection = DatabaseConnection(settings, client=client)
        self.score_manager = ScoreManager(self.db_connection)
        self.vote_manager = VoteManager(self.db_connection, settings.vote_games)
        self.comment_manager = CommentManager(self.db_connection, settings.comments_limit)

    async def initialize(self):
        """Open the connection; raises if MongoDB cannot be reached"""
        try:
            await self.db_connection.initialize()
            logger.info("Database manager initialized successfully")
        except Exception as e:
            logger.error(f"Failed to initialize database manager: {e}")
            raise

    async def close(self):
        await self.db_connection.close()

    @property
    def connected(self) -> bool:
        return self.db_connection.connected

    async def add_score(self, rec: ScoreRec) -> ScoreRec:
        return await self.score_manager.insert_score(rec)

    async def get_leaderboard(self, game: Optional[str] = None) -> List[Leader]:
        return await self.score_manager.get_leaderboard(game)

    async def get_raw_scores(self) -> List[ScoreRec]:
        return await self.score_manager.get_records()

    async def reset_scores(self) -> int:
        return await self.score_manager.reset()

    async def cast_vote(self, rec: VoteRec) -> Dict[str, int]:
        """Record the vote and return the updated tally"""
        await self.vote_manager.cast_vote(rec)
        return await self.vote_manager.get_tally()

    async def get_votes(self) -> Dict[str, int]:
        return await self.vote_manager.get_tally()

    async def add_comment(self, rec: CommentRec) -> CommentRec:
        return await self.comment_manager.add_comment(rec)

    async def get_comments(self) -> List[CommentRec]:
        return await self.comment_manager.get_recent()
