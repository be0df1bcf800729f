import asyncio
from motor.motor_asyncio import AsyncIOMotorClient
from ..config import Settings
from ..errors import DatabaseConnectionError
from ..logger import get_logger

logger = get_logger()

COLLECTIONS = ('scores', 'votes', 'comments')


class DatabaseConnection:
    def __init__(self, settings: Settings, client=None):
        self.settings = settings
        self.client = client
        self.db = None
        self._initialized = False
        self._init_lock = asyncio.Lock()

    async def initialize(self):
        """Connect to MongoDB and make sure every collection exists"""
        if self._initialized:
            return

        async with self._init_lock:
            if self._initialized:  # Double check after acquiring lock
                return

            try:
                logger.info("Attempting to connect to MongoDB...")
                if self.client is None:
                    self.client = AsyncIOMotorClient(
                        self.settings.mongodb_uri,
                        serverSelectionTimeoutMS=self.settings.server_selection_timeout_ms,
                        tz_aware=True,
                    )
                self.db = self.client[self.settings.database_name]
                await self.db.command('ping')

                existing = await self.db.list_collection_names()
                logger.info(f"Available collections: {existing}")
                for name in COLLECTIONS:
                    if name not in existing:
                        await self.db.create_collection(name)
                        logger.info(f"Created collection {name}")

                self._initialized = True
                logger.info("Connected to MongoDB successfully")
            except Exception as e:
                logger.error(f"Failed to connect to MongoDB: {e}")
                await self.close()
                raise

    @property
    def connected(self) -> bool:
        return self._initialized

    def collection(self, name: str):
        """Get a collection, failing if the connection is not up yet"""
        if not self._initialized:
            raise DatabaseConnectionError()
        return self.db[name]

    async def close(self):
        """Close the MongoDB client"""
        if self.client is not None:
            self.client.close()
        self.db = None
        self._initialized = False
