from ..database import DatabaseManager
from ..logger import get_logger
import asyncio

logger = get_logger()


async def startup_event(db: DatabaseManager):
    """Connect to the database before accepting traffic"""
    try:
        await db.initialize()
        logger.info("Database initialized")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise


async def shutdown_event(db: DatabaseManager):
    """Close database connections"""
    try:
        async with asyncio.timeout(5.0):
            await db.close()
            logger.info("Database connections closed")
    except asyncio.TimeoutError:
        logger.warning("Shutdown timed out, database client left open")
    except Exception as e:
        logger.error(f"Error during shutdown: {e}")
