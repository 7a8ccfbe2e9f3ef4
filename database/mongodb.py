"""
MongoDB connection holder for the FlightOps360 back-office.

One client per process, opened in the app lifespan and shared by every
request handler through the get_database dependency.
"""

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class Database:
    client: Optional[AsyncIOMotorClient] = None
    db: Optional[AsyncIOMotorDatabase] = None

    async def connect(self, mongo_url: str, db_name: str) -> None:
        try:
            self.client = AsyncIOMotorClient(mongo_url)
            self.db = self.client[db_name]
            await self.client.admin.command('ping')
        except Exception as e:
            logger.error(f"FlightOps360 could not reach MongoDB ({db_name}): {e}")
            raise
        logger.info(f"FlightOps360 connected to MongoDB database {db_name}")

    async def disconnect(self) -> None:
        if self.client is None:
            return
        self.client.close()
        self.client = None
        self.db = None
        logger.info("FlightOps360 MongoDB client closed")

    def get_db(self) -> AsyncIOMotorDatabase:
        if self.db is None:
            raise RuntimeError("MongoDB is not connected; the app lifespan has not run")
        return self.db


db = Database()


async def get_database() -> AsyncIOMotorDatabase:
    """FastAPI dependency for the shared database handle"""
    return db.get_db()
