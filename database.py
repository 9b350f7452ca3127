"""
Database connection and utilities for MongoDB
"""

import logging
from contextlib import asynccontextmanager
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from typing import AsyncIterator, Optional

from config import settings

logger = logging.getLogger(__name__)

class DatabaseConnection:
    """MongoDB connection manager"""

    def __init__(self, mongo_url: Optional[str] = None, db_name: Optional[str] = None):
        self.mongo_url = mongo_url or settings.mongo_url
        self.db_name = db_name or settings.db_name
        self.client: Optional[AsyncIOMotorClient] = None
        self.database: Optional[AsyncIOMotorDatabase] = None

    async def connect(self):
        """Connect to MongoDB"""
        try:
            self.client = AsyncIOMotorClient(self.mongo_url)
            self.database = self.client[self.db_name]

            # Test the connection
            await self.client.admin.command('ping')
            logger.info(f"Connected to MongoDB: {self.db_name}")

        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            if self.client:
                self.client.close()
            self.client = None
            self.database = None
            raise

    async def disconnect(self):
        """Disconnect from MongoDB"""
        if self.client:
            self.client.close()
            self.client = None
            self.database = None
            logger.info("Disconnected from MongoDB")

@asynccontextmanager
async def open_database(
    mongo_url: Optional[str] = None, db_name: Optional[str] = None
) -> AsyncIterator[AsyncIOMotorDatabase]:
    """Connect, yield the database and always close the client"""
    connection = DatabaseConnection(mongo_url, db_name)
    await connection.connect()
    try:
        yield connection.database
    finally:
        await connection.disconnect()

def get_collection(db: AsyncIOMotorDatabase, name: str):
    """Get a configured collection, e.g. get_collection(db, "carts")"""
    return db[getattr(settings, f"{name}_collection")]

__all__ = ['DatabaseConnection', 'open_database', 'get_collection']
