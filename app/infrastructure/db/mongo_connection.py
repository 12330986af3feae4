# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import get_settings

logger = logging.getLogger(__name__)

POSTS_COLLECTION = "posts"

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_client() -> AsyncIOMotorClient:
    """
    Get MongoDB client (singleton pattern)
    
    The client connects lazily, so creating it does not touch the network.
    
    Returns:
        Motor client instance
    """
    global _mongo_client
    
    if _mongo_client is None:
        settings = get_settings()
        _mongo_client = AsyncIOMotorClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=10000,
            connectTimeoutMS=10000,
        )
    return _mongo_client


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)
    
    Returns:
        MongoDB database instance
    """
    global _mongo_database
    
    if _mongo_database is not None:
        return _mongo_database
    
    settings = get_settings()
    _mongo_database = get_client()[settings.mongo_database_name]
    return _mongo_database


def get_post_collection() -> AsyncIOMotorCollection:
    """
    Get posts collection from MongoDB
    
    Returns:
        MongoDB collection for blog posts
    """
    return get_database()[POSTS_COLLECTION]


def close_connection() -> None:
    """Close the MongoDB client, if one was opened"""
    global _mongo_client, _mongo_database
    
    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB connection closed")
    _mongo_client = None
    _mongo_database = None
