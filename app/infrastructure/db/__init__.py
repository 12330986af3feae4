from .mongo_connection import get_client, get_database, get_post_collection, close_connection
from .mongo_post_repository import MongoPostRepository

__all__ = [
    "get_client",
    "get_database",
    "get_post_collection",
    "close_connection",
    "MongoPostRepository",
]
