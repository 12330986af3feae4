from typing import TYPE_CHECKING
from ...domain.repositories.post_repository import PostRepository
from ...infrastructure.db.mongo_post_repository import MongoPostRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        post_collection = container.get("post_collection")
        
        # Domain interface -> Infrastructure implementation
        container.register_singleton(
            PostRepository,
            MongoPostRepository(post_collection=post_collection)
        )
