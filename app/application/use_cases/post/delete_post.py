# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository

logger = logging.getLogger(__name__)


class DeletePostUseCase:
    """Use case for deleting a blog post"""
    
    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository
    
    async def execute(self, post_id: str) -> None:
        """
        Delete a post permanently.
        
        Deleting an unknown ID succeeds as well; the caller only learns that
        the post is gone.
        
        Args:
            post_id: ID of the post
        """
        await self.post_repository.delete_by_id(post_id)
        logger.info(f"Deleted post {post_id}")
