# Standard library imports
import logging
from typing import Any, Dict

# Local application imports
from ....core.exceptions import NotFoundError, ValidationError
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.post import Author
from ....domain.constants import PostFields
from ...dto.post_dto import PostUpdateRequest, PostResponse
from .response_mapper import to_post_response

logger = logging.getLogger(__name__)


class UpdatePostUseCase:
    """Use case for partially updating a blog post"""
    
    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository
    
    def _collect_fields(self, request: PostUpdateRequest) -> Dict[str, Any]:
        """
        Build the fields to set from the ones present in the request body
        
        A field sent as null counts as present, so it is rejected rather
        than silently ignored.
        """
        supplied = request.model_fields_set
        fields: Dict[str, Any] = {}
        
        if "title" in supplied:
            if request.title is None or not request.title.strip():
                raise ValidationError("Post title cannot be empty", details={"field": "title"})
            fields[PostFields.TITLE] = request.title
        
        if "content" in supplied:
            if request.content is None:
                raise ValidationError("Post content cannot be null", details={"field": "content"})
            fields[PostFields.CONTENT] = request.content
        
        if "author" in supplied:
            if request.author is None:
                raise ValidationError("Post author cannot be null", details={"field": "author"})
            fields[PostFields.AUTHOR] = Author(
                first_name=request.author.first_name,
                last_name=request.author.last_name,
            )
        
        return fields
    
    async def execute(self, post_id: str, request: PostUpdateRequest) -> PostResponse:
        """
        Apply the supplied fields to an existing post
        
        Args:
            post_id: ID from the request path
            request: Update request; fields left out are not changed
            
        Returns:
            PostResponse of the updated post
            
        Raises:
            ValidationError: If the body id differs from the path id, or a
                supplied field is empty
            NotFoundError: If no post has this ID
        """
        # ObjectId hex strings are case-insensitive
        if request.id is not None and request.id.lower() != post_id.lower():
            raise ValidationError(
                f"Request path id ({post_id}) and request body id ({request.id}) must match",
                details={"path_id": post_id, "body_id": request.id},
            )
        
        fields = self._collect_fields(request)
        
        matched = await self.post_repository.update_by_id(post_id, fields)
        if not matched:
            raise NotFoundError(post_id)
        
        updated_post = await self.post_repository.find_by_id(post_id)
        if updated_post is None:
            # Deleted between the update and the read
            raise NotFoundError(post_id)
        
        logger.info(f"Updated post {post_id} fields: {sorted(fields)}")
        return to_post_response(updated_post)
