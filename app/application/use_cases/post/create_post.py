# Standard library imports
import logging

# Local application imports
from ....core.exceptions import ValidationError
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.post import Author, BlogPost
from ....utils.datetime_utils import utc_now
from ...dto.post_dto import PostCreateRequest, PostResponse
from .response_mapper import to_post_response

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """Use case for creating a new blog post"""
    
    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository
    
    def _check_required_fields(self, request: PostCreateRequest) -> None:
        """Raise ValidationError naming the first missing required field"""
        required = [
            ("title", request.title),
            ("content", request.content),
            ("author", request.author),
        ]
        if request.author is not None:
            required.extend([
                ("author.firstName", request.author.first_name),
                ("author.lastName", request.author.last_name),
            ])
        
        for field_name, value in required:
            if value is None:
                raise ValidationError(
                    f"Missing `{field_name}` in request body",
                    details={"field": field_name},
                )
    
    async def execute(self, request: PostCreateRequest) -> PostResponse:
        """
        Create a new post
        
        Args:
            request: Post creation request
            
        Returns:
            PostResponse with the assigned id and created timestamp
            
        Raises:
            ValidationError: If a required field is missing or empty.
                Nothing is written in that case.
        """
        self._check_required_fields(request)
        
        # Domain validation rejects blank title/author names
        new_post = BlogPost(
            id=None,  # Will be set by repository
            title=request.title,
            content=request.content,
            author=Author(
                first_name=request.author.first_name,
                last_name=request.author.last_name,
            ),
            created=utc_now(),
        )
        
        saved_post = await self.post_repository.insert(new_post)
        logger.info(f"Created post {saved_post.id} by {saved_post.author_name}")
        
        return to_post_response(saved_post)
