# Local application imports
from ....domain.models.post import BlogPost
from ....utils.datetime_utils import to_iso
from ...dto.post_dto import PostResponse


def to_post_response(post: BlogPost) -> PostResponse:
    """
    Shape a stored post into its public representation
    
    Args:
        post: BlogPost that has been persisted (id and created set)
        
    Returns:
        PostResponse with the author collapsed into "<firstName> <lastName>"
    """
    return PostResponse(
        id=post.id or "",
        title=post.title,
        content=post.content,
        author=post.author_name,
        created=to_iso(post.created) or "",
    )
