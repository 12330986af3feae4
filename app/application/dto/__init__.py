from .post_dto import (
    AuthorPayload,
    PostCreateRequest,
    PostUpdateRequest,
    PostResponse,
)

__all__ = [
    "AuthorPayload",
    "PostCreateRequest",
    "PostUpdateRequest",
    "PostResponse",
]
