from .create_post import CreatePostUseCase
from .list_posts import ListPostsUseCase
from .get_post import GetPostUseCase
from .update_post import UpdatePostUseCase
from .delete_post import DeletePostUseCase
from .response_mapper import to_post_response

__all__ = [
    "CreatePostUseCase",
    "ListPostsUseCase",
    "GetPostUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
    "to_post_response",
]
