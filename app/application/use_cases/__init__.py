from .post import (
    CreatePostUseCase,
    ListPostsUseCase,
    GetPostUseCase,
    UpdatePostUseCase,
    DeletePostUseCase,
)

__all__ = [
    "CreatePostUseCase",
    "ListPostsUseCase",
    "GetPostUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
]
