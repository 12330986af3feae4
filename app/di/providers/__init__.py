from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .post_provider import PostProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "PostProvider",
]
