"""Constants for domain model field names"""

from .post_fields import PostFields, AuthorFields

__all__ = [
    "PostFields",
    "AuthorFields",
]
