from .config import Settings, get_settings
from .exceptions import (
    BlogApiError,
    ValidationError,
    NotFoundError,
    PersistenceError,
)
from .logging import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "BlogApiError",
    "ValidationError",
    "NotFoundError",
    "PersistenceError",
    "setup_logging",
]
