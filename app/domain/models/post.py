# Standard library imports
from dataclasses import InitVar, dataclass
from datetime import datetime
from typing import Optional

# Local application imports
from ...core.exceptions import ValidationError


def _is_blank(value: Optional[str]) -> bool:
    return value is None or len(value.strip()) < 1


@dataclass
class Author:
    """Author of a blog post - stored as first/last name, displayed joined"""
    first_name: str
    last_name: str
    validate: InitVar[bool] = True
    
    def __post_init__(self, validate: bool) -> None:
        """Business validations (skipped for documents read back from storage)"""
        if not validate:
            return
        if _is_blank(self.first_name):
            raise ValidationError("Author first name is required")
        if _is_blank(self.last_name):
            raise ValidationError("Author last name is required")
    
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass
class BlogPost:
    """
    Pure domain model for BlogPost entity.
    
    `id` and `created` stay None until the post has been inserted; both are
    immutable afterwards.
    """
    id: Optional[str]
    title: str
    content: str
    author: Author
    created: Optional[datetime] = None
    validate: InitVar[bool] = True
    
    def __post_init__(self, validate: bool) -> None:
        """Business validations (skipped for documents read back from storage)"""
        if not validate:
            return
        if _is_blank(self.title):
            raise ValidationError("Post title is required")
        if self.content is None:
            raise ValidationError("Post content is required")
    
    @property
    def author_name(self) -> str:
        """Display name of the author, e.g. "Billy Bob" """
        return self.author.full_name
