from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class AuthorPayload(BaseModel):
    """DTO for the author object of a create/update request"""
    model_config = ConfigDict(populate_by_name=True)
    
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")


class PostCreateRequest(BaseModel):
    """
    DTO for post creation request.
    
    Every field is optional at the schema level so that a missing field is
    reported by the use case as a 400, not by pydantic.
    """
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[AuthorPayload] = None


class PostUpdateRequest(BaseModel):
    """DTO for post update request - only the supplied fields are applied"""
    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[AuthorPayload] = None


class PostResponse(BaseModel):
    """DTO for post response (author collapsed into a display name)"""
    id: str
    title: str
    content: str
    author: str
    created: str
