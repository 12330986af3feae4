from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from ..models.post import BlogPost


class PostRepository(ABC):
    """Repository interface - defines contract for blog post data access"""
    
    @abstractmethod
    async def insert(self, post: BlogPost) -> BlogPost:
        """Insert a new post and return it with its assigned ID"""
        pass
    
    @abstractmethod
    async def insert_many(self, posts: List[BlogPost]) -> List[BlogPost]:
        """Insert several posts at once"""
        pass
    
    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[BlogPost]:
        """Find post by ID"""
        pass
    
    @abstractmethod
    async def find_one(self) -> Optional[BlogPost]:
        """Find any single post"""
        pass
    
    @abstractmethod
    async def find_all(self) -> List[BlogPost]:
        """Find all posts"""
        pass
    
    @abstractmethod
    async def count(self) -> int:
        """Count stored posts"""
        pass
    
    @abstractmethod
    async def update_by_id(self, post_id: str, fields: Dict[str, Any]) -> bool:
        """Set the given persistence fields on a post. Returns False if no post matched"""
        pass
    
    @abstractmethod
    async def delete_by_id(self, post_id: str) -> None:
        """Delete post by ID (no-op if absent)"""
        pass
