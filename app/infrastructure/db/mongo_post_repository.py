# Standard library imports
import logging
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import PersistenceError
from ...domain.repositories.post_repository import PostRepository
from ...domain.models.post import Author, BlogPost
from ...domain.constants import PostFields, AuthorFields
from ...utils.datetime_utils import utc_now, ensure_utc
from .mongo_connection import get_post_collection

logger = logging.getLogger(__name__)

# Fields that must never be written by an update
_IMMUTABLE_FIELDS = (PostFields.MONGO_ID, PostFields.ID, PostFields.CREATED)


def _to_object_id(post_id: str) -> Optional[ObjectId]:
    """Parse a post ID; malformed IDs cannot match any document"""
    if not post_id:
        return None
    try:
        return ObjectId(post_id)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoPostRepository(PostRepository):
    """MongoDB implementation of PostRepository"""
    
    def __init__(self, post_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.post_collection = post_collection if post_collection is not None else get_post_collection()
    
    async def insert(self, post: BlogPost) -> BlogPost:
        """
        Insert a new post
        
        Args:
            post: BlogPost domain model (its id is ignored)
            
        Returns:
            Inserted BlogPost with ID and created timestamp set
        """
        if not post:
            raise ValueError("Post cannot be None")
        
        post_dict = self._post_to_dict(post)
        try:
            result = await self.post_collection.insert_one(post_dict)
            
            # Fetch and return the newly created document
            new_document = await self.post_collection.find_one({PostFields.MONGO_ID: result.inserted_id})
        except PyMongoError as e:
            logger.error(f"Error inserting post: {e}", exc_info=True)
            raise PersistenceError(f"Error inserting post: {str(e)}") from e
        
        if new_document is None:
            raise PersistenceError("Post was created but could not be retrieved")
        
        return self._document_to_post(new_document)
    
    async def insert_many(self, posts: List[BlogPost]) -> List[BlogPost]:
        """
        Insert several posts at once
        
        Args:
            posts: BlogPost domain models
            
        Returns:
            Inserted posts, in the order given, with IDs set
        """
        if not posts:
            return []
        
        documents = [self._post_to_dict(post) for post in posts]
        try:
            result = await self.post_collection.insert_many(documents)
        except PyMongoError as e:
            logger.error(f"Error inserting {len(documents)} posts: {e}", exc_info=True)
            raise PersistenceError(f"Error inserting posts: {str(e)}") from e
        
        inserted = []
        for document, inserted_id in zip(documents, result.inserted_ids):
            document[PostFields.MONGO_ID] = inserted_id
            inserted.append(self._document_to_post(document))
        return inserted
    
    async def find_by_id(self, post_id: str) -> Optional[BlogPost]:
        """
        Find post by ID
        
        Args:
            post_id: The post ID to find
            
        Returns:
            BlogPost domain model if found, None otherwise
        """
        object_id = _to_object_id(post_id)
        if object_id is None:
            return None
        
        try:
            document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error finding post {post_id}: {e}", exc_info=True)
            raise PersistenceError(f"Error finding post by ID: {str(e)}") from e
        
        if document is None:
            return None
        return self._document_to_post(document)
    
    async def find_one(self) -> Optional[BlogPost]:
        """Find any single post, None if the collection is empty"""
        try:
            document = await self.post_collection.find_one({})
        except PyMongoError as e:
            logger.error(f"Error finding a post: {e}", exc_info=True)
            raise PersistenceError(f"Error finding a post: {str(e)}") from e
        
        if document is None:
            return None
        return self._document_to_post(document)
    
    async def find_all(self) -> List[BlogPost]:
        """
        Find all posts
        
        Returns:
            List of BlogPost domain models
        """
        try:
            cursor = self.post_collection.find({})
            posts = []
            async for document in cursor:
                posts.append(self._document_to_post(document))
            return posts
        except PyMongoError as e:
            logger.error(f"Error listing posts: {e}", exc_info=True)
            raise PersistenceError(f"Error listing posts: {str(e)}") from e
    
    async def count(self) -> int:
        """Count stored posts"""
        try:
            return await self.post_collection.count_documents({})
        except PyMongoError as e:
            logger.error(f"Error counting posts: {e}", exc_info=True)
            raise PersistenceError(f"Error counting posts: {str(e)}") from e
    
    async def update_by_id(self, post_id: str, fields: Dict[str, Any]) -> bool:
        """
        Set the given fields on an existing post
        
        Args:
            post_id: The post ID to update
            fields: Mapping of PostFields names to new values. An Author value
                is stored as the embedded author document. The ID and created
                fields are never written.
            
        Returns:
            True if a post matched the ID, False otherwise
        """
        object_id = _to_object_id(post_id)
        if object_id is None:
            return False
        
        update_fields = {
            key: self._author_to_dict(value) if isinstance(value, Author) else value
            for key, value in fields.items()
            if key not in _IMMUTABLE_FIELDS
        }
        
        try:
            if not update_fields:
                document = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
                return document is not None
            
            update_result = await self.post_collection.update_one(
                {PostFields.MONGO_ID: object_id},
                {"$set": update_fields}
            )
        except PyMongoError as e:
            logger.error(f"Error updating post {post_id}: {e}", exc_info=True)
            raise PersistenceError(f"Error updating post: {str(e)}") from e
        
        return update_result.matched_count > 0
    
    async def delete_by_id(self, post_id: str) -> None:
        """
        Delete post by ID
        
        Args:
            post_id: The post ID to delete. Unknown or malformed IDs are a no-op.
        """
        object_id = _to_object_id(post_id)
        if object_id is None:
            return
        
        try:
            await self.post_collection.delete_one({PostFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error deleting post {post_id}: {e}", exc_info=True)
            raise PersistenceError(f"Error deleting post: {str(e)}") from e
    
    def _document_to_post(self, document: Dict[str, Any]) -> BlogPost:
        """
        Convert MongoDB document to BlogPost domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            BlogPost domain model
        """
        if not document:
            raise ValueError("Invalid document: document is None or empty")
        
        author_document = document.get(PostFields.AUTHOR) or {}
        
        # Stored documents are returned as they are, even ones written by
        # other clients with blank fields
        return BlogPost(
            id=str(document[PostFields.MONGO_ID]),
            title=document.get(PostFields.TITLE) or "",
            content=document.get(PostFields.CONTENT) or "",
            author=Author(
                first_name=author_document.get(AuthorFields.FIRST_NAME) or "",
                last_name=author_document.get(AuthorFields.LAST_NAME) or "",
                validate=False,
            ),
            created=ensure_utc(document.get(PostFields.CREATED)),
            validate=False,
        )
    
    def _post_to_dict(self, post: BlogPost) -> Dict[str, Any]:
        """
        Convert BlogPost domain model to a new MongoDB document
        
        The _id is left to MongoDB; created defaults to now.
        """
        return {
            PostFields.TITLE: post.title,
            PostFields.CONTENT: post.content,
            PostFields.AUTHOR: self._author_to_dict(post.author),
            PostFields.CREATED: post.created or utc_now(),
        }
    
    def _author_to_dict(self, author: Author) -> Dict[str, str]:
        return {
            AuthorFields.FIRST_NAME: author.first_name,
            AuthorFields.LAST_NAME: author.last_name,
        }
