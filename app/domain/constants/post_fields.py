"""Constants for BlogPost model field names"""


class PostFields:
    """Field name constants for BlogPost model"""
    ID = "id"
    TITLE = "title"
    CONTENT = "content"
    AUTHOR = "author"
    CREATED = "created"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field


class AuthorFields:
    """Field name constants for the embedded author document"""
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
