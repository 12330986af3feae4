from .post import Author, BlogPost

__all__ = ["Author", "BlogPost"]
