"""
Blog Backend Application - root package.

This package contains the FastAPI app entry point (main.py), the /posts API
routes, the blog post domain model and use cases, and the MongoDB
infrastructure backing them.
"""
