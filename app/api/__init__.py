"""
API layer for the Blog Backend.

Exposes the /posts CRUD endpoints and a /health check.
"""
