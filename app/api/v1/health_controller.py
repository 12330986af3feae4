# External package imports
from fastapi import APIRouter


router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    """Health check endpoint - returns service status"""
    return {"status": "ok", "service": "blog"}
