from .post_controller import router as post_router
from .health_controller import router as health_router


__all__ = ["post_router", "health_router"]
