"""API routers."""

from .meetings import router as meetings_router
from .votes import router as votes_router

__all__ = [
    "meetings_router",
    "votes_router",
]
