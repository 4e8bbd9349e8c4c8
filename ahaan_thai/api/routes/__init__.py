"""API routes package."""

from .book_routes import router as book_router
from .dictionary_routes import router as dictionary_router
from .encyclopedia_routes import router as encyclopedia_router
from .health_routes import router as health_router
from .library_routes import router as library_router

__all__ = [
    "health_router",
    "dictionary_router",
    "book_router",
    "library_router",
    "encyclopedia_router",
]
