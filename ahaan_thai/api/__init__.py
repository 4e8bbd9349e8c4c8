"""API 엔드포인트 패키지 - export only."""

from .dependencies import get_services
from .routes import book_router, dictionary_router, encyclopedia_router, health_router, library_router

__all__ = [
    "health_router",
    "dictionary_router",
    "book_router",
    "library_router",
    "encyclopedia_router",
    "get_services",
]
