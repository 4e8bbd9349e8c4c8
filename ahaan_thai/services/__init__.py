"""비즈니스 로직 서비스 - export only."""

from .factory import ServiceRegistry, create_services
from .impl import (
    BookService,
    DatasetService,
    DictionaryService,
    EncyclopediaService,
    LibraryService,
    TTLCache,
)

__all__ = [
    "ServiceRegistry",
    "create_services",
    "BookService",
    "DatasetService",
    "DictionaryService",
    "EncyclopediaService",
    "LibraryService",
    "TTLCache",
]
