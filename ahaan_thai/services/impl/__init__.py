"""Services implementation package."""

from .book_service import BookService
from .cache_service import TTLCache
from .dataset_service import DatasetService
from .dictionary_service import DictionaryService
from .encyclopedia_service import EncyclopediaService
from .library_service import LibraryService

__all__ = [
    "BookService",
    "TTLCache",
    "DatasetService",
    "DictionaryService",
    "EncyclopediaService",
    "LibraryService",
]
