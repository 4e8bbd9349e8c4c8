"""Pydantic 스키마 - export only."""

from .base import HealthResponse, Record
from .book_schema import Book, BookDataset
from .dictionary_schema import DictionaryDataset, DictionaryEntry
from .encyclopedia_schema import EncyclopediaDataset, EncyclopediaEntry, EncyclopediaLocale
from .library_schema import LibraryDataset, Recipe

__all__ = [
    "Record",
    "HealthResponse",
    "Book",
    "BookDataset",
    "DictionaryEntry",
    "DictionaryDataset",
    "EncyclopediaEntry",
    "EncyclopediaLocale",
    "EncyclopediaDataset",
    "Recipe",
    "LibraryDataset",
]
