"""도메인별 데이터셋 변환기 - export only."""

from .base import DatasetTransformer
from .book import BookTransformer, process_book
from .dictionary import DictionaryTransformer
from .encyclopedia import EncyclopediaTransformer, process_entry
from .library import LibraryTransformer, process_recipe

__all__ = [
    "DatasetTransformer",
    "BookTransformer",
    "DictionaryTransformer",
    "EncyclopediaTransformer",
    "LibraryTransformer",
    "process_book",
    "process_entry",
    "process_recipe",
]
