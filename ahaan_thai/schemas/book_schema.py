"""요리책 정보 스키마"""
from typing import Any

from pydantic import BaseModel

from .base import Record


class Book(Record):
    """요리책 메타데이터

    upstream 값은 타입과 무관하게 그대로 보존합니다 (숫자 title, 소수 level 등).
    shop == "amazon"이고 target이 있으면 변환 단계에서 url이 만들어지고 target은 제거됩니다.
    """
    title: Any = None
    author: Any = None
    year: Any = None
    lang: Any = None
    isbn: Any = None
    level: Any = None
    publisher: Any = None
    description: Any = None
    location: Any = None
    image: Any = None
    shop: Any = None
    target: Any = None
    text: Any = None
    url: Any = None


BookDataset = list[Book]


class BookListResponse(BaseModel):
    count: int
    books: list[dict[str, Any]]


class AuthorBooksResponse(BookListResponse):
    author: str


class LanguageBooksResponse(BookListResponse):
    language: str


class BookStatistics(BaseModel):
    total_books: int
    languages: dict[str, int]
    levels: dict[str, int]
    authors: dict[str, int]
    publishers: dict[str, int]
    years: dict[str, int]
    locations: dict[str, int]
