"""요리책 정보 조회 서비스"""
from typing import Any, Optional

from ahaan_thai.core.exceptions import (
    AuthorNotFoundException,
    BookNotFoundException,
    LanguageNotFoundException,
)
from ahaan_thai.core.logging import logger
from ahaan_thai.schemas.book_schema import Book, BookDataset
from ahaan_thai.services.impl.dataset_service import DatasetService
from ahaan_thai.utils.text import contains_ci, count_by, equals_as_str

NO_DESCRIPTION = "No description available"


def book_summary(book: Book, detailed: bool = False) -> dict[str, Any]:
    """목록/검색 응답용 요약. detailed=True면 location, image 포함"""
    summary: dict[str, Any] = {
        "title": book.title,
        "author": book.author,
        "year": book.year,
        "language": book.lang,
        "isbn": book.isbn,
        "level": book.level,
        "publisher": book.publisher,
        "description": book.description or NO_DESCRIPTION,
    }
    if detailed:
        summary["location"] = book.location
        summary["image"] = book.image
    if book.url:
        summary["url"] = book.url
    return {key: value for key, value in summary.items() if value is not None}


class BookService:
    """요리책 메타데이터 목록/필터/통계"""

    def __init__(self, dataset: DatasetService[BookDataset]):
        self.dataset = dataset

    async def list_books(self) -> list[dict[str, Any]]:
        books = await self.dataset.fetch_dataset()
        return [book_summary(book) for book in books]

    async def search_books(
        self,
        query: Optional[str] = None,
        language: Optional[str] = None,
        level: Optional[str] = None,
        author: Optional[str] = None,
        year: Optional[str] = None,
        publisher: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        """
        조건별 AND 필터 (없는 조건은 무시)

        - query: 제목/저자/설명/본문(text) 부분 일치, 대소문자 무시
        - language: lang 완전 일치
        - level, year: 문자열 변환 후 완전 일치
        - author, publisher: 부분 일치, 대소문자 무시
        """
        books: list[Book] = list(await self.dataset.fetch_dataset())

        if query:
            q = query.lower()
            books = [
                b for b in books
                if contains_ci(b.title, q)
                or contains_ci(b.author, q)
                or contains_ci(b.description, q)
                or contains_ci(b.text, q)
            ]
        if language:
            books = [b for b in books if b.lang == language]
        if level:
            books = [b for b in books if equals_as_str(b.level, level)]
        if author:
            a = author.lower()
            books = [b for b in books if contains_ci(b.author, a)]
        if year:
            books = [b for b in books if equals_as_str(b.year, year)]
        if publisher:
            p = publisher.lower()
            books = [b for b in books if contains_ci(b.publisher, p)]

        logger.info(f"[BOOKS] search: {len(books)} results")
        return [book_summary(book, detailed=True) for book in books]

    async def get_book_by_isbn(self, isbn: str) -> dict[str, Any]:
        books = await self.dataset.fetch_dataset()
        for book in books:
            if equals_as_str(book.isbn, isbn):
                return book.to_dict()
        raise BookNotFoundException(isbn)

    async def get_books_by_author(self, author: str) -> list[dict[str, Any]]:
        books = await self.dataset.fetch_dataset()
        a = author.lower()
        matched = [book.to_dict() for book in books if contains_ci(book.author, a)]
        if not matched:
            raise AuthorNotFoundException(author)
        return matched

    async def get_books_by_language(self, language: str) -> list[dict[str, Any]]:
        books = await self.dataset.fetch_dataset()
        matched = [book.to_dict() for book in books if book.lang == language]
        if not matched:
            raise LanguageNotFoundException(language)
        return matched

    async def get_statistics(self) -> dict[str, Any]:
        """언어/난이도/저자/출판사/연도/위치별 개수 (각각 내림차순)"""
        books = await self.dataset.fetch_dataset()
        return {
            "total_books": len(books),
            "languages": count_by(b.lang for b in books),
            "levels": count_by(b.level for b in books),
            "authors": count_by(b.author for b in books),
            "publishers": count_by(b.publisher for b in books),
            "years": count_by(b.year for b in books),
            "locations": count_by(b.location for b in books),
        }
