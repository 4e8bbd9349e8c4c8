"""요리책 정보 API"""
from typing import Optional

from fastapi import APIRouter, Depends

from ahaan_thai.api.dependencies import get_book_service
from ahaan_thai.api.errors import http_error
from ahaan_thai.core.exceptions import AhaanThaiException
from ahaan_thai.schemas.book_schema import (
    AuthorBooksResponse,
    BookListResponse,
    BookStatistics,
    LanguageBooksResponse,
)
from ahaan_thai.services import BookService

router = APIRouter(prefix="/api/books", tags=["books"])


@router.get("", response_model=BookListResponse)
async def list_books(service: BookService = Depends(get_book_service)):
    try:
        books = await service.list_books()
    except AhaanThaiException as e:
        raise http_error(e)
    return BookListResponse(count=len(books), books=books)


@router.get("/search", response_model=BookListResponse)
async def search_books(
    query: Optional[str] = None,
    language: Optional[str] = None,
    level: Optional[str] = None,
    author: Optional[str] = None,
    year: Optional[str] = None,
    publisher: Optional[str] = None,
    service: BookService = Depends(get_book_service),
):
    """모든 조건은 선택이며 AND로 결합됩니다."""
    try:
        books = await service.search_books(
            query=query,
            language=language,
            level=level,
            author=author,
            year=year,
            publisher=publisher,
        )
    except AhaanThaiException as e:
        raise http_error(e)
    return BookListResponse(count=len(books), books=books)


@router.get("/stats", response_model=BookStatistics)
async def get_statistics(service: BookService = Depends(get_book_service)):
    try:
        return await service.get_statistics()
    except AhaanThaiException as e:
        raise http_error(e)


@router.get("/isbn/{isbn}")
async def get_book_by_isbn(isbn: str, service: BookService = Depends(get_book_service)):
    try:
        return await service.get_book_by_isbn(isbn)
    except AhaanThaiException as e:
        raise http_error(e)


@router.get("/author/{author}", response_model=AuthorBooksResponse)
async def get_books_by_author(author: str, service: BookService = Depends(get_book_service)):
    try:
        books = await service.get_books_by_author(author)
    except AhaanThaiException as e:
        raise http_error(e)
    return AuthorBooksResponse(author=author, count=len(books), books=books)


@router.get("/language/{language}", response_model=LanguageBooksResponse)
async def get_books_by_language(language: str, service: BookService = Depends(get_book_service)):
    try:
        books = await service.get_books_by_language(language)
    except AhaanThaiException as e:
        raise http_error(e)
    return LanguageBooksResponse(language=language, count=len(books), books=books)
