"""태국 음식 사전 API"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from ahaan_thai.api.dependencies import get_dictionary_service
from ahaan_thai.api.errors import http_error
from ahaan_thai.core.config import settings
from ahaan_thai.core.exceptions import AhaanThaiException, TermNotFoundException
from ahaan_thai.schemas.dictionary_schema import (
    CategorySummary,
    DictionaryCategoryResponse,
    DictionarySearchResponse,
)
from ahaan_thai.services import DictionaryService

router = APIRouter(prefix="/api/dictionary", tags=["dictionary"])


@router.get("/categories", response_model=list[CategorySummary])
async def list_categories(service: DictionaryService = Depends(get_dictionary_service)):
    try:
        return await service.list_categories()
    except AhaanThaiException as e:
        raise http_error(e)


@router.get("/search", response_model=DictionarySearchResponse)
async def search_dictionary(
    q: str = Query(..., min_length=1, description="검색어 (태국어/독일어/영어)"),
    category: Optional[str] = None,
    service: DictionaryService = Depends(get_dictionary_service),
):
    try:
        results = await service.search(q, category)
    except AhaanThaiException as e:
        raise http_error(e)
    return DictionarySearchResponse(query=q, category=category, count=len(results), results=results)


@router.get("/category/{category}", response_model=DictionaryCategoryResponse)
async def get_category(category: str, service: DictionaryService = Depends(get_dictionary_service)):
    try:
        items = await service.get_category(category)
    except AhaanThaiException as e:
        raise http_error(e)
    return DictionaryCategoryResponse(category=category, count=len(items), items=items)


@router.get("/translate/{word}")
async def translate_word(word: str, service: DictionaryService = Depends(get_dictionary_service)):
    """
    태국어 단어 번역 (정확히 일치)

    없으면 404와 함께 유사 단어를 제안합니다.
    """
    try:
        result = await service.translate_word(word)
        if result is None:
            suggestions = await service.suggest_terms(word, limit=settings.suggestion_limit)
            raise TermNotFoundException(word, [s["thai"] for s in suggestions])
    except AhaanThaiException as e:
        raise http_error(e)
    return result
