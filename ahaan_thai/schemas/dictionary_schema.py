"""태국 음식 사전 스키마"""
from typing import Any, Optional

from pydantic import BaseModel, Field

from .base import Record


class DictionaryEntry(Record):
    """사전 항목 (네 필드 모두 필수 - 누락은 upstream 데이터 결함)"""
    meaning_de: str = Field(..., description="독일어 뜻")
    meaning_en: str = Field(..., description="영어 뜻")
    trans_de: str = Field(..., description="독일어 표기 전사")
    trans_en: str = Field(..., description="영어 표기 전사")


# category -> thai term -> entry
DictionaryDataset = dict[str, dict[str, DictionaryEntry]]


class CategorySummary(BaseModel):
    key: str
    name: str
    count: int


class DictionarySearchResponse(BaseModel):
    query: str
    category: Optional[str] = None
    count: int
    results: list[dict[str, Any]]


class DictionaryCategoryResponse(BaseModel):
    category: str
    count: int
    items: list[dict[str, Any]]
