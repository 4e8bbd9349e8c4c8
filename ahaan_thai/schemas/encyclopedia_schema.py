"""태국 음식 백과사전 스키마"""
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .base import Record

# 관계 필드는 단일 URL 또는 URL 목록
LinkValue = Union[str, list[str]]


class EncyclopediaLocale(Record):
    """언어별(de/en) 본문"""

    model_config = ConfigDict(extra="allow", populate_by_name=True, alias_generator=to_camel)

    transcription: Optional[str] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[list[str]] = None
    regions: Optional[list[str]] = None
    recipes: Optional[LinkValue] = None
    url: Optional[LinkValue] = None
    used_by: Optional[LinkValue] = None
    uses: Optional[LinkValue] = None
    fits: Optional[LinkValue] = None
    fitted_by: Optional[LinkValue] = None
    variations: Optional[LinkValue] = None
    variation_of: Optional[LinkValue] = None


class EncyclopediaEntry(Record):
    model_config = ConfigDict(extra="allow", populate_by_name=True, alias_generator=to_camel)

    thai_name: Optional[str] = None
    alternative_names: Optional[list[str]] = None
    image_url: Optional[str] = None
    de: Optional[EncyclopediaLocale] = None
    en: Optional[EncyclopediaLocale] = None

    def locales(self) -> list[EncyclopediaLocale]:
        return [loc for loc in (self.de, self.en) if loc is not None]


EncyclopediaDataset = list[EncyclopediaEntry]


class EncyclopediaSearchResponse(BaseModel):
    query: str
    count: int
    results: list[dict[str, Any]]


class EncyclopediaEntriesResponse(BaseModel):
    count: int
    entries: list[dict[str, Any]]


class RegionEntriesResponse(EncyclopediaEntriesResponse):
    region: str


class TagEntriesResponse(EncyclopediaEntriesResponse):
    tag: str
