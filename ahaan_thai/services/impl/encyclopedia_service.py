"""태국 음식 백과사전 조회 서비스"""
import copy
from typing import Any, Iterable, Optional

from ahaan_thai.core.logging import logger, sanitize_for_log
from ahaan_thai.schemas.encyclopedia_schema import (
    EncyclopediaDataset,
    EncyclopediaEntry,
    EncyclopediaLocale,
)
from ahaan_thai.services.impl.dataset_service import DatasetService
from ahaan_thai.utils.text import any_contains_ci, contains_ci

DEFAULT_SEARCH_LIMIT = 20
DEFAULT_LIST_LIMIT = 100

# 태국 4대 지역 (데이터셋과 무관한 고정 테이블)
REGIONS: dict[str, dict[str, str]] = {
    "central": {
        "key_de": "zentralthailand",
        "key_en": "central-thailand",
        "thai": "ภาคกลาง",
        "trans_de": "Phak Klang",
        "trans_en": "Phak Klang",
        "title_de": "Zentralthailand",
        "title_en": "Central Thailand",
    },
    "north": {
        "key_de": "nordthailand",
        "key_en": "northern-thailand",
        "thai": "ภาคเหนือ",
        "trans_de": "Phak Nuea",
        "trans_en": "Phak Nuea",
        "title_de": "Nordthailand",
        "title_en": "Northern Thailand",
    },
    "isaan": {
        "key_de": "nordostthailand",
        "key_en": "northeastern-thailand",
        "thai": "ภาคอีสาน",
        "trans_de": "Phak Isan",
        "trans_en": "Phak Isan",
        "title_de": "Nordostthailand (Isaan)",
        "title_en": "Northeastern Thailand (Isaan)",
    },
    "south": {
        "key_de": "suedthailand",
        "key_en": "southern-thailand",
        "thai": "ปักษ์ใต้",
        "trans_de": "Pak Tai",
        "trans_en": "Pak Tai",
        "title_de": "Südthailand",
        "title_en": "Southern Thailand",
    },
}

# 관계 필드 의미 (고정 테이블)
RELATIONSHIPS: dict[str, dict[str, str]] = {
    "uses": {"title_de": "Verwendet", "title_en": "Uses"},
    "usedBy": {"title_de": "Verwendung", "title_en": "Usages"},
    "fits": {"title_de": "Passt gut zu", "title_en": "Fits"},
    "fittedBy": {"title_de": "Dazu passt gut", "title_en": "Best accompanied by"},
    "variations": {"title_de": "Variationen", "title_en": "Variations"},
    "variationOf": {"title_de": "Eine Variation von", "title_en": "A Variation of"},
}


def _locale_matches(locale: EncyclopediaLocale, query_lower: str) -> bool:
    return (
        contains_ci(locale.transcription, query_lower)
        or contains_ci(locale.summary, query_lower)
        or contains_ci(locale.description, query_lower)
        or any_contains_ci(locale.tags, query_lower)
        or any_contains_ci(locale.regions, query_lower)
    )


def _entry_matches(entry: EncyclopediaEntry, query_lower: str) -> bool:
    if contains_ci(entry.thai_name, query_lower):
        return True
    if any_contains_ci(entry.alternative_names, query_lower):
        return True
    return any(_locale_matches(locale, query_lower) for locale in entry.locales())


def _first(entries: Iterable[EncyclopediaEntry], limit: int) -> list[dict[str, Any]]:
    results: list[dict[str, Any]] = []
    if limit <= 0:
        return results
    for entry in entries:
        results.append(entry.to_dict())
        if len(results) >= limit:
            break
    return results


class EncyclopediaService:
    """백과사전 항목 검색/필터 및 지역/관계 참조 테이블"""

    def __init__(self, dataset: DatasetService[EncyclopediaDataset]):
        self.dataset = dataset

    async def search_entries(self, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> list[dict[str, Any]]:
        """
        이름, 별칭, 언어별 전사/요약/설명/태그/지역에서 부분 일치 검색

        limit개를 모으면 즉시 중단합니다 (원본 순서 유지).
        """
        data = await self.dataset.fetch_dataset()
        query_lower = query.lower()
        results = _first((e for e in data if _entry_matches(e, query_lower)), limit)
        logger.info(f"[ENCYCLOPEDIA] search '{sanitize_for_log(query)}': {len(results)} results")
        return results

    async def get_entries_by_region(self, region: str, limit: int = DEFAULT_SEARCH_LIMIT) -> list[dict[str, Any]]:
        data = await self.dataset.fetch_dataset()
        region_lower = region.lower()
        return _first(
            (
                e for e in data
                if any(any_contains_ci(loc.regions, region_lower) for loc in e.locales())
            ),
            limit,
        )

    async def get_entries_by_tag(self, tag: str, limit: int = DEFAULT_SEARCH_LIMIT) -> list[dict[str, Any]]:
        data = await self.dataset.fetch_dataset()
        tag_lower = tag.lower()
        return _first(
            (e for e in data if any(any_contains_ci(loc.tags, tag_lower) for loc in e.locales())),
            limit,
        )

    async def get_all_entries(self, limit: Optional[int] = DEFAULT_LIST_LIMIT) -> list[dict[str, Any]]:
        data = await self.dataset.fetch_dataset()
        return _first(data, limit if limit is not None else len(data))

    def list_regions(self) -> dict[str, dict[str, str]]:
        return copy.deepcopy(REGIONS)

    def list_relationships(self) -> dict[str, dict[str, str]]:
        return copy.deepcopy(RELATIONSHIPS)
