"""태국 음식 사전 조회 서비스"""
from typing import Any, Optional

from rapidfuzz import fuzz, process, utils

from ahaan_thai.core.exceptions import CategoryNotFoundException
from ahaan_thai.core.logging import logger, sanitize_for_log
from ahaan_thai.schemas.dictionary_schema import DictionaryDataset, DictionaryEntry
from ahaan_thai.services.impl.dataset_service import DatasetService
from ahaan_thai.utils.text import contains_ci, to_display_name


def _matches(thai: str, entry: DictionaryEntry, query_lower: str) -> bool:
    return (
        contains_ci(thai, query_lower)
        or contains_ci(entry.meaning_de, query_lower)
        or contains_ci(entry.meaning_en, query_lower)
        or contains_ci(entry.trans_de, query_lower)
        or contains_ci(entry.trans_en, query_lower)
    )


class DictionaryService:
    """카테고리 → 태국어 단어 → 번역 구조의 사전 조회"""

    def __init__(self, dataset: DatasetService[DictionaryDataset]):
        self.dataset = dataset

    async def get_categories(self) -> list[str]:
        data = await self.dataset.fetch_dataset()
        return list(data.keys())

    async def list_categories(self) -> list[dict[str, Any]]:
        data = await self.dataset.fetch_dataset()
        return [
            {"key": key, "name": to_display_name(key), "count": len(terms)}
            for key, terms in data.items()
        ]

    async def full_dictionary(self) -> dict[str, dict[str, dict[str, Any]]]:
        data = await self.dataset.fetch_dataset()
        return {
            category: {thai: entry.to_dict() for thai, entry in terms.items()}
            for category, terms in data.items()
        }

    async def search(self, query: str, category: Optional[str] = None) -> list[dict[str, Any]]:
        """
        태국어 단어와 번역 4개 필드에서 부분 문자열 검색 (대소문자 무시)

        Args:
            query: 검색어 (태국어/영어/독일어)
            category: 지정 시 해당 카테고리만. 없는 카테고리면 빈 결과

        Returns:
            [{category, thai, meaning_de, meaning_en, trans_de, trans_en}, ...] (원본 순서)
        """
        data = await self.dataset.fetch_dataset()
        query_lower = query.lower()

        if category is not None:
            categories = [category] if category in data else []
        else:
            categories = list(data.keys())

        results: list[dict[str, Any]] = []
        for name in categories:
            for thai, entry in data[name].items():
                if _matches(thai, entry, query_lower):
                    results.append({"category": name, "thai": thai, **entry.to_dict()})

        logger.info(
            f"[DICTIONARY] search '{sanitize_for_log(query)}' "
            f"(category={category or '*'}): {len(results)} results"
        )
        return results

    async def get_category(self, category: str) -> list[dict[str, Any]]:
        data = await self.dataset.fetch_dataset()
        if category not in data:
            raise CategoryNotFoundException(category, list(data.keys()))
        return [{"thai": thai, **entry.to_dict()} for thai, entry in data[category].items()]

    async def translate_word(self, thai_word: str) -> Optional[dict[str, Any]]:
        """정확히 일치하는 단어를 카테고리 순서대로 찾고, 없으면 None (오류 아님)"""
        data = await self.dataset.fetch_dataset()
        for category, terms in data.items():
            entry = terms.get(thai_word)
            if entry is not None:
                return {"category": category, "thai": thai_word, **entry.to_dict()}
        return None

    async def suggest_terms(self, word: str, limit: int = 5, score_cutoff: float = 60.0) -> list[dict[str, Any]]:
        """translate_word가 실패했을 때 제안할 유사 단어 (태국어 표기 + 전사 기준)"""
        if limit <= 0 or not word:
            return []
        data = await self.dataset.fetch_dataset()

        # label -> (thai, category). 같은 label은 처음 나온 단어만
        choices: dict[str, tuple[str, str]] = {}
        for category, terms in data.items():
            for thai, entry in terms.items():
                for label in (thai, entry.trans_de, entry.trans_en):
                    if label:
                        choices.setdefault(label, (thai, category))

        labels = list(choices.keys())
        if not labels:
            return []
        matches = process.extract(
            word,
            labels,
            scorer=fuzz.WRatio,
            processor=utils.default_process,
            limit=len(labels),
            score_cutoff=score_cutoff,
        )

        suggestions: list[dict[str, Any]] = []
        seen: set[str] = set()
        for label, score, _ in matches:
            thai, category = choices[label]
            if thai in seen:
                continue
            seen.add(thai)
            suggestions.append({"thai": thai, "category": category, "score": round(score, 1)})
            if len(suggestions) >= limit:
                break
        return suggestions
