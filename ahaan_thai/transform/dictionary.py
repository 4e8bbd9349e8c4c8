"""사전 변환기 - URL 필드가 없으므로 구조 검증만"""
from typing import Any

from ahaan_thai.core.exceptions import DatasetShapeException
from ahaan_thai.schemas.dictionary_schema import DictionaryDataset

from .base import DatasetTransformer


class DictionaryTransformer(DatasetTransformer[DictionaryDataset]):
    expected_type = dict
    dataset_type = DictionaryDataset

    def process(self, raw: dict[str, Any]) -> dict[str, Any]:
        for category, terms in raw.items():
            if not isinstance(terms, dict):
                raise DatasetShapeException(
                    self.config.name, f"category '{category}' is not an object"
                )
        return raw
