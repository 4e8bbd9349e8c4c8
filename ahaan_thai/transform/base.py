"""데이터셋 변환기 베이스

fetch 직후 한 번만 적용됩니다: 최상위 구조 확인 → 레코드별 URL/필드 재작성(복사본) → 스키마 검증.
"""
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from ahaan_thai.core.config import DomainConfig
from ahaan_thai.core.exceptions import DatasetShapeException

T = TypeVar("T")


class DatasetTransformer(ABC, Generic[T]):
    """도메인별 변환기 공통 흐름"""

    expected_type: type = dict
    dataset_type: Any = dict

    def __init__(self, config: DomainConfig) -> None:
        self.config = config
        self._adapter: TypeAdapter[T] = TypeAdapter(self.dataset_type)

    def transform(self, raw: Any) -> T:
        """
        Args:
            raw: 파싱된 원본 JSON

        Returns:
            검증된 데이터셋

        Raises:
            DatasetShapeException: 구조 또는 레코드 필드가 스키마와 다를 때
        """
        if not isinstance(raw, self.expected_type):
            raise DatasetShapeException(
                self.config.name,
                f"expected {self.expected_type.__name__}, got {type(raw).__name__}",
            )
        processed = self.process(raw)
        try:
            return self._adapter.validate_python(processed)
        except ValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(part) for part in first.get("loc", ()))
            raise DatasetShapeException(
                self.config.name,
                f"{e.error_count()} invalid field(s), first at '{location}': {first.get('msg')}",
            ) from e

    @abstractmethod
    def process(self, raw: Any) -> Any:
        """레코드 재작성 (원본은 변경하지 않음)"""
