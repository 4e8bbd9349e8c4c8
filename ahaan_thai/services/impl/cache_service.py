"""In-memory TTL 캐시 - 데이터셋 하나를 담는 단일 슬롯"""
import time
from typing import Callable, Generic, Optional, TypeVar

from ahaan_thai.core.config import settings

T = TypeVar("T")


class TTLCache(Generic[T]):
    """단일 슬롯 TTL 캐시

    - get(): 저장 후 ttl 초 미만이면 값, 아니면 None
    - 만료 확인 시 값을 지우지 않음 (다음 set()이 덮어씀)
    - 락 없음: 이벤트 루프 하나에서만 접근
    """

    def __init__(self, ttl: Optional[float] = None, clock: Callable[[], float] = time.monotonic):
        """
        Args:
            ttl: 유효 시간 (초). 없으면 settings.cache_ttl
            clock: 현재 시각 함수 (테스트에서 주입)
        """
        self.ttl = float(ttl if ttl is not None else settings.cache_ttl)
        if self.ttl <= 0:
            raise ValueError("ttl must be positive")
        self._clock = clock
        self._data: Optional[T] = None
        self._stored_at: Optional[float] = None

    def get(self) -> Optional[T]:
        if self.is_valid():
            return self._data
        return None

    def set(self, data: T) -> None:
        self._data = data
        self._stored_at = self._clock()

    def clear(self) -> None:
        self._data = None
        self._stored_at = None

    def is_valid(self) -> bool:
        return (
            self._data is not None
            and self._stored_at is not None
            and self._clock() - self._stored_at < self.ttl
        )

    def age(self) -> Optional[float]:
        """저장 후 경과 시간 (초). 비어 있으면 None"""
        if self._stored_at is None:
            return None
        return self._clock() - self._stored_at
