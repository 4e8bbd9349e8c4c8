"""데이터셋 파이프라인 - Cache → Fetcher → Transformer → Cache

도메인별로 하나씩 만들어 Query 서비스에 주입합니다.
"""
import asyncio
from typing import Generic, Optional, TypeVar

from ahaan_thai.clients.json_fetcher import JsonFetcher
from ahaan_thai.core.config import DomainConfig
from ahaan_thai.core.exceptions import FetchException
from ahaan_thai.core.logging import logger
from ahaan_thai.services.impl.cache_service import TTLCache
from ahaan_thai.transform.base import DatasetTransformer

T = TypeVar("T")


class DatasetService(Generic[T]):
    """도메인 데이터셋 로더 (cache-or-fetch)

    동시에 들어온 cache miss 요청은 하나의 fetch를 공유합니다 (single-flight).
    fetch 실패 시 오래된 캐시로 대체하지 않고 예외를 그대로 올립니다.
    """

    def __init__(
        self,
        config: DomainConfig,
        fetcher: JsonFetcher,
        transformer: DatasetTransformer[T],
        cache: Optional[TTLCache[T]] = None,
    ):
        self.config = config
        self.fetcher = fetcher
        self.transformer = transformer
        self.cache: TTLCache[T] = cache if cache is not None else TTLCache()
        self._lock = asyncio.Lock()

    @property
    def name(self) -> str:
        return self.config.name

    async def fetch_dataset(self) -> T:
        """
        캐시된 데이터셋 반환, 없거나 만료되면 fetch → 변환 → 저장

        Raises:
            FetchException: fetch/변환 실패 (재시도 없음)
        """
        cached = self.cache.get()
        if cached is not None:
            logger.debug(f"[DATASET] Cache hit: {self.name}")
            return cached

        async with self._lock:
            # 락 대기 중 다른 요청이 채웠을 수 있음
            cached = self.cache.get()
            if cached is not None:
                logger.debug(f"[DATASET] Cache filled while waiting: {self.name}")
                return cached

            logger.info(f"[DATASET] Cache miss: {self.name}, fetching {self.config.dataset_url}")
            try:
                raw = await self.fetcher.fetch(
                    self.config.dataset_url,
                    expected_type=self.transformer.expected_type,
                )
                dataset = self.transformer.transform(raw)
            except FetchException as e:
                logger.error(f"[DATASET] Failed to load {self.name}: {e.error_code}")
                raise

            self.cache.set(dataset)
            logger.info(f"[DATASET] Loaded {self.name}: {len(dataset)} top-level items")
            return dataset

    def is_cached(self) -> bool:
        return self.cache.is_valid()

    def invalidate(self) -> None:
        self.cache.clear()
