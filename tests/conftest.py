"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 Fake 주입 (네트워크 없는 Fetcher, 수동 시계)
- 도메인 서비스 픽스처
"""

from __future__ import annotations

import asyncio
import copy
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import pytest

# 프로젝트 루트와 tests/를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
sys.path.insert(0, str(Path(__file__).parent))

from ahaan_thai.core.config import Settings
from ahaan_thai.core.exceptions import DatasetShapeException
from ahaan_thai.services import ServiceRegistry, create_services
from fixtures import BOOKS_RAW, DICTIONARY_RAW, ENCYCLOPEDIA_RAW, LIBRARY_RAW


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "INFO"


@dataclass
class FakeClock:
    """TTLCache 주입용 수동 시계"""

    now: float = 1000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@dataclass
class FakeFetcher:
    """URL → 원본 JSON(또는 예외) 매핑으로 동작하는 Fetcher

    - 호출 횟수를 URL별로 기록
    - 반환값은 매번 deepcopy (변환기가 원본을 바꾸지 않는지 확인 가능)
    - delay > 0이면 응답 전에 양보 (동시 요청 테스트)
    """

    payloads: dict[str, Any]
    delay: float = 0.0
    calls: dict[str, int] = field(default_factory=dict)

    async def fetch(self, url: str, expected_type: Optional[type] = None) -> Any:
        self.calls[url] = self.calls.get(url, 0) + 1
        if self.delay:
            await asyncio.sleep(self.delay)
        payload = self.payloads[url]
        if isinstance(payload, Exception):
            raise payload
        if expected_type is not None and not isinstance(payload, expected_type):
            raise DatasetShapeException(url, f"expected top-level {expected_type.__name__}")
        return copy.deepcopy(payload)

    def total_calls(self) -> int:
        return sum(self.calls.values())


@pytest.fixture
def test_settings() -> Settings:
    return Settings(cache_ttl=300, dataset_warmup=False)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_fetcher(test_settings: Settings) -> FakeFetcher:
    return FakeFetcher(
        payloads={
            test_settings.dictionary_url: DICTIONARY_RAW,
            test_settings.book_info_url: BOOKS_RAW,
            test_settings.library_url: LIBRARY_RAW,
            test_settings.encyclopedia_url: ENCYCLOPEDIA_RAW,
        }
    )


@pytest.fixture
def services(test_settings: Settings, fake_fetcher: FakeFetcher) -> ServiceRegistry:
    return create_services(test_settings, fetcher=fake_fetcher)


@pytest.fixture
def dictionary_service(services: ServiceRegistry):
    return services.dictionary


@pytest.fixture
def book_service(services: ServiceRegistry):
    return services.books


@pytest.fixture
def library_service(services: ServiceRegistry):
    return services.library


@pytest.fixture
def encyclopedia_service(services: ServiceRegistry):
    return services.encyclopedia
