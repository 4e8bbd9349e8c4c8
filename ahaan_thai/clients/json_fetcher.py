"""원격 JSON 데이터셋 Fetcher

검증 순서: 전송 → 상태 코드 → Content-Type → JSON 파싱 → 최상위 타입.
어느 단계든 실패하면 FetchException 계열 하나만 올리고, 부분 데이터는 반환하지 않습니다.
재시도는 하지 않습니다.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from ahaan_thai.clients.http_client import SharedHttpClient, get_shared_http_client
from ahaan_thai.core.exceptions import (
    ContentTypeException,
    DatasetShapeException,
    FetchException,
    HttpStatusException,
    JsonParseException,
)
from ahaan_thai.core.logging import logger


def is_json_content_type(content_type: str) -> bool:
    """application/json 또는 application/*+json 여부"""
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


class JsonFetcher:
    """URL에서 JSON 문서를 가져와 검증합니다."""

    def __init__(
        self,
        http_client: Optional[SharedHttpClient] = None,
        timeout_s: Optional[float] = None,
    ) -> None:
        self.http_client = http_client or get_shared_http_client()
        self.timeout_s = timeout_s

    async def fetch(self, url: str, expected_type: Optional[type] = None) -> Any:
        """
        JSON 문서 fetch

        Args:
            url: 데이터셋 URL
            expected_type: 최상위 JSON 타입 (dict 또는 list). None이면 검사 생략

        Returns:
            파싱된 JSON 값

        Raises:
            FetchException: 전송/상태/Content-Type/파싱/구조 실패
        """
        logger.info(f"[FETCH] GET {url}")
        try:
            resp = await self.http_client.get(url, timeout_s=self.timeout_s)

            if not resp.ok:
                raise HttpStatusException(url, resp.status_code, resp.reason)

            if not is_json_content_type(resp.content_type):
                raise ContentTypeException(url, resp.content_type)

            try:
                data = json.loads(resp.text)
            except (json.JSONDecodeError, ValueError) as e:
                raise JsonParseException(url, str(e)) from e

            if expected_type is not None and not isinstance(data, expected_type):
                raise DatasetShapeException(
                    url,
                    f"expected top-level {expected_type.__name__}, got {type(data).__name__}",
                )

        except FetchException as e:
            logger.error(f"[FETCH] {url} failed: {e}")
            raise

        logger.info(f"[FETCH] OK {url} (len={len(resp.text)})")
        return data
