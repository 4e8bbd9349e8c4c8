"""공유 HTTP 클라이언트 (curl_cffi)

- 데이터셋 fetch마다 AsyncSession을 만들지 않고 프로세스 단위로 세션을 재사용합니다.
- 앱 종료 시 close()로 정리합니다.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Optional, Dict

from curl_cffi.requests import AsyncSession

from ahaan_thai.core.config import settings
from ahaan_thai.core.exceptions import TransportException
from ahaan_thai.core.logging import logger


@dataclass
class HttpResponse:
    """fetch 결과 (세션 구현과 분리된 최소 응답 형태)"""

    status_code: int
    text: str
    headers: Dict[str, str] = field(default_factory=dict)
    reason: str = ""

    @property
    def content_type(self) -> str:
        for key, value in self.headers.items():
            if key.lower() == "content-type":
                return value or ""
        return ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class SharedHttpClient:
    """데이터셋 4종이 공유하는 curl_cffi 세션 래퍼"""

    def __init__(self, impersonate: Optional[str] = None, user_agent: Optional[str] = None) -> None:
        self.impersonate = impersonate or settings.http_impersonate
        self.user_agent = user_agent or settings.http_user_agent
        self._lock = asyncio.Lock()
        self._session: Optional[AsyncSession] = None

    @property
    def is_open(self) -> bool:
        return self._session is not None

    async def _ensure_session(self) -> AsyncSession:
        async with self._lock:
            if self._session is None:
                logger.debug(f"[HTTP_CLIENT] Opening session (impersonate={self.impersonate})")
                self._session = AsyncSession(
                    impersonate=self.impersonate,
                    headers=self.default_headers(),
                    allow_redirects=True,
                    trust_env=False,
                )
            return self._session

    def default_headers(self) -> Dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": "application/json",
        }

    async def get(
        self,
        url: str,
        *,
        timeout_s: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> HttpResponse:
        """
        GET 요청

        Raises:
            TransportException: DNS/연결/TLS/타임아웃 등 응답을 받지 못한 경우
        """
        sess = await self._ensure_session()
        timeout = timeout_s if timeout_s is not None else settings.http_timeout_s
        try:
            resp = await sess.get(url, headers=headers, timeout=timeout)
        except Exception as e:
            logger.warning(f"[HTTP_CLIENT] GET {url} failed: {type(e).__name__}")
            raise TransportException(url, f"{type(e).__name__}: {e}") from e

        return HttpResponse(
            status_code=resp.status_code or 0,
            text=resp.text or "",
            headers=dict(resp.headers or {}),
            reason=getattr(resp, "reason", "") or "",
        )

    async def close(self) -> None:
        async with self._lock:
            session, self._session = self._session, None
        if session is None:
            return
        try:
            await session.close()
            logger.info("[HTTP_CLIENT] Session closed")
        except Exception as e:
            logger.warning(f"[HTTP_CLIENT] close failed: {type(e).__name__}: {e}")


_shared_http_client = SharedHttpClient()


def get_shared_http_client() -> SharedHttpClient:
    return _shared_http_client


async def shutdown_shared_http_client() -> None:
    await _shared_http_client.close()
