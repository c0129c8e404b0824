"""공유 HTTP 클라이언트 (curl_cffi)

- 요청마다 AsyncSession을 만들면 TLS/커넥션 오버헤드가 커지므로
  프로세스 단위로 세션을 재사용합니다.
- 앱 종료 시 close()로 정리합니다.
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional, Dict

from curl_cffi.requests import AsyncSession

from image_scraper.core.config import settings
from image_scraper.core.logging import logger


class SharedHttpClient:
    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._session: Optional[AsyncSession] = None

    async def _ensure_session(self) -> AsyncSession:
        async with self._lock:
            if self._session is not None:
                return self._session
            self._session = AsyncSession(
                impersonate=settings.http_impersonate,
                headers=self.default_headers(),
                allow_redirects=True,
                max_clients=settings.http_max_clients,
                trust_env=False,
            )
            return self._session

    def default_headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json, text/javascript, */*; q=0.01",
            "Accept-Language": "en-US,en;q=0.9",
            "User-Agent": settings.user_agent,
            "Referer": "https://duckduckgo.com/",
            "Sec-Fetch-Dest": "empty",
            "Sec-Fetch-Mode": "cors",
            "Sec-Fetch-Site": "same-origin",
        }

    async def get_text(
        self,
        url: str,
        *,
        timeout_s: float,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Optional[tuple[int, str]]:
        """GET 요청 후 (status, body) 반환. 네트워크 실패 시 None."""
        sess = await self._ensure_session()
        try:
            resp = await sess.get(
                url,
                params=params,
                headers=headers,
                timeout=timeout_s,
            )
            status = getattr(resp, "status_code", 0) or 0
            text = getattr(resp, "text", "") or ""
            return status, text
        except Exception as e:
            logger.info(f"[HTTP_CLIENT] GET failed: {type(e).__name__}: {repr(e)}")
            return None

    async def close(self) -> None:
        async with self._lock:
            if self._session is None:
                return
            try:
                await self._session.close()
            except Exception as e:
                logger.debug(f"[HTTP_CLIENT] close failed: {type(e).__name__}")
            self._session = None


_shared_http_client = SharedHttpClient()


def get_shared_http_client() -> SharedHttpClient:
    return _shared_http_client


async def shutdown_shared_http_client() -> None:
    await _shared_http_client.close()
