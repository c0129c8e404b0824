"""vqd Token Provider

DDG 이미지 API(i.js)는 검색어에 묶인 vqd 토큰을 요구합니다.
토큰은 일반 검색 페이지(HTML) 안에 `vqd=<숫자-하이픈>` 형태로 들어 있습니다.
"""

from __future__ import annotations

import re
from typing import Optional

from image_scraper.core.config import settings
from image_scraper.core.exceptions import TokenExtractionError, TokenFetchError
from image_scraper.core.logging import logger, mask_token, sanitize_for_log

from .http_client import SharedHttpClient, get_shared_http_client
from .token_cache import VQD_CACHE_TTL_S, TokenCache, get_token_cache

DDG_SEARCH_URL = "https://duckduckgo.com/"

# 따옴표로 감싼 형태(vqd="4-...")도 허용
VQD_PATTERN = re.compile(r"vqd=[\"']?([\d-]+)")


def extract_vqd(body: str) -> Optional[str]:
    """응답 본문에서 vqd 토큰 추출. 없으면 None."""
    if not body:
        return None
    match = VQD_PATTERN.search(body)
    if match and match.group(1):
        return match.group(1)
    return None


class TokenProvider:
    """vqd 토큰 획득기 (TokenCache read-through)"""

    def __init__(
        self,
        http_client: Optional[SharedHttpClient] = None,
        cache: Optional[TokenCache] = None,
        ttl_s: Optional[float] = None,
        timeout_s: Optional[float] = None,
    ):
        """
        Args:
            http_client: HTTP 클라이언트 (기본값: 프로세스 공유 클라이언트)
            cache: 토큰 캐시 (기본값: 프로세스 전역 캐시)
            ttl_s: 캐시 TTL (기본값: 10분)
            timeout_s: 요청 타임아웃 (기본값: settings.http_timeout_s)
        """
        self.http = http_client or get_shared_http_client()
        self.cache = cache if cache is not None else get_token_cache()
        self.ttl_s = ttl_s if ttl_s is not None else VQD_CACHE_TTL_S
        self.timeout_s = timeout_s if timeout_s is not None else settings.http_timeout_s

    async def acquire(self, query: str) -> str:
        """검색어에 대한 vqd 토큰 반환

        Args:
            query: 검색어 (원문 그대로 캐시 키로 사용)

        Returns:
            str: vqd 토큰

        Raises:
            TokenFetchError: 네트워크 실패 또는 2xx가 아닌 응답
            TokenExtractionError: 응답에서 토큰 패턴을 찾지 못함
        """
        cached = self.cache.get(query)
        if cached:
            logger.info(f"[VQD] Using cached vqd token for query: '{sanitize_for_log(query)}'")
            return cached

        logger.info(f"[VQD] Fetching new vqd token for query: '{sanitize_for_log(query)}'")
        res = await self.http.get_text(
            DDG_SEARCH_URL,
            timeout_s=self.timeout_s,
            params={"q": query, "ia": "web"},
        )
        if res is None:
            logger.error("[VQD] Token request failed: network error")
            raise TokenFetchError("network error")

        status, body = res
        if not 200 <= status < 300:
            logger.error(f"[VQD] Token request failed with status: {status}")
            raise TokenFetchError(f"HTTP {status}", status=status)

        token = extract_vqd(body)
        if not token:
            logger.error(f"[VQD] No vqd token in response (len={len(body)})")
            raise TokenExtractionError(query)

        self.cache.set(query, token, ttl=self.ttl_s)
        logger.info(f"[VQD] Extracted and cached vqd token: {mask_token(token)}")
        return token
