"""DDG 이미지 페이지 요청 (i.js)

- 요청 한 번 = 페이지 한 장
- 응답의 `next`(상대 경로 + 쿼리스트링)를 다음 요청 파라미터로 변환합니다.
  `next`에는 토큰/검색어/페이징 상태가 모두 들어 있으므로 기존 파라미터와
  병합하지 않고 통째로 교체합니다.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional
from urllib.parse import parse_qsl, urljoin, urlparse

from image_scraper.core.config import settings
from image_scraper.core.exceptions import RateLimitedError, UpstreamFetchError
from image_scraper.core.logging import logger

from .http_client import SharedHttpClient, get_shared_http_client
from .result import ImageResult, PageResult

DDG_BASE_URL = "https://duckduckgo.com"
DDG_IMAGES_URL = "https://duckduckgo.com/i.js"


def parse_next_cursor(next_path: Optional[str]) -> Optional[Dict[str, str]]:
    """`next` 값을 다음 요청 파라미터로 변환

    Args:
        next_path: 예) "i.js?q=cats&o=json&p=1&s=100&u=bing&f=,,,,&l=us-en&vqd=4-123"

    Returns:
        dict or None: 쿼리스트링 전체 (빈 값 유지, 중복 키는 마지막 값)
    """
    if not next_path or not isinstance(next_path, str):
        return None
    url = urljoin(DDG_BASE_URL + "/", next_path)
    return dict(parse_qsl(urlparse(url).query, keep_blank_values=True))


class PageFetcher:
    """i.js 페이지 요청 + 레코드 정규화"""

    def __init__(
        self,
        http_client: Optional[SharedHttpClient] = None,
        timeout_s: Optional[float] = None,
    ):
        self.http = http_client or get_shared_http_client()
        self.timeout_s = timeout_s if timeout_s is not None else settings.http_timeout_s

    async def fetch_page(self, params: Dict[str, Any]) -> PageResult:
        """페이지 한 장 요청

        Args:
            params: i.js 쿼리 파라미터 전체

        Returns:
            PageResult: 정규화된 결과와 다음 페이지 파라미터

        Raises:
            RateLimitedError: HTTP 429
            UpstreamFetchError: 그 외 HTTP 오류 또는 네트워크 실패
        """
        res = await self.http.get_text(DDG_IMAGES_URL, timeout_s=self.timeout_s, params=params)
        if res is None:
            logger.error("[PAGE] Error fetching image results: network error")
            raise UpstreamFetchError("network error")

        status, body = res
        if not 200 <= status < 300:
            logger.error(f"[PAGE] DDG API request failed with status: {status}")
            if status == 429:
                raise RateLimitedError()
            raise UpstreamFetchError(f"HTTP {status}", status=status)

        data = self._decode(body)
        records = data.get("results") if data else None
        if not records or not isinstance(records, list):
            logger.debug("[PAGE] Empty results; treating page as terminal")
            return PageResult(items=[], next_params=None)

        items = [ImageResult.from_record(r) for r in records if isinstance(r, dict)]
        next_params = parse_next_cursor(data.get("next"))
        logger.debug(f"[PAGE] Fetched {len(items)} items (has_next={next_params is not None})")
        return PageResult(items=items, next_params=next_params)

    def _decode(self, body: str) -> Optional[Dict[str, Any]]:
        """JSON 본문 디코딩. 객체가 아니면 None (결과 없음과 동일 취급)."""
        try:
            data = json.loads(body) if body else None
        except (json.JSONDecodeError, ValueError) as e:
            logger.warning(f"[PAGE] Response is not JSON: {type(e).__name__}")
            return None
        if not isinstance(data, dict):
            return None
        return data
