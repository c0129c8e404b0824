"""vqd Token Cache - 프로세스 메모리 TTL 캐시

검색어(원문 그대로)별로 vqd 토큰을 보관합니다.
만료 여부는 조회 시점에 확인하며, 별도 eviction은 하지 않습니다.
(항목 수가 적고 TTL로 제한되므로 충분합니다.)
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from time import time
from typing import Callable, Dict, Optional

from image_scraper.core.config import settings


@dataclass(frozen=True)
class CachedToken:
    """캐시된 토큰

    Attributes:
        token: vqd 토큰
        expires_at: 만료 시각 (epoch 초)
    """

    token: str
    expires_at: float


class TokenCache:
    """검색어 → vqd 토큰 TTL 캐시

    Usage:
        cache = TokenCache()
        cache.set("cats", "4-1234", ttl=600)
        cache.get("cats")  # "4-1234" (만료 전)
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self._clock = clock or time
        self._entries: Dict[str, CachedToken] = {}
        self._lock = threading.Lock()

    def get(self, query: str) -> Optional[str]:
        """토큰 조회

        Args:
            query: 검색어 (정규화하지 않은 원문)

        Returns:
            Optional[str]: 유효한 토큰. 없거나 만료(now >= expires_at)면 None.
        """
        with self._lock:
            entry = self._entries.get(query)
        if entry is None:
            return None
        if self._clock() >= entry.expires_at:
            return None
        return entry.token

    def set(self, query: str, token: str, ttl: float) -> CachedToken:
        """토큰 저장 (기존 항목은 덮어씀)

        Args:
            query: 검색어
            token: vqd 토큰
            ttl: 유효 시간 (초)

        Returns:
            CachedToken: 저장된 항목
        """
        entry = CachedToken(token=token, expires_at=self._clock() + ttl)
        with self._lock:
            self._entries[query] = entry
        return entry

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


# 프로세스 전역 캐시 (시작 시 비어 있고, 종료 시 그냥 버려집니다)
_token_cache = TokenCache()

# TTL은 프로세스 수명 동안 고정
VQD_CACHE_TTL_S: float = float(settings.vqd_cache_ttl_s)


def get_token_cache() -> TokenCache:
    return _token_cache
