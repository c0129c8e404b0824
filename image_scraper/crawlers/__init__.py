"""DuckDuckGo crawler modules (vqd token + i.js pagination).

공개 API는 이 파일에서만 export합니다.
"""

from .http_client import SharedHttpClient, get_shared_http_client, shutdown_shared_http_client
from .result import ImageResult, PageResult
from .token_cache import CachedToken, TokenCache, get_token_cache
from .token_provider import TokenProvider
from .page_fetcher import PageFetcher

__all__ = [
        "SharedHttpClient",
        "get_shared_http_client",
        "shutdown_shared_http_client",
        "ImageResult",
        "PageResult",
        "CachedToken",
        "TokenCache",
        "get_token_cache",
        "TokenProvider",
        "PageFetcher",
]
