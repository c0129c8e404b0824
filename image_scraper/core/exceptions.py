"""커스텀 예외 정의 (Structured Exception Hierarchy)

업스트림(DuckDuckGo) 실패를 종류별로 분류합니다.
각 예외는 고정된 ErrorKind/error_code/status_code를 가지므로
호출자는 isinstance 또는 kind로 분기할 수 있습니다.
"""
from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """스크레이프 실패 분류"""

    TOKEN_EXTRACTION = "token_extraction"
    TOKEN_FETCH = "token_fetch"
    RATE_LIMITED = "rate_limited"
    UPSTREAM_FETCH = "upstream_fetch"


# 기본 예외 클래스
class ScraperException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""

    kind: Optional[ErrorKind] = None
    status_code: int = 500

    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 토큰(vqd) 관련 예외
class UpstreamAuthError(ScraperException):
    """vqd 토큰을 얻지 못한 경우 (502)"""

    status_code = 502

    def __init__(self, message: str, error_code: str = "UPSTREAM_AUTH_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "UPSTREAM_AUTH_ERROR", details)


class TokenExtractionError(UpstreamAuthError):
    """검색 페이지에서 vqd 토큰 패턴을 찾지 못함 (DDG 레이아웃 변경 등)"""

    kind = ErrorKind.TOKEN_EXTRACTION

    def __init__(self, query: str, details: Optional[dict[str, Any]] = None):
        message = "Failed to extract vqd token. DDG may have changed their layout."
        super().__init__(message, "TOKEN_EXTRACTION_FAILED", details or {"query": query})


class TokenFetchError(UpstreamAuthError):
    """토큰 요청 자체의 네트워크/HTTP 실패"""

    kind = ErrorKind.TOKEN_FETCH

    def __init__(self, reason: str, status: Optional[int] = None, details: Optional[dict[str, Any]] = None):
        message = f"Could not fetch vqd token from DuckDuckGo: {reason}"
        super().__init__(message, "TOKEN_FETCH_FAILED", details or {"reason": reason, "status": status})
        self.status = status


# 페이지 요청 관련 예외
class RateLimitedError(ScraperException):
    """i.js 요청이 429를 받은 경우"""

    kind = ErrorKind.RATE_LIMITED
    status_code = 429

    def __init__(self, details: Optional[dict[str, Any]] = None):
        super().__init__("Rate limited by DuckDuckGo.", "RATE_LIMITED", details or {"status": 429})


class UpstreamFetchError(ScraperException):
    """429 이외의 HTTP 오류 또는 네트워크 실패 (502)"""

    kind = ErrorKind.UPSTREAM_FETCH
    status_code = 502

    def __init__(self, reason: str, status: Optional[int] = None, details: Optional[dict[str, Any]] = None):
        super().__init__(
            "Failed to fetch results from DuckDuckGo.",
            "UPSTREAM_FETCH_FAILED",
            details or {"reason": reason, "status": status},
        )
        self.status = status
