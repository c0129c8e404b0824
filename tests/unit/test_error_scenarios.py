"""
에러 시나리오 및 분류

업스트림 실패 종류별 error_code / status_code / ErrorKind 매핑
"""

import pytest

from image_scraper.core.exceptions import (
    ErrorKind,
    RateLimitedError,
    ScraperException,
    TokenExtractionError,
    TokenFetchError,
    UpstreamAuthError,
    UpstreamFetchError,
)


class TestErrorScenarios:
    """에러 시나리오 테스트"""

    # ========== 토큰(vqd) 레이어 에러 ==========

    def test_token_extraction_error(self):
        """검색 페이지 레이아웃 변경으로 토큰 없음"""
        with pytest.raises(UpstreamAuthError) as exc_info:
            raise TokenExtractionError(query="cats")

        assert exc_info.value.error_code == "TOKEN_EXTRACTION_FAILED"
        assert exc_info.value.kind == ErrorKind.TOKEN_EXTRACTION
        assert exc_info.value.status_code == 502
        assert exc_info.value.details == {"query": "cats"}

    def test_token_fetch_error(self):
        """토큰 요청 네트워크/HTTP 실패"""
        with pytest.raises(UpstreamAuthError) as exc_info:
            raise TokenFetchError("HTTP 403", status=403)

        assert exc_info.value.error_code == "TOKEN_FETCH_FAILED"
        assert exc_info.value.kind == ErrorKind.TOKEN_FETCH
        assert exc_info.value.status == 403
        assert "HTTP 403" in exc_info.value.message

    # ========== 페이지(i.js) 레이어 에러 ==========

    def test_rate_limited(self):
        """429 → 호출자에게 429 그대로"""
        error = RateLimitedError()

        assert error.status_code == 429
        assert error.kind == ErrorKind.RATE_LIMITED
        assert error.message == "Rate limited by DuckDuckGo."
        assert str(error) == "[RATE_LIMITED] Rate limited by DuckDuckGo."

    def test_upstream_fetch_error(self):
        """429 이외 실패 → 502"""
        error = UpstreamFetchError("HTTP 500", status=500)

        assert error.status_code == 502
        assert error.kind == ErrorKind.UPSTREAM_FETCH
        assert error.details == {"reason": "HTTP 500", "status": 500}

    def test_every_variant_is_classified(self):
        """모든 분류가 서로 다른 ErrorKind를 가짐"""
        variants = [
            TokenExtractionError("q"),
            TokenFetchError("network error"),
            RateLimitedError(),
            UpstreamFetchError("network error"),
        ]
        kinds = {type(v).kind for v in variants}

        assert kinds == set(ErrorKind)
        assert all(isinstance(v, ScraperException) for v in variants)

    def test_rate_limit_is_not_upstream_fetch(self):
        assert not issubclass(RateLimitedError, UpstreamFetchError)
        assert not issubclass(RateLimitedError, UpstreamAuthError)
