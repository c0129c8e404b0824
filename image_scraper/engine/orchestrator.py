"""Scrape Orchestrator - Main Engine Entry Point

Coordinates the entire scrape pipeline:
1. vqd token acquisition (cache → search page)
2. i.js page loop (cursor continuation + inter-page delay)
3. Result truncation and metadata
"""

import asyncio
from time import time
from typing import Awaitable, Callable, Dict, List, Optional

from image_scraper.core.config import settings
from image_scraper.core.exceptions import ScraperException
from image_scraper.core.logging import logger, sanitize_for_log
from image_scraper.crawlers.result import ImageResult

from .result import ScrapeMetadata, ScrapeOutcome, ScrapeRequest, ScrapeState

# DDG 자체 규약. 0 → "-2" 비대칭이지만 그대로 유지해야 합니다.
SAFE_SEARCH_WIRE: Dict[int, str] = {
    1: "1",
    0: "-2",
    -1: "-1",
}


def map_safe_search(mode: int) -> str:
    """safe search 모드를 DDG `p` 파라미터 값으로 변환"""
    try:
        return SAFE_SEARCH_WIRE[mode]
    except KeyError:
        raise ValueError(f"Invalid safe_search: {mode}") from None


def build_initial_params(
    request: ScrapeRequest, vqd: str, locale: Optional[str] = None
) -> Dict[str, str]:
    """첫 페이지 i.js 파라미터

    Args:
        request: 스크레이프 요청
        vqd: vqd 토큰
        locale: DDG 로케일 (기본값: settings.ddg_locale)

    Returns:
        dict: l, o, q, vqd, f, p, s
    """
    return {
        "l": locale or settings.ddg_locale,
        "o": "json",
        "q": request.query,
        "vqd": vqd,
        "f": ",,,",
        "p": map_safe_search(request.safe_search),
        "s": str(request.offset),
    }


class ScrapeOrchestrator:
    """이미지 스크레이프 오케스트레이터

    토큰 획득 → 페이지 루프 → 결과 절단 순서로 실행합니다.
    한 요청 안의 페이지는 항상 순차적으로 요청합니다.
    """

    def __init__(
        self,
        token_provider,
        page_fetcher,
        request_delay_s: Optional[float] = None,
        sleep: Optional[Callable[[float], Awaitable[None]]] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        """
        Args:
            token_provider: 토큰 획득기 (acquire 메서드 구현)
            page_fetcher: 페이지 요청기 (fetch_page 메서드 구현)
            request_delay_s: 페이지 사이 대기 시간 (기본값: settings.request_delay_ms)
            sleep: 대기 함수 (기본값: asyncio.sleep)
            clock: 시간 함수 (기본값: time.time)
        """
        if not token_provider:
            raise ValueError("token_provider must not be None")
        if not page_fetcher:
            raise ValueError("page_fetcher must not be None")

        self.token_provider = token_provider
        self.page_fetcher = page_fetcher
        self.request_delay_s = (
            request_delay_s if request_delay_s is not None else settings.request_delay_s
        )
        self._sleep = sleep or asyncio.sleep
        self._clock = clock or time

    async def scrape(self, request: ScrapeRequest) -> ScrapeOutcome:
        """스크레이프 실행

        Args:
            request: 검증된 스크레이프 요청

        Returns:
            ScrapeOutcome: 최대 request.count개의 결과와 메타데이터

        Raises:
            UpstreamAuthError: 토큰 획득 실패 (502)
            RateLimitedError: 페이지 요청 429
            UpstreamFetchError: 그 외 페이지 요청 실패 (502)
        """
        start_time = self._clock()
        state = ScrapeState.IDLE
        results: List[ImageResult] = []
        pages_fetched = 0
        query_display = sanitize_for_log(request.query)

        try:
            state = ScrapeState.ACQUIRING_TOKEN
            vqd = await self.token_provider.acquire(request.query)

            params = build_initial_params(request, vqd)

            state = ScrapeState.FETCHING_PAGE
            while True:
                pages_fetched += 1
                page = await self.page_fetcher.fetch_page(params)
                results.extend(page.items)

                if len(results) >= request.count:
                    break
                if page.is_terminal:
                    break

                params = page.next_params
                if self.request_delay_s > 0:
                    await self._sleep(self.request_delay_s)

            state = ScrapeState.DONE
            logger.debug(f"Scrape {state.value}: query='{query_display}', pages={pages_fetched}")

        except ScraperException as e:
            logger.error(
                f"Scrape failed: query='{query_display}', state={state.value}, "
                f"pages={pages_fetched}, error={e.error_code}"
            )
            e.details.setdefault("state", ScrapeState.FAILED.value)
            e.details.setdefault("failed_during", state.value)
            raise

        elapsed = self._clock() - start_time
        outcome = ScrapeOutcome(
            results=results[: request.count],
            metadata=ScrapeMetadata(elapsed_seconds=elapsed, pages_fetched=pages_fetched),
        )
        logger.info(
            f"Scraped {len(outcome.results)} images for query '{query_display}' "
            f"with offset {request.offset} in {outcome.metadata.elapsed_display} "
            f"({pages_fetched} pages)"
        )
        return outcome
