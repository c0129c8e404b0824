"""Image Routes (Engine Layer)

HTTP Layer는 파라미터를 보정한 뒤 ScrapeOrchestrator에 위임하는
단순한 Translator 역할만 수행합니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from image_scraper.core.exceptions import ScraperException
from image_scraper.core.logging import logger, sanitize_for_log
from image_scraper.crawlers import PageFetcher, TokenProvider
from image_scraper.engine import ScrapeOrchestrator, ScrapeRequest
from image_scraper.schemas.image_schema import (
    ErrorResponse,
    ImageItem,
    ImageSearchParams,
    ImageSearchResponse,
    ScrapeMetadataModel,
)

router = APIRouter(tags=["images"])

# 싱글톤 서비스
_orchestrator: Optional[ScrapeOrchestrator] = None


def get_orchestrator() -> ScrapeOrchestrator:
    """ScrapeOrchestrator 싱글톤

    Engine Layer의 진입점을 제공합니다.
    """
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = ScrapeOrchestrator(
            token_provider=TokenProvider(),
            page_fetcher=PageFetcher(),
        )
    return _orchestrator


@router.get(
    "/images",
    response_model=ImageSearchResponse,
    responses={400: {"model": ErrorResponse}, 429: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def search_images(
    q: Optional[str] = None,
    count: Optional[str] = None,
    safe: Optional[str] = None,
    offset: Optional[str] = None,
    orchestrator: ScrapeOrchestrator = Depends(get_orchestrator),
):
    """DuckDuckGo 이미지 검색 API

    Flow:
        1. 파라미터 보정 (count 상한, safe 기본값, offset 하한)
        2. Engine에 위임 (vqd 토큰 → i.js 페이지 루프)
        3. 결과를 HTTP Response로 변환 (429/502 오류 분리)
    """
    if not q:
        return JSONResponse(
            status_code=400,
            content={"error": 'The "q" parameter (search query) is required.'},
        )

    params = ImageSearchParams(q=q, count=count, safe=safe, offset=offset)
    logger.info(
        f"[API] Image search: q='{sanitize_for_log(params.q)}', count={params.count}, "
        f"safe={params.safe}, offset={params.offset}"
    )

    try:
        outcome = await orchestrator.scrape(
            ScrapeRequest(
                query=params.q,
                count=params.count,
                safe_search=params.safe,
                offset=params.offset,
            )
        )
        return ImageSearchResponse(
            query=params.q,
            count=len(outcome.results),
            offset=params.offset,
            metadata=ScrapeMetadataModel(
                elapsed_time=outcome.metadata.elapsed_display,
                pages_scraped=outcome.metadata.pages_fetched,
            ),
            results=[ImageItem(**r.to_dict()) for r in outcome.results],
        )
    except ScraperException as e:
        logger.warning(f"[API] Scrape failed: {e}")
        return JSONResponse(
            status_code=e.status_code,
            content={"error": e.message, "error_code": e.error_code},
        )
    except Exception:
        logger.error(f"[API] Scrape failed: q='{sanitize_for_log(params.q)}'", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "An internal server error occurred."},
        )
