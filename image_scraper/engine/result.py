"""Scrape Request/Outcome - Standardized Input/Result Format"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from image_scraper.crawlers.result import ImageResult

SAFE_SEARCH_MODES = (1, 0, -1)


class ScrapeState(str, Enum):
    """스크레이프 진행 상태

    IDLE → ACQUIRING_TOKEN → FETCHING_PAGE → (FETCHING_PAGE | DONE) → DONE
    실패 시 어느 단계에서든 FAILED로 전이합니다.
    """

    IDLE = "idle"
    ACQUIRING_TOKEN = "acquiring_token"
    FETCHING_PAGE = "fetching_page"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class ScrapeRequest:
    """스크레이프 요청 (HTTP 레이어에서 검증/보정된 값)

    Attributes:
        query: 검색어
        count: 요청 결과 수 (1 이상, 상한은 HTTP 레이어에서 적용)
        safe_search: 1(엄격) | 0(끔) | -1(중간)
        offset: 건너뛸 결과 수
    """

    query: str
    count: int
    safe_search: int = 1
    offset: int = 0

    def __post_init__(self):
        if not self.query or not isinstance(self.query, str):
            raise ValueError(f"Invalid query: {self.query!r}")
        if self.count < 1:
            raise ValueError(f"Invalid count: {self.count}")
        if self.safe_search not in SAFE_SEARCH_MODES:
            raise ValueError(f"Invalid safe_search: {self.safe_search}")
        if self.offset < 0:
            raise ValueError(f"Invalid offset: {self.offset}")


@dataclass
class ScrapeMetadata:
    """실행 메타데이터"""

    elapsed_seconds: float
    pages_fetched: int

    @property
    def elapsed_display(self) -> str:
        """표시용 소요 시간 (예: 1.23s)"""
        return f"{self.elapsed_seconds:.2f}s"


@dataclass
class ScrapeOutcome:
    """스크레이프 결과

    Attributes:
        results: 결과 (DDG 전달 순서, 최대 request.count개)
        metadata: 소요 시간 / 요청한 페이지 수
    """

    results: List[ImageResult] = field(default_factory=list)
    metadata: ScrapeMetadata = field(default_factory=lambda: ScrapeMetadata(0.0, 0))
