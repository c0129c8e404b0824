"""Pydantic 스키마 정의"""
import re
from typing import Any, List, Optional
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from image_scraper.core.config import settings

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

VALID_SAFE_MODES = (1, 0, -1)


def parse_int_param(value: Any) -> Optional[int]:
    """쿼리 파라미터의 앞부분 정수만 파싱 ("12abc" → 12). 실패 시 None."""
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


class ImageSearchParams(BaseModel):
    """이미지 검색 요청 파라미터 (보정 후)

    - count: 없음/0/음수/파싱 실패 → 기본값, 상한 초과 → 상한
    - safe: 1, 0, -1 이외 → 1
    - offset: 없음/파싱 실패/음수 → 0
    """
    q: str = Field(..., min_length=1, description="검색어")
    count: int = Field(default_factory=lambda: settings.default_image_count, ge=1, description="결과 수")
    safe: int = Field(1, description="safe search (1 | 0 | -1)")
    offset: int = Field(0, ge=0, description="건너뛸 결과 수")

    @field_validator("count", mode="before")
    @classmethod
    def coerce_count(cls, v: Any) -> int:
        parsed = parse_int_param(v)
        if parsed is None or parsed < 1:
            parsed = settings.default_image_count
        return min(parsed, settings.max_image_count)

    @field_validator("safe", mode="before")
    @classmethod
    def coerce_safe(cls, v: Any) -> int:
        parsed = parse_int_param(v)
        return parsed if parsed in VALID_SAFE_MODES else 1

    @field_validator("offset", mode="before")
    @classmethod
    def coerce_offset(cls, v: Any) -> int:
        parsed = parse_int_param(v)
        if parsed is None or parsed < 0:
            return 0
        return parsed


class ImageItem(BaseModel):
    """이미지 한 건

    DDG 레코드 값을 그대로 전달합니다 (타입 강제 없음).
    """
    title: Any = Field(None, description="제목")
    image: Any = Field(None, description="원본 이미지 URL")
    thumbnail: Any = Field(None, description="썸네일 URL")
    width: Any = Field(None, description="너비")
    height: Any = Field(None, description="높이")
    source: Any = Field(None, description="검색 소스")
    page_url: Any = Field(None, description="게시 페이지 URL")


class ScrapeMetadataModel(BaseModel):
    """실행 메타데이터 (응답 키: elapsedTime / pagesScraped)"""
    model_config = ConfigDict(populate_by_name=True)

    elapsed_time: str = Field(..., alias="elapsedTime", description="소요 시간 (예: 1.23s)")
    pages_scraped: int = Field(..., alias="pagesScraped", ge=0, description="요청한 페이지 수")


class ImageSearchResponse(BaseModel):
    """이미지 검색 응답"""
    query: str
    count: int = Field(..., ge=0, description="반환한 결과 수")
    offset: int = Field(..., ge=0)
    metadata: ScrapeMetadataModel
    results: List[ImageItem]


class ErrorResponse(BaseModel):
    """오류 응답"""
    error: str
    error_code: Optional[str] = None


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str
    timestamp: datetime
    version: str
    cached_tokens: int = Field(0, ge=0, description="캐시된 vqd 토큰 수")
