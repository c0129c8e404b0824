"""Crawler Result Standard Format

i.js 응답 레코드의 표준 형식을 정의합니다.
"""

from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any, List


@dataclass(frozen=True)
class ImageResult:
    """이미지 검색 결과 한 건

    Attributes:
        title: 이미지 제목
        image: 원본 이미지 URL
        thumbnail: 썸네일 URL
        width: 원본 너비 (px)
        height: 원본 높이 (px)
        source: 검색 소스 (예: "Bing")
        page_url: 이미지가 게시된 페이지 URL (DDG 레코드의 `url`)
    """

    title: Optional[str] = None
    image: Optional[str] = None
    thumbnail: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    source: Optional[str] = None
    page_url: Optional[str] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "ImageResult":
        """DDG 원본 레코드에서 필드만 골라 ImageResult 생성

        Args:
            record: i.js `results` 배열의 원소

        Returns:
            ImageResult 인스턴스
        """
        return cls(
            title=record.get("title"),
            image=record.get("image"),
            thumbnail=record.get("thumbnail"),
            width=record.get("width"),
            height=record.get("height"),
            source=record.get("source"),
            page_url=record.get("url"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class PageResult:
    """페이지 한 번의 요청 결과

    Attributes:
        items: 정규화된 결과 (DDG 전달 순서 유지)
        next_params: 다음 페이지 파라미터 전체. 없으면 마지막 페이지.
    """

    items: List[ImageResult]
    next_params: Optional[Dict[str, str]] = None

    @property
    def is_terminal(self) -> bool:
        return not self.items or self.next_params is None
