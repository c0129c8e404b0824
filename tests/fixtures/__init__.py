"""테스트 자산(데이터) 레이어

규칙:
- 엔진/네트워크 의존 없음
"""

from .ddg_pages import SEARCH_HTML, SEARCH_HTML_QUOTED, SEARCH_HTML_NO_TOKEN, make_record, make_records, page_body

__all__ = [
    "SEARCH_HTML",
    "SEARCH_HTML_QUOTED",
    "SEARCH_HTML_NO_TOKEN",
    "make_record",
    "make_records",
    "page_body",
]
