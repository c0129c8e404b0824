"""DuckDuckGo 응답 자산

- 검색 페이지(HTML): vqd 토큰 포함/미포함
- i.js 응답(JSON): results + next
"""

import json
from typing import Any, Optional

SEARCH_HTML = (
    "<html><head><script>"
    "DDG.deep.initialize('/d.js?q=cats&l=us-en&s=0&dl=en&ct=KR&ss_mkt=us&vqd=4-123456789012345678901234567890&p_ent=');"
    "</script></head><body></body></html>"
)

SEARCH_HTML_QUOTED = '<html><script>var vqd="4-98765432109876543210";</script></html>'

SEARCH_HTML_NO_TOKEN = "<html><body>Something changed</body></html>"


def make_record(i: int) -> dict[str, Any]:
    """i.js `results` 원소"""
    return {
        "title": f"cat {i}",
        "image": f"https://img.example.com/{i}.jpg",
        "thumbnail": f"https://tse.example.com/{i}.jpg",
        "width": 800 + i,
        "height": 600 + i,
        "source": "Bing",
        "url": f"https://page.example.com/{i}",
        "image_token": f"tok{i}",
    }


def make_records(start: int, n: int) -> list[dict[str, Any]]:
    return [make_record(i) for i in range(start, start + n)]


def page_body(records: list[dict[str, Any]], next_path: Optional[str] = None) -> str:
    """i.js JSON 본문"""
    body: dict[str, Any] = {"results": records}
    if next_path is not None:
        body["next"] = next_path
    return json.dumps(body)
