"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 Fake 주입 (HTTP 클라이언트, 시계, sleep)

금지:
- 실제 DuckDuckGo 호출
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "INFO"


Response = Optional[tuple[int, str]]


@dataclass
class FakeHttpClient:
    """SharedHttpClient 대체용 더미

    - responses를 순서대로 반환 (None = 네트워크 실패)
    - 호출된 url/params를 기록
    """

    responses: list[Response] = field(default_factory=list)
    calls: list[dict[str, Any]] = field(default_factory=list)

    async def get_text(
        self,
        url: str,
        *,
        timeout_s: float,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Response:
        self.calls.append({"url": url, "params": dict(params or {}), "timeout_s": timeout_s})
        if not self.responses:
            raise AssertionError(f"Unexpected request: {url}")
        return self.responses.pop(0)


@dataclass
class FakeClock:
    now: float = 1_000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@dataclass
class FakeSleep:
    delays: list[float] = field(default_factory=list)

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def fake_http() -> FakeHttpClient:
    return FakeHttpClient()


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_sleep() -> FakeSleep:
    return FakeSleep()
