"""SharedHttpClient 단위 테스트 (curl_cffi 세션은 Mock)."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from image_scraper.core.config import settings
from image_scraper.crawlers.http_client import SharedHttpClient


def test_default_headers_use_configured_user_agent():
    headers = SharedHttpClient().default_headers()

    assert headers["User-Agent"] == settings.user_agent
    assert headers["Referer"] == "https://duckduckgo.com/"
    assert headers["Sec-Fetch-Mode"] == "cors"


@pytest.mark.asyncio
async def test_get_text_returns_status_and_body():
    session = MagicMock()
    session.get = AsyncMock(return_value=MagicMock(status_code=200, text="ok"))
    session.close = AsyncMock()

    with patch("image_scraper.crawlers.http_client.AsyncSession", return_value=session) as factory:
        client = SharedHttpClient()
        res = await client.get_text("https://duckduckgo.com/", timeout_s=3.0, params={"q": "cats"})
        await client.get_text("https://duckduckgo.com/", timeout_s=3.0)
        await client.close()

    assert res == (200, "ok")
    assert factory.call_count == 1
    assert session.get.await_args_list[0].kwargs["params"] == {"q": "cats"}
    assert session.get.await_args_list[0].kwargs["timeout"] == 3.0
    session.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_get_text_network_error_returns_none():
    session = MagicMock()
    session.get = AsyncMock(side_effect=ConnectionError("reset"))

    with patch("image_scraper.crawlers.http_client.AsyncSession", return_value=session):
        client = SharedHttpClient()
        res = await client.get_text("https://duckduckgo.com/i.js", timeout_s=3.0)

    assert res is None
