"""
Unit tests for BrowserSession against a mocked Playwright page.

This module contains unit tests for:
- Navigation failures mapped to NavigationError on load and reload
- Browser controller state before start and after close
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeout

from ui_journeys.browser import BrowserConfig, BrowserController, BrowserSession
from ui_journeys.errors import NavigationError


@pytest.fixture
def page():
    page = MagicMock()
    page.viewport_size = {"width": 1280, "height": 720}
    page.url = "https://site/topics/asthma"
    page.goto = AsyncMock()
    page.reload = AsyncMock()
    return page


class TestNavigationFailures:
    """Test that every failed navigation surfaces as a NavigationError."""

    @pytest.mark.asyncio
    async def test_reload_network_failure(self, page):
        page.reload.side_effect = PlaywrightError("net::ERR_CONNECTION_REFUSED")

        with pytest.raises(NavigationError) as exc_info:
            await BrowserSession(page).reload(deadline_ms=5000)

        assert "Reloading page failed" in exc_info.value.message
        assert "ERR_CONNECTION_REFUSED" in exc_info.value.message
        assert exc_info.value.url == "https://site/topics/asthma"
        assert exc_info.value.deadline_ms == 5000

    @pytest.mark.asyncio
    async def test_reload_timeout(self, page):
        page.reload.side_effect = PlaywrightTimeout("Timeout 5000ms exceeded")

        with pytest.raises(NavigationError) as exc_info:
            await BrowserSession(page).reload(deadline_ms=5000)

        assert "timed out" in exc_info.value.message
        assert exc_info.value.elapsed_ms is not None

    @pytest.mark.asyncio
    async def test_load_network_failure(self, page):
        page.goto.side_effect = PlaywrightError("net::ERR_NAME_NOT_RESOLVED")

        with pytest.raises(NavigationError) as exc_info:
            await BrowserSession(page).load("/favourites", deadline_ms=5000)

        assert "Loading '/favourites' failed" in exc_info.value.message
        assert exc_info.value.url == "https://site/topics/asthma"

    @pytest.mark.asyncio
    async def test_successful_reload_passes_readiness(self, page):
        await BrowserSession(page).reload(deadline_ms=5000)

        page.reload.assert_awaited_once_with(wait_until="domcontentloaded", timeout=5000)


class TestController:
    """Test controller state outside a running browser."""

    def test_context_before_start(self):
        controller = BrowserController(BrowserConfig())

        assert controller.current_page is None
        with pytest.raises(RuntimeError, match="not initialized"):
            controller.context

    @pytest.mark.asyncio
    async def test_close_releases_everything(self):
        controller = BrowserController(BrowserConfig())
        context = MagicMock(close=AsyncMock())
        controller._context = context
        controller._page = MagicMock()

        await controller.close()

        context.close.assert_awaited_once()
        assert controller.current_page is None
        with pytest.raises(RuntimeError):
            controller.context
