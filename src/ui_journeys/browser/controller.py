"""
Browser Controller

Manages a Playwright browser instance with configurable options.
Each controller owns exactly one isolated browser context, so a scenario
never shares cookies, storage or layout state with another scenario.
"""

import logging
import os
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Literal, Optional

from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
)
from dotenv import load_dotenv

from .session import BrowserSession

load_dotenv()

logger = logging.getLogger(__name__)


BrowserType = Literal["chromium", "firefox", "webkit"]


@dataclass
class BrowserConfig:
    """
    Configuration for browser instance.

    Reads from environment variables with sensible defaults.
    """

    browser_type: BrowserType = "chromium"

    # Journeys usually run in CI, so headless unless asked otherwise
    headless: bool = True

    viewport_width: int = 1280
    viewport_height: int = 720

    # Slow motion delay in ms (useful for debugging)
    slow_mo: int = 0

    # Root of the site under test; relative loads ("/") resolve against it
    base_url: Optional[str] = None

    # Playwright defaults for actions without an explicit deadline
    page_load_timeout: int = 30000
    navigation_timeout: int = 30000

    @classmethod
    def from_env(cls) -> "BrowserConfig":
        """
        Create BrowserConfig from environment variables.

        Environment variables:
            BROWSER_TYPE: chromium, firefox, or webkit (default: chromium)
            BROWSER_HEADLESS: true/false (default: true)
            BROWSER_VIEWPORT_WIDTH: int (default: 1280)
            BROWSER_VIEWPORT_HEIGHT: int (default: 720)
            BROWSER_SLOW_MO: int in ms (default: 0)
            BASE_URL: site under test (no default)
            PAGE_LOAD_TIMEOUT: int in ms (default: 30000)
            NAVIGATION_TIMEOUT: int in ms (default: 30000)
        """
        env_type = os.getenv("BROWSER_TYPE", "chrome").lower()
        browser_type_map = {
            "chrome": "chromium",
            "chromium": "chromium",
            "firefox": "firefox",
            "webkit": "webkit",
            "safari": "webkit",
        }
        browser_type = browser_type_map.get(env_type, "chromium")

        headless_str = os.getenv("BROWSER_HEADLESS", "true").lower()
        headless = headless_str in ("true", "1", "yes")

        return cls(
            browser_type=browser_type,
            headless=headless,
            viewport_width=int(os.getenv("BROWSER_VIEWPORT_WIDTH", "1280")),
            viewport_height=int(os.getenv("BROWSER_VIEWPORT_HEIGHT", "720")),
            slow_mo=int(os.getenv("BROWSER_SLOW_MO", "0")),
            base_url=os.getenv("BASE_URL") or None,
            page_load_timeout=int(os.getenv("PAGE_LOAD_TIMEOUT", "30000")),
            navigation_timeout=int(os.getenv("NAVIGATION_TIMEOUT", "30000")),
        )


class BrowserController:
    """
    Controls the Playwright browser instance.

    Usage:
        >>> async with BrowserController(config) as browser:
        ...     page = browser.current_page
        ...     await page.goto("/")
    """

    def __init__(self, config: Optional[BrowserConfig] = None):
        """
        Initialize browser controller.

        Args:
            config: Browser configuration (uses env if None)
        """
        self.config = config or BrowserConfig.from_env()

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    @property
    def context(self) -> BrowserContext:
        if self._context is None:
            raise RuntimeError("Browser not initialized")
        return self._context

    @property
    def current_page(self) -> Optional[Page]:
        return self._page

    async def initialize(self) -> None:
        """Start Playwright, launch the browser and open a fresh context."""
        if self._playwright is not None:
            return

        self._playwright = await async_playwright().start()
        launcher = self._get_browser_launcher()

        logger.debug(
            "Launching %s (headless=%s)", self.config.browser_type, self.config.headless
        )
        self._browser = await launcher.launch(
            headless=self.config.headless,
            slow_mo=self.config.slow_mo,
        )

        context_options = {
            "viewport": {
                "width": self.config.viewport_width,
                "height": self.config.viewport_height,
            },
        }
        if self.config.base_url:
            context_options["base_url"] = self.config.base_url

        self._context = await self._browser.new_context(**context_options)
        self._context.set_default_timeout(self.config.page_load_timeout)
        self._context.set_default_navigation_timeout(self.config.navigation_timeout)

        self._page = await self._context.new_page()

    def _get_browser_launcher(self):
        """Get the appropriate browser launcher based on config."""
        if self._playwright is None:
            raise RuntimeError("Playwright not initialized")

        launchers = {
            "chromium": self._playwright.chromium,
            "firefox": self._playwright.firefox,
            "webkit": self._playwright.webkit,
        }
        return launchers.get(self.config.browser_type, self._playwright.chromium)

    async def close(self) -> None:
        """Close the browser and release every Playwright resource."""
        if self._context:
            try:
                await self._context.close()
            except Exception as e:
                logger.debug(f"Context close failed: {e}")
            self._context = None
            self._page = None

        if self._browser:
            try:
                await self._browser.close()
            except Exception as e:
                logger.debug(f"Browser close failed: {e}")
            self._browser = None

        if self._playwright:
            try:
                await self._playwright.stop()
            except Exception as e:
                logger.debug(f"Playwright stop failed: {e}")
            self._playwright = None

    async def __aenter__(self) -> "BrowserController":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


@asynccontextmanager
async def open_session(config) -> AsyncIterator[BrowserSession]:
    """
    Launch an isolated browser and yield a session bound to its only page.

    The browser is torn down when the block exits, whatever the outcome.

    Args:
        config: SuiteConfig for the run
    """
    async with BrowserController(config.browser) as browser:
        yield BrowserSession(browser.current_page, base_url=config.browser.base_url)
