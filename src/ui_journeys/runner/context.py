"""
Per-scenario execution context.
"""

import logging
from typing import Any

from ..browser import BrowserSession, NavigationStrategy, Viewport
from ..config import Deadlines, SuiteConfig
from ..pages import (
    FavouritesPage,
    HomePage,
    SearchResultsPage,
    TopicPage,
    navigator_for,
)

logger = logging.getLogger(__name__)


class ScenarioContext:
    """
    Everything a step can touch: the session, the page models and values
    stored by earlier steps.

    The navigation strategy is derived from the viewport here, once, and
    again only when a step changes the viewport.
    """

    def __init__(self, session: BrowserSession, config: SuiteConfig):
        self.session = session
        self.config = config
        self.values: dict[str, Any] = {}
        self._build_pages()

    @property
    def deadlines(self) -> Deadlines:
        return self.config.deadlines

    @property
    def viewport(self) -> Viewport:
        if self.session.viewport is not None:
            return self.session.viewport
        browser = self.config.browser
        return Viewport(width=browser.viewport_width, height=browser.viewport_height)

    def _build_pages(self) -> None:
        self.strategy = NavigationStrategy.for_viewport(
            self.viewport, self.config.mobile_breakpoint
        )
        navigator = navigator_for(self.strategy)
        deadlines = self.config.deadlines

        self.home = HomePage(self.session, deadlines, navigator)
        self.results = SearchResultsPage(self.session, deadlines)
        self.topic = TopicPage(self.session, deadlines)
        self.favourites = FavouritesPage(self.session, deadlines, navigator)

    async def set_viewport(self, viewport: Viewport) -> None:
        await self.session.set_viewport(viewport)
        self._build_pages()
        logger.debug(f"Viewport {viewport} uses {self.strategy.value} navigation")
