"""
Viewport-dependent site navigation.

The site renders a full navbar on desktop and a collapsed menu behind an
expand button on mobile. Each layout gets its own navigator; the scenario
picks one from the viewport instead of probing the page inside every
operation.
"""

import logging

from ..browser import BrowserSession, ElementHandle, NavigationStrategy, SelectorSpec
from .base import BasePage
from .naming import FAVOURITES_LINK, MY_FAVOURITES_TILE

logger = logging.getLogger(__name__)

NAVBAR = SelectorSpec.css("#navbar")
MOBILE_MENU_BUTTON = SelectorSpec.test_id("expand-button")

# The desktop navbar copy of the link stays in the DOM on mobile (hidden)
FAVOURITES_NAV_LINK = SelectorSpec.role("link", FAVOURITES_LINK, visible_only=True)


class Navigator:
    """Navigation behaviour for one layout."""

    strategy: NavigationStrategy

    @property
    def is_touch(self) -> bool:
        return self.strategy.is_touch

    async def release_focus(self, session: BrowserSession, handle: ElementHandle) -> None:
        """Hook run after typing into an input."""

    async def open_favourites(self, page: BasePage) -> None:
        raise NotImplementedError


class DesktopNavigator(Navigator):
    strategy = NavigationStrategy.DESKTOP

    async def open_favourites(self, page: BasePage) -> None:
        logger.info("Desktop view: following the Favourites link in the navbar")
        await page.wait_then_click(FAVOURITES_NAV_LINK, first=True)


class MobileNavigator(Navigator):
    strategy = NavigationStrategy.MOBILE

    async def release_focus(self, session: BrowserSession, handle: ElementHandle) -> None:
        # The on-screen keyboard otherwise covers the results region
        await session.blur(handle)

    async def open_favourites(self, page: BasePage) -> None:
        logger.info("Mobile view: opening the collapsed menu first")
        await page.wait_then_click(MOBILE_MENU_BUTTON)

        # The link turning visible marks the start of the slide-in; its end
        # has no observable signal.
        await page.wait_until_visible(FAVOURITES_NAV_LINK, first=True)
        await page.session.pause(
            page.deadlines.menu_transition_settle_ms, "mobile menu open transition"
        )

        await page.wait_then_click(FAVOURITES_NAV_LINK, first=True)
        await page.open_named_action("button", MY_FAVOURITES_TILE)


_NAVIGATORS = {
    NavigationStrategy.DESKTOP: DesktopNavigator,
    NavigationStrategy.MOBILE: MobileNavigator,
}


def navigator_for(strategy: NavigationStrategy) -> Navigator:
    return _NAVIGATORS[strategy]()
