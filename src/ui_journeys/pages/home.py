"""
Home Page Model

Interface between journeys and the guidelines homepage: loading, global
search and the quick-link breadcrumbs.
"""

import logging
from typing import Optional

from ..browser import BrowserSession, SelectorSpec
from ..config import Deadlines
from .base import BasePage
from .naming import SEARCH_BOX, breadcrumb_name
from .navigation import MOBILE_MENU_BUTTON, NAVBAR, Navigator, DesktopNavigator

logger = logging.getLogger(__name__)


class HomePage(BasePage):
    """
    Homepage model.

    Usage:
        home = HomePage(session, deadlines, navigator)
        await home.navigate_home()
        await home.search("Diabetes")
    """

    search_input = SelectorSpec.role("textbox", SEARCH_BOX)
    navbar = NAVBAR
    mobile_menu_button = MOBILE_MENU_BUTTON

    def __init__(
        self,
        session: BrowserSession,
        deadlines: Optional[Deadlines] = None,
        navigator: Optional[Navigator] = None,
    ):
        super().__init__(session, deadlines)
        self.navigator = navigator or DesktopNavigator()

    async def navigate_home(self) -> None:
        """
        Load the site root.

        Readiness is DOM presence only; the site's background requests never
        let the network go idle.

        Raises:
            NavigationError: If the DOM is not ready before the deadline
        """
        await self.session.load("/", "domcontentloaded", self.deadlines.navigation_ms)

    async def reload(self) -> None:
        """Reload so the layout is recomputed for the current viewport."""
        await self.session.reload("domcontentloaded", self.deadlines.navigation_ms)

    async def search(self, term: str) -> None:
        """
        Run a global search.

        The search box appears late while the client app hydrates, hence the
        long deadline.

        Raises:
            ElementNotReadyError: If the search box never appears
        """
        box = await self.wait_until_visible(self.search_input, self.deadlines.search_control_ms)
        await self.session.fill(box, term)
        await self.session.press_key(box, "Enter")
        await self.session.wait_for_readiness("domcontentloaded", self.deadlines.navigation_ms)
        await self.navigator.release_focus(self.session, box)
        logger.info(f'Action: searched for "{term}"')

    async def open_breadcrumb(self, topic: str) -> None:
        """Click a homepage quick-link for a guideline."""
        await self.open_named_action("button", breadcrumb_name(topic))
