"""
Favourites Page Model

Reaching the saved-topics list from any page and locating entries on it.
"""

import logging
import re
from typing import Optional

from ..browser import BrowserSession, ElementHandle, SelectorSpec
from ..config import Deadlines
from .base import BasePage
from .naming import FAVOURITES_TAB
from .navigation import DesktopNavigator, Navigator

logger = logging.getLogger(__name__)

FAVOURITES_URL = re.compile(r".*favourites")

# Rendered together with the saved entries, so an empty list is told apart
# from one still loading
LIST_LOADED = SelectorSpec.role("tab", FAVOURITES_TAB)


class FavouritesPage(BasePage):
    """Saved topics list."""

    def __init__(
        self,
        session: BrowserSession,
        deadlines: Optional[Deadlines] = None,
        navigator: Optional[Navigator] = None,
    ):
        super().__init__(session, deadlines)
        self.navigator = navigator or DesktopNavigator()

    async def open_favorites_list(self) -> None:
        """
        Open the favourites list through the site navigation.

        Arrival is checked on the URL: the list itself may take a while to
        populate.

        Raises:
            ElementNotReadyError: If a navigation control never appears
            AssertionFailure: If the favourites URL is never reached
        """
        await self.navigator.open_favourites(self)
        await self.session.wait_for_url(FAVOURITES_URL, self.deadlines.url_assertion_ms)

    async def wait_until_loaded(self) -> None:
        """
        Wait for the list to finish rendering its entries.

        Raises:
            ElementNotReadyError: If the list never finishes loading
        """
        await self.wait_until_visible(LIST_LOADED, self.deadlines.list_item_ms)

    async def find_in_list(self, label: str) -> ElementHandle:
        """
        Locate a saved topic by its visible text.

        Matching on text rather than link role keeps working when the mobile
        layout renders entries as cards.

        Returns:
            Handle to the entry, for the caller to click

        Raises:
            ElementNotReadyError: If the entry never shows up
        """
        item = await self.session.wait_for(
            SelectorSpec.text(label, exact=True, visible_only=True),
            "visible",
            self.deadlines.list_item_ms,
            first=True,
        )
        logger.info(f'Verified: "{label}" exists in favourites')
        return item
