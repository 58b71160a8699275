"""
Page Models

One class per surface of the guidelines site. Page models translate journey
intents into guarded interactions against a BrowserSession.
"""

from .base import BasePage
from .favourites import FAVOURITES_URL, LIST_LOADED, FavouritesPage
from .home import HomePage
from .navigation import (
    MOBILE_MENU_BUTTON,
    NAVBAR,
    DesktopNavigator,
    MobileNavigator,
    Navigator,
    navigator_for,
)
from .search_results import SearchResultsPage
from .topic import TopicPage

__all__ = [
    "BasePage",
    "HomePage",
    "SearchResultsPage",
    "TopicPage",
    "FavouritesPage",
    "FAVOURITES_URL",
    "LIST_LOADED",
    "Navigator",
    "DesktopNavigator",
    "MobileNavigator",
    "navigator_for",
    "NAVBAR",
    "MOBILE_MENU_BUTTON",
]
