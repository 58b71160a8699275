"""
Unit tests for page models against a mocked session.

This module contains unit tests for:
- Layout-specific navigators
- Search focus handling per layout
- Named actions and search result selection errors
"""

import asyncio
import time
from unittest.mock import AsyncMock, MagicMock, call

import pytest

from ui_journeys.browser import NavigationStrategy, SelectorSpec
from ui_journeys.config import Deadlines
from ui_journeys.errors import AmbiguousMatchError, ElementNotReadyError
from ui_journeys.pages import (
    MOBILE_MENU_BUTTON,
    DesktopNavigator,
    FavouritesPage,
    HomePage,
    MobileNavigator,
    SearchResultsPage,
    TopicPage,
    navigator_for,
)
from ui_journeys.pages.base import remaining_ms
from ui_journeys.pages.navigation import FAVOURITES_NAV_LINK


@pytest.fixture
def session():
    session = MagicMock()
    for name in (
        "load", "reload", "wait_for_readiness", "wait_for_url", "wait_for", "click",
        "fill", "press_key", "blur", "scroll_into_view", "pause",
    ):
        setattr(session, name, AsyncMock())
    session.wait_for.side_effect = lambda target, *args, **kwargs: f"handle:{target}"
    session.current_url.return_value = "https://site/"
    return session


@pytest.fixture
def deadlines():
    return Deadlines.uniform(1000, settle_ms=250)


class TestNavigators:
    """Test layout-specific navigation."""

    def test_navigator_for_strategy(self):
        assert isinstance(navigator_for(NavigationStrategy.DESKTOP), DesktopNavigator)
        assert isinstance(navigator_for(NavigationStrategy.MOBILE), MobileNavigator)
        assert navigator_for(NavigationStrategy.MOBILE).is_touch

    @pytest.mark.asyncio
    async def test_desktop_follows_navbar_link(self, session, deadlines):
        page = FavouritesPage(session, deadlines, DesktopNavigator())

        await page.open_favorites_list()

        waited = [c.args[0] for c in session.wait_for.call_args_list]
        assert waited == [FAVOURITES_NAV_LINK]
        session.pause.assert_not_awaited()
        session.wait_for_url.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_mobile_opens_menu_then_hub(self, session, deadlines):
        page = FavouritesPage(session, deadlines, MobileNavigator())

        await page.open_favorites_list()

        waited = [c.args[0] for c in session.wait_for.call_args_list]
        assert waited[0] == MOBILE_MENU_BUTTON
        assert waited[1] == FAVOURITES_NAV_LINK
        assert waited[-1] == SelectorSpec.role("button", "Navigate to My favourites page")
        session.pause.assert_awaited_once_with(250, "mobile menu open transition")
        assert session.click.await_count == 3

    @pytest.mark.asyncio
    async def test_mobile_search_releases_focus(self, session, deadlines):
        home = HomePage(session, deadlines, MobileNavigator())

        await home.search("Diabetes")

        box = session.fill.await_args.args[0]
        session.fill.assert_awaited_once_with(box, "Diabetes")
        session.press_key.assert_awaited_once_with(box, "Enter")
        session.blur.assert_awaited_once_with(box)

    @pytest.mark.asyncio
    async def test_desktop_search_keeps_focus(self, session, deadlines):
        home = HomePage(session, deadlines, DesktopNavigator())

        await home.search("Diabetes")

        session.blur.assert_not_awaited()


class TestPageActions:
    """Test page model operations."""

    @pytest.mark.asyncio
    async def test_navigate_home_loads_root(self, session, deadlines):
        await HomePage(session, deadlines).navigate_home()
        session.load.assert_awaited_once_with("/", "domcontentloaded", 1000)

    @pytest.mark.asyncio
    async def test_open_breadcrumb_uses_named_button(self, session, deadlines):
        await HomePage(session, deadlines).open_breadcrumb("Diabetes")

        spec = session.wait_for.call_args.args[0]
        assert spec == SelectorSpec.role("button", "Diabetes-breadcrumb")

    @pytest.mark.asyncio
    async def test_named_action_rejects_other_roles(self, session, deadlines):
        with pytest.raises(ValueError):
            await TopicPage(session, deadlines).open_named_action("checkbox", "Anything")

    @pytest.mark.asyncio
    async def test_toggle_favourite_clicks_star(self, session, deadlines):
        await TopicPage(session, deadlines).toggle_favorite("Asthma")

        spec = session.wait_for.call_args.args[0]
        assert spec == SelectorSpec.role("button", "Favourite Asthma")
        session.click.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_select_result_forces_click_on_visible_match(self, session, deadlines):
        await SearchResultsPage(session, deadlines).select_result("Diabetes")

        first_wait = session.wait_for.call_args_list[0]
        assert first_wait.args[0] == SelectorSpec.text("Diabetes", visible_only=True)
        assert first_wait.kwargs == {"first": True}
        assert session.click.await_args.kwargs["force"] is True

    @pytest.mark.asyncio
    async def test_select_result_without_visible_match(self, session, deadlines):
        session.wait_for.side_effect = ElementNotReadyError(
            "timed out", deadline_ms=1000, elapsed_ms=1003.0, url="https://site/search?q=x"
        )

        with pytest.raises(AmbiguousMatchError) as exc_info:
            await SearchResultsPage(session, deadlines).select_result("Diabetes")

        assert exc_info.value.url == "https://site/search?q=x"
        assert exc_info.value.selector == 'text="Diabetes" [visible]'
        session.click.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_find_in_list_returns_handle(self, session, deadlines):
        item = await FavouritesPage(session, deadlines).find_in_list("Asthma")

        assert item == f"handle:{SelectorSpec.text('Asthma', visible_only=True)}"
        assert session.wait_for.call_args == call(
            SelectorSpec.text("Asthma", visible_only=True), "visible", 1000, first=True
        )

    @pytest.mark.asyncio
    async def test_wait_until_loaded_waits_for_tab(self, session, deadlines):
        await FavouritesPage(session, deadlines).wait_until_loaded()

        assert session.wait_for.call_args == call(
            SelectorSpec.role("tab", "Favourites"), "visible", 1000, first=False
        )

    @pytest.mark.asyncio
    async def test_click_gets_what_the_wait_left(self, session, deadlines):
        async def slow_wait(target, *args, **kwargs):
            await asyncio.sleep(0.2)
            return f"handle:{target}"

        session.wait_for.side_effect = slow_wait

        await TopicPage(session, deadlines).toggle_favorite("Asthma")

        assert 1 <= session.click.await_args.kwargs["deadline_ms"] <= 800


class TestRemainingDeadline:
    """Test deadline budgeting across chained waits."""

    def test_fresh_deadline_is_whole(self):
        assert remaining_ms(1000, time.monotonic()) in range(990, 1001)

    def test_spent_deadline_floors_at_one(self):
        assert remaining_ms(1000, time.monotonic() - 5) == 1
