"""
Integration tests for the page models.

Drives headless Chromium against the in-memory site from conftest.py:
- Home page loading, search and breadcrumbs
- Visible-only search result selection
- Favourites navigation on both layouts and toggle semantics
- Bounded waits failing with the right error kind
"""

import re
import time

import pytest

from ui_journeys.browser import DESKTOP, MOBILE, NavigationStrategy
from ui_journeys.errors import AmbiguousMatchError, ElementNotReadyError
from ui_journeys.pages import MOBILE_MENU_BUTTON

from .conftest import SITE, TOPIC, TOPIC_PATH

pytestmark = pytest.mark.integration


class TestHomePage:
    """Loading, searching and quick links."""

    @pytest.mark.asyncio
    async def test_navigate_home_loads_root(self, ctx):
        await ctx.home.navigate_home()

        assert ctx.session.current_url() == f"{SITE}/"
        assert await ctx.session.title() == "Home | Therapeutic Guidelines"

    @pytest.mark.asyncio
    async def test_search_routes_to_results(self, ctx):
        await ctx.home.navigate_home()
        await ctx.home.search("Diabetes")

        url = await ctx.session.wait_for_url(re.compile(r".*search"), 5000)
        assert "q=Diabetes" in url

    @pytest.mark.asyncio
    async def test_breadcrumb_opens_guideline(self, ctx):
        await ctx.home.navigate_home()
        await ctx.home.open_breadcrumb("Diabetes")
        await ctx.topic.wait_for_topic_tile(TOPIC)

        assert ctx.session.current_url().endswith("/topics/diabetes")

    @pytest.mark.asyncio
    async def test_search_on_mobile_releases_focus(self, ctx):
        await ctx.set_viewport(MOBILE)
        await ctx.home.navigate_home()
        await ctx.home.search("Diabetes")

        focused = await ctx.session.page.evaluate("document.activeElement.tagName")
        assert focused != "INPUT"


class TestSearchResults:
    """Search result selection ignores hidden copies of the label."""

    @pytest.mark.asyncio
    async def test_selects_visible_match_over_hidden_echo(self, ctx):
        await ctx.session.load("/search?q=Diabetes")

        # Hidden query echo comes first in the DOM
        assert await ctx.session.page.get_by_text("Diabetes", exact=True).count() == 2

        await ctx.results.select_result("Diabetes")
        await ctx.session.wait_for_url(re.compile(r".*diabetes", re.IGNORECASE), 5000)

        assert ctx.session.current_url().endswith("/topics/diabetes")

    @pytest.mark.asyncio
    async def test_only_hidden_matches_is_ambiguous(self, ctx, suite_config):
        suite_config.deadlines.search_result_ms = 1000
        await ctx.session.load("/search?q=Asthma")

        with pytest.raises(AmbiguousMatchError) as exc_info:
            await ctx.results.select_result("Asthma")

        assert exc_info.value.deadline_ms == 1000
        assert "search" in exc_info.value.url


class TestFavourites:
    """Favourites list navigation and toggle behaviour."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("viewport", [MOBILE, DESKTOP], ids=["mobile", "desktop"])
    async def test_open_favorites_list_on_both_layouts(self, ctx, viewport):
        await ctx.set_viewport(viewport)
        await ctx.home.navigate_home()

        await ctx.favourites.open_favorites_list()

        assert re.match(r".*favourites", ctx.session.current_url())

    @pytest.mark.asyncio
    async def test_layout_strategy_follows_viewport(self, ctx):
        await ctx.set_viewport(MOBILE)
        assert ctx.strategy is NavigationStrategy.MOBILE

        await ctx.set_viewport(DESKTOP)
        assert ctx.strategy is NavigationStrategy.DESKTOP

    @pytest.mark.asyncio
    async def test_toggled_topic_appears_in_list(self, ctx):
        await ctx.session.load(TOPIC_PATH)
        await ctx.topic.toggle_favorite(TOPIC)

        await ctx.home.navigate_home()
        await ctx.favourites.open_favorites_list()
        item = await ctx.favourites.find_in_list(TOPIC)

        await ctx.session.click(item)
        await ctx.topic.wait_for_heading(TOPIC)
        assert ctx.session.current_url().endswith(TOPIC_PATH)

    @pytest.mark.asyncio
    async def test_second_toggle_removes_topic(self, ctx):
        await ctx.session.load(TOPIC_PATH)
        await ctx.topic.toggle_favorite(TOPIC)
        await ctx.home.navigate_home()
        await ctx.favourites.open_favorites_list()
        await ctx.favourites.find_in_list(TOPIC)

        await ctx.session.load(TOPIC_PATH)
        await ctx.topic.toggle_favorite(TOPIC)
        await ctx.home.navigate_home()
        await ctx.favourites.open_favorites_list()

        await ctx.favourites.wait_until_loaded()
        assert await ctx.session.count(ctx.session.page.get_by_text(TOPIC, exact=True)) == 0

    @pytest.mark.asyncio
    async def test_missing_item_fails_within_deadline(self, ctx, suite_config):
        suite_config.deadlines.list_item_ms = 1000
        await ctx.session.load("/favourites")

        start = time.monotonic()
        with pytest.raises(ElementNotReadyError) as exc_info:
            await ctx.favourites.find_in_list("Never saved")
        elapsed = time.monotonic() - start

        assert elapsed < 1.0 + 2.0
        assert exc_info.value.deadline_ms == 1000
        assert 'text="Never saved"' in exc_info.value.selector


class TestResponsiveLayout:
    """Collapsed navigation only on narrow viewports."""

    @pytest.mark.asyncio
    async def test_mobile_menu_button_visible_on_mobile(self, ctx):
        await ctx.home.navigate_home()
        await ctx.set_viewport(MOBILE)
        await ctx.home.reload()

        assert await ctx.session.is_visible(MOBILE_MENU_BUTTON)

    @pytest.mark.asyncio
    async def test_mobile_menu_button_hidden_on_desktop(self, ctx):
        await ctx.home.navigate_home()
        await ctx.set_viewport(DESKTOP)
        await ctx.home.reload()

        assert not await ctx.session.is_visible(MOBILE_MENU_BUTTON)
