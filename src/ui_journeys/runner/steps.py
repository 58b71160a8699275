"""
Step library.

Factories that wrap page-model operations into Steps with the journey state
they reach and a sensible default outcome check.
"""

import re
from typing import Optional

from ..browser import Viewport
from ..pages import FAVOURITES_URL
from .expectations import (
    StepCheck,
    document_ready,
    heading_visible,
    topic_tile_visible,
    url_matches,
)
from .scenario import Step
from .states import JourneyState

SEARCH_URL = re.compile(r".*search")


def navigate_home(expect: Optional[StepCheck] = None) -> Step:
    return Step(
        name="navigate home",
        action=lambda ctx: ctx.home.navigate_home(),
        expect=expect or document_ready(),
        enters=JourneyState.LOADED,
        navigates=True,
    )


def resize_and_reload(viewport: Viewport, expect: Optional[StepCheck] = None) -> Step:
    """Change the viewport and reload so media queries and layout JS re-run."""

    async def action(ctx) -> None:
        await ctx.set_viewport(viewport)
        await ctx.home.reload()

    return Step(
        name=f"resize to {viewport} and reload",
        action=action,
        expect=expect or document_ready(),
        enters=JourneyState.LOADED,
        navigates=True,
    )


def search(term: str, expect: Optional[StepCheck] = None) -> Step:
    return Step(
        name=f'search for "{term}"',
        action=lambda ctx: ctx.home.search(term),
        expect=expect or url_matches(SEARCH_URL),
        enters=JourneyState.SEARCHED,
        navigates=True,
    )


def select_result(label: str, expect: Optional[StepCheck] = None) -> Step:
    return Step(
        name=f'select result "{label}"',
        action=lambda ctx: ctx.results.select_result(label),
        expect=expect or url_matches(re.compile(f".*{re.escape(label)}", re.IGNORECASE)),
        enters=JourneyState.RESULT_SELECTED,
        navigates=True,
    )


def open_breadcrumb(topic: str, expect: Optional[StepCheck] = None) -> Step:
    return Step(
        name=f'open "{topic}" breadcrumb',
        action=lambda ctx: ctx.home.open_breadcrumb(topic),
        expect=expect or url_matches(re.compile(f".*{re.escape(topic)}", re.IGNORECASE)),
        enters=JourneyState.BREADCRUMB_NAVIGATED,
        navigates=True,
    )


def wait_for_topic_tile(topic: str) -> Step:
    return Step(
        name=f'wait for "{topic}" tile',
        action=lambda ctx: ctx.topic.wait_for_topic_tile(topic),
        expect=topic_tile_visible(topic),
    )


def open_topic(topic: str) -> Step:
    return Step(
        name=f'open topic "{topic}"',
        action=lambda ctx: ctx.topic.open_topic(topic),
        expect=heading_visible(topic),
        enters=JourneyState.TOPIC_OPEN,
        navigates=True,
    )


def toggle_favourite(topic: str) -> Step:
    return Step(
        name=f'toggle favourite "{topic}"',
        action=lambda ctx: ctx.topic.toggle_favorite(topic),
        enters=JourneyState.FAVORITE_TOGGLED,
    )


def depart_home() -> Step:
    """Leave the topic page to prove the favourite survives a page change."""
    return Step(
        name="return home",
        action=lambda ctx: ctx.home.navigate_home(),
        expect=document_ready(),
        enters=JourneyState.DEPARTED,
        navigates=True,
    )


def open_favourites_list() -> Step:
    return Step(
        name="open favourites list",
        action=lambda ctx: ctx.favourites.open_favorites_list(),
        expect=url_matches(FAVOURITES_URL),
        enters=JourneyState.FAVORITES_LIST_OPEN,
        navigates=True,
    )


def find_in_list(label: str, store_as: str = "list_item") -> Step:
    return Step(
        name=f'find "{label}" in list',
        action=lambda ctx: ctx.favourites.find_in_list(label),
        enters=JourneyState.ITEM_FOUND,
        store_as=store_as,
    )


def open_stored_item(topic: str, key: str = "list_item") -> Step:
    """Click a handle stored by an earlier step and land on the topic."""

    async def action(ctx) -> None:
        await ctx.session.click(ctx.values[key], deadline_ms=ctx.deadlines.list_item_ms)

    return Step(
        name=f'open "{topic}" from list',
        action=action,
        expect=heading_visible(topic),
        enters=JourneyState.ITEM_OPENED,
        navigates=True,
    )


async def _no_action(ctx) -> None:
    return None


def check(name: str, expect: StepCheck) -> Step:
    """Assertion-only step."""
    return Step(name=name, action=_no_action, expect=expect, enters=JourneyState.CONFIRMED)
