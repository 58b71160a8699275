"""
Critical user journeys of the guidelines web application.

Each journey starts from a clean homepage load in its own browser, so any
one of them can be run alone or in parallel with the others.
"""

import re
from typing import Iterable, Optional

from .browser import DESKTOP, MOBILE
from .pages import MOBILE_MENU_BUTTON
from .runner import Scenario
from .runner import steps
from .runner.expectations import (
    element_hidden,
    element_visible,
    heading_visible,
    list_item_absent,
    title_matches,
)

# Core content known to exist on every environment
SEARCH_TERM = "Diabetes"
GUIDELINE = "Diabetes"
TOPIC = "Principles of management of diabetes"

HOME_TITLE = re.compile(r"Home \| Therapeutic Guidelines")


def smoke() -> Scenario:
    return Scenario(
        name="TC-00",
        description="Homepage loads successfully with correct title",
        tags=("smoke",),
        steps=[
            steps.navigate_home(),
            steps.check("title is the homepage title", title_matches(HOME_TITLE)),
        ],
    )


def search_and_open() -> Scenario:
    return Scenario(
        name="TC-01",
        description=f'User can search for "{SEARCH_TERM}" and navigate to the topic page',
        tags=("search",),
        steps=[
            steps.navigate_home(),
            steps.search(SEARCH_TERM),
            steps.select_result(SEARCH_TERM),
        ],
    )


def breadcrumb_navigation() -> Scenario:
    return Scenario(
        name="TC-02",
        description=f'User can navigate to "{TOPIC}" from the homepage breadcrumb',
        tags=("navigation",),
        steps=[
            steps.navigate_home(),
            steps.open_breadcrumb(GUIDELINE),
            steps.wait_for_topic_tile(TOPIC),
        ],
    )


def mobile_menu_visible() -> Scenario:
    return Scenario(
        name="TC-03",
        description="Mobile menu button is visible on mobile viewports",
        tags=("responsive",),
        steps=[
            steps.navigate_home(),
            steps.resize_and_reload(MOBILE),
            steps.check("mobile menu button visible", element_visible(MOBILE_MENU_BUTTON)),
        ],
    )


def desktop_menu_hidden() -> Scenario:
    return Scenario(
        name="TC-03b",
        description="Mobile menu button is hidden on desktop viewports",
        tags=("responsive",),
        steps=[
            steps.navigate_home(),
            steps.resize_and_reload(DESKTOP),
            steps.check("mobile menu button hidden", element_hidden(MOBILE_MENU_BUTTON)),
        ],
    )


def favourite_round_trip() -> Scenario:
    return Scenario(
        name="TC-04",
        description="User can add a topic to favourites and navigate back to it from the list",
        tags=("favourites",),
        steps=[
            steps.navigate_home(),
            steps.open_breadcrumb(GUIDELINE),
            steps.wait_for_topic_tile(TOPIC),
            steps.open_topic(TOPIC),
            steps.toggle_favourite(TOPIC),
            steps.depart_home(),
            steps.open_favourites_list(),
            steps.find_in_list(TOPIC),
            steps.open_stored_item(TOPIC),
            steps.check("topic heading visible", heading_visible(TOPIC)),
        ],
    )


def favourite_toggle_off() -> Scenario:
    return Scenario(
        name="TC-05",
        description="A favourite toggled off from its topic page leaves the favourites list",
        tags=("favourites",),
        steps=[
            steps.navigate_home(),
            steps.open_breadcrumb(GUIDELINE),
            steps.open_topic(TOPIC),
            steps.toggle_favourite(TOPIC),
            steps.depart_home(),
            steps.open_favourites_list(),
            steps.find_in_list(TOPIC),
            steps.open_stored_item(TOPIC),
            steps.toggle_favourite(TOPIC),
            steps.depart_home(),
            steps.open_favourites_list(),
            steps.check("topic absent from favourites", list_item_absent(TOPIC)),
        ],
    )


_BUILDERS = (
    smoke,
    search_and_open,
    breadcrumb_navigation,
    mobile_menu_visible,
    desktop_menu_hidden,
    favourite_round_trip,
    favourite_toggle_off,
)


def all_journeys() -> dict[str, Scenario]:
    """Every journey keyed by its test-case id, in catalog order."""
    journeys = (build() for build in _BUILDERS)
    return {journey.name: journey for journey in journeys}


def select_journeys(
    names: Optional[Iterable[str]] = None,
    tags: Optional[Iterable[str]] = None,
) -> list[Scenario]:
    """
    Pick journeys by id and/or tag (no filters: all of them).

    Raises:
        KeyError: If an id is not in the catalog
    """
    catalog = all_journeys()
    selected = list(catalog.values())

    if names:
        unknown = [n for n in names if n not in catalog]
        if unknown:
            raise KeyError(f"Unknown journey(s): {', '.join(unknown)}")
        wanted = set(names)
        selected = [s for s in selected if s.name in wanted]

    if tags:
        wanted_tags = set(tags)
        selected = [s for s in selected if wanted_tags & set(s.tags)]

    return selected


def with_viewport(scenarios: Iterable[Scenario], viewport) -> list[Scenario]:
    """Copies of scenarios that start at the given viewport."""
    return [
        Scenario(
            name=s.name,
            steps=s.steps,
            description=s.description,
            viewport=viewport,
            tags=s.tags,
        )
        for s in scenarios
    ]
