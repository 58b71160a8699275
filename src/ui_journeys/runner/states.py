"""
Journey states and their ordering rules.

A scenario is always in one current state: the page the last stateful step
left it on. A step may only enter a state when the current state is one of
that state's predecessors (toggling a favourite requires an open topic, and
so on). Reaching a state earlier in the scenario does not count once a later
step has moved away from it.
"""

from enum import Enum
from typing import Optional


class JourneyState(str, Enum):
    START = "start"
    LOADED = "loaded"
    SEARCHED = "searched"
    RESULT_SELECTED = "result_selected"
    BREADCRUMB_NAVIGATED = "breadcrumb_navigated"
    TOPIC_OPEN = "topic_open"
    FAVORITE_TOGGLED = "favorite_toggled"
    DEPARTED = "departed"
    FAVORITES_LIST_OPEN = "favorites_list_open"
    ITEM_FOUND = "item_found"
    ITEM_OPENED = "item_opened"
    CONFIRMED = "confirmed"


S = JourneyState

# Empty set: reachable from anywhere
PREDECESSORS: dict[JourneyState, frozenset[JourneyState]] = {
    S.START: frozenset(),
    S.LOADED: frozenset(),
    S.SEARCHED: frozenset({S.LOADED}),
    S.RESULT_SELECTED: frozenset({S.SEARCHED}),
    S.BREADCRUMB_NAVIGATED: frozenset({S.LOADED}),
    S.TOPIC_OPEN: frozenset({S.RESULT_SELECTED, S.BREADCRUMB_NAVIGATED}),
    # A topic opened from the favourites list is a topic page too; a toggle
    # leaves the topic page open for another one
    S.FAVORITE_TOGGLED: frozenset({S.TOPIC_OPEN, S.ITEM_OPENED, S.FAVORITE_TOGGLED}),
    S.DEPARTED: frozenset({S.FAVORITE_TOGGLED}),
    S.FAVORITES_LIST_OPEN: frozenset({S.LOADED, S.DEPARTED}),
    S.ITEM_FOUND: frozenset({S.FAVORITES_LIST_OPEN}),
    S.ITEM_OPENED: frozenset({S.ITEM_FOUND}),
    S.CONFIRMED: frozenset(set(JourneyState) - {S.START, S.CONFIRMED}),
}

# Entering these asserts on the current page without moving off it
STATIONARY = frozenset({S.CONFIRMED})


def can_enter(state: JourneyState, current: Optional[JourneyState]) -> bool:
    """
    Whether a step may enter ``state`` from ``current``.

    ``current`` is None after a navigation whose landing page is unknown;
    only states without predecessors can follow it.
    """
    required = PREDECESSORS[state]
    return not required or current in required


def advance(
    state: Optional[JourneyState],
    current: Optional[JourneyState],
    navigates: bool = False,
) -> Optional[JourneyState]:
    """Current state after a step that entered ``state`` (None: entered nothing)."""
    if state is None:
        return None if navigates else current
    if state in STATIONARY:
        return current
    return state
