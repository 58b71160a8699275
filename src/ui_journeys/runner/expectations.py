"""
Outcome checks run between steps.

Each factory returns a coroutine function over the scenario context. Checks
poll with Playwright's web-first assertions up to a deadline and raise
AssertionFailure when the outcome never holds.
"""

import re
import time
from typing import TYPE_CHECKING, Awaitable, Callable, Optional, Union

from playwright.async_api import expect

from ..browser import SelectorSpec
from ..errors import AssertionFailure

if TYPE_CHECKING:
    from .context import ScenarioContext

Pattern = Union[str, re.Pattern]
StepCheck = Callable[["ScenarioContext"], Awaitable[None]]


async def _assert(
    ctx: "ScenarioContext",
    check: Awaitable[None],
    message: str,
    deadline_ms: int,
    selector: Optional[str] = None,
) -> None:
    start = time.monotonic()
    try:
        await check
    except AssertionError as e:
        raise AssertionFailure(
            message,
            selector=selector,
            deadline_ms=deadline_ms,
            elapsed_ms=(time.monotonic() - start) * 1000,
            url=ctx.session.current_url(),
        ) from e


def _shown(pattern: Pattern) -> str:
    return pattern.pattern if isinstance(pattern, re.Pattern) else pattern


def url_matches(pattern: Pattern, deadline_ms: Optional[int] = None) -> StepCheck:
    """Page URL matches a regex or string."""

    async def check(ctx: "ScenarioContext") -> None:
        deadline = deadline_ms or ctx.deadlines.url_assertion_ms
        await _assert(
            ctx,
            expect(ctx.session.page).to_have_url(pattern, timeout=deadline),
            f"Expected URL matching '{_shown(pattern)}'",
            deadline,
        )

    return check


def title_matches(pattern: Pattern, deadline_ms: Optional[int] = None) -> StepCheck:
    """Document title matches a regex or string."""

    async def check(ctx: "ScenarioContext") -> None:
        deadline = deadline_ms or ctx.deadlines.navigation_ms
        await _assert(
            ctx,
            expect(ctx.session.page).to_have_title(pattern, timeout=deadline),
            f"Expected title matching '{_shown(pattern)}'",
            deadline,
        )

    return check


def element_visible(spec: SelectorSpec, deadline_ms: Optional[int] = None) -> StepCheck:
    async def check(ctx: "ScenarioContext") -> None:
        deadline = deadline_ms or ctx.deadlines.named_action_ms
        locator = ctx.session.resolve(spec).first
        await _assert(
            ctx,
            expect(locator).to_be_visible(timeout=deadline),
            f"Expected {spec.describe()} to be visible",
            deadline,
            spec.describe(),
        )

    return check


def element_hidden(spec: SelectorSpec, deadline_ms: Optional[int] = None) -> StepCheck:
    async def check(ctx: "ScenarioContext") -> None:
        deadline = deadline_ms or ctx.deadlines.named_action_ms
        locator = ctx.session.resolve(spec).first
        await _assert(
            ctx,
            expect(locator).to_be_hidden(timeout=deadline),
            f"Expected {spec.describe()} to be hidden",
            deadline,
            spec.describe(),
        )

    return check


def heading_visible(name: str, deadline_ms: Optional[int] = None) -> StepCheck:
    """Topic heading rendered; content can be slow, so topic deadline applies."""

    async def check(ctx: "ScenarioContext") -> None:
        deadline = deadline_ms or ctx.deadlines.topic_content_ms
        await element_visible(SelectorSpec.role("heading", name), deadline)(ctx)

    return check


def topic_tile_visible(topic: str, deadline_ms: Optional[int] = None) -> StepCheck:
    async def check(ctx: "ScenarioContext") -> None:
        deadline = deadline_ms or ctx.deadlines.topic_content_ms
        await element_visible(ctx.topic.tile(topic), deadline)(ctx)

    return check


def list_item_absent(label: str, deadline_ms: Optional[int] = None) -> StepCheck:
    """
    No visible element carries the label once the favourites list has loaded.

    Counting before the entries render would pass on any list.
    """

    async def check(ctx: "ScenarioContext") -> None:
        deadline = deadline_ms or ctx.deadlines.list_item_ms
        await ctx.favourites.wait_until_loaded()
        spec = SelectorSpec.text(label, exact=True, visible_only=True)
        await _assert(
            ctx,
            expect(ctx.session.resolve(spec)).to_have_count(0, timeout=deadline),
            f'Expected "{label}" to be absent from the list',
            deadline,
            spec.describe(),
        )

    return check


def document_ready(deadline_ms: Optional[int] = None) -> StepCheck:
    """DOM parsed on the current page."""

    async def check(ctx: "ScenarioContext") -> None:
        deadline = deadline_ms or ctx.deadlines.navigation_ms
        await ctx.session.wait_for_readiness("domcontentloaded", deadline)

    return check
