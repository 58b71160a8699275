"""
Browser Session

Thin capability surface over a single Playwright page. Page models talk to
the browser only through this class, which owns:
- SelectorSpec resolution into lazily re-resolved locators
- Bounded condition waits (every wait carries an explicit deadline)
- Translation of Playwright failures into the journey error taxonomy
"""

import asyncio
import logging
import re
import time
from contextlib import contextmanager
from typing import Iterator, Literal, Optional, Union

from playwright.async_api import (
    Error as PlaywrightError,
    Locator,
    Page,
    TimeoutError as PlaywrightTimeout,
)

from ..errors import (
    AmbiguousMatchError,
    AssertionFailure,
    ElementNotReadyError,
    JourneyError,
    NavigationError,
)
from .models import SelectorSpec, Strategy, Viewport

logger = logging.getLogger(__name__)

# Locators are the element handles of this suite: they re-resolve on use
ElementHandle = Locator

ReadinessPolicy = Literal["commit", "domcontentloaded", "load", "networkidle"]
ElementCondition = Literal["attached", "detached", "visible", "hidden"]
UrlPattern = Union[str, re.Pattern]

Target = Union[SelectorSpec, Locator]


def _elapsed_ms(start: float) -> float:
    return (time.monotonic() - start) * 1000


class BrowserSession:
    """
    One isolated browser page plus the operations journeys need from it.

    The external site keeps background requests open indefinitely, so the
    default readiness policy is ``domcontentloaded``; ``networkidle`` would
    never settle.
    """

    def __init__(self, page: Page, base_url: Optional[str] = None):
        """
        Initialize the session.

        Args:
            page: Playwright page owned exclusively by this session
            base_url: Site root, used only for diagnostics
        """
        self.page = page
        self.base_url = base_url
        size = page.viewport_size
        self._viewport = Viewport(**size) if size else None

    @property
    def viewport(self) -> Optional[Viewport]:
        return self._viewport

    def current_url(self) -> str:
        return self.page.url

    async def title(self) -> str:
        return await self.page.title()

    @contextmanager
    def _deadline(
        self,
        error_cls: type[JourneyError],
        message: str,
        *,
        selector: Optional[str] = None,
        deadline_ms: Optional[int] = None,
    ) -> Iterator[None]:
        """Translate Playwright failures raised inside the block."""
        start = time.monotonic()
        try:
            yield
        except PlaywrightTimeout as e:
            elapsed = _elapsed_ms(start)
            logger.debug(f"{message} timed out after {elapsed:.0f}ms: {e}")
            raise error_cls(
                f"{message} (timed out after {elapsed:.0f}ms)",
                selector=selector,
                deadline_ms=deadline_ms,
                elapsed_ms=elapsed,
                url=self.current_url(),
            ) from e
        except PlaywrightError as e:
            if "strict mode violation" not in str(e):
                raise
            raise AmbiguousMatchError(
                f"{message}: selector matched more than one element",
                selector=selector,
                deadline_ms=deadline_ms,
                elapsed_ms=_elapsed_ms(start),
                url=self.current_url(),
            ) from e

    # --- NAVIGATION ---

    @contextmanager
    def _navigating(self, message: str, deadline_ms: int) -> Iterator[None]:
        """Like _deadline, but any failed navigation (net::, aborted) is a NavigationError."""
        with self._deadline(NavigationError, message, deadline_ms=deadline_ms):
            try:
                yield
            except PlaywrightTimeout:
                raise
            except PlaywrightError as e:
                raise NavigationError(
                    f"{message} failed: {e.message}",
                    deadline_ms=deadline_ms,
                    url=self.current_url(),
                ) from e

    async def load(
        self,
        url: str,
        readiness: ReadinessPolicy = "domcontentloaded",
        deadline_ms: int = 30000,
    ) -> None:
        """
        Navigate to a URL (relative URLs resolve against the context base URL).

        Raises:
            NavigationError: If the page fails to load or never becomes ready in time
        """
        logger.debug(f"Loading {url} (wait_until={readiness})")
        with self._navigating(f"Loading '{url}'", deadline_ms):
            await self.page.goto(url, wait_until=readiness, timeout=deadline_ms)

    async def reload(
        self,
        readiness: ReadinessPolicy = "domcontentloaded",
        deadline_ms: int = 30000,
    ) -> None:
        """
        Reload the current page so layout logic re-runs.

        Raises:
            NavigationError: If the reload fails or never becomes ready in time
        """
        with self._navigating("Reloading page", deadline_ms):
            await self.page.reload(wait_until=readiness, timeout=deadline_ms)

    async def wait_for_readiness(
        self,
        readiness: ReadinessPolicy = "domcontentloaded",
        deadline_ms: int = 30000,
    ) -> None:
        """Wait for the current document to reach a load state."""
        with self._deadline(
            NavigationError, f"Waiting for {readiness}", deadline_ms=deadline_ms
        ):
            await self.page.wait_for_load_state(readiness, timeout=deadline_ms)

    async def wait_for_url(self, pattern: UrlPattern, deadline_ms: int = 30000) -> str:
        """
        Wait until the page URL matches a glob or regex.

        Raises:
            AssertionFailure: If the URL never matches in time
        """
        shown = pattern.pattern if isinstance(pattern, re.Pattern) else pattern
        with self._deadline(
            AssertionFailure, f"Expected URL matching '{shown}'", deadline_ms=deadline_ms
        ):
            await self.page.wait_for_url(pattern, wait_until="commit", timeout=deadline_ms)
        return self.current_url()

    async def set_viewport(self, viewport: Viewport) -> None:
        """Resize the page; layout only fully reflows after a reload."""
        logger.debug(f"Setting viewport to {viewport}")
        await self.page.set_viewport_size(viewport.as_playwright())
        self._viewport = viewport

    # --- ELEMENTS ---

    def resolve(self, spec: SelectorSpec) -> ElementHandle:
        """
        Build a locator for a SelectorSpec.

        The locator may match zero or more elements; nothing is queried until
        it is used.
        """
        options = spec.options
        if spec.strategy is Strategy.ROLE:
            locator = self.page.get_by_role(
                spec.value,
                name=options.get("name"),
                exact=options.get("exact", True),
            )
        elif spec.strategy is Strategy.TEST_ID:
            locator = self.page.get_by_test_id(spec.value)
        elif spec.strategy is Strategy.TEXT:
            locator = self.page.get_by_text(spec.value, exact=options.get("exact", True))
        else:
            locator = self.page.locator(spec.value)

        if spec.visible_only:
            locator = locator.filter(visible=True)
        return locator

    def _locate(self, target: Target) -> tuple[Locator, str]:
        if isinstance(target, SelectorSpec):
            return self.resolve(target), target.describe()
        return target, str(target)

    async def count(self, target: Target) -> int:
        locator, _ = self._locate(target)
        return await locator.count()

    async def is_visible(self, target: Target) -> bool:
        """Instant visibility check (no waiting)."""
        locator, _ = self._locate(target)
        return await locator.first.is_visible()

    async def wait_for(
        self,
        target: Target,
        condition: ElementCondition = "visible",
        deadline_ms: int = 30000,
        *,
        first: bool = False,
    ) -> ElementHandle:
        """
        Wait for an element to reach a state.

        Args:
            target: SelectorSpec or locator
            condition: attached, detached, visible or hidden
            deadline_ms: Maximum wait time
            first: Wait on the first match only (when duplicates are expected)

        Returns:
            The locator that satisfied the condition

        Raises:
            ElementNotReadyError: If the condition is not met in time
            AmbiguousMatchError: If several elements match and first is False
        """
        locator, description = self._locate(target)
        if first:
            locator = locator.first
        with self._deadline(
            ElementNotReadyError,
            f"Waiting for {description} to be {condition}",
            selector=description,
            deadline_ms=deadline_ms,
        ):
            await locator.wait_for(state=condition, timeout=deadline_ms)
        return locator

    async def click(
        self,
        handle: ElementHandle,
        *,
        force: bool = False,
        deadline_ms: int = 30000,
    ) -> None:
        with self._deadline(
            ElementNotReadyError, "Clicking element", selector=str(handle), deadline_ms=deadline_ms
        ):
            await handle.click(force=force, timeout=deadline_ms)

    async def fill(self, handle: ElementHandle, text: str, deadline_ms: int = 30000) -> None:
        with self._deadline(
            ElementNotReadyError, "Filling element", selector=str(handle), deadline_ms=deadline_ms
        ):
            await handle.fill(text, timeout=deadline_ms)

    async def press_key(self, handle: ElementHandle, key: str, deadline_ms: int = 30000) -> None:
        with self._deadline(
            ElementNotReadyError, f"Pressing {key}", selector=str(handle), deadline_ms=deadline_ms
        ):
            await handle.press(key, timeout=deadline_ms)

    async def blur(self, handle: ElementHandle, deadline_ms: int = 30000) -> None:
        """Drop input focus (dismisses the on-screen keyboard on touch layouts)."""
        if await handle.count() == 0:
            # Element left the DOM (page navigated), so it holds no focus
            logger.debug(f"Skipping blur, element detached: {handle}")
            return
        with self._deadline(
            ElementNotReadyError, "Blurring element", selector=str(handle), deadline_ms=deadline_ms
        ):
            await handle.blur(timeout=deadline_ms)

    async def scroll_into_view(self, handle: ElementHandle, deadline_ms: int = 30000) -> None:
        with self._deadline(
            ElementNotReadyError, "Scrolling element into view", selector=str(handle),
            deadline_ms=deadline_ms,
        ):
            await handle.scroll_into_view_if_needed(timeout=deadline_ms)

    async def pause(self, milliseconds: int, reason: str) -> None:
        """
        Fixed delay for conditions the page exposes no signal for.

        Callers pass a named, configurable duration; inline literals are not
        accepted anywhere in the page models.
        """
        if milliseconds <= 0:
            return
        logger.debug(f"Pausing {milliseconds}ms: {reason}")
        await asyncio.sleep(milliseconds / 1000)
