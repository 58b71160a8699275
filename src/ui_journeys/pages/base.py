"""
Base Page Model

Shared plumbing for page models: every interaction is guarded by a bounded
readiness wait, and accessible-role controls get a single wait-then-click
primitive.
"""

import logging
import time
from typing import Literal, Optional

from ..browser import BrowserSession, ElementHandle, SelectorSpec
from ..config import Deadlines

logger = logging.getLogger(__name__)

ActionRole = Literal["button", "link"]


def remaining_ms(deadline_ms: int, start: float) -> int:
    """What is left of a deadline started at ``start`` (never below 1ms)."""
    return max(1, deadline_ms - int((time.monotonic() - start) * 1000))


class BasePage:
    """
    Base class for page models.

    A page model holds selector descriptions and the session reference only;
    it carries no other state between calls.
    """

    def __init__(self, session: BrowserSession, deadlines: Optional[Deadlines] = None):
        """
        Initialize the page model.

        Args:
            session: Browser session for the current scenario
            deadlines: Wait deadlines (defaults when None)
        """
        self.session = session
        self.deadlines = deadlines or Deadlines()

    async def wait_until_visible(
        self,
        spec: SelectorSpec,
        deadline_ms: Optional[int] = None,
        *,
        first: bool = False,
    ) -> ElementHandle:
        """Wait for an element to be visible and return its handle."""
        return await self.session.wait_for(
            spec,
            "visible",
            deadline_ms or self.deadlines.named_action_ms,
            first=first,
        )

    async def wait_then_click(
        self,
        spec: SelectorSpec,
        deadline_ms: Optional[int] = None,
        *,
        first: bool = False,
        force: bool = False,
    ) -> None:
        """Wait for a control and click it, both within one deadline."""
        deadline = deadline_ms or self.deadlines.named_action_ms
        start = time.monotonic()
        handle = await self.wait_until_visible(spec, deadline, first=first)
        await self.session.click(handle, force=force, deadline_ms=remaining_ms(deadline, start))

    async def open_named_action(
        self,
        role: ActionRole,
        accessible_name: str,
        deadline_ms: Optional[int] = None,
    ) -> None:
        """
        Click a button or link identified by its accessible name.

        Used for breadcrumb shortcuts, topic tiles and similarly named
        controls.

        Raises:
            ElementNotReadyError: If the control never becomes visible
        """
        if role not in ("button", "link"):
            raise ValueError(f"Unsupported role for named action: {role}")
        logger.info(f'Action: open {role} "{accessible_name}"')
        await self.wait_then_click(
            SelectorSpec.role(role, accessible_name),
            deadline_ms or self.deadlines.named_action_ms,
        )
