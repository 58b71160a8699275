"""
Journey Errors

Failure taxonomy raised by the browser session and page models. Every error
is terminal for the scenario that raised it; the runner reports the first
one and stops.
"""

from typing import Optional


class JourneyError(Exception):
    """
    Base error for journey failures.

    Carries the context the runner needs for a readable failure trace.
    """

    kind = "JourneyError"

    def __init__(
        self,
        message: str,
        *,
        selector: Optional[str] = None,
        deadline_ms: Optional[int] = None,
        elapsed_ms: Optional[float] = None,
        url: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.selector = selector
        self.deadline_ms = deadline_ms
        self.elapsed_ms = elapsed_ms
        self.url = url

    def __str__(self) -> str:
        parts = [self.message]
        if self.selector:
            parts.append(f"selector={self.selector}")
        if self.deadline_ms is not None:
            parts.append(f"deadline={self.deadline_ms}ms")
        if self.url:
            parts.append(f"url={self.url}")
        return " | ".join(parts)


class NavigationError(JourneyError):
    """Page never reached its ready state."""

    kind = "NavigationError"


class ElementNotReadyError(JourneyError):
    """Awaited element never satisfied its condition within the deadline."""

    kind = "ElementNotReadyError"


class AmbiguousMatchError(JourneyError):
    """Selector resolved to zero or several usable candidates where one was required."""

    kind = "AmbiguousMatchError"


class AssertionFailure(JourneyError):
    """Postcondition did not hold after a successful interaction."""

    kind = "AssertionFailure"


class ScenarioDefinitionError(JourneyError):
    """Scenario is malformed (unchecked navigation, skipped predecessor state)."""

    kind = "ScenarioDefinitionError"
