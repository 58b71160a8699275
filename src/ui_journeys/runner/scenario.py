"""
Scenario and Step definitions.

A Scenario is an ordered list of Steps; a Step is one action plus the
outcome check that must hold before the next Step runs. Scenarios are
validated when constructed, before any browser is launched.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Optional

from ..browser import Viewport
from ..errors import ScenarioDefinitionError
from .states import PREDECESSORS, JourneyState, advance, can_enter

if TYPE_CHECKING:
    from .context import ScenarioContext

StepAction = Callable[["ScenarioContext"], Awaitable[Any]]
StepCheck = Callable[["ScenarioContext"], Awaitable[None]]


@dataclass
class Step:
    """
    One action of a scenario.

    Attributes:
        name: Label used in reports
        action: Coroutine function run against the scenario context
        expect: Outcome check run after the action
        enters: Journey state reached when the step succeeds
        navigates: The action changes page; an outcome check is mandatory
        store_as: Keep the action's return value under this key
    """

    name: str
    action: StepAction
    expect: Optional[StepCheck] = None
    enters: Optional[JourneyState] = None
    navigates: bool = False
    store_as: Optional[str] = None


@dataclass
class Scenario:
    """Ordered, independently reproducible test case."""

    name: str
    steps: list[Step]
    description: str = ""
    viewport: Optional[Viewport] = None
    tags: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Check step ordering rules.

        Raises:
            ScenarioDefinitionError: On an empty scenario, a navigating step
                without an outcome check, or a step that skips its
                predecessor state
        """
        if not self.steps:
            raise ScenarioDefinitionError(f"Scenario '{self.name}' has no steps")

        current: Optional[JourneyState] = JourneyState.START
        for index, step in enumerate(self.steps, start=1):
            if step.navigates and step.expect is None:
                raise ScenarioDefinitionError(
                    f"Scenario '{self.name}' step {index} '{step.name}' navigates "
                    "but has no outcome check"
                )
            if step.enters is not None and not can_enter(step.enters, current):
                required = ", ".join(sorted(s.value for s in PREDECESSORS[step.enters]))
                where = current.value if current is not None else "an unknown page"
                raise ScenarioDefinitionError(
                    f"Scenario '{self.name}' step {index} '{step.name}' enters "
                    f"'{step.enters.value}' from '{where}', which is not one of: {required}"
                )
            current = advance(step.enters, current, step.navigates)
