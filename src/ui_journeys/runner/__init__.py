"""
Scenario Runner Module

Scenario/Step definitions, the step library, outcome checks and the runner
that executes scenarios in isolated browser sessions.
"""

from . import expectations, steps
from .context import ScenarioContext
from .runner import ScenarioRunner, SessionFactory, run_scenarios
from .scenario import Scenario, Step
from .states import JourneyState

__all__ = [
    "ScenarioRunner",
    "SessionFactory",
    "run_scenarios",
    "Scenario",
    "Step",
    "ScenarioContext",
    "JourneyState",
    "expectations",
    "steps",
]
