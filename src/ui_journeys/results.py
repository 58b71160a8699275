"""
Result models for scenario execution.

Serializable with ``model_dump_json()`` for the JSON-lines report.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Outcome(str, Enum):
    PASS = "pass"
    FAIL = "fail"


class StepResult(BaseModel):
    """Outcome of one step."""

    name: str
    success: bool
    elapsed_ms: float = Field(ge=0)

    error_kind: Optional[str] = None
    """Error class name (NavigationError, ElementNotReadyError, ...)."""

    error: Optional[str] = None
    deadline_ms: Optional[int] = None

    url: Optional[str] = None
    """Last known page URL when the step finished."""


class ScenarioResult(BaseModel):
    """Outcome of one scenario: pass, or the first failing step."""

    name: str
    description: str = ""
    viewport: Optional[str] = None
    outcome: Outcome
    steps: list[StepResult] = Field(default_factory=list)
    failing_step: Optional[str] = None
    diagnostic: Optional[str] = None
    started_at: datetime = Field(default_factory=datetime.now)
    duration_ms: float = Field(ge=0, default=0.0)

    @property
    def passed(self) -> bool:
        return self.outcome is Outcome.PASS
