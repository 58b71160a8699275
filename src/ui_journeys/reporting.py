"""
Reporting sinks.

Every finished ScenarioResult is handed to each configured sink:
- ConsoleReporter: Rich panels in the terminal
- JsonLinesReporter: one JSON object per scenario, for CI gating
"""

import logging
from pathlib import Path
from typing import Optional, Protocol, Union

from .results import ScenarioResult
from .tui import ReportConsole, get_console, print_scenario_result, print_summary

logger = logging.getLogger(__name__)


class ReportSink(Protocol):
    def record(self, result: ScenarioResult) -> None:
        ...


class ConsoleReporter:
    """Prints each scenario as it finishes and a summary on demand."""

    def __init__(self, console: Optional[ReportConsole] = None):
        self.console = console or get_console()
        self.results: list[ScenarioResult] = []

    def record(self, result: ScenarioResult) -> None:
        self.results.append(result)
        print_scenario_result(result, console=self.console)

    def print_summary(self) -> None:
        print_summary(self.results, console=self.console)


class JsonLinesReporter:
    """
    Appends one JSON line per scenario to a file.

    The file is truncated when the reporter is created so a run never mixes
    with results of an earlier one.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("", encoding="utf-8")
        logger.debug(f"Writing JSON report to {self.path}")

    def record(self, result: ScenarioResult) -> None:
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(result.model_dump_json() + "\n")
