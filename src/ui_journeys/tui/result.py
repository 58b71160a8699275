"""
Result display for scenario outcomes.

One panel per scenario (step table, failure trace) and a closing summary
table for the whole run.
"""

from typing import Iterable, Optional

from rich.table import Table
from rich.text import Text

from ..results import ScenarioResult
from .console import ReportConsole, get_console


def _truncate(value: Optional[str], limit: int = 100) -> str:
    if not value:
        return ""
    if len(value) > limit:
        return value[: limit - 3] + "..."
    return value


def print_scenario_result(
    result: ScenarioResult,
    *,
    console: Optional[ReportConsole] = None,
) -> None:
    """
    Print a panel for one scenario.

    Args:
        result: Finished scenario
        console: Console to use (defaults to global console)
    """
    console = console or get_console()

    steps = Table(show_header=True, header_style="bold", box=None)
    steps.add_column("#", style="dim", justify="right")
    steps.add_column("Step")
    steps.add_column("Time", justify="right")
    steps.add_column("Status")

    for index, step in enumerate(result.steps, start=1):
        status = Text("ok", style="pass") if step.success else Text(
            step.error_kind or "failed", style="fail"
        )
        steps.add_row(str(index), step.name, f"{step.elapsed_ms:.0f}ms", status)

    content = Table.grid(padding=(0, 0))
    if result.description:
        content.add_row(Text(result.description, style="dim"))
    content.add_row(steps)
    if result.diagnostic:
        trace = Text()
        trace.append("\nFailure: ", style="fail")
        trace.append(result.diagnostic)
        content.add_row(trace)

    icon = "✓" if result.passed else "✗"
    viewport = f" @ {result.viewport}" if result.viewport else ""
    console.print_block(
        content,
        "pass" if result.passed else "fail",
        f"[{icon} {result.name}{viewport}]",
    )


def print_summary(
    results: Iterable[ScenarioResult],
    *,
    console: Optional[ReportConsole] = None,
) -> None:
    """Print the run summary table."""
    console = console or get_console()
    results = list(results)

    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Scenario")
    table.add_column("Outcome")
    table.add_column("Duration", justify="right")
    table.add_column("Failing step")

    for result in results:
        outcome = Text(result.outcome.value.upper(), style="pass" if result.passed else "fail")
        table.add_row(
            result.name,
            outcome,
            f"{result.duration_ms / 1000:.1f}s",
            _truncate(result.failing_step),
        )

    failed = sum(1 for r in results if not r.passed)
    title = f"[SUMMARY {len(results) - failed}/{len(results)} passed]"
    console.print_block(table, "fail" if failed else "pass", title)
