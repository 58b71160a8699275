"""
Rich TUI Interface Module

Terminal output for journey runs, built on the Rich library.

Components:
- ReportConsole: Main console wrapper with themed output
- TUIConfig: Configuration for colors and display options
- Scenario and summary panels
"""

from ui_journeys.tui.console import (
    BlockType,
    ReportConsole,
    TUIConfig,
    get_console,
)
from ui_journeys.tui.result import (
    print_scenario_result,
    print_summary,
)

__all__ = [
    "BlockType",
    "ReportConsole",
    "TUIConfig",
    "get_console",
    "print_scenario_result",
    "print_summary",
]
