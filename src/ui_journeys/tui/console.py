"""
Rich TUI Console Setup

Provides the core console infrastructure for journey reports.
Configured via environment variables for customizable appearance.
"""

import os
from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Optional

from rich.console import Console
from rich.panel import Panel
from rich.style import Style
from rich.theme import Theme


BlockType = Literal["pass", "fail", "info"]


@dataclass
class TUIConfig:
    """
    TUI configuration loaded from environment variables.

    Attributes:
        color_pass: Color for passing scenarios
        color_fail: Color for failing scenarios
        color_info: Color for informational blocks
        show_timestamps: Whether to display timestamps
    """

    color_pass: str = "green"
    color_fail: str = "red"
    color_info: str = "blue"
    show_timestamps: bool = True

    @classmethod
    def from_env(cls) -> "TUIConfig":
        """Load configuration from environment variables."""
        return cls(
            color_pass=os.getenv("COLOR_PASS", "green"),
            color_fail=os.getenv("COLOR_FAIL", "red"),
            color_info=os.getenv("COLOR_INFO", "blue"),
            show_timestamps=os.getenv("SHOW_TIMESTAMPS", "true").lower() == "true",
        )


def create_theme(config: TUIConfig) -> Theme:
    """Create a Rich theme from TUI configuration."""
    return Theme(
        {
            "pass": Style(color=config.color_pass, bold=True),
            "fail": Style(color=config.color_fail, bold=True),
            "info": Style(color=config.color_info, bold=True),
            "timestamp": Style(dim=True),
            "label": Style(bold=True),
        }
    )


class ReportConsole:
    """
    Rich console wrapper for journey output.

    Provides panels for scenario outcomes with consistent styling and
    optional timestamps.
    """

    def __init__(self, config: Optional[TUIConfig] = None, console: Optional[Console] = None):
        """
        Initialize the report console.

        Args:
            config: TUI configuration. If None, loads from environment.
            console: Rich console to write to (stdout when None)
        """
        self.config = config or TUIConfig.from_env()
        self._theme = create_theme(self.config)
        if console is None:
            console = Console(theme=self._theme)
        else:
            console.push_theme(self._theme)
        self.console = console

    def _get_timestamp(self) -> str:
        if self.config.show_timestamps:
            return datetime.now().strftime("%H:%M:%S")
        return ""

    def color_for(self, block_type: BlockType) -> str:
        colors = {
            "pass": self.config.color_pass,
            "fail": self.config.color_fail,
            "info": self.config.color_info,
        }
        return colors[block_type]

    def print_block(self, content, block_type: BlockType, title: str) -> None:
        """
        Print a styled panel.

        Args:
            content: Text or any Rich renderable
            block_type: pass, fail or info
            title: Panel title
        """
        timestamp = self._get_timestamp()
        if timestamp:
            title = f"{timestamp} {title}"

        panel = Panel(
            content,
            title=title,
            title_align="left",
            border_style=self.color_for(block_type),
            padding=(0, 1),
        )
        self.console.print(panel)

    def print(self, *args, **kwargs) -> None:
        """Passthrough to underlying Rich console."""
        self.console.print(*args, **kwargs)

    def status(self, message: str):
        """Spinner shown while journeys run; panels print above it."""
        return self.console.status(message, spinner="dots")


_console: Optional[ReportConsole] = None


def get_console() -> ReportConsole:
    """Get or create the global console instance."""
    global _console
    if _console is None:
        _console = ReportConsole()
    return _console
