"""
Configuration and Logging Setup

Provides centralized configuration and logging for the journey suite.
Reads LOG_LEVEL and the per-step deadlines from environment variables.

Usage:
    from ui_journeys.config import configure_logging, SuiteConfig

    # Configure at application startup
    configure_logging()

    config = SuiteConfig.from_env()
"""

import logging
import os
import sys
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from .browser.controller import BrowserConfig

load_dotenv()

# Default configuration
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s: %(message)s"

# Valid log levels
VALID_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_log_level() -> int:
    """
    Get the log level from LOG_LEVEL environment variable.

    Returns:
        Logging level constant (e.g., logging.INFO)
    """
    level_str = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    if level_str not in VALID_LEVELS:
        print(
            f"Warning: Invalid LOG_LEVEL '{level_str}'. "
            f"Valid values: {', '.join(VALID_LEVELS.keys())}. "
            f"Using {DEFAULT_LOG_LEVEL}.",
            file=sys.stderr,
        )
        return VALID_LEVELS[DEFAULT_LOG_LEVEL]

    return VALID_LEVELS[level_str]


def configure_logging(
    level: Optional[int] = None,
    verbose: bool = False,
) -> None:
    """
    Configure logging for the journey suite.

    Args:
        level: Override log level (default: from LOG_LEVEL env var)
        verbose: Use detailed format with timestamps (default: simple format)
    """
    if level is None:
        level = get_log_level()

    log_format = LOG_FORMAT if verbose else LOG_FORMAT_SIMPLE

    logging.basicConfig(
        level=level,
        format=log_format,
        stream=sys.stderr,
        force=True,
    )

    logging.getLogger("ui_journeys").setLevel(level)

    # Quiet noisy third-party loggers in non-debug mode
    if level > logging.DEBUG:
        logging.getLogger("playwright").setLevel(logging.WARNING)
        logging.getLogger("asyncio").setLevel(logging.WARNING)


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


@dataclass
class Deadlines:
    """
    Per-step wait deadlines in milliseconds.

    Every condition wait in the page models takes its deadline from here.
    ``menu_transition_settle_ms`` is the only fixed delay in the suite: the
    mobile menu's slide-in animation exposes no observable end signal.
    """

    navigation_ms: int = 30000
    search_control_ms: int = 30000
    search_result_ms: int = 10000
    list_item_ms: int = 15000
    named_action_ms: int = 30000
    topic_content_ms: int = 60000
    url_assertion_ms: int = 30000
    menu_transition_settle_ms: int = 500

    @classmethod
    def from_env(cls) -> "Deadlines":
        """
        Create Deadlines from environment variables.

        Environment variables:
            DEADLINE_NAVIGATION_MS, DEADLINE_SEARCH_CONTROL_MS,
            DEADLINE_SEARCH_RESULT_MS, DEADLINE_LIST_ITEM_MS,
            DEADLINE_NAMED_ACTION_MS, DEADLINE_TOPIC_CONTENT_MS,
            DEADLINE_URL_ASSERTION_MS, MENU_TRANSITION_SETTLE_MS
        """
        return cls(
            navigation_ms=_env_int("DEADLINE_NAVIGATION_MS", 30000),
            search_control_ms=_env_int("DEADLINE_SEARCH_CONTROL_MS", 30000),
            search_result_ms=_env_int("DEADLINE_SEARCH_RESULT_MS", 10000),
            list_item_ms=_env_int("DEADLINE_LIST_ITEM_MS", 15000),
            named_action_ms=_env_int("DEADLINE_NAMED_ACTION_MS", 30000),
            topic_content_ms=_env_int("DEADLINE_TOPIC_CONTENT_MS", 60000),
            url_assertion_ms=_env_int("DEADLINE_URL_ASSERTION_MS", 30000),
            menu_transition_settle_ms=_env_int("MENU_TRANSITION_SETTLE_MS", 500),
        )

    @classmethod
    def uniform(cls, deadline_ms: int, settle_ms: int = 0) -> "Deadlines":
        """Every deadline set to the same value (handy for fast local sites)."""
        return cls(
            navigation_ms=deadline_ms,
            search_control_ms=deadline_ms,
            search_result_ms=deadline_ms,
            list_item_ms=deadline_ms,
            named_action_ms=deadline_ms,
            topic_content_ms=deadline_ms,
            url_assertion_ms=deadline_ms,
            menu_transition_settle_ms=settle_ms,
        )


@dataclass
class SuiteConfig:
    """Top-level configuration handed to the scenario runner."""

    browser: BrowserConfig = field(default_factory=BrowserConfig)
    deadlines: Deadlines = field(default_factory=Deadlines)

    # Viewports narrower than this use the collapsed (mobile) navigation
    mobile_breakpoint: int = 768

    @classmethod
    def from_env(cls) -> "SuiteConfig":
        """Create SuiteConfig from environment variables."""
        return cls(
            browser=BrowserConfig.from_env(),
            deadlines=Deadlines.from_env(),
            mobile_breakpoint=_env_int("MOBILE_BREAKPOINT", 768),
        )
