"""
Browser Automation Module

Provides Playwright browser management and the BrowserSession capability
that page models drive.
"""

from .controller import BrowserController, BrowserConfig, open_session
from .models import (
    DESKTOP,
    MOBILE,
    NavigationStrategy,
    SelectorSpec,
    Strategy,
    Viewport,
)
from .session import BrowserSession, ElementHandle

__all__ = [
    "BrowserController",
    "BrowserConfig",
    "open_session",
    "BrowserSession",
    "ElementHandle",
    "SelectorSpec",
    "Strategy",
    "Viewport",
    "NavigationStrategy",
    "MOBILE",
    "DESKTOP",
]
