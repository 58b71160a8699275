"""
Data models for element targeting and layout.

This module defines Pydantic models shared by the session and page models:
- SelectorSpec: declarative, immutable description of how to locate an element
- Viewport: browser window size with named presets
- NavigationStrategy: desktop vs. collapsed (mobile) navigation variant
"""

import re
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Strategy(str, Enum):
    """How a SelectorSpec is resolved against the page."""

    ROLE = "role"
    TEST_ID = "test_id"
    CSS = "css"
    TEXT = "text"


class SelectorSpec(BaseModel):
    """Declarative element locator.

    Page models hold these instead of live handles; the session re-resolves
    them on every interaction.

    Options understood by the session:
    - name: accessible name (ROLE strategy)
    - exact: exact name/text match
    - visible_only: keep only currently visible matches
    """

    model_config = ConfigDict(frozen=True)

    strategy: Strategy
    value: str = Field(min_length=1)
    options: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def role(cls, role: str, name: Optional[str] = None, *, exact: bool = True,
             visible_only: bool = False) -> "SelectorSpec":
        options: dict[str, Any] = {"exact": exact, "visible_only": visible_only}
        if name is not None:
            options["name"] = name
        return cls(strategy=Strategy.ROLE, value=role, options=options)

    @classmethod
    def test_id(cls, test_id: str) -> "SelectorSpec":
        return cls(strategy=Strategy.TEST_ID, value=test_id)

    @classmethod
    def css(cls, selector: str, *, visible_only: bool = False) -> "SelectorSpec":
        return cls(strategy=Strategy.CSS, value=selector, options={"visible_only": visible_only})

    @classmethod
    def text(cls, text: str, *, exact: bool = True, visible_only: bool = True) -> "SelectorSpec":
        return cls(
            strategy=Strategy.TEXT,
            value=text,
            options={"exact": exact, "visible_only": visible_only},
        )

    @property
    def visible_only(self) -> bool:
        return bool(self.options.get("visible_only", False))

    def visible(self) -> "SelectorSpec":
        """Copy of this spec restricted to visible matches."""
        return self.model_copy(update={"options": {**self.options, "visible_only": True}})

    def describe(self) -> str:
        """Short human-readable form used in failure traces."""
        if self.strategy is Strategy.ROLE:
            desc = f"role={self.value}"
            if "name" in self.options:
                desc += f' name="{self.options["name"]}"'
        elif self.strategy is Strategy.TEST_ID:
            desc = f"test-id={self.value}"
        elif self.strategy is Strategy.TEXT:
            desc = f'text="{self.value}"'
        else:
            desc = f"css={self.value}"
        if self.visible_only:
            desc += " [visible]"
        return desc


_VIEWPORT_PATTERN = re.compile(r"^\s*(\d+)\s*[xX×]\s*(\d+)\s*$")


class Viewport(BaseModel):
    """Browser viewport size in CSS pixels."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(gt=0)
    height: int = Field(gt=0)

    @classmethod
    def parse(cls, value: str) -> "Viewport":
        """
        Parse a viewport from a preset name or ``WIDTHxHEIGHT``.

        Args:
            value: "mobile", "desktop" or e.g. "375x667"

        Raises:
            ValueError: If the value is neither a preset nor a size
        """
        preset = VIEWPORT_PRESETS.get(value.strip().lower())
        if preset is not None:
            return preset
        match = _VIEWPORT_PATTERN.match(value)
        if not match:
            raise ValueError(
                f"Invalid viewport '{value}'. Use one of "
                f"{', '.join(VIEWPORT_PRESETS)} or WIDTHxHEIGHT."
            )
        return cls(width=int(match.group(1)), height=int(match.group(2)))

    def as_playwright(self) -> dict[str, int]:
        return {"width": self.width, "height": self.height}

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


# iPhone SE and a full-HD desktop
MOBILE = Viewport(width=375, height=667)
DESKTOP = Viewport(width=1920, height=1080)

VIEWPORT_PRESETS = {
    "mobile": MOBILE,
    "desktop": DESKTOP,
}


class NavigationStrategy(str, Enum):
    """Which navigation layout the site renders for a viewport."""

    DESKTOP = "desktop"
    MOBILE = "mobile"

    @classmethod
    def for_viewport(cls, viewport: Viewport, breakpoint: int = 768) -> "NavigationStrategy":
        """Collapsed navigation below the breakpoint width."""
        if viewport.width < breakpoint:
            return cls.MOBILE
        return cls.DESKTOP

    @property
    def is_touch(self) -> bool:
        """Mobile layouts get an on-screen keyboard that must be dismissed."""
        return self is NavigationStrategy.MOBILE
