"""
Topic Page Model

Guideline landing tiles, topic headings and the per-topic favourite toggle.
"""

import logging

from ..browser import SelectorSpec
from .base import BasePage
from .naming import favourite_control_name, topic_tile_name

logger = logging.getLogger(__name__)


class TopicPage(BasePage):
    """Guideline landing page and the topic pages behind its tiles."""

    def tile(self, topic: str) -> SelectorSpec:
        return SelectorSpec.role("button", topic_tile_name(topic))

    def heading(self, topic: str) -> SelectorSpec:
        return SelectorSpec.role("heading", topic)

    async def wait_for_topic_tile(self, topic: str) -> None:
        """Guideline content loads slowly on the test environment."""
        await self.wait_until_visible(self.tile(topic), self.deadlines.topic_content_ms)

    async def open_topic(self, topic: str) -> None:
        await self.open_named_action(
            "button", topic_tile_name(topic), self.deadlines.topic_content_ms
        )
        logger.info(f'Action: opened "{topic}" topic page')

    async def wait_for_heading(self, topic: str) -> None:
        await self.wait_until_visible(self.heading(topic), self.deadlines.topic_content_ms)

    async def toggle_favorite(self, topic: str) -> None:
        """
        Click the star button of a topic.

        This is a toggle: a second call removes the favourite again. Callers
        track the end state they want.
        """
        await self.wait_then_click(SelectorSpec.role("button", favourite_control_name(topic)))
        logger.info(f'Action: toggled favourite for "{topic}"')
