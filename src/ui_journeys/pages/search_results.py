"""
Search Results Page Model
"""

import logging
import time

from ..browser import SelectorSpec
from ..errors import AmbiguousMatchError, ElementNotReadyError
from .base import BasePage, remaining_ms

logger = logging.getLogger(__name__)


class SearchResultsPage(BasePage):
    """Results list rendered after a global search."""

    async def select_result(self, label: str) -> None:
        """
        Click the search result whose text is exactly ``label``.

        The label usually appears more than once (the query echo, hidden menu
        entries, the result itself) and the position of the result among
        those copies differs between layouts, so matches are narrowed to the
        visible ones rather than picked by index.

        Raises:
            AmbiguousMatchError: If no visible element carries the label
        """
        spec = SelectorSpec.text(label, exact=True, visible_only=True)
        deadline = self.deadlines.search_result_ms
        start = time.monotonic()
        try:
            result = await self.session.wait_for(spec, "visible", deadline, first=True)
        except ElementNotReadyError as e:
            raise AmbiguousMatchError(
                f'No visible search result labelled "{label}"',
                selector=spec.describe(),
                deadline_ms=deadline,
                elapsed_ms=e.elapsed_ms,
                url=e.url,
            ) from e

        # Sticky headers can cover the result; force the click once it is in view
        await self.session.scroll_into_view(result, remaining_ms(deadline, start))
        await self.session.wait_for(result, "visible", remaining_ms(deadline, start))
        await self.session.click(result, force=True, deadline_ms=remaining_ms(deadline, start))
        logger.info(f'Action: selected search result "{label}"')
