"""
FilterController - Live search over the icon catalog.

Case-insensitive literal substring match on icon names.
"""
from typing import List, Optional, Sequence
from loguru import logger

from icondeck.catalog.models import IconEntry


def filter_icons(entries: Sequence[IconEntry], query: str) -> List[IconEntry]:
    """
    Filter entries whose name contains `query`, ignoring case.

    The query is a literal substring, never a pattern. The result is an
    order-preserving subsequence of `entries`; an empty query returns
    every entry.

    Args:
        entries: Registry or any ordered sequence of entries
        query: Free text from the search field

    Returns:
        Matching entries in input order
    """
    if not query:
        return list(entries)

    needle = query.casefold()
    return [entry for entry in entries if needle in entry.name.casefold()]


class FilterController:
    """
    Holds the page's current query and applies it.

    Example:
        controller = FilterController()
        controller.set_text_filter("arrow")
        visible = controller.apply(registry.entries)
    """

    def __init__(self):
        """Initialize filter controller."""
        self._text_filter: str = ""

    # --- Text Filter ---

    def set_text_filter(self, text: Optional[str]):
        """
        Set search text.

        Args:
            text: Search text (case-insensitive, kept verbatim)
        """
        self._text_filter = text or ""
        logger.debug(f"Text filter set: '{self._text_filter}'")

    def clear(self):
        """Clear text filter."""
        self._text_filter = ""

    @property
    def text_filter(self) -> str:
        """Current text filter."""
        return self._text_filter

    @property
    def is_active(self) -> bool:
        return bool(self._text_filter)

    # --- Apply ---

    def apply(self, entries: Sequence[IconEntry]) -> List[IconEntry]:
        """Apply the current query to `entries`."""
        return filter_icons(entries, self._text_filter)
