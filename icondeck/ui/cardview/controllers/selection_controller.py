"""
SelectionController - Single-slot icon selection.

Tracks at most one active icon and, on pages with a detail view, the
drawer state derived from it. Selection is independent of filtering: it
is never validated against, nor cleared by, the visible set.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from loguru import logger

from icondeck.catalog.models import IconEntry
from icondeck.core.events import Signal


class SelectionController:
    """
    Single-selection state machine: Unselected <-> Selected(entry).

    Usage:
        selection = SelectionController()
        selection.selection_changed.connect(on_selection_changed)

        selection.select(entry)   # last write wins
        if selection.is_selected(entry):
            highlight(entry)
        selection.clear()
    """

    def __init__(self):
        self._selected: Optional[IconEntry] = None
        self.selection_changed = Signal("SelectionChanged")

    @property
    def selected(self) -> Optional[IconEntry]:
        """Currently selected entry or None."""
        return self._selected

    @property
    def is_empty(self) -> bool:
        return self._selected is None

    def select(self, entry: IconEntry) -> None:
        """Select `entry`, replacing any previous selection."""
        self._selected = entry
        logger.debug(f"Selected: {entry.name}")
        self.selection_changed.emit(entry)

    def clear(self) -> None:
        """Clear selection."""
        if self._selected is None:
            return
        self._selected = None
        logger.debug("Selection cleared")
        self.selection_changed.emit(None)

    def is_selected(self, entry: IconEntry) -> bool:
        """Check if `entry` is the active one (compared by name)."""
        return self._selected is not None and self._selected.name == entry.name


class DrawerStatus(str, Enum):
    CLOSED = "closed"
    OPEN = "open"


@dataclass(frozen=True)
class DrawerState:
    """
    Detail drawer snapshot.

    Attributes:
        status: Open or closed
        entry: Entry shown while open
    """
    status: DrawerStatus = DrawerStatus.CLOSED
    entry: Optional[IconEntry] = None

    @classmethod
    def closed(cls) -> "DrawerState":
        return cls()

    @classmethod
    def opened(cls, entry: IconEntry) -> "DrawerState":
        return cls(DrawerStatus.OPEN, entry)

    @property
    def is_open(self) -> bool:
        return self.status is DrawerStatus.OPEN


class DetailDrawer:
    """
    Detail view driven by a SelectionController.

    The drawer state is derived from the selection: Selected(entry) shows
    Open(entry), Unselected shows Closed. open() and close() only write
    the selection.
    """

    def __init__(self, selection: SelectionController):
        self._selection = selection
        self._state = self._state_for(selection.selected)
        self.state_changed = Signal("DrawerStateChanged")
        selection.selection_changed.connect(self._on_selection_changed)

    @property
    def state(self) -> DrawerState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state.is_open

    @property
    def entry(self) -> Optional[IconEntry]:
        return self._state.entry

    def open(self, entry: IconEntry) -> None:
        self._selection.select(entry)

    def close(self) -> None:
        self._selection.clear()

    def detach(self) -> None:
        """Stop following the selection."""
        self._selection.selection_changed.disconnect(self._on_selection_changed)

    @staticmethod
    def _state_for(entry: Optional[IconEntry]) -> DrawerState:
        if entry is None:
            return DrawerState.closed()
        return DrawerState.opened(entry)

    def _on_selection_changed(self, entry: Optional[IconEntry]) -> None:
        state = self._state_for(entry)
        if state == self._state:
            return
        self._state = state
        self.state_changed.emit(state)
