"""
Clipboard boundary.

Fire-and-forget text writes to the system clipboard. Failures are caught
here, logged and turned into a transient notification; they never reach
the caller and never touch catalog, query or selection state.
"""
import asyncio
from typing import Optional, Protocol
from pydantic import BaseModel
from loguru import logger

from icondeck.core.config import ClipboardSettings
from icondeck.core.errors import ClipboardWriteFailed
from icondeck.core.events import Signal


class Notification(BaseModel):
    """Transient, non-blocking UI message."""
    message: str
    level: str = "info"
    timeout_ms: int = 2000


class ClipboardBackend(Protocol):
    def set_text(self, text: str) -> None:
        ...


class QtClipboardBackend:
    """Writes through `QGuiApplication.clipboard()`."""

    def _clipboard(self):
        try:
            from PySide6.QtGui import QGuiApplication
        except ImportError as e:
            raise ClipboardWriteFailed(f"Qt clipboard unavailable: {e}") from e

        if QGuiApplication.instance() is None:
            raise ClipboardWriteFailed("No Qt application instance, clipboard unavailable")
        return QGuiApplication.clipboard()

    def set_text(self, text: str) -> None:
        self._clipboard().setText(text)


class ClipboardAction:
    """
    One-shot clipboard writes.

    Inside a running asyncio loop (qasync in the desktop shell) the write
    is scheduled with `call_soon` so the input handler returns first.
    Without a loop it happens immediately.

    Usage:
        action = ClipboardAction()
        action.notification.connect(show_toast)
        action.copy("ArrowLeft")
    """

    def __init__(
        self,
        backend: Optional[ClipboardBackend] = None,
        settings: Optional[ClipboardSettings] = None,
    ):
        self._backend = backend if backend is not None else QtClipboardBackend()
        self._settings = settings or ClipboardSettings()
        self._last_error: Optional[ClipboardWriteFailed] = None
        self.notification = Signal("ClipboardNotification")

    @property
    def last_error(self) -> Optional[ClipboardWriteFailed]:
        """Failure of the most recent write, if any."""
        return self._last_error

    def copy(self, payload: str) -> None:
        """
        Request a clipboard write of `payload`.

        Args:
            payload: Icon name or snippet text
        """
        if not isinstance(payload, str):
            raise TypeError(f"Clipboard payload must be str, got {type(payload).__name__}")

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop is None:
            self._write(payload)
        else:
            loop.call_soon(self._write, payload)

    def _write(self, payload: str) -> None:
        try:
            payload.encode("utf-8")
            self._backend.set_text(payload)
        except ClipboardWriteFailed as e:
            e.payload = e.payload or payload
            self._fail(e)
        except Exception as e:
            self._fail(ClipboardWriteFailed(f"Clipboard write failed: {e}", payload))
        else:
            self._last_error = None
            logger.debug(f"Copied to clipboard: {payload!r}")
            if self._settings.notify_on_success:
                self._notify(f"Copied {payload}", "info")

    def _fail(self, error: ClipboardWriteFailed) -> None:
        self._last_error = error
        logger.warning(f"Clipboard write failed for {error.payload!r}: {error}")
        self._notify(f"Could not copy: {error}", "warning")

    def _notify(self, message: str, level: str) -> None:
        self.notification.emit(
            Notification(message=message, level=level, timeout_ms=self._settings.notification_timeout_ms)
        )
