"""
Core systems: configuration, logging, events and error types.
"""
from icondeck.core.config import (
    ConfigManager,
    AppConfig,
    GeneralSettings,
    CatalogSettings,
    ClipboardSettings,
    SnippetSettings,
    PresentationSettings,
    DEFAULT_MAX_ICONS,
    DEFAULT_EXCLUDED_EXPORTS,
)
from icondeck.core.errors import IconDeckError, IconNotFoundError, ClipboardWriteFailed
from icondeck.core.events import Signal
from icondeck.core.logging import bind_logging, setup_logging

__all__ = [
    "ConfigManager",
    "AppConfig",
    "GeneralSettings",
    "CatalogSettings",
    "ClipboardSettings",
    "SnippetSettings",
    "PresentationSettings",
    "DEFAULT_MAX_ICONS",
    "DEFAULT_EXCLUDED_EXPORTS",
    "IconDeckError",
    "IconNotFoundError",
    "ClipboardWriteFailed",
    "Signal",
    "setup_logging",
    "bind_logging",
]
