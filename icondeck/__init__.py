"""
icondeck - icon catalog browsing engine.

Search, group, select and copy over a bounded catalog of icon glyphs,
shared by every theme page of the browser.
"""

# Core systems
from icondeck.core.config import ConfigManager, AppConfig
from icondeck.core.errors import IconDeckError, IconNotFoundError, ClipboardWriteFailed
from icondeck.core.events import Signal
from icondeck.core.logging import bind_logging, setup_logging

# Catalog
from icondeck.catalog import (
    IconEntry,
    IconRegistry,
    MappingIconSource,
    ModuleIconSource,
    SvgDirectoryIconSource,
    SnippetType,
)

# UI
from icondeck.ui import ClipboardAction, IconBrowserViewModel, get_page_profile

__version__ = "0.1.0"

__all__ = [
    # Core
    "ConfigManager",
    "AppConfig",
    "IconDeckError",
    "IconNotFoundError",
    "ClipboardWriteFailed",
    "Signal",
    "setup_logging",
    "bind_logging",

    # Catalog
    "IconEntry",
    "IconRegistry",
    "MappingIconSource",
    "ModuleIconSource",
    "SvgDirectoryIconSource",
    "SnippetType",

    # UI
    "ClipboardAction",
    "IconBrowserViewModel",
    "get_page_profile",
]
