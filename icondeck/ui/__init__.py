"""
icondeck UI layer.

Provides the presentation-facing pieces shared by the theme pages:
- cardview: search, grouping and selection controllers
- pages: per-theme profiles
- clipboard: copy boundary with transient notifications
- viewmodels: IconBrowserViewModel wiring it all together

Usage:
    from icondeck.ui import IconBrowserViewModel, get_page_profile

    vm = IconBrowserViewModel(registry, get_page_profile("daily"))
"""
from .clipboard import ClipboardAction, Notification, QtClipboardBackend
from .filler import FillerText
from .pages import PAGE_PROFILES, PageProfile, get_page_profile, list_page_keys
from .viewmodels import IconBrowserViewModel

__all__ = [
    "ClipboardAction",
    "Notification",
    "QtClipboardBackend",
    "FillerText",
    "PAGE_PROFILES",
    "PageProfile",
    "get_page_profile",
    "list_page_keys",
    "IconBrowserViewModel",
]
