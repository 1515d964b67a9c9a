from icondeck.ui.viewmodels.icon_browser_viewmodel import IconBrowserViewModel

__all__ = ["IconBrowserViewModel"]
