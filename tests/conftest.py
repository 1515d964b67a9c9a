import pytest
from unittest.mock import MagicMock

from icondeck.catalog.registry import IconRegistry
from icondeck.catalog.sources import MappingIconSource
from icondeck.ui.clipboard import ClipboardAction


SAMPLE_NAMES = [
    "Activity", "Airplay", "AlarmClock", "Anchor", "Aperture",
    "Archive", "ArrowDown", "ArrowLeft", "ArrowRight", "ArrowUp",
    "Bell", "Bluetooth", "Book", "Bookmark", "Box",
    "Calendar", "Camera", "Cast", "Check", "Circle",
    "Clock", "Cloud", "Code", "Coffee", "Compass",
    "Heart", "Home", "House", "Search", "Star",
]


def build_registry(names, **kwargs):
    registry = IconRegistry(**kwargs)
    registry.load(MappingIconSource({name: f"<svg:{name}>" for name in names}))
    return registry


@pytest.fixture
def registry():
    """Thirty-icon registry with renderer placeholders."""
    return build_registry(SAMPLE_NAMES)


@pytest.fixture
def small_registry():
    """Registry [Home, House, Heart, Star]."""
    return build_registry(["Home", "House", "Heart", "Star"])


@pytest.fixture
def clipboard_backend():
    backend = MagicMock()
    backend.set_text = MagicMock()
    return backend


@pytest.fixture
def clipboard(clipboard_backend):
    return ClipboardAction(backend=clipboard_backend)


@pytest.fixture
def make_registry():
    """Factory: make_registry(names, settings=...)."""
    return build_registry
