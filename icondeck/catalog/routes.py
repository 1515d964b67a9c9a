"""
Detail routes - `/collection/<name>` references to catalog entries.
"""
from typing import Optional
from urllib.parse import quote, unquote
from pydantic import BaseModel, ConfigDict
from loguru import logger

from icondeck.catalog.models import IconEntry
from icondeck.catalog.registry import IconRegistry
from icondeck.core.errors import IconNotFoundError

DETAIL_PREFIX = "/collection/"


class DetailView(BaseModel):
    """Resolved detail route; `found` is False for the placeholder state."""
    model_config = ConfigDict(frozen=True)

    name: str = ""
    entry: Optional[IconEntry] = None

    @property
    def found(self) -> bool:
        return self.entry is not None


def detail_path(name: str) -> str:
    """Build the detail route for an icon name."""
    return DETAIL_PREFIX + quote(name, safe="")


def parse_detail_path(path: str) -> Optional[str]:
    """
    Extract the icon name from a detail route.

    Returns:
        Name, or None if the path is not a detail route
    """
    if not path.startswith(DETAIL_PREFIX):
        return None
    name = unquote(path[len(DETAIL_PREFIX):].rstrip("/"))
    if not name or "/" in name:
        return None
    return name


def resolve_detail(registry: IconRegistry, path: str) -> DetailView:
    """
    Resolve a detail route against the registry.

    Unknown names and malformed paths resolve to a placeholder view.
    """
    name = parse_detail_path(path)
    if name is None:
        logger.debug(f"Not a detail route: {path!r}")
        return DetailView()

    try:
        return DetailView(name=name, entry=registry.get(name))
    except IconNotFoundError as e:
        logger.info(f"{e}; rendering placeholder")
        return DetailView(name=name)
