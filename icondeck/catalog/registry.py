"""
IconRegistry - Bounded, ordered, immutable icon catalog.

Materializes a name -> entry lookup table from an icon source once per
load. Nothing else in the package introspects a source.
"""
from typing import Dict, Iterable, Iterator, Optional, Tuple
from loguru import logger

from icondeck.catalog.models import IconEntry
from icondeck.catalog.sources import IconSource
from icondeck.core.config import CatalogSettings
from icondeck.core.errors import IconNotFoundError


class IconRegistry:
    """
    Ordered catalog of IconEntry.

    Features:
    - Preserves source enumeration order
    - Drops non-icon exports via a fixed exclusion list
    - Truncates to a configured cap (`catalog.max_icons`)
    - Name lookup with IconNotFoundError

    Example:
        registry = IconRegistry()
        registry.load(MappingIconSource(icons), cap=800)
        entry = registry.get("ArrowLeft")
    """

    def __init__(self, settings: Optional[CatalogSettings] = None):
        """
        Initialize an empty registry.

        Args:
            settings: Catalog settings (cap and exclusion list)
        """
        self._settings = settings or CatalogSettings()
        self._entries: Tuple[IconEntry, ...] = ()
        self._by_name: Dict[str, IconEntry] = {}
        self._loaded = False

    # --- Loading ---

    def load(self, source: IconSource, cap: Optional[int] = None) -> Tuple[IconEntry, ...]:
        """
        Build the catalog from a source.

        Args:
            source: Icon source collaborator
            cap: Maximum number of entries (default: settings.max_icons)

        Returns:
            Ordered tuple of loaded entries
        """
        if cap is None:
            cap = self._settings.max_icons
        if cap < 0:
            raise ValueError(f"Registry cap must be >= 0, got {cap}")

        excluded = set(self._settings.excluded_exports)
        entries = []
        by_name: Dict[str, IconEntry] = {}

        for name, renderer in source.exports():
            if len(entries) >= cap:
                break
            if name in excluded:
                continue
            if name in by_name:
                logger.warning(f"Duplicate icon name '{name}' ignored")
                continue
            entry = IconEntry(name=name, renderer=renderer)
            entries.append(entry)
            by_name[name] = entry

        self._entries = tuple(entries)
        self._by_name = by_name
        self._loaded = True
        logger.debug(f"Registry loaded {len(self._entries)} icons (cap={cap})")
        return self._entries

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    # --- Lookup ---

    def get(self, name: str) -> IconEntry:
        """
        Get entry by name.

        Raises:
            IconNotFoundError: If no entry has this name
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise IconNotFoundError(name) from None

    def find(self, name: str) -> Optional[IconEntry]:
        """Get entry by name or None."""
        return self._by_name.get(name)

    @property
    def entries(self) -> Tuple[IconEntry, ...]:
        return self._entries

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(entry.name for entry in self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[IconEntry]:
        return iter(self._entries)


def load_registry(source: IconSource, settings: Optional[CatalogSettings] = None) -> IconRegistry:
    """Create a registry and load it from `source`."""
    registry = IconRegistry(settings)
    registry.load(source)
    return registry


def entries_from_names(names: Iterable[str]) -> Tuple[IconEntry, ...]:
    """Build renderer-less entries, mostly useful for previews and tests."""
    return tuple(IconEntry(name=name) for name in names)
