"""
IconBrowserViewModel - shared engine behind every theme page.

Wires query -> filter -> group, single selection with optional detail
drawer, and clipboard copies. Pages supply a PageProfile and render.
"""
from typing import Dict, List, Optional
from loguru import logger

from icondeck.catalog.models import IconEntry
from icondeck.catalog.registry import IconRegistry
from icondeck.catalog.routes import DetailView, resolve_detail
from icondeck.catalog.snippets import SnippetType, generate, read_svg
from icondeck.core.config import AppConfig
from icondeck.core.events import Signal
from icondeck.ui.cardview.controllers.filter_controller import FilterController
from icondeck.ui.cardview.controllers.group_controller import GroupController, feature_tiers
from icondeck.ui.cardview.controllers.selection_controller import DetailDrawer, SelectionController
from icondeck.ui.cardview.models.grouping import DisplayGroup, FeatureTiers
from icondeck.ui.clipboard import ClipboardAction
from icondeck.ui.filler import FillerText
from icondeck.ui.pages import PageProfile


class IconBrowserViewModel:
    """
    ViewModel for one theme page instance.

    Controls:
    - Current query and visible/grouped results
    - Selection and detail drawer state
    - Copy actions

    Signals:
        visible_items_changed(list)
        grouped_items_changed(dict)

    Example:
        vm = IconBrowserViewModel(registry, get_page_profile("collection_detail"))
        vm.set_query("arrow")
        vm.activate(vm.visible_items[0])     # opens the drawer
        vm.copy_snippet(SnippetType.JSX)
    """

    def __init__(
        self,
        registry: IconRegistry,
        profile: PageProfile,
        clipboard: Optional[ClipboardAction] = None,
        config: Optional[AppConfig] = None,
    ):
        """
        Initialize view model.

        Args:
            registry: Loaded icon registry
            profile: Page configuration
            clipboard: Clipboard action (default: Qt clipboard)
            config: Application config
        """
        self._registry = registry
        self._profile = profile
        self._config = config or AppConfig()

        # Controllers
        self.filter_controller = FilterController()
        self.group_controller = GroupController(profile.policy, collection=registry.entries)
        self.selection = SelectionController()
        self.drawer: Optional[DetailDrawer] = DetailDrawer(self.selection) if profile.has_drawer else None
        self.clipboard = clipboard or ClipboardAction(settings=self._config.clipboard)
        self.filler = FillerText(self._config.presentation.filler_seed)

        # Signals
        self.visible_items_changed = Signal("VisibleItemsChanged")
        self.grouped_items_changed = Signal("GroupedItemsChanged")

        self._visible: List[IconEntry] = []
        self._grouped: DisplayGroup = {}
        self._apply_transformations()

    @property
    def profile(self) -> PageProfile:
        return self._profile

    @property
    def registry(self) -> IconRegistry:
        return self._registry

    # --- Query ---

    @property
    def query(self) -> str:
        return self.filter_controller.text_filter

    def set_query(self, text: str):
        """
        Replace the search query and recompute results.

        Selection and drawer state are left untouched.
        """
        self.filter_controller.set_text_filter(text)
        self._apply_transformations()

    def clear_query(self):
        self.filter_controller.clear()
        self._apply_transformations()

    def refresh(self):
        """Recompute results, e.g. after the registry was reloaded."""
        self._apply_transformations()

    @property
    def visible_items(self) -> List[IconEntry]:
        return list(self._visible)

    @property
    def grouped_items(self) -> DisplayGroup:
        return {label: list(items) for label, items in self._grouped.items()}

    def feature_tiers(self) -> Dict[str, FeatureTiers]:
        """
        Feature split of every current group.

        Empty unless the page profile sets `split_groups`.
        """
        if not self._profile.split_groups:
            return {}
        return {label: feature_tiers(items) for label, items in self._grouped.items()}

    # --- Selection ---

    @property
    def selected(self) -> Optional[IconEntry]:
        return self.selection.selected

    def is_selected(self, entry: IconEntry) -> bool:
        return self.selection.is_selected(entry)

    def select(self, entry: IconEntry):
        self.selection.select(entry)

    def open_detail(self, entry: IconEntry):
        """Select `entry` and open the drawer when the page has one."""
        if self.drawer is None:
            self.selection.select(entry)
            return
        self.drawer.open(entry)

    def close_detail(self):
        if self.drawer is None:
            self.selection.clear()
            return
        self.drawer.close()

    def activate(self, entry: IconEntry):
        """
        Handle a click on an icon tile.

        Drawer pages open the detail view; flat pages copy the configured
        snippet; the others just select.
        """
        if self.drawer is not None:
            self.drawer.open(entry)
        elif self._profile.click_copies is not None:
            self.copy_snippet(self._profile.click_copies, entry)
        else:
            self.selection.select(entry)

    # --- Clipboard ---

    def copy_name(self, entry: Optional[IconEntry] = None):
        self.copy_snippet(SnippetType.NAME, entry)

    def copy_snippet(self, snippet_type: SnippetType, entry: Optional[IconEntry] = None):
        """
        Copy a snippet for `entry` (default: current selection).

        SVG-based snippets are skipped with a warning when the entry's
        renderer carries no SVG markup.
        """
        if entry is None:
            entry = self.selection.selected
        if entry is None:
            logger.debug("Nothing to copy, no icon selected")
            return
        snippet_type = SnippetType(snippet_type)
        svg = read_svg(entry.renderer) if snippet_type.requires_svg else None
        if snippet_type.requires_svg and svg is None:
            logger.warning(f"No SVG markup for {entry.name}, cannot copy {snippet_type.label}")
            return
        self.clipboard.copy(generate(entry.name, snippet_type, self._config.snippets, svg=svg))

    # --- Routes / presentation ---

    def resolve_route(self, path: str) -> DetailView:
        return resolve_detail(self._registry, path)

    def filler_text(self) -> Optional[str]:
        if self._profile.filler is None:
            return None
        return self.filler.text(self._profile.filler)

    # --- Transformations ---

    def _apply_transformations(self):
        """Apply filter -> group pipeline."""
        # Slices are cut from the live catalog; the registry may be reloaded.
        self.group_controller.set_collection(self._registry.entries)
        self._visible = self.filter_controller.apply(self._registry.entries)
        self._grouped = self.group_controller.apply(self._visible)

        self.visible_items_changed.emit(self.visible_items)
        if self.group_controller.is_active:
            self.grouped_items_changed.emit(self.grouped_items)

        logger.debug(
            f"Transformations applied: {len(self._registry)} → {len(self._visible)} items, "
            f"{len(self._grouped)} groups"
        )
