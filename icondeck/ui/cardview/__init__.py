"""
CardView Module - search, grouping and selection for icon grids.

Usage:
    from icondeck.ui.cardview import FilterController, GroupController, AlphabeticalPolicy

    visible = FilterController().apply(registry.entries)
    grouped = GroupController(AlphabeticalPolicy()).apply(visible)
"""
from icondeck.ui.cardview.controllers import (
    DetailDrawer,
    DrawerState,
    FilterController,
    GroupController,
    SelectionController,
    filter_icons,
)
from icondeck.ui.cardview.models import (
    AlphabeticalPolicy,
    DisplayGroup,
    FeatureSplitPolicy,
    FeatureTiers,
    FixedSlicesPolicy,
    GroupingPolicy,
    SliceSpec,
)

__all__ = [
    # Controllers
    "FilterController",
    "filter_icons",
    "GroupController",
    "SelectionController",
    "DetailDrawer",
    "DrawerState",
    # Policies
    "AlphabeticalPolicy",
    "FixedSlicesPolicy",
    "FeatureSplitPolicy",
    "GroupingPolicy",
    "SliceSpec",
    "FeatureTiers",
    "DisplayGroup",
]
