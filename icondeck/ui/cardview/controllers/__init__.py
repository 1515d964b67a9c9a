"""
CardView Controllers Package.
"""
from icondeck.ui.cardview.controllers.filter_controller import FilterController, filter_icons
from icondeck.ui.cardview.controllers.group_controller import (
    GroupController,
    feature_tiers,
    group_alphabetical,
    group_fixed_slices,
)
from icondeck.ui.cardview.controllers.selection_controller import (
    DetailDrawer,
    DrawerState,
    DrawerStatus,
    SelectionController,
)

__all__ = [
    "FilterController",
    "filter_icons",
    "GroupController",
    "feature_tiers",
    "group_alphabetical",
    "group_fixed_slices",
    "SelectionController",
    "DetailDrawer",
    "DrawerState",
    "DrawerStatus",
]
