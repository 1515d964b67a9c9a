"""
CardView Models Package.
"""
from icondeck.ui.cardview.models.grouping import (
    AlphabeticalPolicy,
    DisplayGroup,
    FeatureSplitPolicy,
    FeatureTiers,
    FixedSlicesPolicy,
    GroupingPolicy,
    SliceSpec,
)

__all__ = [
    "AlphabeticalPolicy",
    "DisplayGroup",
    "FeatureSplitPolicy",
    "FeatureTiers",
    "FixedSlicesPolicy",
    "GroupingPolicy",
    "SliceSpec",
]
