"""
GroupController - Buckets filtered icons for display.

Three policies: alphabetical, fixed slices and feature split. Every
transform is pure; the same input always yields the same DisplayGroup.
"""
from typing import Dict, List, Optional, Sequence, Set
from loguru import logger

from icondeck.catalog.models import IconEntry
from icondeck.ui.cardview.models.grouping import (
    AlphabeticalPolicy,
    DisplayGroup,
    FeatureSplitPolicy,
    FeatureTiers,
    FixedSlicesPolicy,
    GroupingPolicy,
)

UNGROUPED = "all"


def group_alphabetical(items: Sequence[IconEntry]) -> DisplayGroup:
    """
    Group by uppercase first character.

    Buckets come out in ascending key order and only when non-empty;
    items keep their input order inside a bucket.
    """
    grouped: Dict[str, List[IconEntry]] = {}
    for item in items:
        grouped.setdefault(item.name[0].upper(), []).append(item)
    return dict(sorted(grouped.items()))


def group_fixed_slices(
    items: Sequence[IconEntry],
    policy: FixedSlicesPolicy,
    collection: Sequence[IconEntry],
) -> DisplayGroup:
    """
    Intersect pre-partitioned slices of `collection` with `items`.

    Slice order follows the policy; slices left empty by the filter
    are dropped.

    Args:
        items: Filtered entries
        policy: Slice configuration
        collection: Unfiltered collection the slices are cut from
    """
    visible: Set[str] = {item.name for item in items}
    grouped: DisplayGroup = {}
    for spec in policy.slices:
        members = [entry for entry in collection[spec.start:spec.end] if entry.name in visible]
        if members:
            grouped[spec.label] = members
    return grouped


def feature_tiers(items: Sequence[IconEntry]) -> FeatureTiers:
    """
    Split one category into rank tiers.

    featured = items[0:1], secondary = items[1:3], standard = items[3:].
    """
    items = list(items)
    return FeatureTiers(featured=items[0:1], secondary=items[1:3], standard=items[3:])


class GroupController:
    """
    Controls grouping for a page.

    Features:
    - Alphabetical buckets
    - Fixed, human-authored slices of a collection
    - Feature split (1 / 2 / rest)

    Example:
        controller = GroupController(collection=registry.entries)
        controller.set_policy(AlphabeticalPolicy())
        grouped = controller.apply(visible)  # {"A": [...], "B": [...]}
    """

    def __init__(
        self,
        policy: Optional[GroupingPolicy] = None,
        collection: Optional[Sequence[IconEntry]] = None,
    ):
        """
        Initialize group controller.

        Args:
            policy: Grouping policy (None for a single "all" group)
            collection: Collection fixed slices are cut from
        """
        self._policy = policy
        self._collection = tuple(collection) if collection is not None else None

    # --- Policy ---

    def set_policy(self, policy: Optional[GroupingPolicy]):
        self._policy = policy
        logger.debug(f"Grouping policy: {policy.kind if policy else 'none'}")

    @property
    def policy(self) -> Optional[GroupingPolicy]:
        return self._policy

    def set_collection(self, collection: Sequence[IconEntry]):
        """Set the collection fixed slices are cut from."""
        self._collection = tuple(collection)

    @property
    def is_active(self) -> bool:
        """Check if grouping is active."""
        return self._policy is not None

    # --- Apply ---

    def apply(self, items: Sequence[IconEntry], policy: Optional[GroupingPolicy] = None) -> DisplayGroup:
        """
        Group items.

        Args:
            items: Filtered entries
            policy: Override for the controller's policy

        Returns:
            Dict mapping group label to entries
        """
        policy = policy if policy is not None else self._policy

        if policy is None:
            return {UNGROUPED: list(items)}

        if isinstance(policy, AlphabeticalPolicy):
            return group_alphabetical(items)

        if isinstance(policy, FixedSlicesPolicy):
            if self._collection is None:
                raise ValueError("Fixed slices need a collection to slice")
            return group_fixed_slices(items, policy, self._collection)

        if isinstance(policy, FeatureSplitPolicy):
            return feature_tiers(items).as_group()

        raise TypeError(f"Unknown grouping policy: {policy!r}")

