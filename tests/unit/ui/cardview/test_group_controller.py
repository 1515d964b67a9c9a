"""
Tests for GroupController policies.
"""
import pytest
from pydantic import ValidationError

from icondeck.catalog.registry import entries_from_names
from icondeck.ui.cardview.controllers.filter_controller import filter_icons
from icondeck.ui.cardview.controllers.group_controller import (
    GroupController,
    feature_tiers,
    group_alphabetical,
)
from icondeck.ui.cardview.models.grouping import (
    AlphabeticalPolicy,
    FeatureSplitPolicy,
    FixedSlicesPolicy,
    SliceSpec,
)


def _names(entries):
    return [e.name for e in entries]


def _group_names(grouped):
    return {label: _names(items) for label, items in grouped.items()}


class TestAlphabetical:

    def test_scenario_single_bucket(self, small_registry):
        visible = filter_icons(small_registry.entries, "h")

        assert _group_names(group_alphabetical(visible)) == {"H": ["Home", "House", "Heart"]}

    def test_keys_ascending_and_complete(self, registry):
        visible = filter_icons(registry.entries, "o")
        grouped = group_alphabetical(visible)

        assert list(grouped) == sorted(grouped)
        assert all(grouped.values())
        flattened = [e for items in grouped.values() for e in items]
        assert sorted(_names(flattened)) == sorted(_names(visible))
        for key, items in grouped.items():
            assert all(e.name[0].upper() == key for e in items)
            assert _names(items) == [e.name for e in visible if e.name[0].upper() == key]

    def test_lowercase_names_share_uppercase_key(self):
        grouped = group_alphabetical(entries_from_names(["apple", "Anchor", "bell"]))

        assert _group_names(grouped) == {"A": ["apple", "Anchor"], "B": ["bell"]}

    def test_empty_input(self):
        assert group_alphabetical([]) == {}


class TestFixedSlices:

    @pytest.fixture
    def policy(self):
        return FixedSlicesPolicy.from_ranges(
            ("Recent", 0, 4),
            ("Material", 4, 8),
            ("UI 24px", 8, 20),
        )

    def test_no_query(self, registry, policy):
        controller = GroupController(policy, collection=registry.entries)
        grouped = controller.apply(registry.entries)

        assert list(grouped) == ["Recent", "Material", "UI 24px"]
        assert _names(grouped["Recent"]) == ["Activity", "Airplay", "AlarmClock", "Anchor"]
        assert len(grouped["UI 24px"]) == 12

    def test_query_shrinks_slices_and_drops_empty(self, registry, policy):
        controller = GroupController(policy, collection=registry.entries)
        grouped = controller.apply(filter_icons(registry.entries, "arrow"))

        assert _group_names(grouped) == {
            "Material": ["ArrowDown", "ArrowLeft"],
            "UI 24px": ["ArrowRight", "ArrowUp"],
        }

    def test_slice_order_is_stable(self, registry, policy):
        controller = GroupController(policy, collection=registry.entries)

        for query in ["", "a", "o", "ch"]:
            labels = list(controller.apply(filter_icons(registry.entries, query)))
            assert labels == [l for l in ["Recent", "Material", "UI 24px"] if l in labels]

    def test_range_past_end_is_clipped(self, small_registry):
        policy = FixedSlicesPolicy.from_ranges(("All", 0, 100))
        grouped = GroupController(policy, collection=small_registry.entries).apply(small_registry.entries)

        assert len(grouped["All"]) == 4

    def test_requires_collection(self, registry, policy):
        with pytest.raises(ValueError):
            GroupController(policy).apply(registry.entries)

    def test_invalid_range(self):
        with pytest.raises(ValidationError):
            SliceSpec(label="Bad", start=5, end=2)

    def test_duplicate_labels(self):
        with pytest.raises(ValidationError):
            FixedSlicesPolicy.from_ranges(("A", 0, 1), ("A", 1, 2))


class TestFeatureSplit:

    def test_scenario_five_items(self):
        tiers = feature_tiers(entries_from_names(["A", "B", "C", "D", "E"]))

        assert _names(tiers.featured) == ["A"]
        assert _names(tiers.secondary) == ["B", "C"]
        assert _names(tiers.standard) == ["D", "E"]

    @pytest.mark.parametrize("length", range(0, 8))
    def test_tier_sizes_partition_list(self, length):
        items = entries_from_names([f"Icon{i}" for i in range(length)])
        tiers = feature_tiers(items)

        assert len(tiers.featured) == min(1, length)
        assert len(tiers.secondary) == max(0, min(2, length - 1))
        assert len(tiers.standard) == max(0, length - 3)
        assert list(tiers.featured) + list(tiers.secondary) + list(tiers.standard) == list(items)

    def test_policy_output_has_all_tiers(self):
        grouped = GroupController(FeatureSplitPolicy()).apply(entries_from_names(["A", "B"]))

        assert _group_names(grouped) == {"featured": ["A"], "secondary": ["B"], "standard": []}


class TestGroupController:

    def test_no_policy_single_group(self, small_registry):
        controller = GroupController()

        assert not controller.is_active
        assert _group_names(controller.apply(small_registry.entries)) == {
            "all": ["Home", "House", "Heart", "Star"],
        }

    def test_policy_override(self, small_registry):
        controller = GroupController()
        grouped = controller.apply(small_registry.entries, AlphabeticalPolicy())

        assert list(grouped) == ["H", "S"]

    def test_deterministic(self, registry):
        controller = GroupController(AlphabeticalPolicy())
        visible = filter_icons(registry.entries, "c")

        assert controller.apply(visible) == controller.apply(visible)

    def test_set_policy(self):
        controller = GroupController()
        controller.set_policy(AlphabeticalPolicy())

        assert controller.is_active
        assert isinstance(controller.policy, AlphabeticalPolicy)

    def test_unknown_policy(self, small_registry):
        with pytest.raises(TypeError):
            GroupController().apply(small_registry.entries, object())
