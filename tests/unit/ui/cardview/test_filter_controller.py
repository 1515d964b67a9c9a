"""
Tests for case-insensitive literal search.
"""
import pytest

from icondeck.ui.cardview.controllers.filter_controller import FilterController, filter_icons


def _names(entries):
    return [e.name for e in entries]


class TestFilterIcons:

    def test_empty_query_is_identity(self, registry):
        result = filter_icons(registry.entries, "")

        assert result == list(registry.entries)

    def test_scenario_home_house_heart(self, small_registry):
        assert _names(filter_icons(small_registry.entries, "h")) == ["Home", "House", "Heart"]

    def test_case_insensitive(self, registry):
        assert filter_icons(registry.entries, "ARROW") == filter_icons(registry.entries, "arrow")
        assert _names(filter_icons(registry.entries, "arrow")) == [
            "ArrowDown", "ArrowLeft", "ArrowRight", "ArrowUp",
        ]

    @pytest.mark.parametrize("query", ["o", "c", "arrow", "ck", "zzz", "E"])
    def test_result_is_ordered_subsequence(self, registry, query):
        result = filter_icons(registry.entries, query)
        positions = [registry.entries.index(e) for e in result]

        assert positions == sorted(positions)
        assert all(query.lower() in e.name.lower() for e in result)

    @pytest.mark.parametrize("query", ["o", "arrow", "Clock", ""])
    def test_idempotent(self, registry, query):
        once = filter_icons(registry.entries, query)

        assert filter_icons(once, query) == once

    @pytest.mark.parametrize("query", [".*", "(", "[a-z]", "\\", "^Home$", "?"])
    def test_pattern_characters_are_literal(self, registry, query):
        assert filter_icons(registry.entries, query) == []

    def test_whitespace_is_not_stripped(self, small_registry):
        assert filter_icons(small_registry.entries, " ") == []

    def test_does_not_mutate_input(self, small_registry):
        before = small_registry.entries

        filter_icons(small_registry.entries, "h")

        assert small_registry.entries == before
        assert small_registry.names == ("Home", "House", "Heart", "Star")


class TestFilterController:

    def test_holds_query(self, small_registry):
        controller = FilterController()
        controller.set_text_filter("ST")

        assert controller.text_filter == "ST"
        assert controller.is_active
        assert _names(controller.apply(small_registry.entries)) == ["Star"]

    def test_clear(self, small_registry):
        controller = FilterController()
        controller.set_text_filter("star")
        controller.clear()

        assert not controller.is_active
        assert len(controller.apply(small_registry.entries)) == 4

    def test_none_treated_as_empty(self):
        controller = FilterController()
        controller.set_text_filter(None)

        assert controller.text_filter == ""
