"""
Tests for location filtering.

Run with: python -m pytest tests/test_filters.py
"""

from logic.filters import filter_locations, group_by_category, matches_categories, matches_search
from logic.models import LocationRecord


def make(location_id, name, category, description=""):
    return LocationRecord(
        id=location_id,
        position=[44.0, -121.0],
        name=name,
        description=description,
        category=category,
    )


CAFE = make(1, "Cafe", ["Food"])
BAR = make(2, "Bar", ["Beverages"])
BREWPUB = make(3, "Brewpub", ["Food", "Beverages"], "Beer and burgers")
RIVER = make(4, "River Trail", ["Activities"], "Walk past the old BAR sign")
COLLECTION = [CAFE, BAR, BREWPUB, RIVER]


def test_category_selection_only():
    assert filter_locations([CAFE, BAR], "", {"Food"}) == [CAFE]


def test_search_only():
    assert filter_locations([CAFE, BAR], "bar", set()) == [BAR]


def test_search_is_case_insensitive_on_name_and_description():
    assert filter_locations(COLLECTION, "BaR") == [BAR, RIVER]
    assert filter_locations(COLLECTION, "BURGERS") == [BREWPUB]


def test_empty_selection_returns_all_text_matches():
    assert filter_locations(COLLECTION, "", set()) == COLLECTION
    assert filter_locations(COLLECTION, "", None) == COLLECTION
    assert filter_locations(COLLECTION, "r") == [
        loc for loc in COLLECTION if matches_search(loc, "r")
    ]


def test_categories_use_union():
    assert filter_locations(COLLECTION, "", {"Food", "Activities"}) == [CAFE, BREWPUB, RIVER]


def test_search_and_category_are_combined_with_and():
    # RIVER mentions "bar" but is not in Beverages; CAFE is Food but lacks "bar"
    assert filter_locations(COLLECTION, "bar", {"Beverages"}) == [BAR]
    assert filter_locations(COLLECTION, "bar", {"Food"}) == []


def test_filter_preserves_input_order_and_does_not_mutate():
    reversed_collection = list(reversed(COLLECTION))
    snapshot = list(reversed_collection)
    result = filter_locations(reversed_collection, "", {"Food", "Beverages"})
    assert result == [BREWPUB, BAR, CAFE]
    assert reversed_collection == snapshot


def test_matches_categories_with_empty_selection():
    assert matches_categories(CAFE, [])
    assert not matches_categories(CAFE, ["Home"])


def test_group_by_category():
    groups = group_by_category(COLLECTION)
    assert list(groups) == ["Food", "Beverages", "Activities"]
    assert groups["Food"] == [CAFE, BREWPUB]
    assert groups["Beverages"] == [BAR, BREWPUB]
    assert groups["Activities"] == [RIVER]
    assert "Home" not in groups
