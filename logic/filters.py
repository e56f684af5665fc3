"""
Location filtering.

Pure functions deriving the visible subset of the collection from the search
box and the category checkboxes, plus the category buckets used by the list
view.

Author: Bend Guide maintainers
Date: 2026-10-17
"""

from typing import Dict, Iterable, List, Optional, Sequence

from logic.config import CATEGORIES
from logic.models import LocationRecord


def matches_search(location: LocationRecord, search_term: str) -> bool:
    """Case-insensitive substring match against name or description."""
    term = (search_term or "").lower()
    return term in location.name.lower() or term in location.description.lower()


def matches_categories(location: LocationRecord, selected: Iterable[str]) -> bool:
    """True if nothing is selected or the record shares any selected category."""
    selected = set(selected)
    if not selected:
        return True
    return bool(selected.intersection(location.category))


def filter_locations(
        locations: Sequence[LocationRecord],
        search_term: str = "",
        selected_categories: Optional[Iterable[str]] = None,
) -> List[LocationRecord]:
    """Filter locations by search text AND category selection.

    Args:
        locations: Collection in display order.
        search_term: Text to look for in name or description.
        selected_categories: Categories ticked in the sidebar. Empty means all.

    Returns:
        Records passing both tests, in input order.
    """
    selected = set(selected_categories or ())
    return [
        loc for loc in locations
        if matches_search(loc, search_term) and matches_categories(loc, selected)
    ]


def group_by_category(locations: Sequence[LocationRecord]) -> Dict[str, List[LocationRecord]]:
    """Bucket locations under each of their categories.

    Buckets follow the canonical category order and empty ones are omitted.
    A record tagged with several categories appears in each bucket.
    """
    groups: Dict[str, List[LocationRecord]] = {}
    for category in CATEGORIES:
        bucket = [loc for loc in locations if category in loc.category]
        if bucket:
            groups[category] = bucket
    return groups
