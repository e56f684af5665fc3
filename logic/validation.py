"""
Validation and sanitization utilities.

This module contains the coercion rules applied to location records before
they enter the collection: category normalisation, marker glyph fallback,
coordinate bounds, and length limits on submitted text.

Author: Bend Guide maintainers
Date: 2026-10-17
"""

from typing import Any, List, Sequence

from logic.config import CATEGORIES, DEFAULT_CATEGORY, DEFAULT_EMOJI

# Only enforced on request bodies; stored records keep their text verbatim
MAX_NAME_LEN = 120
MAX_DESCRIPTION_LEN = 2000

# Labels used by older seed files
LEGACY_CATEGORY_ALIASES = {"bars": "Beverages"}


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


def sanitise_categories(value: Any) -> List[str]:
    """Normalise a category selection.

    Accepts a single label or a sequence of labels. Unknown labels are
    dropped, duplicates removed, and an empty result is coerced to the
    default category rather than rejected.

    Args:
        value: Raw category value.

    Returns:
        Non-empty list of known category labels, original order preserved.
    """
    known = {c.lower(): c for c in CATEGORIES}
    result: List[str] = []
    for item in _as_list(value):
        if not isinstance(item, str):
            continue
        key = item.strip().lower()
        label = known.get(key) or LEGACY_CATEGORY_ALIASES.get(key)
        if label and label not in result:
            result.append(label)
    return result or [DEFAULT_CATEGORY]


def sanitise_emojis(value: Any) -> List[str]:
    """Normalise marker glyphs, falling back to the default pin.

    Args:
        value: A glyph string or sequence of glyph strings.

    Returns:
        Non-empty list of glyph strings.
    """
    result = [item for item in _as_list(value) if isinstance(item, str) and item.strip()]
    return result or [DEFAULT_EMOJI]


def coerce_text(value: Any) -> str:
    """Turn a missing free-text field into an empty string, leaving text as is."""
    if value is None:
        return ""
    return str(value)


def check_text_length(value: str, max_len: int) -> str:
    """Bound a free-text field submitted through the API.

    Raises:
        ValueError: If the text exceeds the maximum length.
    """
    if len(value) > max_len:
        raise ValueError(f"Text too long (max {max_len} characters)")
    return value


def validate_position(value: Sequence[Any]) -> List[float]:
    """Validate a latitude/longitude pair.

    Args:
        value: Two-element sequence of numbers.

    Returns:
        ``[lat, lng]`` as floats.

    Raises:
        ValueError: If the pair is malformed or out of range.
    """
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError("Position must be a [latitude, longitude] pair")
    lat, lng = value
    if isinstance(lat, bool) or isinstance(lng, bool):
        raise ValueError("Invalid coordinate")
    try:
        lat, lng = float(lat), float(lng)
    except (TypeError, ValueError):
        raise ValueError("Invalid coordinate")
    if not -90.0 <= lat <= 90.0:
        raise ValueError("Latitude out of range")
    if not -180.0 <= lng <= 180.0:
        raise ValueError("Longitude out of range")
    return [lat, lng]
