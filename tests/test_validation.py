"""
Tests for record validation and coercion.
"""

import pytest
from pydantic import ValidationError

from logic.models import LocationPayload, LocationRecord
from logic.validation import sanitise_categories, sanitise_emojis, validate_position


def test_sanitise_categories_defaults_to_food():
    assert sanitise_categories([]) == ["Food"]
    assert sanitise_categories(None) == ["Food"]
    assert sanitise_categories(["Nightlife"]) == ["Food"]


def test_sanitise_categories_normalises():
    assert sanitise_categories("beverages") == ["Beverages"]
    assert sanitise_categories(["Home", "food", "Home", 7]) == ["Home", "Food"]


def test_sanitise_emojis_falls_back_to_pin():
    assert sanitise_emojis(None) == ["📍"]
    assert sanitise_emojis(["", "  "]) == ["📍"]
    assert sanitise_emojis("🍕") == ["🍕"]
    assert sanitise_emojis(["🍕", "", " 🍺 "]) == ["🍕", " 🍺 "]


def test_validate_position():
    assert validate_position([44, -121.5]) == [44.0, -121.5]
    with pytest.raises(ValueError):
        validate_position([91, 0])
    with pytest.raises(ValueError):
        validate_position([0, 181])
    with pytest.raises(ValueError):
        validate_position([1, 2, 3])
    with pytest.raises(ValueError):
        validate_position(["north", 0])


def test_record_accepts_legacy_single_values():
    record = LocationRecord.model_validate(
        {"id": 5, "position": [44, -121], "name": "Old", "description": "",
         "category": "Bars", "emoji": "🍺"}
    )
    assert record.category == ["Beverages"]
    assert record.emoji == ["🍺"]


def test_record_defaults():
    record = LocationRecord(position=[44, -121])
    assert record.name == ""
    assert record.category == ["Food"]
    assert record.emoji == ["📍"]


def test_payload_rejects_overlong_text():
    with pytest.raises(ValidationError):
        LocationPayload(position=[44, -121], name="x" * 500)
    with pytest.raises(ValidationError):
        LocationPayload(position=[44, -121], description="x" * 2001)


def test_record_keeps_long_text_verbatim():
    record = LocationRecord(position=[44, -121], name="x" * 500, description="y" * 2001)
    assert len(record.name) == 500
    assert len(record.description) == 2001


def test_payload_to_record_coerces_category():
    payload = LocationPayload(position=[44, -121], name=" Cafe ", category=[])
    record = payload.to_record(9)
    assert record.id == 9
    assert record.name == " Cafe "
    assert record.category == ["Food"]


def test_record_round_trips_through_json():
    record = LocationRecord(
        id=1, position=[44.1, -121.2], name="Cafe", description="☕ and 🥐",
        category=["Food", "Beverages"], emoji=["☕"],
    )
    assert LocationRecord.model_validate_json(record.model_dump_json()) == record
