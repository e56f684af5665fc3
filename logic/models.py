"""
Location record model.

Author: Bend Guide maintainers
Date: 2026-10-17
"""

from typing import Any, List, Optional

from pydantic import BaseModel, field_validator

from logic.config import DEFAULT_CATEGORY, DEFAULT_EMOJI
from logic.validation import (
    MAX_DESCRIPTION_LEN,
    MAX_NAME_LEN,
    check_text_length,
    coerce_text,
    sanitise_categories,
    sanitise_emojis,
    validate_position,
)


class LocationRecord(BaseModel):
    """A single point of interest shown as a map marker.

    Attributes:
        id: Creation-timestamp derived identifier, immutable once assigned.
        position: ``[latitude, longitude]``.
        name: Display name, may be empty while editing.
        description: Free text.
        category: One or more category labels.
        emoji: One or more marker glyphs.
    """

    id: int = 0
    position: List[float]
    name: str = ""
    description: str = ""
    category: List[str] = [DEFAULT_CATEGORY]
    emoji: List[str] = [DEFAULT_EMOJI]

    @field_validator("position", mode="before")
    @classmethod
    def _check_position(cls, value: Any) -> List[float]:
        return validate_position(value)

    @field_validator("name", mode="before")
    @classmethod
    def _name_text(cls, value: Any) -> str:
        return coerce_text(value)

    @field_validator("description", mode="before")
    @classmethod
    def _description_text(cls, value: Any) -> str:
        return coerce_text(value)

    @field_validator("category", mode="before")
    @classmethod
    def _coerce_category(cls, value: Any) -> List[str]:
        return sanitise_categories(value)

    @field_validator("emoji", mode="before")
    @classmethod
    def _coerce_emoji(cls, value: Any) -> List[str]:
        return sanitise_emojis(value)

    def to_dict(self) -> dict:
        """Convert the record to a JSON-serialisable dictionary."""
        return self.model_dump()


class LocationPayload(BaseModel):
    """Request model for creating or replacing a location."""

    id: Optional[int] = None
    position: List[float]
    name: str = ""
    description: str = ""
    category: Any = None
    emoji: Any = None

    @field_validator("name")
    @classmethod
    def _bound_name(cls, value: str) -> str:
        return check_text_length(value, MAX_NAME_LEN)

    @field_validator("description")
    @classmethod
    def _bound_description(cls, value: str) -> str:
        return check_text_length(value, MAX_DESCRIPTION_LEN)

    def to_record(self, location_id: int) -> LocationRecord:
        """Build a validated record carrying ``location_id``."""
        return LocationRecord(
            id=location_id,
            position=self.position,
            name=self.name,
            description=self.description,
            category=self.category,
            emoji=self.emoji,
        )


class MapClick(BaseModel):
    """Request model for the map-click create flow."""

    lat: float
    lng: float
