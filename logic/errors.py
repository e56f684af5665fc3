"""Domain exceptions raised by the logic layer.

Routers translate these into HTTP errors.
"""


class GuideError(Exception):
    """Base class for travel guide errors."""


class LocationNotFoundError(GuideError):
    """Raised when an update targets an id that is not in the collection."""

    def __init__(self, location_id: int):
        super().__init__(f"Location '{location_id}' not found")
        self.location_id = location_id


class InvalidCollectionError(GuideError):
    """Raised when a serialized collection cannot be parsed or validated."""
