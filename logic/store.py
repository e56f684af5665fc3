"""
Location store.

This module owns the ordered collection of points of interest. The collection
is hydrated from persistent storage or the static seed file, mutated only
through create/update/delete, and written back as one JSON blob on every
change.

Persistence policy: the collection is only written while the store is loaded
for an authenticated admin session. Updates are strict replaces; an unknown
id is an error, never an implicit append.

Author: Bend Guide maintainers
Date: 2026-10-17
"""

import json
import logging
import os
import time
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from pydantic import ValidationError

from logic.config import EXPORT_FILENAME, LOCATIONS_KEY
from logic.errors import InvalidCollectionError, LocationNotFoundError
from logic.models import LocationRecord
from logic.storage import LocalStorage

logger = logging.getLogger(__name__)


def parse_collection(data: Any) -> List[LocationRecord]:
    """Validate a decoded collection.

    Accepts either a bare list of records (the persisted form) or a document
    with a ``locations`` field (the seed and export form).

    Args:
        data: Decoded JSON value.

    Returns:
        List of validated records in document order.

    Raises:
        InvalidCollectionError: If the shape is wrong, a record is invalid, or
            two records share an id.
    """
    if isinstance(data, dict):
        data = data.get("locations")
    if not isinstance(data, list):
        raise InvalidCollectionError("Expected a list of locations")

    records = []
    seen = set()
    for index, item in enumerate(data):
        try:
            record = LocationRecord.model_validate(item)
        except ValidationError as e:
            raise InvalidCollectionError(f"Invalid location at index {index}: {e}") from e
        if record.id in seen:
            raise InvalidCollectionError(f"Duplicate location id {record.id}")
        seen.add(record.id)
        records.append(record)
    return records


def build_export(locations: Iterable[LocationRecord]) -> Dict[str, Any]:
    """Build the ``{"locations": [...]}`` document shared by seed and export."""
    return {"locations": [loc.to_dict() for loc in locations]}


class LocationStore:
    """Explicitly owned collection of location records.

    Attributes:
        storage: Persistent key/value store holding the working copy.
        seed_path: Path to the static seed document.
        export_dir: Directory receiving ``locations.json`` on save when
            ``export_on_save`` is set.
        export_on_save: Write the export artifact after every save.
        authenticated: Whether the store was loaded for an admin session.
    """

    def __init__(
            self,
            storage: LocalStorage,
            seed_path: str,
            export_dir: Optional[str] = None,
            export_on_save: bool = False,
            clock: Callable[[], float] = time.time,
    ):
        self.storage = storage
        self.seed_path = seed_path
        self.export_dir = export_dir
        self.export_on_save = export_on_save
        self.authenticated = False
        self._clock = clock
        self._locations: List[LocationRecord] = []

    @property
    def locations(self) -> Tuple[LocationRecord, ...]:
        """Read-only view of the collection in display order."""
        return tuple(self._locations)

    def __len__(self) -> int:
        return len(self._locations)

    def get(self, location_id: int) -> Optional[LocationRecord]:
        return next((loc for loc in self._locations if loc.id == location_id), None)

    # ------------------------------------------------------------
    # Hydration
    # ------------------------------------------------------------

    def load(self, authenticated: bool) -> Tuple[LocationRecord, ...]:
        """Hydrate the collection.

        The persisted working copy is used only for authenticated sessions;
        otherwise, or if it is absent or malformed, the seed file is read.
        If the seed is unavailable too the collection is left empty.

        Args:
            authenticated: Whether the caller holds an admin session.

        Returns:
            The loaded collection.
        """
        self.authenticated = authenticated

        if authenticated:
            persisted = self._load_persisted()
            if persisted is not None:
                self._locations = persisted
                return self.locations

        self._locations = self.load_seed()
        return self.locations

    def _load_persisted(self) -> Optional[List[LocationRecord]]:
        raw = self.storage.get_item(LOCATIONS_KEY)
        if raw is None:
            return None
        try:
            return parse_collection(json.loads(raw))
        except (json.JSONDecodeError, InvalidCollectionError) as e:
            logger.warning("Discarding malformed persisted locations: %s", e)
            return None

    def load_seed(self) -> List[LocationRecord]:
        """Read the seed document, returning an empty list if unavailable."""
        try:
            with open(self.seed_path, "r", encoding="utf-8") as f:
                return parse_collection(json.load(f))
        except FileNotFoundError:
            logger.error("Error loading locations: seed file not found at %s", self.seed_path)
        except (json.JSONDecodeError, InvalidCollectionError) as e:
            logger.error("Error loading locations from %s: %s", self.seed_path, e)
        return []

    # ------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------

    def save(self) -> bool:
        """Persist the whole collection.

        Returns:
            True if the collection was written, False if the store is not
            loaded for an admin session.
        """
        if not self.authenticated:
            logger.debug("Skipping save outside an admin session")
            return False

        self.storage.set_item(
            LOCATIONS_KEY,
            json.dumps([loc.to_dict() for loc in self._locations], ensure_ascii=False),
        )
        if self.export_on_save:
            self.write_export()
        return True

    def export(self) -> Dict[str, Any]:
        """Get the collection as a seed-shaped document."""
        return build_export(self._locations)

    def write_export(self) -> str:
        """Write the export document to the export directory.

        Returns:
            Path of the written file.
        """
        if not self.export_dir:
            raise ValueError("No export directory configured")
        os.makedirs(self.export_dir, exist_ok=True)
        path = os.path.join(self.export_dir, EXPORT_FILENAME)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.export(), f, indent=2, ensure_ascii=False)
        logger.info("Location data written to %s; commit it as the new seed to publish", path)
        return path

    def reset(self) -> Tuple[LocationRecord, ...]:
        """Drop the persisted working copy and reload from the seed."""
        self.storage.remove_item(LOCATIONS_KEY)
        return self.load(authenticated=False)

    # ------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------

    def _next_id(self) -> int:
        candidate = int(self._clock() * 1000)
        existing = {loc.id for loc in self._locations}
        if candidate in existing:
            candidate = max(existing) + 1
        return candidate

    def create(self, record: LocationRecord) -> LocationRecord:
        """Append a record under a freshly generated id.

        Any id carried by ``record`` is ignored.
        """
        new_record = record.model_copy(update={"id": self._next_id()})
        self._locations = [*self._locations, new_record]
        self.save()
        logger.info("Created location %s", new_record.id)
        return new_record

    def new_at(self, position: Sequence[float]) -> LocationRecord:
        """Create a blank record at a clicked map position."""
        return self.create(LocationRecord(position=list(position)))

    def update(self, record: LocationRecord) -> LocationRecord:
        """Replace the record with the same id, keeping its place in order.

        Raises:
            LocationNotFoundError: If no record has ``record.id``.
        """
        index = next(
            (i for i, loc in enumerate(self._locations) if loc.id == record.id), None
        )
        if index is None:
            raise LocationNotFoundError(record.id)

        updated = list(self._locations)
        updated[index] = record
        self._locations = updated
        self.save()
        logger.info("Updated location %s", record.id)
        return record

    def delete(self, location_id: int) -> bool:
        """Remove the record with ``location_id``.

        Returns:
            True if a record was removed, False if none matched.
        """
        remaining = [loc for loc in self._locations if loc.id != location_id]
        if len(remaining) == len(self._locations):
            return False
        self._locations = remaining
        self.save()
        logger.info("Deleted location %s", location_id)
        return True

    def replace_all(self, records: Sequence[LocationRecord]) -> Tuple[LocationRecord, ...]:
        """Replace the entire collection, e.g. from an imported export.

        Raises:
            InvalidCollectionError: If two records share an id.
        """
        ids = [r.id for r in records]
        if len(ids) != len(set(ids)):
            raise InvalidCollectionError("Duplicate location ids in import")
        self._locations = list(records)
        self.save()
        logger.info("Replaced collection with %d locations", len(records))
        return self.locations
