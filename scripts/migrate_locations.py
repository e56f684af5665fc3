"""Migration script to normalise a legacy locations.json.

Older seed files stored ``category`` and ``emoji`` as single strings and used
the "Bars" label. This script rewrites a seed document into the current list
form so it loads without coercion.

Run with: migrate-locations [path/to/locations.json]
  or: python -m scripts.migrate_locations [path/to/locations.json]
"""

import json
import sys
from datetime import datetime

from logic.config import SEED_PATH
from logic.errors import InvalidCollectionError
from logic.store import build_export, parse_collection


def migrate_locations(seed_path: str, backup: bool = True) -> int:
    """Migrate a seed document in place.

    Args:
        seed_path: Path to locations.json.
        backup: Whether to create a backup before migration.

    Returns:
        Number of migrated locations.
    """
    print(f"Starting migration of {seed_path}...")

    try:
        with open(seed_path, "r", encoding="utf-8") as f:
            document = json.load(f)
    except FileNotFoundError:
        print(f"Error: Seed file not found at {seed_path}")
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in seed file: {e}")
        sys.exit(1)

    try:
        records = parse_collection(document)
    except InvalidCollectionError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if backup:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        backup_path = f"{seed_path}.backup_{timestamp}"
        with open(backup_path, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=2, ensure_ascii=False)
        print(f"Backup created at {backup_path}")

    with open(seed_path, "w", encoding="utf-8") as f:
        json.dump(build_export(records), f, indent=2, ensure_ascii=False)

    print("Migration completed successfully!")
    print(f"  - Normalised {len(records)} locations")
    return len(records)


def main():
    """Main entry point for migration script."""
    seed_path = sys.argv[1] if len(sys.argv) > 1 else SEED_PATH
    migrate_locations(seed_path)


if __name__ == "__main__":
    main()
