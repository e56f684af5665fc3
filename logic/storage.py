"""
Persistent key/value storage.

A small file-backed store with the same shape as browser localStorage: string
keys mapped to string values, persisted together in one JSON document.

Author: Bend Guide maintainers
Date: 2026-10-17
"""

import json
import logging
import os
import tempfile
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class LocalStorage:
    """File-backed string key/value store.

    Attributes:
        path: Path to the JSON file holding every key.
    """

    def __init__(self, path: str):
        self.path = path

    def _read(self) -> Dict[str, str]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("Storage file %s is unreadable, treating as empty: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file %s does not hold an object, treating as empty", self.path)
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: Dict[str, str]):
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        # Write to a sibling temp file and swap it in so readers never see a partial blob
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".storage-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def get_item(self, key: str) -> Optional[str]:
        """Get the value stored under ``key``, or None if absent."""
        return self._read().get(key)

    def set_item(self, key: str, value: str):
        """Store ``value`` under ``key``, replacing any previous value."""
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str):
        """Remove ``key``; a no-op if it is absent."""
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def clear(self):
        """Remove every key."""
        self._write({})

    def __contains__(self, key: str) -> bool:
        return key in self._read()
