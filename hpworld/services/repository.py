import json
import os
import threading
from typing import List

from hpworld.models.schema import UserEntry
from hpworld.utils.logger import get_logger

logger = get_logger("repository")


class UserEntryRepository:
    """Append-only collection of accepted submissions, mirrored to a JSON file.

    The file always holds the full collection and is overwritten on each
    snapshot. Appends and snapshots share one lock so concurrent requests
    cannot interleave a write with a half-built collection.
    """

    def __init__(self, path: str, entries: List[UserEntry] = None):
        self.path = path
        self._entries: List[UserEntry] = list(entries or [])
        self._lock = threading.Lock()

    @classmethod
    def load(cls, path: str) -> "UserEntryRepository":
        if not os.path.exists(path):
            return cls(path)
        with open(path, "r", encoding="utf-8") as f:
            rows = json.load(f)
        entries = [UserEntry.model_validate(row) for row in rows]
        logger.info("Loaded %d entries from %s", len(entries), path)
        return cls(path, entries)

    def append(self, entry: UserEntry) -> None:
        with self._lock:
            self._entries.append(entry)

    def entries(self) -> List[UserEntry]:
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def snapshot(self) -> int:
        """Overwrite the file with the whole collection. Returns the entry count."""
        with self._lock:
            rows = [entry.to_wire() for entry in self._entries]
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(rows, f, indent=2, ensure_ascii=False)
        return len(rows)
