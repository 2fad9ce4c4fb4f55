"""
Sequence-Support Cache.

Maps a literal 3-letter sequence to the number of sampled pool words that
contained it. Entries are write-once and never evicted, so a sequence seen
in an earlier round (or an earlier rejected attempt) is never re-sampled.

The lock makes get/put safe when generation runs in worker threads; the
first count stored for a key wins.
"""

from __future__ import annotations

import threading
from typing import Dict, Optional


class SupportCache:
    def __init__(self) -> None:
        self._counts: Dict[str, int] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[int]:
        with self._lock:
            return self._counts.get(key)

    def put(self, key: str, count: int) -> int:
        """Store `count` unless `key` is already known; return the stored value."""
        with self._lock:
            return self._counts.setdefault(key, int(count))

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._counts

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)
