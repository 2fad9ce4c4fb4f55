"""
JSON file store for Statistics.

The whole record is rewritten on every save, through a temp file that is
swapped into place. A missing file loads as fresh statistics; a corrupt one
is logged and also loads as fresh statistics, so a bad file never stops
the game from starting.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from .stats import Statistics

log = logging.getLogger(__name__)

DEFAULT_STATS_PATH = Path.home() / ".letterseq" / "stats.json"


class StatsStore:
    def __init__(self, path: Path | str = DEFAULT_STATS_PATH) -> None:
        self.path = Path(path)

    def load(self) -> Statistics:
        if not self.path.exists():
            return Statistics()
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            log.warning("ignoring unreadable stats file %s: %s", self.path, e)
            return Statistics()
        return Statistics.from_dict(data)

    def save(self, stats: Statistics) -> str:
        """A failed write leaves the previous file untouched."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            with tmp.open("w", encoding="utf-8") as f:
                json.dump(stats.to_dict(), f, indent=2)
            os.replace(tmp, self.path)
        finally:
            tmp.unlink(missing_ok=True)
        return str(self.path)

    def clear(self) -> None:
        """Forget everything, highlights included."""
        self.path.unlink(missing_ok=True)
