"""Persisted calculation history, newest entry first."""
# rpncalc/history/store.py

import json
import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from rpncalc.config import HISTORY_LIMIT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    """One successful calculation."""
    timestamp: datetime
    expression: str
    result: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "timestamp": self.timestamp.isoformat(timespec="seconds"),
            "expression": self.expression,
            "result": self.result,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "HistoryEntry":
        return cls(
            timestamp=datetime.fromisoformat(data["timestamp"]),
            expression=data["expression"],
            result=data["result"],
        )

    def format(self) -> str:
        """e.g. '[2025-11-05 10:00] 2+3 = 5'"""
        stamp = self.timestamp.strftime("%Y-%m-%d %H:%M")
        return f"[{stamp}] {self.expression} = {self.result}"


class HistoryStore:
    """
    Capacity-bounded history log.

    Entries are kept newest first; once `capacity` is exceeded the oldest
    entries are evicted. When `path` is given every change is written to it
    as JSON, and existing entries are loaded from it.
    """

    def __init__(self, path: Optional[Path] = None, capacity: int = HISTORY_LIMIT):
        if capacity < 1:
            raise ValueError("History capacity must be at least 1")
        self.path = Path(path) if path is not None else None
        self.capacity = capacity
        self._lock = threading.Lock()
        self._entries: List[HistoryEntry] = self._load()

    def _load(self) -> List[HistoryEntry]:
        if self.path is None or not self.path.exists():
            return []
        with open(self.path, "r") as f:
            try:
                raw = json.load(f)
            except json.JSONDecodeError:
                logger.warning(f"History file {self.path} is not valid JSON, starting empty")
                return []
        try:
            entries = [HistoryEntry.from_dict(item) for item in raw]
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"History file {self.path} has unexpected entries ({e}), starting empty")
            return []
        return entries[:self.capacity]

    def _save(self):
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump([e.to_dict() for e in self._entries], f, indent=2)

    def add(self, expression: str, result: str,
            timestamp: Optional[datetime] = None) -> HistoryEntry:
        """Record a calculation and return the stored entry."""
        entry = HistoryEntry(
            timestamp=timestamp or datetime.now(),
            expression=expression,
            result=result,
        )
        with self._lock:
            self._entries.insert(0, entry)
            evicted = len(self._entries) - self.capacity
            if evicted > 0:
                del self._entries[self.capacity:]
                logger.debug(f"Evicted {evicted} old history entries")
            self._save()
        logger.info(f"History: {entry.expression} = {entry.result}")
        return entry

    def entries(self) -> List[HistoryEntry]:
        """Entries, newest first."""
        with self._lock:
            return list(self._entries)

    def clear(self):
        """Delete all entries (useful for tests)."""
        with self._lock:
            self._entries = []
            self._save()

    def __len__(self) -> int:
        return len(self._entries)
