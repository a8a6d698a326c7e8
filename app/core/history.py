"""
Session history of completed summarize requests.
"""

import threading
from typing import List, Optional

from app.config import config
from app.models.schemas import HistoryEntry


class HistoryStore:
    """Bounded, newest-first log of completed requests.

    Eviction is purely positional: appending past the limit drops the oldest
    entries, favorites included.
    """

    def __init__(self, limit: Optional[int] = None):
        self.limit = config.HISTORY_LIMIT if limit is None else max(limit, 0)
        self._entries: List[HistoryEntry] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def entries(self) -> List[HistoryEntry]:
        """Snapshot of the history, newest first."""
        with self._lock:
            return [entry.model_copy() for entry in self._entries]

    def append(self, entry: HistoryEntry) -> None:
        with self._lock:
            self._entries = [entry, *self._entries][: self.limit]

    def toggle_favorite(self, index: int) -> None:
        with self._lock:
            if 0 <= index < len(self._entries):
                entry = self._entries[index]
                self._entries[index] = entry.model_copy(update={"is_favorite": not entry.is_favorite})

    def remove(self, index: int) -> None:
        with self._lock:
            if 0 <= index < len(self._entries):
                del self._entries[index]

    def clear(self) -> None:
        """Empty the history. Callers are expected to confirm with the user first."""
        with self._lock:
            self._entries = []
