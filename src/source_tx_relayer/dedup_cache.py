"""
Bounded LRU cache of already resolved source transaction hashes.
"""

import threading
from collections import OrderedDict


class DedupCache:
    """Maps a VAA cache key to its resolved source transaction hash.

    OrderedDict keeps entries from least to most recently used; reads move
    an entry to the end and inserts beyond capacity pop from the front.
    Only non-empty hashes are stored so failed lookups are retried later.
    """

    MAX_ENTRIES: int = 100

    def __init__(self, max_entries: int = MAX_ENTRIES) -> None:
        if max_entries <= 0:
            raise ValueError(f"Cache capacity must be positive, got {max_entries}")
        self.max_entries = max_entries
        self._entries: OrderedDict[str, str] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        """Return the cached hash for ``key`` and mark it as recently used."""
        with self._lock:
            tx_hash = self._entries.get(key)
            if tx_hash is not None:
                self._entries.move_to_end(key)
            return tx_hash

    def set(self, key: str, tx_hash: str) -> None:
        """
        Store a resolved hash, evicting the least recently used entry if full.

        Raises:
            ValueError: If ``tx_hash`` is empty
        """
        if not tx_hash:
            raise ValueError(f"Refusing to cache an empty hash for {key}")

        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
            elif len(self._entries) >= self.max_entries:
                self._entries.popitem(last=False)
            self._entries[key] = tx_hash

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def keys(self) -> list[str]:
        """Snapshot of the keys, least recently used first."""
        with self._lock:
            return list(self._entries)

    def __contains__(self, key: object) -> bool:
        # Membership checks do not count as a use.
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get_stats(self) -> dict:
        return {
            'size': len(self),
            'capacity': self.max_entries,
        }
