"""
Cache Module

Remembers the sum computed for each exact input string, so a repeated
input is answered without reparsing. Entries live until clear() is
called; there is no eviction.
"""

from dataclasses import dataclass, field
from threading import Lock
from typing import Dict, Optional

from .logging_config import get_logger

logger = get_logger("cache")


@dataclass
class SumCache:
    """
    Thread-safe mapping from raw input string to its sum.

    Keys are the untouched input, so "1,2" and "1\\n2" are cached
    separately even though they add up the same.
    """
    _lock: Lock = field(default_factory=Lock, repr=False)
    _entries: Dict[str, int] = field(default_factory=dict, repr=False)
    _hits: int = field(default=0, repr=False)
    _misses: int = field(default=0, repr=False)

    def get(self, key: str) -> Optional[int]:
        """Return the cached sum for key, or None."""
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self._misses += 1
            else:
                self._hits += 1
            return value

    def put(self, key: str, value: int) -> None:
        """Store the sum for key."""
        with self._lock:
            self._entries[key] = value

    def clear(self) -> None:
        """Drop every entry and reset the counters."""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            self._hits = 0
            self._misses = 0
        logger.info(f"Sum cache cleared ({count} entries dropped)")

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def get_stats(self) -> dict:
        """Get current cache statistics."""
        with self._lock:
            return {
                "entries": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
            }
