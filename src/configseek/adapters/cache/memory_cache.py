"""In-memory LRU cache adapter implementing ConfigCachePort."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cachetools import LRUCache

from configseek.settings import DEFAULT_CACHE_SIZE


if TYPE_CHECKING:
    from collections.abc import Hashable

    from configseek.core.models import ConfigOutput


class LRUConfigCache:
    """Bounded cache of loaded configuration outputs.

    Least recently used entries are evicted once the capacity is reached.
    Entries are never invalidated by file changes; call reset() to force
    the next lookups to go back to the file system.

    Attributes:
        maxsize: Maximum number of entries held.
    """

    def __init__(self, maxsize: int = DEFAULT_CACHE_SIZE) -> None:
        """Initialize an empty cache.

        Args:
            maxsize: Capacity of the cache. Must be positive.

        Raises:
            ValueError: If maxsize is not positive.
        """
        if maxsize <= 0:
            raise ValueError(f"Cache size must be positive, got {maxsize}")
        self.maxsize = maxsize
        self._entries: LRUCache[Hashable, ConfigOutput] = LRUCache(maxsize=maxsize)

    def get(self, key: Hashable) -> ConfigOutput | None:
        """Get the output stored under key and mark it recently used."""
        return self._entries.get(key)

    def set(self, key: Hashable, value: ConfigOutput) -> None:
        """Store value under key, evicting the least recently used entry if full."""
        self._entries[key] = value

    def reset(self) -> None:
        """Remove every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
