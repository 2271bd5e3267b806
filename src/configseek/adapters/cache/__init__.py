"""Cache adapters."""

from configseek.adapters.cache.memory_cache import LRUConfigCache


__all__ = ["LRUConfigCache"]
