"""Unit tests for the LRUConfigCache adapter."""

from __future__ import annotations

from pathlib import PurePosixPath

import pytest

from configseek.adapters.cache import LRUConfigCache
from configseek.core.models import ConfigOutput
from configseek.core.ports import ConfigCachePort
from configseek.settings import DEFAULT_CACHE_SIZE


def _output(value: int) -> ConfigOutput:
    return ConfigOutput.from_file({"value": value}, PurePosixPath(f"/c/{value}.json"))


@pytest.mark.cache
@pytest.mark.tra("Adapter.LRUConfigCache")
@pytest.mark.tier(0)
def test_satisfies_config_cache_port() -> None:
    """LRUConfigCache should satisfy ConfigCachePort."""
    assert isinstance(LRUConfigCache(), ConfigCachePort)


@pytest.mark.cache
class TestGetSet:
    """Tests for get() and set()."""

    def test_get_missing_returns_none(self) -> None:
        """Unknown keys return None."""
        assert LRUConfigCache().get("missing") is None

    def test_set_then_get_returns_same_object(self) -> None:
        """Stored outputs come back by identity."""
        cache = LRUConfigCache()
        output = _output(1)
        cache.set("key", output)

        assert cache.get("key") is output

    def test_tuple_keys(self) -> None:
        """Any hashable key is accepted."""
        cache = LRUConfigCache()
        cache.set(("file", PurePosixPath("/a.json"), True), _output(1))

        assert ("file", PurePosixPath("/a.json"), True) in cache

    def test_default_capacity(self) -> None:
        """The default capacity comes from settings."""
        assert LRUConfigCache().maxsize == DEFAULT_CACHE_SIZE

    def test_non_positive_capacity_rejected(self) -> None:
        """A cache must be able to hold something."""
        with pytest.raises(ValueError, match="positive"):
            LRUConfigCache(maxsize=0)


@pytest.mark.cache
class TestEviction:
    """Tests for least-recently-used eviction."""

    def test_evicts_oldest_entry_when_full(self) -> None:
        """The least recently stored entry goes first."""
        cache = LRUConfigCache(maxsize=2)
        cache.set("a", _output(1))
        cache.set("b", _output(2))
        cache.set("c", _output(3))

        assert cache.get("a") is None
        assert len(cache) == 2

    def test_get_refreshes_recency(self) -> None:
        """Reading an entry protects it from the next eviction."""
        cache = LRUConfigCache(maxsize=2)
        cache.set("a", _output(1))
        cache.set("b", _output(2))
        cache.get("a")
        cache.set("c", _output(3))

        assert "a" in cache
        assert "b" not in cache


@pytest.mark.cache
class TestReset:
    """Tests for reset()."""

    def test_reset_removes_everything(self) -> None:
        """reset() empties the cache."""
        cache = LRUConfigCache()
        cache.set("a", _output(1))
        cache.set("b", _output(2))

        cache.reset()

        assert len(cache) == 0
        assert cache.get("a") is None
