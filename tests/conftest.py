"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
shared fixtures for the test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from configseek import api
from configseek.adapters.cache import LRUConfigCache
from configseek.adapters.filesystem import MemoryFileSystem
from configseek.core.services import ConfigLoader


if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, ports, and services")
    config.addinivalue_line("markers", "filesystem: File system adapters")
    config.addinivalue_line("markers", "cache: LRU cache adapter")
    config.addinivalue_line("markers", "modules: Code-module config adapter")
    config.addinivalue_line(
        "markers", "tra: Test Responsibility Anchor (TRA) - namespace.Anchor format"
    )
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


@pytest.fixture(autouse=True)
def _reset_process_cache() -> Iterator[None]:
    """Keep the process-wide cache from leaking between tests."""
    api.clear_cache()
    yield
    api.clear_cache()


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    """In-memory file system with a small project tree.

    Layout::

        /p/a/x.toml            key = 1
        /p/a/b/file.js
        /p/a/node_modules/x.toml
        /p/a/node_modules/pkg/file.js
    """
    fs = MemoryFileSystem()
    fs.write_text("/p/a/x.toml", "key = 1")
    fs.write_text("/p/a/b/file.js", "")
    fs.write_text("/p/a/node_modules/x.toml", "key = 2")
    fs.write_text("/p/a/node_modules/pkg/file.js", "")
    return fs


@pytest.fixture
def loader(memory_fs: MemoryFileSystem) -> Iterator[ConfigLoader]:
    """ConfigLoader over memory_fs with its own small cache."""
    with ConfigLoader(fs=memory_fs, cache=LRUConfigCache(maxsize=16)) as config_loader:
        yield config_loader


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Real on-disk project directory with symlinks resolved."""
    root = tmp_path.resolve() / "project"
    root.mkdir()
    return root
