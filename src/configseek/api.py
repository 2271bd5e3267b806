"""Process-wide configuration lookup.

The functions here share a single cache for the whole process. Code that
needs isolation (tests, independent build runs in one process) should own
a ConfigLoader instead, or call clear_cache() between runs.

Example:
    >>> import asyncio
    >>> from configseek import load_config
    >>> output = asyncio.run(
    ...     load_config(None, "src/app/main.py", [".toolrc", "tool.toml"])
    ... )
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from configseek.adapters.cache import LRUConfigCache
from configseek.adapters.filesystem import LocalFileSystem
from configseek.adapters.modules import PythonModuleLoader
from configseek.core import resolver
from configseek.core.services import ConfigLoader


if TYPE_CHECKING:
    import os
    from collections.abc import Iterable, Mapping
    from pathlib import PurePath

    from configseek.core.models import ConfigOptions, ConfigOutput
    from configseek.core.ports import FileSystemPort


_cache = LRUConfigCache()
_module_loader = PythonModuleLoader()


def _fs_or_default(fs: FileSystemPort | None) -> FileSystemPort:
    return LocalFileSystem() if fs is None else fs


async def resolve_config(
    fs: FileSystemPort | None,
    filepath: str | os.PathLike[str],
    filenames: Iterable[str],
    options: ConfigOptions | None = None,
    root: str | os.PathLike[str] | None = None,
) -> PurePath | None:
    """Find the nearest config file for filepath. None for fs means local disk."""
    return await resolver.resolve_config(
        _fs_or_default(fs), filepath, filenames, options, root
    )


def resolve_config_sync(
    fs: FileSystemPort | None,
    filepath: str | os.PathLike[str],
    filenames: Iterable[str],
    options: ConfigOptions | None = None,
    root: str | os.PathLike[str] | None = None,
) -> PurePath | None:
    """Blocking form of resolve_config()."""
    return resolver.resolve_config_sync(
        _fs_or_default(fs), filepath, filenames, options, root
    )


async def load_config(
    fs: FileSystemPort | None,
    filepath: str | os.PathLike[str],
    filenames: Iterable[str],
    options: ConfigOptions | Mapping[str, Any] | None = None,
) -> ConfigOutput | None:
    """Load the config for filepath using the process-wide cache.

    See ConfigLoader.load() for the returned value and raised errors.
    """
    loader = ConfigLoader(
        fs=_fs_or_default(fs), cache=_cache, module_loader=_module_loader
    )
    return await loader.load(filepath, filenames, options)


def clear_cache() -> None:
    """Empty the process-wide cache."""
    _cache.reset()
