"""Core domain services for configseek."""

from __future__ import annotations

import asyncio
import copy
import logging
import os
from pathlib import PurePath
from typing import TYPE_CHECKING, Any

from configseek.core.exceptions import ConfigParseError
from configseek.core.models import ConfigOptions, ConfigOutput
from configseek.core.parsers import get_parser
from configseek.core.resolver import resolve_config, resolve_config_sync
from configseek.settings import CODE_MODULE_EXTENSIONS


if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable, Mapping
    from types import TracebackType

    from configseek.core.ports import (
        ConfigCachePort,
        FileSystemPort,
        ModuleLoaderPort,
    )


logger = logging.getLogger(__name__)


class ConfigLoader:
    """Finds, parses and caches the configuration that applies to a file.

    Outputs are cached under two keys: the resolved config file (with the
    parse mode) and the query that led to it (path, candidate names and
    parse mode). A repeated query is answered without touching the file
    system, and different files sharing one config share one output.

    Code-module configs are never cached; each load executes the module
    again in a worker thread and returns a deep copy of its export.
    """

    def __init__(
        self,
        fs: FileSystemPort | None = None,
        cache: ConfigCachePort | None = None,
        module_loader: ModuleLoaderPort | None = None,
    ) -> None:
        if fs is None:
            from configseek.adapters.filesystem import LocalFileSystem

            fs = LocalFileSystem()
        if cache is None:
            from configseek.adapters.cache import LRUConfigCache

            cache = LRUConfigCache()
        if module_loader is None:
            from configseek.adapters.modules import PythonModuleLoader

            module_loader = PythonModuleLoader()

        self._fs = fs
        self._cache = cache
        self._module_loader = module_loader

    @property
    def fs(self) -> FileSystemPort:
        """The file system this loader searches."""
        return self._fs

    def __enter__(self) -> ConfigLoader:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.clear_cache()

    def clear_cache(self) -> None:
        """Drop every cached output so the next loads resolve afresh."""
        self._cache.reset()

    async def resolve(
        self,
        filepath: str | os.PathLike[str],
        filenames: Iterable[str],
        root: str | os.PathLike[str] | None = None,
    ) -> PurePath | None:
        """Find the nearest config file for filepath. See resolve_config()."""
        return await resolve_config(self._fs, filepath, filenames, root=root)

    def resolve_sync(
        self,
        filepath: str | os.PathLike[str],
        filenames: Iterable[str],
        root: str | os.PathLike[str] | None = None,
    ) -> PurePath | None:
        """Blocking form of resolve()."""
        return resolve_config_sync(self._fs, filepath, filenames, root=root)

    async def load(
        self,
        filepath: str | os.PathLike[str],
        filenames: Iterable[str],
        options: ConfigOptions | Mapping[str, Any] | None = None,
    ) -> ConfigOutput | None:
        """Load the configuration that applies to filepath.

        Args:
            filepath: The file whose configuration is wanted.
            filenames: Candidate config filenames in priority order.
            options: ConfigOptions, or a mapping such as {"parse": False}.

        Returns:
            The loaded configuration, or None when no config file was found,
            the found file is empty, or it vanished before it could be read.

        Raises:
            ConfigParseError: If the config file is malformed.
            ConfigModuleError: If a code-module config fails while executing.
            FileNotFoundError: If the starting directory does not exist.
            OSError: For unexpected I/O failures such as PermissionError.
        """
        opts = ConfigOptions.coerce(options)
        names = tuple(filenames)
        query_key = ("query", os.fspath(filepath), names, opts.parse)

        cached = self._cache.get(query_key)
        if cached is not None:
            logger.debug("Config cache hit for %s", filepath)
            return cached

        config_file = await self.resolve(filepath, names)
        if config_file is None:
            return None

        try:
            return await self._load_file(config_file, query_key, opts)
        except (FileNotFoundError, ModuleNotFoundError) as e:
            logger.debug("Treating %s as missing: %s", config_file, e)
            return None

    async def _load_file(
        self, config_file: PurePath, query_key: Hashable, opts: ConfigOptions
    ) -> ConfigOutput | None:
        extension = config_file.suffix[1:]

        if extension.lower() in CODE_MODULE_EXTENSIONS:
            # Independent copy so callers never share mutable state
            export = await asyncio.to_thread(self._module_loader.load, config_file)
            return ConfigOutput.from_file(copy.deepcopy(export), config_file)

        file_key = ("file", config_file, opts.parse)
        cached = self._cache.get(file_key)
        if cached is not None:
            logger.debug("Config cache hit for %s", config_file)
            self._cache.set(query_key, cached)
            return cached

        content = await self._fs.aread_text(config_file)
        if not content:
            logger.debug("Config file %s is empty", config_file)
            return None

        if opts.parse:
            config = self._parse(config_file, extension, content)
        else:
            config = content

        output = ConfigOutput.from_file(config, config_file)
        self._cache.set(file_key, output)
        self._cache.set(query_key, output)
        return output

    def _parse(self, config_file: PurePath, extension: str, content: str) -> Any:
        parse = get_parser(extension)
        try:
            return parse(content)
        except ValueError as e:
            raise ConfigParseError(
                f"Could not parse config file {config_file}: {e}",
                path=config_file,
                line=getattr(e, "lineno", None),
                cause=e,
            ) from e
