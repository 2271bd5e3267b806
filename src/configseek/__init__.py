"""configseek - Find and load the nearest configuration file for a source file.

This library walks upward from a file's directory looking for candidate
config filenames, parses the first match (TOML, JSON5, or a Python module)
and caches the result so repeated lookups are free.

Example:
    >>> import asyncio
    >>> from configseek import ConfigLoader
    >>> loader = ConfigLoader()
    >>> output = asyncio.run(
    ...     loader.load("src/app/main.py", ["linter.toml", ".linterrc"])
    ... )
    >>> output.config if output else None  # parsed config, or None
"""

from configseek.adapters.cache import LRUConfigCache
from configseek.adapters.filesystem import LocalFileSystem, MemoryFileSystem
from configseek.adapters.modules import PythonModuleLoader
from configseek.api import (
    clear_cache,
    load_config,
    resolve_config,
    resolve_config_sync,
)
from configseek.core.exceptions import (
    ConfigModuleError,
    ConfigParseError,
    ConfigseekError,
)
from configseek.core.models import ConfigFile, ConfigOptions, ConfigOutput
from configseek.core.parsers import get_parser
from configseek.core.ports import (
    ConfigCachePort,
    FileSystemPort,
    ModuleLoaderPort,
    Parser,
)
from configseek.core.services import ConfigLoader


__version__ = "0.1.0"

__all__ = [
    "ConfigCachePort",
    "ConfigFile",
    "ConfigLoader",
    "ConfigModuleError",
    "ConfigOptions",
    "ConfigOutput",
    "ConfigParseError",
    "ConfigseekError",
    "FileSystemPort",
    "LRUConfigCache",
    "LocalFileSystem",
    "MemoryFileSystem",
    "ModuleLoaderPort",
    "Parser",
    "PythonModuleLoader",
    "__version__",
    "clear_cache",
    "get_parser",
    "load_config",
    "resolve_config",
    "resolve_config_sync",
]
