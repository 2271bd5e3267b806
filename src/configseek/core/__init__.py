"""Core domain module for configseek.

This module contains the resolver, the parser dispatch, the loader service
and the port definitions. It reaches I/O only through the ports.
"""

from configseek.core.models import ConfigFile, ConfigOptions, ConfigOutput
from configseek.core.ports import (
    ConfigCachePort,
    FileSystemPort,
    ModuleLoaderPort,
    Parser,
)


__all__ = [
    "ConfigCachePort",
    "ConfigFile",
    "ConfigOptions",
    "ConfigOutput",
    "FileSystemPort",
    "ModuleLoaderPort",
    "Parser",
]
