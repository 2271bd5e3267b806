"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The core domain
depends only on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable


if TYPE_CHECKING:
    import os
    from pathlib import PurePath

    from configseek.core.models import ConfigOutput

Parser = Callable[[str], Any]


@runtime_checkable
class FileSystemPort(Protocol):
    """File system access used by the resolver and the loader.

    Every query has a blocking form and a coroutine form (prefixed with
    ``a``) with identical semantics.
    """

    def realpath(self, path: str | os.PathLike[str]) -> PurePath:
        """Return the canonical, symlink-free absolute form of path.

        Raises:
            FileNotFoundError: If path does not exist.
        """
        ...

    def is_file(self, path: str | os.PathLike[str]) -> bool:
        """Report whether path is a regular file, following symlinks.

        Returns:
            True for a regular file. False when the path is absent, is a
            directory, is a dangling symlink, or has a non-directory parent.

        Raises:
            OSError: For any other failure (permission denied, device error).
        """
        ...

    def read_text(self, path: str | os.PathLike[str]) -> str:
        """Read the full contents of a file as UTF-8 text.

        Bytes that are not valid UTF-8 are replaced with U+FFFD rather than
        raising, so a stray byte never hides a config.

        Raises:
            FileNotFoundError: If path does not exist.
        """
        ...

    async def arealpath(self, path: str | os.PathLike[str]) -> PurePath:
        """Coroutine form of realpath()."""
        ...

    async def ais_file(self, path: str | os.PathLike[str]) -> bool:
        """Coroutine form of is_file()."""
        ...

    async def aread_text(self, path: str | os.PathLike[str]) -> str:
        """Coroutine form of read_text()."""
        ...


@runtime_checkable
class ModuleLoaderPort(Protocol):
    """Executes code-module config files."""

    def load(self, path: PurePath) -> Any:
        """Execute the module at path and return its exported value.

        Raises:
            FileNotFoundError: If the module file does not exist.
            ModuleNotFoundError: If the module imports something missing.
        """
        ...


@runtime_checkable
class ConfigCachePort(Protocol):
    """Bounded in-memory store of loaded configuration outputs."""

    def get(self, key: Hashable) -> ConfigOutput | None:
        """Get a cached output, or None if not cached."""
        ...

    def set(self, key: Hashable, value: ConfigOutput) -> None:
        """Store an output under key."""
        ...

    def reset(self) -> None:
        """Remove every entry."""
        ...
