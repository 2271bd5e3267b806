"""Local disk adapter implementing FileSystemPort."""

from __future__ import annotations

import asyncio
import errno
import os
import stat
from pathlib import Path
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pathlib import PurePath


# errno values that mean "not a file here" rather than a real failure
_ABSENT_ERRNOS = frozenset({errno.ENOENT, errno.ENOTDIR, errno.ELOOP, errno.EBADF})


class LocalFileSystem:
    """File system adapter for the local disk.

    Implements FileSystemPort. The coroutine forms run the blocking calls
    in a worker thread so the event loop is never stalled on I/O.
    """

    def realpath(self, path: str | os.PathLike[str]) -> Path:
        """Resolve symlinks and return the absolute canonical path.

        Args:
            path: Path to resolve (absolute or relative to the cwd).

        Returns:
            The canonical path.

        Raises:
            FileNotFoundError: If path does not exist.
        """
        return Path(path).resolve(strict=True)

    def is_file(self, path: str | os.PathLike[str]) -> bool:
        """Check whether path is a regular file, following symlinks.

        Args:
            path: Path to check.

        Returns:
            True for a regular file, False when nothing usable is there.

        Raises:
            OSError: For failures other than absence (e.g., PermissionError).
        """
        try:
            st = os.stat(path)
        except OSError as e:
            if e.errno in _ABSENT_ERRNOS:
                return False
            raise
        return stat.S_ISREG(st.st_mode)

    def read_text(self, path: str | os.PathLike[str]) -> str:
        """Read a file as UTF-8 text, replacing undecodable bytes with U+FFFD."""
        return Path(path).read_text(encoding="utf-8", errors="replace")

    async def arealpath(self, path: str | os.PathLike[str]) -> PurePath:
        """Coroutine form of realpath()."""
        return await asyncio.to_thread(self.realpath, path)

    async def ais_file(self, path: str | os.PathLike[str]) -> bool:
        """Coroutine form of is_file()."""
        return await asyncio.to_thread(self.is_file, path)

    async def aread_text(self, path: str | os.PathLike[str]) -> str:
        """Coroutine form of read_text()."""
        return await asyncio.to_thread(self.read_text, path)
