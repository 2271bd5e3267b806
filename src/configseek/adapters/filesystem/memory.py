"""In-memory adapter implementing FileSystemPort.

Models POSIX paths, directories, regular files and symlinks without
touching the disk. Useful for tests and for tools that lint unsaved
buffers against a virtual tree.
"""

from __future__ import annotations

import errno
import os
from pathlib import PurePosixPath


# Matches the Linux limit on symlink hops during path resolution
_MAX_SYMLINK_HOPS = 40


def _oserror(cls: type[OSError], code: int, path: object) -> OSError:
    return cls(code, os.strerror(code), str(path))


class MemoryFileSystem:
    """File system held entirely in memory.

    Directories are created implicitly for every file and symlink added.
    Paths given as relative are taken relative to ``cwd``.

    Attributes:
        cwd: Working directory used to absolutize relative paths.

    Example:
        >>> fs = MemoryFileSystem()
        >>> fs.write_text("/p/a/x.toml", "key = 1")
        >>> fs.is_file("/p/a/x.toml")
        True
        >>> fs.is_file("/p/a")
        False
    """

    def __init__(self, cwd: str | os.PathLike[str] = "/") -> None:
        self.cwd = PurePosixPath(cwd)
        self._dirs: set[PurePosixPath] = {PurePosixPath("/")}
        self._files: dict[PurePosixPath, str] = {}
        self._symlinks: dict[PurePosixPath, PurePosixPath] = {}
        self._denied: set[PurePosixPath] = set()
        self.mkdir(self.cwd)

    def _absolute(self, path: str | os.PathLike[str]) -> PurePosixPath:
        path = PurePosixPath(path)
        return path if path.is_absolute() else self.cwd / path

    def mkdir(self, path: str | os.PathLike[str]) -> None:
        """Create a directory and any missing parents."""
        path = self._absolute(path)
        self._dirs.update([path, *path.parents])

    def write_text(self, path: str | os.PathLike[str], text: str) -> None:
        """Create or replace a regular file, creating parent directories."""
        path = self._absolute(path)
        self.mkdir(path.parent)
        self._files[path] = text

    def symlink(
        self, link: str | os.PathLike[str], target: str | os.PathLike[str]
    ) -> None:
        """Create a symlink at link pointing to target.

        A relative target is interpreted relative to the link's directory.
        The target need not exist.
        """
        link = self._absolute(link)
        self.mkdir(link.parent)
        self._symlinks[link] = PurePosixPath(target)

    def remove(self, path: str | os.PathLike[str]) -> None:
        """Remove a file or symlink. Missing paths are ignored."""
        path = self._absolute(path)
        self._files.pop(path, None)
        self._symlinks.pop(path, None)

    def deny(self, path: str | os.PathLike[str]) -> None:
        """Make every access to path (after resolution) raise PermissionError."""
        self._denied.add(self._absolute(path))

    def _resolve(self, path: str | os.PathLike[str]) -> PurePosixPath:
        """Resolve symlinks and dot segments without checking existence."""
        parts = list(self._absolute(path).parts[1:])
        resolved = PurePosixPath("/")
        hops = 0

        while parts:
            part = parts.pop(0)
            if part == ".":
                continue
            if part == "..":
                resolved = resolved.parent
                continue

            candidate = resolved / part
            if candidate in self._denied:
                raise _oserror(PermissionError, errno.EACCES, path)
            if candidate in self._files and parts:
                raise _oserror(NotADirectoryError, errno.ENOTDIR, path)

            target = self._symlinks.get(candidate)
            if target is None:
                resolved = candidate
                continue

            hops += 1
            if hops > _MAX_SYMLINK_HOPS:
                raise _oserror(OSError, errno.ELOOP, path)
            if target.is_absolute():
                resolved = PurePosixPath("/")
                parts = list(target.parts[1:]) + parts
            else:
                parts = list(target.parts) + parts

        return resolved

    def realpath(self, path: str | os.PathLike[str]) -> PurePosixPath:
        """Return the canonical path, raising FileNotFoundError if absent."""
        try:
            resolved = self._resolve(path)
        except NotADirectoryError:
            raise _oserror(FileNotFoundError, errno.ENOENT, path) from None
        if resolved not in self._dirs and resolved not in self._files:
            raise _oserror(FileNotFoundError, errno.ENOENT, path)
        return resolved

    def is_file(self, path: str | os.PathLike[str]) -> bool:
        """Check whether path resolves to a regular file."""
        try:
            resolved = self._resolve(path)
        except OSError as e:
            if e.errno in (errno.ENOTDIR, errno.ELOOP):
                return False
            raise
        return resolved in self._files

    def read_text(self, path: str | os.PathLike[str]) -> str:
        """Return the text of the file at path."""
        resolved = self._resolve(path)
        if resolved in self._dirs:
            raise _oserror(IsADirectoryError, errno.EISDIR, path)
        try:
            return self._files[resolved]
        except KeyError:
            raise _oserror(FileNotFoundError, errno.ENOENT, path) from None

    async def arealpath(self, path: str | os.PathLike[str]) -> PurePosixPath:
        """Coroutine form of realpath()."""
        return self.realpath(path)

    async def ais_file(self, path: str | os.PathLike[str]) -> bool:
        """Coroutine form of is_file()."""
        return self.is_file(path)

    async def aread_text(self, path: str | os.PathLike[str]) -> str:
        """Coroutine form of read_text()."""
        return self.read_text(path)
