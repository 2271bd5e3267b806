"""Upward search for the nearest configuration file.

Starting from the directory containing a file, each ancestor directory is
checked for the candidate filenames in order. The walk operates on
canonical (symlink-resolved) directories and stops at:

1. a directory named ``node_modules`` (its contents are never tested),
2. the search root, after testing its contents,
3. the file system anchor, after testing its contents.

The blocking and coroutine forms share these rules exactly.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from configseek.settings import MODULE_BOUNDARY_DIRNAME


if TYPE_CHECKING:
    import os
    from collections.abc import Iterable

    from configseek.core.models import ConfigOptions
    from configseek.core.ports import FileSystemPort


logger = logging.getLogger(__name__)


def default_root(filepath: str | os.PathLike[str]) -> PurePath:
    """Return the anchor (file system root or drive) of filepath."""
    return Path(Path(filepath).absolute().anchor)


def _is_boundary(directory: PurePath) -> bool:
    return directory.name == MODULE_BOUNDARY_DIRNAME


def _is_last(directory: PurePath, root: PurePath) -> bool:
    return directory == root or directory.parent == directory


def _canonical_root(
    fs: FileSystemPort,
    filepath: str | os.PathLike[str],
    root: str | os.PathLike[str] | None,
) -> PurePath:
    stop = default_root(filepath) if root is None else Path(root)
    try:
        return fs.realpath(stop)
    except FileNotFoundError:
        return stop


async def _acanonical_root(
    fs: FileSystemPort,
    filepath: str | os.PathLike[str],
    root: str | os.PathLike[str] | None,
) -> PurePath:
    stop = default_root(filepath) if root is None else Path(root)
    try:
        return await fs.arealpath(stop)
    except FileNotFoundError:
        return stop


def resolve_config_sync(
    fs: FileSystemPort,
    filepath: str | os.PathLike[str],
    filenames: Iterable[str],
    options: ConfigOptions | None = None,  # noqa: ARG001
    root: str | os.PathLike[str] | None = None,
) -> PurePath | None:
    """Find the nearest config file for filepath, blocking on I/O.

    Args:
        fs: File system to search.
        filepath: The file whose configuration is wanted. Search starts in
            its parent directory.
        filenames: Candidate config filenames, tested in order in each
            directory.
        options: Accepted for signature parity with the loader; unused.
        root: Directory at which the search stops. Defaults to the anchor
            of filepath.

    Returns:
        Canonical path of the first candidate that is a regular file, or
        None when the search ends without a match.

    Raises:
        FileNotFoundError: If the starting directory does not exist.
        OSError: If a candidate cannot be checked for reasons other than
            absence.
    """
    names = tuple(filenames)
    stop = _canonical_root(fs, filepath, root)
    current = Path(filepath)

    while True:
        directory = fs.realpath(current.parent)
        if _is_boundary(directory):
            logger.debug("Stopping config search at package boundary %s", directory)
            return None

        for name in names:
            candidate = directory / name
            if fs.is_file(candidate):
                logger.debug("Resolved config for %s: %s", filepath, candidate)
                return candidate

        if _is_last(directory, stop):
            logger.debug("No config found for %s below %s", filepath, stop)
            return None

        current = Path(directory)


async def resolve_config(
    fs: FileSystemPort,
    filepath: str | os.PathLike[str],
    filenames: Iterable[str],
    options: ConfigOptions | None = None,  # noqa: ARG001
    root: str | os.PathLike[str] | None = None,
) -> PurePath | None:
    """Find the nearest config file for filepath without blocking the event loop.

    Same arguments, return value and errors as resolve_config_sync().
    """
    names = tuple(filenames)
    stop = await _acanonical_root(fs, filepath, root)
    current = Path(filepath)

    while True:
        directory = await fs.arealpath(current.parent)
        if _is_boundary(directory):
            logger.debug("Stopping config search at package boundary %s", directory)
            return None

        for name in names:
            candidate = directory / name
            if await fs.ais_file(candidate):
                logger.debug("Resolved config for %s: %s", filepath, candidate)
                return candidate

        if _is_last(directory, stop):
            logger.debug("No config found for %s below %s", filepath, stop)
            return None

        current = Path(directory)
