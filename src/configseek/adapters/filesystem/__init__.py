"""File system adapters."""

from configseek.adapters.filesystem.local import LocalFileSystem
from configseek.adapters.filesystem.memory import MemoryFileSystem


__all__ = ["LocalFileSystem", "MemoryFileSystem"]
