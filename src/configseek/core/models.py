"""Core domain models for configseek.

These models are pure Python dataclasses with no I/O dependencies.
They describe what a configuration lookup produces and how it is asked for.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import PurePath
from typing import Any, Self


@dataclass(frozen=True, slots=True)
class ConfigFile:
    """A file that contributed to a loaded configuration.

    Attributes:
        file_path: Canonical path of the configuration file.
    """

    file_path: PurePath


@dataclass(frozen=True, slots=True)
class ConfigOutput:
    """Result of loading the configuration that applies to a file.

    Attributes:
        config: Parsed value, raw text (when parsing is disabled), or the
            exported value of a code-module config.
        files: Provenance of the configuration. Currently always a single
            entry, the resolved config file.

    Example:
        >>> from pathlib import PurePosixPath
        >>> output = ConfigOutput.from_file({"key": 1}, PurePosixPath("/p/a/x.toml"))
        >>> output.file_path
        PurePosixPath('/p/a/x.toml')
    """

    config: Any
    files: tuple[ConfigFile, ...]

    @classmethod
    def from_file(cls, config: Any, file_path: PurePath) -> Self:
        """Build an output whose provenance is a single file."""
        return cls(config=config, files=(ConfigFile(file_path),))

    @property
    def file_path(self) -> PurePath:
        """Path of the file the configuration was loaded from."""
        return self.files[0].file_path


@dataclass(frozen=True, slots=True)
class ConfigOptions:
    """Options accepted by the loader.

    Attributes:
        parse: When False, the loader returns the raw file text instead of
            a parsed structure. Code-module configs are always executed.
    """

    parse: bool = True

    @classmethod
    def coerce(cls, options: ConfigOptions | Mapping[str, Any] | None) -> Self:
        """Normalize None, a mapping, or an instance into ConfigOptions.

        Args:
            options: Caller supplied options.

        Returns:
            A ConfigOptions instance.

        Raises:
            TypeError: If a mapping contains unknown option names.
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        unknown = set(options) - {"parse"}
        if unknown:
            raise TypeError(f"Unknown config options: {', '.join(sorted(unknown))}")
        # Only an explicit False turns parsing off
        return cls(parse=options.get("parse", True) is not False)
