"""Domain exceptions for configseek.

All library errors inherit from ConfigseekError, allowing users to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.

Absence is never an error: a missing config file, a missing module or an
empty config file make the loader return None. Unexpected I/O failures such
as PermissionError are not wrapped and propagate as raised.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pathlib import PurePath


class ConfigseekError(Exception):
    """Base class for all configseek exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class ConfigParseError(ConfigseekError, ValueError):
    """Raised when a found config file cannot be parsed.

    Attributes:
        path: The config file that failed to parse.
        line: Line number reported by the parser (if available).
        cause: The underlying parser exception.
    """

    def __init__(
        self,
        message: str,
        path: PurePath,
        line: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.path = path
        self.line = line
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Point at the file and line to fix."""
        if self.line:
            return f"Fix the syntax of {self.path.name} at line {self.line}"
        return f"Fix the syntax of {self.path.name}"


class ConfigModuleError(ConfigseekError):
    """Raised when a code-module config fails while executing.

    A module that cannot be found is not an error; this covers syntax
    errors and exceptions raised by the module body.

    Attributes:
        path: The code-module config file.
        line: Line number where the error occurred (if available).
        cause: The underlying exception.
    """

    def __init__(
        self,
        message: str,
        path: PurePath,
        line: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.path = path
        self.line = line
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest checking the module at the specific line."""
        if self.line:
            return f"Check {self.path.name} at line {self.line}"
        return f"Check {self.path.name} for syntax or import errors"
