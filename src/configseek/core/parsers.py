"""Parser dispatch for configuration file contents.

Maps a file extension to a function turning text into a structured value.
Unrecognized extensions fall back to JSON5, which is a superset of JSON
(comments, trailing commas and unquoted keys are accepted).
"""

from __future__ import annotations

import tomllib
from typing import TYPE_CHECKING, Any

import json5


if TYPE_CHECKING:
    from configseek.core.ports import Parser


def parse_toml(text: str) -> dict[str, Any]:
    """Parse TOML text into a dict."""
    return tomllib.loads(text)


def parse_json5(text: str) -> Any:
    """Parse JSON or JSON5 text."""
    return json5.loads(text)


PARSERS: dict[str, Parser] = {
    "toml": parse_toml,
    "json": parse_json5,
    "json5": parse_json5,
}

DEFAULT_PARSER: Parser = parse_json5


def get_parser(extension: str) -> Parser:
    """Select the parser for a file extension.

    Args:
        extension: File extension with or without the leading dot
            (e.g., "toml" or ".toml"). Matching is case-insensitive.

    Returns:
        The parser registered for the extension, or the JSON5 parser when
        the extension is not recognized. No extension is rejected.

    Example:
        >>> get_parser(".toml") is parse_toml
        True
        >>> get_parser("rc") is parse_json5
        True
    """
    return PARSERS.get(extension.lstrip(".").lower(), DEFAULT_PARSER)
