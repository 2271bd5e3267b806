"""Unit tests for the parser dispatch."""

from __future__ import annotations

import tomllib

import pytest

from configseek.core.parsers import get_parser, parse_json5, parse_toml


@pytest.mark.core
@pytest.mark.tra("Domain.Parsers")
class TestGetParser:
    """Tests for get_parser()."""

    @pytest.mark.parametrize("extension", ["toml", ".toml", "TOML"])
    def test_toml_extensions(self, extension: str) -> None:
        """TOML is selected regardless of dot or case."""
        assert get_parser(extension) is parse_toml

    @pytest.mark.parametrize("extension", ["json", "json5", "", "rc", "yaml"])
    def test_everything_else_is_json5(self, extension: str) -> None:
        """JSON, JSON5 and unknown extensions all use the JSON5 parser."""
        assert get_parser(extension) is parse_json5


@pytest.mark.core
@pytest.mark.tra("Domain.Parsers")
class TestParsers:
    """Tests for the parser functions."""

    def test_toml_parses_tables(self) -> None:
        """TOML tables become nested dicts."""
        assert parse_toml("key = 1\n[tool]\nname = 'x'\n") == {
            "key": 1,
            "tool": {"name": "x"},
        }

    def test_json5_accepts_comments_trailing_commas_and_bare_keys(self) -> None:
        """JSON5 extensions over strict JSON are accepted."""
        text = """
        {
            // comment
            a: 1,
            "b": [1, 2,],
        }
        """

        assert parse_json5(text) == {"a": 1, "b": [1, 2]}

    def test_json5_accepts_strict_json(self) -> None:
        """Plain JSON is valid JSON5."""
        assert parse_json5('{"a": {"b": null}}') == {"a": {"b": None}}

    def test_malformed_toml_raises_value_error(self) -> None:
        """TOML errors are ValueErrors."""
        with pytest.raises(tomllib.TOMLDecodeError):
            parse_toml("key = ")

    def test_malformed_json5_raises_value_error(self) -> None:
        """JSON5 errors are ValueErrors."""
        with pytest.raises(ValueError):
            parse_json5("{a: }")
