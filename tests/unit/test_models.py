"""Unit tests for domain models."""

from __future__ import annotations

import dataclasses
from pathlib import PurePosixPath

import pytest

from configseek.core.models import ConfigFile, ConfigOptions, ConfigOutput


@pytest.mark.core
@pytest.mark.tra("Domain.ConfigOutput")
class TestConfigOutput:
    """Tests for ConfigOutput."""

    def test_from_file_records_single_provenance_entry(self) -> None:
        """from_file() builds a one-entry files tuple."""
        output = ConfigOutput.from_file({"key": 1}, PurePosixPath("/p/a/x.toml"))

        assert output.files == (ConfigFile(PurePosixPath("/p/a/x.toml")),)
        assert output.file_path == PurePosixPath("/p/a/x.toml")

    def test_is_frozen(self) -> None:
        """Outputs cannot be reassigned."""
        output = ConfigOutput.from_file({}, PurePosixPath("/x.json"))

        with pytest.raises(dataclasses.FrozenInstanceError):
            output.config = {"other": 1}  # type: ignore[misc]


@pytest.mark.core
@pytest.mark.tra("Domain.ConfigOptions")
class TestConfigOptions:
    """Tests for ConfigOptions."""

    def test_parse_defaults_to_true(self) -> None:
        """Parsing is on by default."""
        assert ConfigOptions().parse is True

    def test_coerce_none(self) -> None:
        """None becomes the defaults."""
        assert ConfigOptions.coerce(None) == ConfigOptions()

    def test_coerce_instance_is_identity(self) -> None:
        """An instance passes through unchanged."""
        options = ConfigOptions(parse=False)

        assert ConfigOptions.coerce(options) is options

    def test_coerce_mapping(self) -> None:
        """A mapping with known keys is converted."""
        assert ConfigOptions.coerce({"parse": False}) == ConfigOptions(parse=False)

    def test_coerce_empty_mapping(self) -> None:
        """Missing keys take their defaults."""
        assert ConfigOptions.coerce({}) == ConfigOptions()

    @pytest.mark.parametrize("value", [None, 0, "", True])
    def test_coerce_only_false_disables_parsing(self, value: object) -> None:
        """Falsy values other than False keep parsing on."""
        assert ConfigOptions.coerce({"parse": value}).parse is True

    def test_coerce_rejects_unknown_keys(self) -> None:
        """Unknown keys raise TypeError naming them."""
        with pytest.raises(TypeError, match="watch"):
            ConfigOptions.coerce({"parse": True, "watch": True})
