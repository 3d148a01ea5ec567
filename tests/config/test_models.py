"""Tests for config/models.py."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from rstags.config.models import (
    KindsConfig,
    LoggingConfig,
    LogOutputConfig,
    ParserConfig,
    RsTagsConfig,
    TagsConfig,
)


class TestLogOutputConfig:
    """LogOutputConfig tests."""

    def test_defaults(self) -> None:
        config = LogOutputConfig()
        assert config.format == "console"
        assert config.destination == "stderr"
        assert config.level is None

    def test_absolute_path_destination(self, tmp_path: Path) -> None:
        config = LogOutputConfig(destination=str(tmp_path / "rstags.log"))
        assert config.destination == str(tmp_path / "rstags.log")

    def test_relative_path_fails(self) -> None:
        with pytest.raises(ValidationError, match="absolute"):
            LogOutputConfig(destination="logs/rstags.log")


class TestLoggingConfig:
    """LoggingConfig tests."""

    def test_defaults(self) -> None:
        config = LoggingConfig()
        assert config.level == "WARNING"
        assert len(config.outputs) == 1

    def test_invalid_level(self) -> None:
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")  # type: ignore[arg-type]


class TestKindsConfig:
    def test_all_enabled_by_default(self) -> None:
        config = KindsConfig()
        assert config.function and config.type and config.let


class TestTagsConfig:
    """TagsConfig tests."""

    def test_defaults(self) -> None:
        config = TagsConfig()
        assert config.extensions == [".rs"]
        assert config.exclude_dirs == []
        assert config.max_file_size_mb == 10
        assert config.output_format == "ctags"
        assert config.sort is True
        assert config.qualified_tags is False

    def test_extensions_get_leading_dot(self) -> None:
        assert TagsConfig(extensions=["rs", ".rs.in"]).extensions == [".rs", ".rs.in"]

    @pytest.mark.parametrize("size", [0, -5])
    def test_max_file_size_must_be_positive(self, size: int) -> None:
        with pytest.raises(ValidationError, match="positive"):
            TagsConfig(max_file_size_mb=size)

    def test_unknown_output_format(self) -> None:
        with pytest.raises(ValidationError):
            TagsConfig(output_format="xml")  # type: ignore[arg-type]


class TestRsTagsConfig:
    """Root config tests."""

    def test_defaults(self) -> None:
        config = RsTagsConfig()
        assert isinstance(config.logging, LoggingConfig)
        assert isinstance(config.tags, TagsConfig)
        assert config.parser == ParserConfig(strict=False)

    def test_nested_dict_validation(self) -> None:
        config = RsTagsConfig.model_validate(
            {"tags": {"kinds": {"let": False}}, "parser": {"strict": True}}
        )
        assert config.tags.kinds.let is False
        assert config.tags.kinds.type is True
        assert config.parser.strict is True
