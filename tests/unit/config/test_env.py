"""Tests for EnvReader class."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from faststart.config.env import EnvReader


class TestEnvReaderGetStr:
    """Tests for EnvReader.get_str method."""

    def test_returns_value_when_set(self) -> None:
        """Should return the value when environment variable is set."""
        reader = EnvReader(env={"MY_VAR": "hello"})
        assert reader.get_str("MY_VAR") == "hello"

    def test_returns_default_when_not_set(self) -> None:
        """Should return default when environment variable is not set."""
        reader = EnvReader(env={})
        assert reader.get_str("MY_VAR") is None
        assert reader.get_str("MY_VAR", "default") == "default"

    def test_returns_empty_string_when_set_to_empty(self) -> None:
        reader = EnvReader(env={"MY_VAR": ""})
        assert reader.get_str("MY_VAR", "default") == ""


class TestEnvReaderGetInt:
    """Tests for EnvReader.get_int method."""

    def test_parses_integer(self) -> None:
        reader = EnvReader(env={"MY_VAR": "42"})
        assert reader.get_int("MY_VAR") == 42

    def test_invalid_value_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Should return default and log a warning for non-integers."""
        reader = EnvReader(env={"MY_VAR": "many"})
        with caplog.at_level(logging.WARNING):
            assert reader.get_int("MY_VAR", 7) == 7
        assert "Invalid integer value for MY_VAR" in caplog.text


class TestEnvReaderGetBool:
    """Tests for EnvReader.get_bool method."""

    @pytest.mark.parametrize("value", ["true", "TRUE", "1", "yes", "on"])
    def test_truthy_values(self, value: str) -> None:
        assert EnvReader(env={"FLAG": value}).get_bool("FLAG") is True

    @pytest.mark.parametrize("value", ["false", "0", "no", "off", "maybe"])
    def test_other_values_are_false(self, value: str) -> None:
        assert EnvReader(env={"FLAG": value}).get_bool("FLAG") is False

    def test_unset_returns_default(self) -> None:
        assert EnvReader(env={}).get_bool("FLAG") is None


class TestEnvReaderGetPath:
    """Tests for EnvReader.get_path method."""

    def test_existing_path(self, tmp_path: Path) -> None:
        reader = EnvReader(env={"TOOL": str(tmp_path)})
        assert reader.get_path("TOOL") == tmp_path

    def test_missing_path_warns(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        reader = EnvReader(env={"TOOL": str(tmp_path / "nope")})
        with caplog.at_level(logging.WARNING):
            assert reader.get_path("TOOL") is None
        assert "non-existent path" in caplog.text

    def test_missing_path_allowed(self, tmp_path: Path) -> None:
        """must_exist=False returns paths that will be created later."""
        target = tmp_path / "logs" / "run.log"
        reader = EnvReader(env={"LOG": str(target)})
        assert reader.get_path("LOG", must_exist=False) == target

    def test_expands_user(self) -> None:
        reader = EnvReader(env={"LOG": "~/run.log"})
        assert reader.get_path("LOG", must_exist=False) == Path.home() / "run.log"


class TestEnvReaderGetList:
    """Tests for EnvReader.get_list method."""

    def test_splits_and_strips(self) -> None:
        reader = EnvReader(env={"EXTS": " mp4, m4v ,,mov"})
        assert reader.get_list("EXTS") == ["mp4", "m4v", "mov"]

    def test_custom_separator(self) -> None:
        reader = EnvReader(env={"EXTS": "mp4:m4v"})
        assert reader.get_list("EXTS", separator=":") == ["mp4", "m4v"]

    def test_unset_returns_default(self) -> None:
        assert EnvReader(env={}).get_list("EXTS", default=["mp4"]) == ["mp4"]
