"""Tests for core/subprocess_utils.py module."""

import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from faststart.core.subprocess_utils import run_command


class TestRunCommand:
    """Tests for run_command function."""

    @patch("faststart.core.subprocess_utils.subprocess.run")
    def test_converts_paths_and_returns_tuple(self, mock_run) -> None:
        mock_run.return_value = subprocess.CompletedProcess(
            args=[], returncode=0, stdout="out", stderr="err"
        )

        result = run_command([Path("/usr/bin/tool"), "-v", Path("a b.mp4")])

        assert result == ("out", "err", 0)
        assert result.stderr == "err"
        assert result.returncode == 0
        args, kwargs = mock_run.call_args
        assert args[0] == ["/usr/bin/tool", "-v", "a b.mp4"]
        assert kwargs["capture_output"] is True
        assert kwargs["text"] is True
        assert kwargs["errors"] == "replace"
        assert kwargs["timeout"] is None

    @patch("faststart.core.subprocess_utils.subprocess.run")
    def test_none_output_becomes_empty(self, mock_run) -> None:
        mock_run.return_value = subprocess.CompletedProcess(
            args=[], returncode=3, stdout=None, stderr=None
        )

        assert run_command(["tool"]) == ("", "", 3)

    @patch("faststart.core.subprocess_utils.subprocess.run")
    def test_launch_failure_propagates(self, mock_run) -> None:
        mock_run.side_effect = FileNotFoundError(2, "No such file", "tool")

        with pytest.raises(FileNotFoundError):
            run_command(["tool"])

    def test_real_process(self) -> None:
        """Runs an actual executable and captures its output."""
        stdout, stderr, code = run_command(
            [sys.executable, "-c", "import sys; print('hi'); sys.exit(4)"]
        )

        assert stdout.strip() == "hi"
        assert code == 4
