"""Shared test fixtures for faststart."""

import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from faststart.executor.interface import TranscodeOutcome, TranscodeRequest
from faststart.logging.context import FileContextFilter


class FakeTranscoder:
    """Transcoder stand-in that never starts a process.

    Writes ``payload`` to the staging path for every request, except for
    sources whose file name is in ``fail_for``, which fail with
    ``diagnostic``. A failing request leaves ``partial_output`` at the
    staging path when it is set, and no staging file otherwise.
    """

    def __init__(self) -> None:
        self.fail_for: set[str] = set()
        self.diagnostic = "moov atom not found\nInvalid data found when processing input"
        self.payload = b"optimized mp4 content"
        self.partial_output: bytes | None = None
        self.calls: list[TranscodeRequest] = []

    def invoke(self, request: TranscodeRequest) -> TranscodeOutcome:
        self.calls.append(request)
        if request.source_path.name in self.fail_for:
            if self.partial_output is not None:
                request.staging_path.write_bytes(self.partial_output)
            return TranscodeOutcome.failed(
                request.staging_path, self.diagnostic, returncode=1
            )
        request.staging_path.write_bytes(self.payload)
        return TranscodeOutcome.succeeded(request.staging_path)


@pytest.fixture
def fake_transcoder() -> FakeTranscoder:
    """Return a fresh FakeTranscoder."""
    return FakeTranscoder()


@pytest.fixture
def sample_mp4(tmp_path: Path) -> Path:
    """Create a single fake MP4 file."""
    path = tmp_path / "movie.mp4"
    path.write_bytes(b"original mp4 content")
    return path


@pytest.fixture
def video_tree(tmp_path: Path) -> Path:
    """Create a directory tree with MP4 and non-MP4 files.

    Layout::

        library/
            a.mp4
            notes.txt
            show/
                b.mp4
                c.mkv
                season2/
                    d.mp4
    """
    root = tmp_path / "library"
    (root / "show" / "season2").mkdir(parents=True)
    (root / "a.mp4").write_bytes(b"original a")
    (root / "notes.txt").write_text("not a video")
    (root / "show" / "b.mp4").write_bytes(b"original b")
    (root / "show" / "c.mkv").write_bytes(b"original c")
    (root / "show" / "season2" / "d.mp4").write_bytes(b"original d")
    return root


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path):
    """Point configuration at an empty location for every test.

    Removes any FASTSTART_* variables from the environment and sets
    FASTSTART_CONFIG_PATH to a file that does not exist, so the user's
    ~/.faststart/config.toml never leaks into tests.
    """
    env = {k: v for k, v in os.environ.items() if not k.startswith("FASTSTART_")}
    env["FASTSTART_CONFIG_PATH"] = str(tmp_path / "no-such-config.toml")
    with patch.dict(os.environ, env, clear=True):
        yield


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Remove handlers installed by configure_logging and restore the level."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if any(isinstance(f, FileContextFilter) for f in handler.filters):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
