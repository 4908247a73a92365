"""Tests for executor/interface.py module."""

from pathlib import Path
from unittest.mock import patch

from faststart.executor.interface import (
    TranscodeOutcome,
    TranscodeRequest,
    get_tool_path,
    is_staging_path,
    staging_path_for,
)


class TestStagingPath:
    """Tests for staging path derivation."""

    def test_inserts_marker_before_extension(self) -> None:
        """movie.mp4 stages to movie.new.mp4 in the same directory."""
        assert staging_path_for(Path("/videos/movie.mp4")) == Path(
            "/videos/movie.new.mp4"
        )

    def test_preserves_extension_case(self) -> None:
        """Uppercase extensions are kept so ffmpeg picks the same muxer."""
        assert staging_path_for(Path("clip.MP4")) == Path("clip.new.MP4")

    def test_keeps_inner_dots_of_stem(self) -> None:
        """Only the last suffix is treated as the extension."""
        assert staging_path_for(Path("a.b.c.mp4")) == Path("a.b.c.new.mp4")

    def test_is_deterministic(self) -> None:
        """The same source always yields the same staging path."""
        source = Path("/x/y.mp4")
        assert staging_path_for(source) == staging_path_for(source)

    def test_staging_path_is_recognizable(self) -> None:
        """Derived staging paths are detected as staging artifacts."""
        assert is_staging_path(staging_path_for(Path("movie.mp4")))

    def test_regular_file_is_not_staging(self) -> None:
        assert not is_staging_path(Path("movie.mp4"))
        assert not is_staging_path(Path("newsreel.mp4"))


class TestTranscodeRequest:
    """Tests for TranscodeRequest."""

    def test_for_source_derives_staging_path(self) -> None:
        request = TranscodeRequest.for_source(Path("/v/movie.mp4"))
        assert request.source_path == Path("/v/movie.mp4")
        assert request.staging_path == Path("/v/movie.new.mp4")


class TestTranscodeOutcome:
    """Tests for TranscodeOutcome constructors."""

    def test_succeeded(self) -> None:
        outcome = TranscodeOutcome.succeeded(Path("a.new.mp4"))
        assert outcome.success is True
        assert outcome.returncode == 0
        assert outcome.diagnostic == ""

    def test_failed_keeps_diagnostic_verbatim(self) -> None:
        text = "line one\n  line two  \n"
        outcome = TranscodeOutcome.failed(Path("a.new.mp4"), text, returncode=1)
        assert outcome.success is False
        assert outcome.diagnostic == text
        assert outcome.returncode == 1


class TestGetToolPath:
    """Tests for get_tool_path."""

    def test_configured_path_wins(self) -> None:
        configured = Path("/opt/ffmpeg/bin/ffmpeg")
        with patch("faststart.executor.interface.shutil.which") as mock_which:
            assert get_tool_path("ffmpeg", configured) == configured
        mock_which.assert_not_called()

    def test_falls_back_to_path_lookup(self) -> None:
        with patch(
            "faststart.executor.interface.shutil.which",
            return_value="/usr/bin/ffmpeg",
        ):
            assert get_tool_path("ffmpeg") == Path("/usr/bin/ffmpeg")

    def test_returns_none_when_missing(self) -> None:
        with patch("faststart.executor.interface.shutil.which", return_value=None):
            assert get_tool_path("ffmpeg") is None
