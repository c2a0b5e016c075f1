"""
Tests for the release fetcher.
"""

import http.client
import urllib.error
from pathlib import Path
from unittest.mock import patch

import pytest

from ptp_launcher.core.errors import DownloadError
from ptp_launcher.core.services.binary.execution.download import (
    build_release_location,
    downloaded_archive,
    fetch_archive,
)
from tests.helpers import FakeResponse

BASE = "https://github.com/giorgi-leladze/php-test-processor/releases/latest/download"
URL = f"{BASE}/ptp-linux-amd64.tar.gz"


class _TruncatedResponse(FakeResponse):
    """Server hangs up 3 bytes into a 100-byte body."""

    def __init__(self):
        super().__init__(b"")

    def read(self, size: int = -1) -> bytes:
        raise http.client.IncompleteRead(b"abc", 100)


class TestBuildReleaseLocation:
    def test_url(self):
        loc = build_release_location("ptp-linux-amd64", BASE)
        assert loc.artifact_name == "ptp-linux-amd64"
        assert loc.download_url == URL

    def test_trailing_slash(self):
        loc = build_release_location("ptp-darwin-arm64", BASE + "/")
        assert loc.download_url == f"{BASE}/ptp-darwin-arm64.tar.gz"


class TestFetchArchive:
    def test_writes_body_to_temp_file(self, scratch_dir: Path):
        loc = build_release_location("ptp-linux-amd64", BASE)
        with patch("urllib.request.urlopen", return_value=FakeResponse(b"archive-bytes")):
            path = fetch_archive(loc, tmp_dir=scratch_dir)
        assert path.parent == scratch_dir
        assert path.name.endswith(".tar.gz")
        assert path.read_bytes() == b"archive-bytes"

    def test_sends_user_agent(self, scratch_dir: Path):
        loc = build_release_location("ptp-linux-amd64", BASE)
        with patch("urllib.request.urlopen", return_value=FakeResponse(b"x")) as mock_open:
            fetch_archive(loc, user_agent="ptp-test/9.9", tmp_dir=scratch_dir)
        req = mock_open.call_args.args[0]
        assert req.full_url == URL
        assert req.get_header("User-agent") == "ptp-test/9.9"

    def test_no_timeout_by_default(self, scratch_dir: Path):
        loc = build_release_location("ptp-linux-amd64", BASE)
        with patch("urllib.request.urlopen", return_value=FakeResponse(b"x")) as mock_open:
            fetch_archive(loc, tmp_dir=scratch_dir)
        assert "timeout" not in mock_open.call_args.kwargs

    def test_unique_temp_names(self, scratch_dir: Path):
        loc = build_release_location("ptp-linux-amd64", BASE)
        with patch("urllib.request.urlopen", side_effect=lambda *a, **k: FakeResponse(b"x")):
            first = fetch_archive(loc, tmp_dir=scratch_dir)
            second = fetch_archive(loc, tmp_dir=scratch_dir)
        assert first != second
        assert first.exists() and second.exists()

    def test_http_error(self, scratch_dir: Path):
        loc = build_release_location("ptp-linux-amd64", BASE)
        err = urllib.error.HTTPError(URL, 404, "Not Found", {}, None)
        with patch("urllib.request.urlopen", side_effect=err):
            with pytest.raises(DownloadError) as exc_info:
                fetch_archive(loc, tmp_dir=scratch_dir)
        assert exc_info.value.url == URL
        assert URL in str(exc_info.value)
        assert "404" in str(exc_info.value)
        assert list(scratch_dir.iterdir()) == []

    def test_transport_error(self, scratch_dir: Path):
        loc = build_release_location("ptp-linux-amd64", BASE)
        with patch(
            "urllib.request.urlopen",
            side_effect=urllib.error.URLError("name resolution failed"),
        ):
            with pytest.raises(DownloadError) as exc_info:
                fetch_archive(loc, tmp_dir=scratch_dir)
        assert exc_info.value.url == URL
        assert list(scratch_dir.iterdir()) == []

    def test_non_success_status(self, scratch_dir: Path):
        loc = build_release_location("ptp-linux-amd64", BASE)
        with patch("urllib.request.urlopen", return_value=FakeResponse(b"", status=204)):
            path = fetch_archive(loc, tmp_dir=scratch_dir)
        assert path.exists()

        with patch("urllib.request.urlopen", return_value=FakeResponse(b"", status=302)):
            with pytest.raises(DownloadError):
                fetch_archive(loc, tmp_dir=scratch_dir)

    def test_truncated_body(self, scratch_dir: Path):
        loc = build_release_location("ptp-linux-amd64", BASE)
        with patch("urllib.request.urlopen", return_value=_TruncatedResponse()):
            with pytest.raises(DownloadError) as exc_info:
                fetch_archive(loc, tmp_dir=scratch_dir)
        assert exc_info.value.url == URL
        assert "3 bytes" in str(exc_info.value)
        assert list(scratch_dir.iterdir()) == []

    def test_protocol_error(self, scratch_dir: Path):
        loc = build_release_location("ptp-linux-amd64", BASE)
        with patch(
            "urllib.request.urlopen",
            side_effect=http.client.RemoteDisconnected("closed"),
        ):
            with pytest.raises(DownloadError):
                fetch_archive(loc, tmp_dir=scratch_dir)
        assert list(scratch_dir.iterdir()) == []

    def test_interrupt_still_cleans_up(self, scratch_dir: Path):
        loc = build_release_location("ptp-linux-amd64", BASE)
        with patch("urllib.request.urlopen", side_effect=KeyboardInterrupt):
            with pytest.raises(KeyboardInterrupt):
                fetch_archive(loc, tmp_dir=scratch_dir)
        assert list(scratch_dir.iterdir()) == []

    def test_single_attempt(self, scratch_dir: Path):
        loc = build_release_location("ptp-linux-amd64", BASE)
        with patch(
            "urllib.request.urlopen",
            side_effect=urllib.error.URLError("down"),
        ) as mock_open:
            with pytest.raises(DownloadError):
                fetch_archive(loc, tmp_dir=scratch_dir)
        assert mock_open.call_count == 1


class TestDownloadedArchive:
    def test_removed_after_use(self, scratch_dir: Path):
        loc = build_release_location("ptp-linux-amd64", BASE)
        with patch("urllib.request.urlopen", return_value=FakeResponse(b"data")):
            with downloaded_archive(loc, tmp_dir=scratch_dir) as path:
                assert path.read_bytes() == b"data"
        assert not path.exists()

    def test_removed_on_error(self, scratch_dir: Path):
        loc = build_release_location("ptp-linux-amd64", BASE)
        with patch("urllib.request.urlopen", return_value=FakeResponse(b"data")):
            with pytest.raises(RuntimeError):
                with downloaded_archive(loc, tmp_dir=scratch_dir):
                    raise RuntimeError("boom")
        assert list(scratch_dir.iterdir()) == []
