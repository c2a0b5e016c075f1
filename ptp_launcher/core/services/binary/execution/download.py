"""
L4 Execution — Release download.

Builds the deterministic "latest" URL for an artifact and streams the
archive into a uniquely named temporary file. Failures raise
DownloadError with the attempted URL; there is no retry and no cached
fallback.
"""

from __future__ import annotations

import http.client
import logging
import os
import tempfile
import urllib.error
import urllib.request
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from ptp_launcher.core.config.settings import USER_AGENT
from ptp_launcher.core.errors import DownloadError
from ptp_launcher.core.models.asset import ReleaseLocation

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024


def _fmt_size(n: int | float) -> str:
    """Human-readable byte size."""
    for unit in ("B", "KB", "MB", "GB"):
        if n < 1024:
            return f"{n:.0f} {unit}" if unit == "B" else f"{n:.1f} {unit}"
        n /= 1024
    return f"{n:.1f} TB"


def build_release_location(artifact_name: str, base_url: str) -> ReleaseLocation:
    """``<base_url>/<artifact>.tar.gz`` — no version pinning."""
    url = f"{base_url.rstrip('/')}/{artifact_name}.tar.gz"
    return ReleaseLocation(artifact_name=artifact_name, download_url=url)


def fetch_archive(
    location: ReleaseLocation,
    *,
    user_agent: str = USER_AGENT,
    tmp_dir: Path | None = None,
    timeout: float | None = None,
) -> Path:
    """Download the release archive to a fresh temporary file.

    urllib follows redirects, which the GitHub ``latest/download``
    endpoint relies on. The temp file name carries a random suffix so
    two concurrent installs never share it.

    Args:
        location: Artifact name and download URL.
        user_agent: Identifying client token sent with the request.
        tmp_dir: Directory for the temp file (default: OS temp dir).
        timeout: Socket timeout in seconds; None waits indefinitely.

    Returns:
        Path of the downloaded archive. The caller owns it and must
        remove it (see ``downloaded_archive``).

    Raises:
        DownloadError: On any transport failure or non-2xx response.
    """
    url = location.download_url
    req = urllib.request.Request(url, headers={"User-Agent": user_agent})

    fd, name = tempfile.mkstemp(
        prefix=f"ptp-{os.getpid()}-", suffix=".tar.gz", dir=tmp_dir,
    )
    tmp_path = Path(name)
    logger.debug("Fetching %s → %s", url, tmp_path)

    try:
        total = _stream_to_file(req, fd, url, timeout)
    except BaseException:
        _discard(tmp_path)
        raise

    logger.info("Downloaded %s (%s)", location.archive_name, _fmt_size(total))
    return tmp_path


def _stream_to_file(
    req: urllib.request.Request,
    fd: int,
    url: str,
    timeout: float | None,
) -> int:
    """Copy the response body into ``fd``; every failure becomes DownloadError."""
    kwargs = {} if timeout is None else {"timeout": timeout}
    total = 0
    try:
        with os.fdopen(fd, "wb") as out:
            with urllib.request.urlopen(req, **kwargs) as resp:  # nosec B310
                status = resp.getcode()
                if status is not None and not 200 <= status < 300:
                    raise DownloadError(url, f"HTTP {status}")
                while True:
                    chunk = resp.read(_CHUNK_SIZE)
                    if not chunk:
                        break
                    out.write(chunk)
                    total += len(chunk)
    except urllib.error.HTTPError as exc:
        raise DownloadError(url, f"HTTP {exc.code}") from exc
    except http.client.IncompleteRead as exc:
        raise DownloadError(
            url, f"connection closed after {len(exc.partial)} bytes",
        ) from exc
    except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError) as exc:
        raise DownloadError(url, str(exc) or type(exc).__name__) from exc
    return total


@contextmanager
def downloaded_archive(
    location: ReleaseLocation,
    *,
    user_agent: str = USER_AGENT,
    tmp_dir: Path | None = None,
) -> Iterator[Path]:
    """Scoped download: the temp archive is removed on every exit path."""
    path = fetch_archive(location, user_agent=user_agent, tmp_dir=tmp_dir)
    try:
        yield path
    finally:
        _discard(path)


def _discard(path: Path) -> None:
    """Best-effort removal; a cleanup failure never masks the real error."""
    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        logger.debug("Could not remove temp file %s: %s", path, exc)
