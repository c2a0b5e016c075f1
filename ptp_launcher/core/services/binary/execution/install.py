"""
L4 Execution — Archive extraction and atomic install.

Extracts the downloaded tarball into a private temporary directory,
checks that the expected file sits at its root, then moves it over the
installed binary with a single rename. Readers of the install path see
either the old binary or the new one, both complete and executable.
"""

from __future__ import annotations

import errno
import logging
import os
import shutil
import tarfile
import tempfile
import uuid
from pathlib import Path

from ptp_launcher.core.errors import (
    ExtractionError,
    InstallError,
    MissingArtifactError,
)

logger = logging.getLogger(__name__)

BINARY_MODE = 0o755
INSTALL_DIR_MODE = 0o755


def extract_archive(archive: Path, dest_dir: Path) -> None:
    """Decode a gzip tarball into ``dest_dir``.

    Raises:
        ExtractionError: Corrupt/truncated archive, unsafe member path,
            or any I/O failure while writing members.
    """
    root = dest_dir.resolve()
    try:
        with tarfile.open(archive, "r:gz") as tf:
            for member in tf.getmembers():
                target = (root / member.name).resolve()
                if not target.is_relative_to(root):
                    raise ExtractionError(
                        archive, f"path traversal detected: {member.name}",
                    )
            tf.extractall(root, filter="data")
    except ExtractionError:
        raise
    except (tarfile.TarError, EOFError, OSError) as exc:
        raise ExtractionError(archive, str(exc)) from exc

    logger.debug("Extracted %s into %s", archive.name, dest_dir)


def locate_artifact(extract_dir: Path, artifact_name: str) -> Path:
    """Return ``extract_dir/artifact_name`` if it is a regular file.

    Only the flat single-file layout is accepted; a nested or renamed
    binary is treated as missing.
    """
    candidate = extract_dir / artifact_name
    if not candidate.is_file() or candidate.is_symlink():
        found = sorted(p.name for p in extract_dir.iterdir())
        logger.debug("Archive root contains: %s", found)
        raise MissingArtifactError(artifact_name, extract_dir)
    return candidate


def ensure_install_root(install_root: Path) -> None:
    """Create the install directory (0755) if it does not exist."""
    if not install_root.is_dir():
        install_root.mkdir(mode=INSTALL_DIR_MODE, parents=True, exist_ok=True)
        logger.debug("Created install directory %s", install_root)


def replace_binary(source: Path, target: Path) -> Path:
    """Make ``source`` executable and rename it over ``target``.

    ``os.replace`` swaps the directory entry in one step, so the old file
    is unlinked and the new one appears with no gap in between. When
    ``source`` lives on another filesystem the rename fails with EXDEV;
    the file is then copied to a hidden sibling of ``target`` first, so
    the final step is still a same-directory rename.

    Raises:
        InstallError: The install directory, the permission change or
            the rename failed (read-only tree, EACCES, ENOSPC, ...).
    """
    try:
        ensure_install_root(target.parent)
        os.chmod(source, BINARY_MODE)
        _rename_into_place(source, target)
    except OSError as exc:
        raise InstallError(target, str(exc)) from exc
    return target


def _rename_into_place(source: Path, target: Path) -> None:
    try:
        os.replace(source, target)
        return
    except OSError as exc:
        if exc.errno != errno.EXDEV:
            raise

    staging = target.parent / f".{target.name}.{uuid.uuid4().hex[:12]}.tmp"
    logger.debug("Cross-device install, staging via %s", staging)
    try:
        shutil.copyfile(source, staging)
        os.chmod(staging, BINARY_MODE)
        os.replace(staging, target)
    finally:
        try:
            staging.unlink(missing_ok=True)
        except OSError as exc:
            logger.debug("Could not remove staging file %s: %s", staging, exc)


def install_from_archive(
    archive: Path,
    artifact_name: str,
    target: Path,
    *,
    tmp_dir: Path | None = None,
) -> Path:
    """Extract, verify and install. The extraction directory is always removed.

    A failure before ``replace_binary`` leaves any existing binary at
    ``target`` untouched.

    Returns:
        The installed binary path (``target``).
    """
    with tempfile.TemporaryDirectory(
        prefix=f"ptp-extract-{os.getpid()}-",
        dir=tmp_dir,
        ignore_cleanup_errors=True,
    ) as extract_root:
        extract_dir = Path(extract_root)
        extract_archive(archive, extract_dir)
        extracted = locate_artifact(extract_dir, artifact_name)
        replace_binary(extracted, target)

    logger.info("Installed %s to %s", artifact_name, target)
    return target
