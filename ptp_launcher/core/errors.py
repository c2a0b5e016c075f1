"""
Error taxonomy — every terminal failure of provisioning or delegation.

Services raise these; use cases and CLI commands catch ``LauncherError``,
print ``str(exc)`` as a single line on stderr and exit 1. None of them
is retried.
"""

from __future__ import annotations

from pathlib import Path


class LauncherError(Exception):
    """Base class for all launcher failures."""


class UnsupportedPlatformError(LauncherError):
    """No release artifact exists for the detected OS / architecture."""

    def __init__(self, os_family: str, arch: str, manual_install_url: str = ""):
        self.os_family = os_family
        self.arch = arch
        self.manual_install_url = manual_install_url
        message = f"ptp: unsupported platform ({os_family} {arch})."
        if manual_install_url:
            message += f" Install manually from {manual_install_url}"
        super().__init__(message)


class DownloadError(LauncherError):
    """The release archive could not be fetched."""

    def __init__(self, url: str, reason: str = ""):
        self.url = url
        self.reason = reason
        message = f"ptp: failed to download {url}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class ExtractionError(LauncherError):
    """The downloaded archive could not be decoded."""

    def __init__(self, archive: Path, reason: str = ""):
        self.archive = archive
        self.reason = reason
        message = f"ptp: failed to extract archive {archive}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class MissingArtifactError(LauncherError):
    """The archive did not contain the expected file at its root."""

    def __init__(self, artifact_name: str, directory: Path):
        self.artifact_name = artifact_name
        self.directory = directory
        super().__init__(
            f"ptp: extracted binary not found at {directory / artifact_name}"
        )


class InstallError(LauncherError):
    """The extracted binary could not be moved into the install path."""

    def __init__(self, target: Path, reason: str = ""):
        self.target = target
        self.reason = reason
        message = f"ptp: failed to install binary at {target}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class BinaryNotInstalledError(LauncherError):
    """The installed binary is absent or not executable."""

    def __init__(self, path: Path, reason: str = "missing", remediation: str = ""):
        self.path = path
        self.reason = reason
        self.remediation = remediation
        message = f"ptp: binary not found at {path}"
        if reason == "not_executable":
            message = f"ptp: binary at {path} is not executable"
        if remediation:
            message += f". Run: {remediation}"
        super().__init__(message)


class ChildExecutionIndeterminateError(LauncherError):
    """The child process ended without a retrievable numeric status."""

    def __init__(self, command: str, returncode: int | None = None):
        self.command = command
        self.returncode = returncode
        super().__init__(
            f"ptp: could not determine exit status of {command} (got {returncode!r})"
        )
