"""
L5 Orchestration — Provisioning.

Resolve → fetch → install, run once from the install/update hook.
Temporary resources are acquired on an ExitStack so the archive and the
extraction directory are released on every exit path, in reverse order,
without a cleanup error hiding the failure that caused the unwind.
"""

from __future__ import annotations

import logging
from contextlib import ExitStack
from dataclasses import dataclass
from pathlib import Path

from ptp_launcher.core.config.settings import LauncherConfig
from ptp_launcher.core.models.asset import AssetDescriptor, ReleaseLocation
from ptp_launcher.core.services.binary.detection.platform import (
    detect_platform,
    require_asset_name,
)
from ptp_launcher.core.services.binary.execution.download import (
    build_release_location,
    downloaded_archive,
)
from ptp_launcher.core.services.binary.execution.install import install_from_archive

logger = logging.getLogger(__name__)


@dataclass
class ProvisionOutcome:
    """What a successful provisioning run produced."""

    platform: AssetDescriptor
    location: ReleaseLocation
    binary_path: Path

    def to_dict(self) -> dict:
        return {
            "os": self.platform.os_family,
            "arch": self.platform.arch,
            "artifact": self.location.artifact_name,
            "url": self.location.download_url,
            "path": str(self.binary_path),
        }


def provision(
    config: LauncherConfig,
    *,
    descriptor: AssetDescriptor | None = None,
    tmp_dir: Path | None = None,
) -> ProvisionOutcome:
    """Materialize the binary for this host at ``config.binary_path``.

    Args:
        config: Install root and release source.
        descriptor: Platform override (default: the running host).
        tmp_dir: Scratch directory (default: OS temp dir).

    Raises:
        UnsupportedPlatformError, DownloadError, ExtractionError,
        MissingArtifactError, InstallError. On any of them the previously installed
        binary, if any, is left as it was.
    """
    descriptor = descriptor or detect_platform()
    artifact = require_asset_name(descriptor, config.manual_install_url)
    location = build_release_location(artifact, config.release_base_url)

    logger.info("Downloading %s for %s", artifact, descriptor.label)
    logger.debug("Release URL: %s", location.download_url)

    with ExitStack() as stack:
        archive = stack.enter_context(
            downloaded_archive(location, user_agent=config.user_agent, tmp_dir=tmp_dir),
        )
        installed = install_from_archive(
            archive, artifact, config.binary_path, tmp_dir=tmp_dir,
        )

    return ProvisionOutcome(platform=descriptor, location=location, binary_path=installed)
