"""
Status use case — what is installed, and would this host get a binary.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ptp_launcher.core.config.settings import LauncherConfig
from ptp_launcher.core.models.asset import AssetDescriptor
from ptp_launcher.core.services.binary.detection.binary_status import binary_info
from ptp_launcher.core.services.binary.detection.platform import (
    SUPPORTED_ASSETS,
    detect_platform,
)


@dataclass
class StatusResult:
    platform: AssetDescriptor
    artifact: str | None
    binary: dict = field(default_factory=dict)

    @property
    def installed(self) -> bool:
        return self.binary.get("status") == "present"

    def to_dict(self) -> dict:
        return {
            "os": self.platform.os_family,
            "arch": self.platform.arch,
            "supported": self.artifact is not None,
            "artifact": self.artifact,
            "binary": self.binary,
        }


def get_status(
    config: LauncherConfig,
    descriptor: AssetDescriptor | None = None,
) -> StatusResult:
    descriptor = descriptor or detect_platform()
    return StatusResult(
        platform=descriptor,
        artifact=SUPPORTED_ASSETS.get((descriptor.os_family, descriptor.arch)),
        binary=binary_info(config.binary_path),
    )
