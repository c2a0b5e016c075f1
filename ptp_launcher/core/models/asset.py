"""
Asset models — which release artifact fits this machine, and where it lives.

Both are computed fresh on every provisioning run and never persisted.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

OsFamily = Literal["Linux", "Darwin", "Windows", "Other"]
Arch = Literal["amd64", "arm64", "Other"]


class AssetDescriptor(BaseModel):
    """Normalized (OS family, architecture) pair of the running host."""

    model_config = ConfigDict(frozen=True)

    os_family: OsFamily
    arch: Arch

    # Raw values as reported by the platform, kept for error messages
    raw_os: str = ""
    raw_arch: str = ""

    @property
    def label(self) -> str:
        return f"{self.raw_os or self.os_family} {self.raw_arch or self.arch}"


class ReleaseLocation(BaseModel):
    """Artifact name plus the deterministic URL it is downloaded from."""

    model_config = ConfigDict(frozen=True)

    artifact_name: str
    download_url: str

    @property
    def archive_name(self) -> str:
        return f"{self.artifact_name}.tar.gz"
