"""
L3 Detection — Platform asset resolution.

Pure mapping from (OS family, CPU architecture) to the release artifact
name. No I/O beyond reading ``platform.system()`` / ``platform.machine()``
when the caller does not pass them in.
"""

from __future__ import annotations

import logging
import platform

from ptp_launcher.core.errors import UnsupportedPlatformError
from ptp_launcher.core.models.asset import AssetDescriptor

logger = logging.getLogger(__name__)

# Raw ``platform.machine()`` values → canonical arch token
_ARCH_MAP: dict[str, str] = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
}

_OS_FAMILIES = ("Linux", "Darwin", "Windows")

# (os_family, arch) → artifact name published on the releases page
SUPPORTED_ASSETS: dict[tuple[str, str], str] = {
    ("Linux", "amd64"): "ptp-linux-amd64",
    ("Darwin", "amd64"): "ptp-darwin-amd64",
    ("Darwin", "arm64"): "ptp-darwin-arm64",
}


def normalize_arch(raw_arch: str) -> str:
    """Map architecture synonyms onto ``amd64`` / ``arm64`` / ``Other``."""
    return _ARCH_MAP.get(raw_arch.strip().lower(), "Other")


def normalize_os(raw_os: str) -> str:
    """Map ``platform.system()`` output onto a known OS family."""
    for family in _OS_FAMILIES:
        if raw_os.strip().lower() == family.lower():
            return family
    return "Other"


def detect_platform(
    os_name: str | None = None,
    machine: str | None = None,
) -> AssetDescriptor:
    """Describe the running host (or the given values) as an AssetDescriptor."""
    raw_os = os_name if os_name is not None else platform.system()
    raw_arch = machine if machine is not None else platform.machine()
    return AssetDescriptor(
        os_family=normalize_os(raw_os),
        arch=normalize_arch(raw_arch),
        raw_os=raw_os,
        raw_arch=raw_arch,
    )


def resolve_asset_name(os_family: str, arch: str) -> str | None:
    """Return the artifact name for the pair, or None when unsupported.

    ``arch`` may be a raw synonym (``x86_64``, ``aarch64``); it is
    normalized first, so ``x86_64`` and ``amd64`` resolve identically.
    """
    key = (normalize_os(os_family), normalize_arch(arch))
    return SUPPORTED_ASSETS.get(key)


def require_asset_name(
    descriptor: AssetDescriptor,
    manual_install_url: str = "",
) -> str:
    """Resolve the artifact name or raise UnsupportedPlatformError.

    Unsupported is terminal for provisioning: there is nothing to fetch.
    """
    name = SUPPORTED_ASSETS.get((descriptor.os_family, descriptor.arch))
    if name is None:
        raise UnsupportedPlatformError(
            descriptor.raw_os or descriptor.os_family,
            descriptor.raw_arch or descriptor.arch,
            manual_install_url,
        )
    logger.debug("Resolved asset %s for %s", name, descriptor.label)
    return name
