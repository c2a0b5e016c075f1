"""
Launcher settings — where the binary lives and where it comes from.

One ``LauncherConfig`` is built per process and passed explicitly to
the resolver, fetcher, installer and delegate. Nothing reads a global
install path, so tests point ``install_root`` at a tmp directory.

Two layouts resolve to the same physical file in a normal install:

    standalone:  <site-packages>/ptp_launcher/bin/ptp-binary
    plugin:      <vendor_dir>/ptp_launcher/bin/ptp-binary
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

# ── Release source ──────────────────────────────────────────────

RELEASE_PROJECT = "giorgi-leladze/php-test-processor"
RELEASE_BASE_URL = f"https://github.com/{RELEASE_PROJECT}/releases/latest/download"
MANUAL_INSTALL_URL = f"https://github.com/{RELEASE_PROJECT}/releases"
USER_AGENT = "ptp-pip-installer/1.0"

# ── Install layout ──────────────────────────────────────────────

PACKAGE_DIR_NAME = "ptp_launcher"
BIN_DIR_NAME = "bin"
BINARY_NAME = "ptp-binary"

# Command shown to users when the binary is missing
PROVISION_COMMAND = "ptp-install"


class LauncherConfig(BaseModel):
    """Explicit configuration threaded through every component."""

    model_config = ConfigDict(frozen=True)

    install_root: Path
    binary_name: str = BINARY_NAME
    release_base_url: str = RELEASE_BASE_URL
    manual_install_url: str = MANUAL_INSTALL_URL
    user_agent: str = USER_AGENT
    provision_command: str = PROVISION_COMMAND

    @property
    def binary_path(self) -> Path:
        """Fixed location of the installed executable."""
        return self.install_root / self.binary_name

    @classmethod
    def for_package(cls, **overrides) -> LauncherConfig:
        """Standalone form: ``bin/`` next to the launcher package itself."""
        package_dir = Path(__file__).resolve().parent.parent.parent
        return cls(install_root=package_dir / BIN_DIR_NAME, **overrides)

    @classmethod
    def for_vendor_dir(cls, vendor_dir: Path | str, **overrides) -> LauncherConfig:
        """Plugin form: resolved under the host's managed package directory."""
        return cls(
            install_root=Path(vendor_dir) / PACKAGE_DIR_NAME / BIN_DIR_NAME,
            **overrides,
        )
