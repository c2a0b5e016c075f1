"""Launcher configuration — the explicit install-root value."""

from ptp_launcher.core.config.settings import (
    BINARY_NAME,
    MANUAL_INSTALL_URL,
    PACKAGE_DIR_NAME,
    RELEASE_BASE_URL,
    USER_AGENT,
    LauncherConfig,
)

__all__ = [
    "BINARY_NAME",
    "LauncherConfig",
    "MANUAL_INSTALL_URL",
    "PACKAGE_DIR_NAME",
    "RELEASE_BASE_URL",
    "USER_AGENT",
]
