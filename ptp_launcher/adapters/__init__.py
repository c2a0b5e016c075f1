"""Adapters — commands exposed to a host dependency-manager.

Public re-exports for convenient access.
"""

from ptp_launcher.adapters.base import CommandContext, HostCommand
from ptp_launcher.adapters.host.ptp import PtpHostCommand
from ptp_launcher.adapters.mock import MockHostCommand
from ptp_launcher.adapters.registry import CommandRegistry

__all__ = [
    "CommandContext",
    "CommandRegistry",
    "HostCommand",
    "MockHostCommand",
    "PtpHostCommand",
]
