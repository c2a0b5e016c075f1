"""Host-tool command implementations."""

from ptp_launcher.adapters.host.ptp import PtpHostCommand

__all__ = ["PtpHostCommand"]
