"""
Provision use case — install/update hook behind ``ptp-install``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ptp_launcher.core.config.settings import LauncherConfig
from ptp_launcher.core.errors import LauncherError
from ptp_launcher.core.services.binary.orchestration.provision import (
    ProvisionOutcome,
    provision,
)

logger = logging.getLogger(__name__)


@dataclass
class ProvisionResult:
    """Result of one provisioning run."""

    outcome: ProvisionOutcome | None = None
    error: str | None = None
    error_type: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    def to_dict(self) -> dict:
        data: dict = {"ok": self.ok}
        if self.outcome is not None:
            data.update(self.outcome.to_dict())
        if self.error:
            data["error"] = self.error
            data["error_type"] = self.error_type
        return data


def run_provision(config: LauncherConfig | None = None) -> ProvisionResult:
    """Provision the binary, folding every terminal failure into the result.

    Args:
        config: Install location and release source
            (default: the standalone package layout).
    """
    config = config or LauncherConfig.for_package()
    try:
        outcome = provision(config)
    except LauncherError as e:
        logger.debug("Provisioning failed", exc_info=True)
        return ProvisionResult(error=str(e), error_type=type(e).__name__)
    return ProvisionResult(outcome=outcome)
