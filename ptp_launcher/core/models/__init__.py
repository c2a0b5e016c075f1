"""
Domain models — Pydantic types for provisioning and delegation.

    from ptp_launcher.core.models import AssetDescriptor, ExecutionResult
"""

from ptp_launcher.core.models.asset import (
    Arch,
    AssetDescriptor,
    OsFamily,
    ReleaseLocation,
)
from ptp_launcher.core.models.execution import (
    FALLBACK_EXIT_CODE,
    ExecutionRequest,
    ExecutionResult,
)

__all__ = [
    # asset.py
    "Arch",
    "AssetDescriptor",
    "OsFamily",
    "ReleaseLocation",
    # execution.py
    "ExecutionRequest",
    "ExecutionResult",
    "FALLBACK_EXIT_CODE",
]
