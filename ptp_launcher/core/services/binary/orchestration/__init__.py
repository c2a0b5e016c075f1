"""
L5 Orchestration — provisioning and delegation entry points.
"""

from ptp_launcher.core.services.binary.orchestration.delegate import (  # noqa: F401
    build_request,
    delegate,
    delegate_streaming,
    require_binary,
)
from ptp_launcher.core.services.binary.orchestration.provision import (  # noqa: F401
    ProvisionOutcome,
    provision,
)
