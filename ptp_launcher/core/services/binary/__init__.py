"""
Binary provisioning service — package re-exports.

    from ptp_launcher.core.services.binary import provision, delegate

Each symbol lives in its single-responsibility module inside the
appropriate layer (detection → execution → orchestration).
"""

# ── L3: Detection ──
from ptp_launcher.core.services.binary.detection.binary_status import (  # noqa: F401
    binary_info,
    check_binary,
)
from ptp_launcher.core.services.binary.detection.platform import (  # noqa: F401
    detect_platform,
    resolve_asset_name,
)

# ── L4: Execution ──
from ptp_launcher.core.services.binary.execution.download import (  # noqa: F401
    build_release_location,
    fetch_archive,
)
from ptp_launcher.core.services.binary.execution.install import (  # noqa: F401
    install_from_archive,
)
from ptp_launcher.core.services.binary.execution.subprocess_runner import (  # noqa: F401
    build_command_line,
    quote_argument,
)

# ── L5: Orchestration ──
from ptp_launcher.core.services.binary.orchestration.delegate import (  # noqa: F401
    delegate,
    delegate_streaming,
)
from ptp_launcher.core.services.binary.orchestration.provision import (  # noqa: F401
    ProvisionOutcome,
    provision,
)
