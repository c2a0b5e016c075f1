"""
L3 Detection — read-only probes of the host and the install path.
"""

from ptp_launcher.core.services.binary.detection.binary_status import (  # noqa: F401
    BinaryStatus,
    binary_info,
    check_binary,
)
from ptp_launcher.core.services.binary.detection.platform import (  # noqa: F401
    SUPPORTED_ASSETS,
    detect_platform,
    normalize_arch,
    normalize_os,
    require_asset_name,
    resolve_asset_name,
)
