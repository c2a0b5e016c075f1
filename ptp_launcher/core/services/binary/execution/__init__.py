"""
L4 Execution — functions that WRITE: network download, filesystem
install, child process spawn.
"""

from ptp_launcher.core.services.binary.execution.download import (  # noqa: F401
    build_release_location,
    downloaded_archive,
    fetch_archive,
)
from ptp_launcher.core.services.binary.execution.install import (  # noqa: F401
    extract_archive,
    install_from_archive,
    locate_artifact,
    replace_binary,
)
from ptp_launcher.core.services.binary.execution.subprocess_runner import (  # noqa: F401
    build_command_line,
    echo_chunk,
    quote_argument,
    run_inherited,
    run_streaming,
    tty_supported,
)
