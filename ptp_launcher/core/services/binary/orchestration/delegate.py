"""
L5 Orchestration — Delegation.

Locate the installed binary, refuse to spawn anything if it is missing
or not executable, otherwise forward argv and return the child's status.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from ptp_launcher.core.config.settings import LauncherConfig
from ptp_launcher.core.errors import BinaryNotInstalledError
from ptp_launcher.core.models.execution import ExecutionRequest, ExecutionResult
from ptp_launcher.core.services.binary.detection.binary_status import check_binary
from ptp_launcher.core.services.binary.execution.subprocess_runner import (
    OutputCallback,
    echo_chunk,
    run_inherited,
    run_streaming,
)

logger = logging.getLogger(__name__)


def require_binary(config: LauncherConfig) -> Path:
    """Return the installed binary path or raise BinaryNotInstalledError."""
    path = config.binary_path
    status = check_binary(path)
    if status != "present":
        raise BinaryNotInstalledError(path, status, config.provision_command)
    return path


def build_request(config: LauncherConfig, argv: Sequence[str]) -> ExecutionRequest:
    return ExecutionRequest(executable_path=require_binary(config), argv=tuple(argv))


def delegate(
    config: LauncherConfig,
    argv: Sequence[str],
    *,
    use_shell: bool = False,
) -> ExecutionResult:
    """Standalone delegation: the child inherits the standard streams.

    Raises:
        BinaryNotInstalledError: Before anything is spawned.
    """
    request = build_request(config, argv)
    return run_inherited(request, use_shell=use_shell)


def delegate_streaming(
    config: LauncherConfig,
    argv: Sequence[str],
    *,
    tty: bool = False,
    callback: OutputCallback = echo_chunk,
) -> ExecutionResult:
    """Host-plugin delegation.

    With ``tty`` the child gets the terminal directly; otherwise output is
    captured chunk by chunk and handed to ``callback``.
    """
    request = build_request(config, argv)
    if tty:
        logger.debug("Terminal available, running with inherited streams")
        return run_inherited(request)
    return run_streaming(request, callback)
