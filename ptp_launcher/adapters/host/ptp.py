"""
PTP host command — runs the provisioned binary from inside a host tool.

Same contract as the standalone launcher, except that the binary is
looked up under the host's managed package directory and output is
captured per chunk and re-emitted, unless the host reports a terminal,
in which case the child gets the terminal directly.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable

from ptp_launcher.adapters.base import CommandContext, HostCommand
from ptp_launcher.core.config.settings import LauncherConfig
from ptp_launcher.core.errors import BinaryNotInstalledError
from ptp_launcher.core.models.execution import FALLBACK_EXIT_CODE, ExecutionResult
from ptp_launcher.core.services.binary.execution.subprocess_runner import (
    OutputCallback,
    echo_chunk,
)
from ptp_launcher.core.services.binary.orchestration.delegate import (
    delegate_streaming,
)

logger = logging.getLogger(__name__)


def _write_error_line(message: str) -> None:
    print(message, file=sys.stderr, flush=True)


class PtpHostCommand(HostCommand):
    """``<host> ptp [ptp-args...]``

    Args:
        output: Chunk callback ``(channel, data)``; defaults to echoing
            on the matching parent stream.
        error_line: Writer for the single-line failure message.
        config_factory: Builds the LauncherConfig from the vendor dir.
    """

    argument_name = "ptp-args"

    def __init__(
        self,
        output: OutputCallback = echo_chunk,
        error_line: Callable[[str], None] = _write_error_line,
        config_factory: Callable[[str], LauncherConfig] = LauncherConfig.for_vendor_dir,
    ):
        self._output = output
        self._error_line = error_line
        self._config_factory = config_factory

    @property
    def name(self) -> str:
        return "ptp"

    @property
    def description(self) -> str:
        return "Run PTP (PHP Test Processor) - parallel PHPUnit runner"

    @property
    def help(self) -> str:
        return (
            "Run ptp subcommands, e.g. `ptp-host run list` or "
            "`ptp-host run run --processors 8`. Arguments are passed to ptp unchanged."
        )

    def config_for(self, context: CommandContext) -> LauncherConfig:
        return self._config_factory(context.vendor_dir)

    def execute(self, context: CommandContext) -> ExecutionResult:
        config = self.config_for(context)
        try:
            return delegate_streaming(
                config,
                context.argv,
                tty=context.tty,
                callback=self._output,
            )
        except BinaryNotInstalledError as e:
            self._error_line(str(e))
            return ExecutionResult(exit_code=FALLBACK_EXIT_CODE)
