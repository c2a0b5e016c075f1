"""
Mock host command — test double for registry and CLI dispatch.

Records every context it receives and returns a configurable exit code
without spawning anything.
"""

from __future__ import annotations

from ptp_launcher.adapters.base import CommandContext, HostCommand
from ptp_launcher.core.models.execution import ExecutionResult


class MockHostCommand(HostCommand):
    """Universal mock command for testing."""

    def __init__(
        self,
        command_name: str = "mock",
        exit_code: int = 0,
        description: str = "Mock command",
    ):
        self._name = command_name
        self._exit_code = exit_code
        self._description = description
        self._call_log: list[CommandContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def call_log(self) -> list[CommandContext]:
        """All contexts this mock has received."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    def set_exit_code(self, exit_code: int) -> None:
        self._exit_code = exit_code

    def execute(self, context: CommandContext) -> ExecutionResult:
        self._call_log.append(context)
        return ExecutionResult.from_returncode(self._exit_code)

    def reset(self) -> None:
        """Clear the call log."""
        self._call_log.clear()
