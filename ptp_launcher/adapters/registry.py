"""
Command registry — the host tool's command table.

Commands are registered by name and dispatched through the registry;
the CLI never instantiates a command directly at call time.
"""

from __future__ import annotations

import logging

from ptp_launcher.adapters.base import CommandContext, HostCommand
from ptp_launcher.core.models.execution import FALLBACK_EXIT_CODE, ExecutionResult

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Central registry and dispatcher for host commands."""

    def __init__(self) -> None:
        self._commands: dict[str, HostCommand] = {}

    def register(self, command: HostCommand) -> None:
        name = command.name
        if name in self._commands:
            logger.warning("Overwriting existing command: %s", name)
        self._commands[name] = command
        logger.debug("Registered command: %s", name)

    def unregister(self, name: str) -> None:
        """Remove a command from the table."""
        self._commands.pop(name, None)

    def get(self, name: str) -> HostCommand | None:
        return self._commands.get(name)

    def list_commands(self) -> list[str]:
        return list(self._commands.keys())

    def describe(self) -> dict[str, dict[str, str]]:
        """Name, description and argument name of every registered command."""
        return {
            name: {
                "name": name,
                "description": command.description,
                "argument": command.argument_name,
                "type": command.__class__.__name__,
            }
            for name, command in self._commands.items()
        }

    def dispatch(self, name: str, context: CommandContext) -> ExecutionResult:
        """Run the named command. Never raises.

        Unknown names and commands that raise anyway both yield the
        fallback exit code.
        """
        command = self._commands.get(name)
        if command is None:
            logger.error("No command registered for '%s'", name)
            return ExecutionResult(exit_code=FALLBACK_EXIT_CODE)

        try:
            return command.execute(context)
        except Exception as e:
            # Contract violation; the host still gets an exit code
            logger.error("Command %s raised during execution: %s", name, e)
            return ExecutionResult(exit_code=FALLBACK_EXIT_CODE)
