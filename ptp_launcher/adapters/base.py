"""
Host command base — the contract between a host tool and a plugin command.

A host dependency-manager keeps a table of named commands. Each entry
is a HostCommand: it carries its own name/description/help and turns a
CommandContext into an ExecutionResult.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, Field

from ptp_launcher.core.models.execution import ExecutionResult


class CommandContext(BaseModel):
    """Everything a host command needs for one invocation.

    ``vendor_dir`` is the host's managed package directory; ``tty`` is
    whatever the host reports about terminal support.
    """

    argv: list[str] = Field(default_factory=list)
    vendor_dir: str = "."
    tty: bool = False


class HostCommand(ABC):
    """Abstract base class for commands registered with a host tool.

    Commands never raise: every failure ends up as a non-zero
    ExecutionResult, with the reason written to the error stream.
    """

    #: Name of the variadic argument the host collects for this command
    argument_name: str = "args"

    @property
    @abstractmethod
    def name(self) -> str:
        """Command identifier in the host's command table."""

    @property
    def description(self) -> str:
        """One-line summary shown in the host's command list."""
        return ""

    @property
    def help(self) -> str:
        """Longer help text."""
        return self.description

    @abstractmethod
    def execute(self, context: CommandContext) -> ExecutionResult:
        """Run the command and return its exit status. MUST never raise."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
