"""
Execution models — the delegation contract.

The delegate receives an ``ExecutionRequest`` and always produces an
``ExecutionResult`` with a concrete integer exit code. An unknown child
status is folded into ``FALLBACK_EXIT_CODE`` here, never passed on.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

FALLBACK_EXIT_CODE = 1


class ExecutionRequest(BaseModel):
    """Binary to spawn and the arguments forwarded to it, verbatim."""

    model_config = ConfigDict(frozen=True)

    executable_path: Path
    argv: tuple[str, ...] = Field(default_factory=tuple)

    @property
    def command(self) -> list[str]:
        return [str(self.executable_path), *self.argv]


class ExecutionResult(BaseModel):
    """Exit status of a delegated run."""

    exit_code: int = FALLBACK_EXIT_CODE
    raw_status: int | None = None   # what the OS reported, if anything

    @property
    def indeterminate(self) -> bool:
        """True when the child's own status could not be used."""
        return self.raw_status is None or self.raw_status < 0

    @classmethod
    def from_returncode(cls, returncode: int | None) -> ExecutionResult:
        """Propagate a numeric status verbatim; fall back to 1 otherwise.

        ``subprocess`` reports death-by-signal as a negative return code,
        which has no shell-visible numeric status of its own.
        """
        if returncode is None or returncode < 0:
            return cls(exit_code=FALLBACK_EXIT_CODE, raw_status=returncode)
        return cls(exit_code=returncode, raw_status=returncode)
