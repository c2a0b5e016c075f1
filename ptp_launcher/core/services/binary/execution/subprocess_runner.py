"""
L4 Execution — Child process runner.

The SINGLE PLACE where the installed binary is spawned. Two modes:

    run_inherited   child shares the parent's stdin/stdout/stderr
    run_streaming   stdout/stderr are piped, each chunk goes through a
                    callback tagged "out" or "err"

Both return an ExecutionResult whose exit code is the child's own
status, or 1 when no numeric status is available. There is no timeout.
"""

from __future__ import annotations

import logging
import os
import re
import selectors
import subprocess
import sys
from collections.abc import Callable, Iterable, Sequence

from ptp_launcher.core.errors import ChildExecutionIndeterminateError
from ptp_launcher.core.models.execution import ExecutionRequest, ExecutionResult

logger = logging.getLogger(__name__)

OutputCallback = Callable[[str, bytes], None]

_SAFE_ARG = re.compile(r"[A-Za-z0-9_./:=@-]+")
_READ_SIZE = 64 * 1024


# ── Command-string compatibility shim ───────────────────────────


def quote_argument(arg: str) -> str:
    """POSIX-shell quote one argument.

    Arguments made only of ``[A-Za-z0-9_./:=@-]`` pass through; anything
    else (including the empty string) is single-quoted with embedded
    quotes written as ``'\\''``.
    """
    if arg and _SAFE_ARG.fullmatch(arg):
        return arg
    return "'" + arg.replace("'", "'\\''") + "'"


def build_command_line(executable: str, argv: Iterable[str] = ()) -> str:
    """Join executable and arguments into one shell-safe string."""
    return " ".join(quote_argument(part) for part in [executable, *argv])


# ── Terminal detection ──────────────────────────────────────────


def tty_supported(streams: Sequence | None = None) -> bool:
    """Whether a child can be given the controlling terminal directly."""
    if os.name != "posix":
        return False
    if streams is None:
        streams = (sys.stdin, sys.stdout, sys.stderr)
    try:
        return all(s is not None and s.isatty() for s in streams)
    except (AttributeError, ValueError):
        return False


# ── Runners ─────────────────────────────────────────────────────


def run_inherited(
    request: ExecutionRequest,
    *,
    use_shell: bool = False,
) -> ExecutionResult:
    """Run the binary with the parent's standard streams, no buffering layer.

    Args:
        request: Executable and forwarded argv.
        use_shell: Spawn through ``/bin/sh -c`` with a quoted command line
            instead of an argument vector.
    """
    command_line = build_command_line(str(request.executable_path), request.argv)
    logger.debug("Executing: %s", command_line)

    try:
        if use_shell:
            proc = subprocess.run(command_line, shell=True)  # nosec B602
        else:
            proc = subprocess.run(request.command)  # nosec B603
    except OSError as exc:
        logger.error("ptp: failed to start %s: %s", request.executable_path, exc)
        return ExecutionResult.from_returncode(None)

    return _result(proc.returncode, command_line)


def echo_chunk(channel: str, data: bytes) -> None:
    """Default callback: re-emit a chunk on the matching parent stream."""
    stream = sys.stderr if channel == "err" else sys.stdout
    target = getattr(stream, "buffer", None)
    if target is not None:
        target.write(data)
    else:
        stream.write(data.decode(errors="replace"))
    stream.flush()


def run_streaming(
    request: ExecutionRequest,
    callback: OutputCallback = echo_chunk,
) -> ExecutionResult:
    """Run the binary, passing every stdout/stderr chunk to ``callback``.

    Chunks are delivered as soon as the child writes them; ``channel`` is
    ``"out"`` or ``"err"``. stdin is inherited.
    """
    command_line = build_command_line(str(request.executable_path), request.argv)
    logger.debug("Executing (streaming): %s", command_line)

    try:
        proc = subprocess.Popen(  # nosec B603
            request.command,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as exc:
        logger.error("ptp: failed to start %s: %s", request.executable_path, exc)
        return ExecutionResult.from_returncode(None)

    # Popen.__exit__ closes both pipes and waits, so the child is reaped
    # on every exit path
    with proc:
        try:
            _pump(proc, callback)
        except BaseException:
            logger.debug("Output relay failed, killing pid %d", proc.pid)
            proc.kill()
            raise

    return _result(proc.returncode, command_line)


def _pump(proc: subprocess.Popen, callback: OutputCallback) -> None:
    """Relay both pipes to ``callback`` until the child closes them."""
    with selectors.DefaultSelector() as sel:
        sel.register(proc.stdout, selectors.EVENT_READ, "out")
        sel.register(proc.stderr, selectors.EVENT_READ, "err")
        while sel.get_map():
            for key, _ in sel.select():
                data = os.read(key.fd, _READ_SIZE)
                if not data:
                    sel.unregister(key.fileobj)
                    key.fileobj.close()
                    continue
                callback(key.data, data)


def _result(returncode: int | None, command_line: str) -> ExecutionResult:
    result = ExecutionResult.from_returncode(returncode)
    if result.indeterminate:
        logger.warning(
            "%s, exiting %d",
            ChildExecutionIndeterminateError(command_line, returncode),
            result.exit_code,
        )
    else:
        logger.debug("Child exited with %d", result.exit_code)
    return result
