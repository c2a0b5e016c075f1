"""
PTP launcher — console entrypoints.

Usage:
    ptp [args...]              forward everything to the installed binary
    ptp-install                download and install the binary for this host
    ptp-host run [args...]     same as ``ptp``, through the host command table
    ptp-host status
"""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from pathlib import Path

import click

from ptp_launcher import __version__
from ptp_launcher.core.config.settings import PACKAGE_DIR_NAME, LauncherConfig
from ptp_launcher.core.errors import BinaryNotInstalledError
from ptp_launcher.core.observability.logging_config import (
    resolve_level,
    setup_logging_from_env,
)

# Directory the package is installed into (site-packages in a normal install)
DEFAULT_VENDOR_DIR = Path(__file__).resolve().parent.parent


# ── Standalone launcher ─────────────────────────────────────────


def run_launcher(
    argv: Sequence[str] | None = None,
    config: LauncherConfig | None = None,
) -> int:
    """Forward ``argv`` verbatim to the installed binary; return its status.

    No option parsing happens here: ``ptp --help`` is the binary's help.
    """
    from ptp_launcher.core.services.binary.orchestration.delegate import delegate

    argv = list(sys.argv[1:] if argv is None else argv)
    config = config or LauncherConfig.for_package()

    try:
        result = delegate(config, argv)
    except BinaryNotInstalledError as e:
        click.echo(str(e), err=True)
        return 1
    return result.exit_code


def launcher() -> None:
    """``ptp`` console script."""
    setup_logging_from_env()
    sys.exit(run_launcher())


# ── Provisioning entrypoint ─────────────────────────────────────


@click.command("ptp-install")
@click.version_option(version=__version__, prog_name="ptp-install")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def provision(verbose: bool, quiet: bool, debug: bool, as_json: bool) -> None:
    """Download the PTP binary for this platform and install it."""
    from ptp_launcher.core.use_cases.provision import run_provision

    setup_logging_from_env(resolve_level(debug=debug, verbose=verbose, quiet=quiet))

    result = run_provision()

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(result.exit_code)

    outcome = result.outcome
    if outcome is None:
        click.secho(result.error, fg="red", err=True)
        sys.exit(1)

    if not quiet:
        click.secho(
            f"✅ {outcome.location.artifact_name} installed to {outcome.binary_path}",
            fg="green",
        )


# ── Host-tool surface ───────────────────────────────────────────


@click.group("ptp-host")
@click.version_option(version=__version__, prog_name="ptp-host")
@click.option(
    "--vendor-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_VENDOR_DIR,
    show_default=True,
    help=f"Managed package directory containing {PACKAGE_DIR_NAME}/.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.pass_context
def host(ctx: click.Context, vendor_dir: Path, verbose: bool, debug: bool) -> None:
    """Host tool — runs registered plugin commands such as PTP."""
    from ptp_launcher.adapters.host.ptp import PtpHostCommand
    from ptp_launcher.adapters.registry import CommandRegistry

    setup_logging_from_env(resolve_level(debug=debug, verbose=verbose))

    registry = CommandRegistry()
    registry.register(PtpHostCommand())

    ctx.ensure_object(dict)
    ctx.obj.setdefault("registry", registry)
    ctx.obj["vendor_dir"] = vendor_dir


from ptp_launcher.ui.cli.host import commands, run, status  # noqa: E402

host.add_command(run)
host.add_command(status)
host.add_command(commands)


if __name__ == "__main__":
    launcher()
