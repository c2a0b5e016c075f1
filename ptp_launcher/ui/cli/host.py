"""
CLI commands for the host-tool surface (``ptp-host``).

Thin wrappers over the command registry and ``ptp_launcher.core.use_cases``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from ptp_launcher.adapters.base import CommandContext
from ptp_launcher.adapters.registry import CommandRegistry
from ptp_launcher.core.config.settings import LauncherConfig
from ptp_launcher.core.services.binary.execution.subprocess_runner import tty_supported


def _registry(ctx: click.Context) -> CommandRegistry:
    return ctx.obj["registry"]


def _vendor_dir(ctx: click.Context) -> Path:
    return ctx.obj["vendor_dir"]


@click.command(
    "run",
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
        "help_option_names": [],
    },
)
@click.argument("ptp_args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def run(ctx: click.Context, ptp_args: tuple[str, ...]) -> None:
    """Run PTP with the given arguments (all passed through unchanged)."""
    context = CommandContext(
        argv=list(ptp_args),
        vendor_dir=str(_vendor_dir(ctx)),
        tty=tty_supported(),
    )
    result = _registry(ctx).dispatch("ptp", context)
    sys.exit(result.exit_code)


@click.command("status")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def status(ctx: click.Context, as_json: bool) -> None:
    """Show the installed binary and whether this platform is supported."""
    from ptp_launcher.core.use_cases.status import get_status

    config = LauncherConfig.for_vendor_dir(_vendor_dir(ctx))
    result = get_status(config)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    click.secho("📦 PTP binary:", fg="cyan", bold=True)
    click.echo(f"   Platform: {result.platform.label}")
    if result.artifact:
        click.echo(f"   Artifact: {result.artifact}")
    else:
        click.secho("   Artifact: unsupported platform", fg="red")

    binary = result.binary
    color = {"present": "green", "missing": "red"}.get(binary["status"], "yellow")
    click.echo(f"   Path:     {binary['path']}")
    click.echo("   Status:   ", nl=False)
    click.secho(binary["status"], fg=color)
    if not result.installed:
        click.echo(f"   Install with: {config.provision_command}")


@click.command("commands")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def commands(ctx: click.Context, as_json: bool) -> None:
    """List the commands registered with the host."""
    described = _registry(ctx).describe()

    if as_json:
        click.echo(json.dumps(described, indent=2))
        return

    for name, info in described.items():
        click.echo(f"   {name:<10} {info['description']}")
