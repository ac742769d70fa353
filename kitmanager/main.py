"""
Toolkit manager — CLI entrypoint.

Usage:
    python -m kitmanager.main --help
    python -m kitmanager.main groups --operation update
    python -m kitmanager.main config show
"""

from __future__ import annotations

import json
import locale
import logging
import sys
from pathlib import Path

import click

from kitmanager import __version__
from kitmanager.core.models.operation import Operation
from kitmanager.core.observability.logging_config import configure_from_cli

logger = logging.getLogger(__name__)

_OPERATIONS = [op.value for op in Operation]


@click.group()
@click.version_option(version=__version__, prog_name="kitmgr")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--snapshot",
    "-s",
    "snapshot_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to kits.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    snapshot_path: str | None,
) -> None:
    """Toolkit manager — reconcile installed and available toolkits."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["snapshot_path"] = Path(snapshot_path) if snapshot_path else None

    # ── Logging setup (once, at process start) ──────────────────
    configure_from_cli(debug, verbose, quiet)

    # Display names sort with the user's collation
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.debug("Keeping C collation: %s", e)


def _fail(message: str, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps({"error": message}, indent=2))
    else:
        click.secho(f"❌ {message}", fg="red")
    sys.exit(1)


@cli.command()
@click.option(
    "--operation",
    "-o",
    type=click.Choice(_OPERATIONS),
    default=Operation.UPDATE.value,
    show_default=True,
    help="Session mode.",
)
@click.option("--target", "target_version", default=None, help="Toolkit version to move toward.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def groups(ctx: click.Context, operation: str, target_version: str | None, as_json: bool) -> None:
    """Show grouped component selection for an operation."""
    from kitmanager.core.use_cases.reconcile import reconcile

    result = reconcile(
        Operation(operation),
        snapshot_path=ctx.obj.get("snapshot_path"),
        target_version=target_version,
    )

    if result.error:
        _fail(result.error, as_json)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    if not ctx.obj.get("quiet", False):
        installed = result.installed_version or "(none)"
        target = result.target_version or "(none)"
        click.secho(f"\n🧰 {result.operation}: {installed} → {target}", fg="cyan", bold=True)
        if result.uninstalling:
            click.secho("   The whole toolkit will be removed.", fg="yellow")
        click.echo()

    for group in result.groups:
        click.secho(f"   {group.label}", fg="white", bold=True)
        for item in group.items:
            box = "[x]" if item.checked else "[ ]"
            lock = " 🔒" if item.disabled else ""
            required = " (required)" if item.required else ""
            click.echo(f"     {box} {item.label}{required}{lock}")

    if result.restricted and result.operation is Operation.UPDATE:
        click.echo()
        click.secho("   Needs a package source:", fg="yellow", bold=True)
        for rc in result.restricted:
            click.echo(f"     • {rc.name}")

    click.echo()


@cli.command()
@click.option("--target", "target_version", default=None, help="Toolkit version to move toward.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def removed(ctx: click.Context, target_version: str | None, as_json: bool) -> None:
    """List installed components that the target toolkit drops."""
    from kitmanager.core.use_cases.reconcile import reconcile

    result = reconcile(
        Operation.UPDATE,
        snapshot_path=ctx.obj.get("snapshot_path"),
        target_version=target_version,
    )

    if result.error:
        _fail(result.error, as_json)

    if as_json:
        click.echo(json.dumps(result.to_dict()["removed"], indent=2))
        return

    if not result.removed:
        click.secho("✅ Nothing is dropped by the target toolkit", fg="green")
        return

    click.secho(f"🗑️  Dropped by {result.target_version}:", fg="yellow", bold=True)
    for comp in result.removed:
        version = f" ({comp.version})" if comp.version else ""
        click.echo(f"   • {comp.display_name}{version}")


@cli.command()
@click.option("--target", "target_version", default=None, help="Toolkit version to move toward.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def restricted(ctx: click.Context, target_version: str | None, as_json: bool) -> None:
    """List restricted tools that need a package source."""
    from kitmanager.core.use_cases.reconcile import reconcile

    result = reconcile(
        Operation.UPDATE,
        snapshot_path=ctx.obj.get("snapshot_path"),
        target_version=target_version,
    )

    if result.error:
        _fail(result.error, as_json)

    if as_json:
        click.echo(json.dumps(result.to_dict()["restricted"], indent=2))
        return

    if not result.restricted:
        click.secho("✅ No restricted tools", fg="green")
        return

    click.secho("🔐 Restricted tools:", fg="yellow", bold=True)
    for rc in result.restricted:
        click.echo(f"   • {rc.label}")
        if rc.source:
            click.echo(f"      source:  {rc.source}")
        if rc.default:
            click.echo(f"      default: {rc.default}")


@cli.group()
def config() -> None:
    """Default configuration commands."""


@config.command("show")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_show(ctx: click.Context, as_json: bool) -> None:
    """Show the backend's default configuration."""
    from kitmanager.core.use_cases.reconcile import install_plan

    result = install_plan(snapshot_path=ctx.obj.get("snapshot_path"))

    if result.error:
        _fail(result.error, as_json)

    assert result.config is not None  # set on success
    cfg = result.config

    if as_json:
        click.echo(json.dumps(cfg.model_dump(mode="json"), indent=2))
        return

    click.secho("⚙️  Configuration:", fg="cyan", bold=True)
    click.echo(f"   Install path:   {cfg.path or '(unset)'}")
    click.echo(f"   Add to PATH:    {'yes' if cfg.add_to_path else 'no'}")
    click.echo(f"   Insecure:       {'yes' if cfg.insecure else 'no'}")
    click.echo(f"   Source config:  {'allowed' if cfg.allow_source_config else 'locked'}")
    for key, (value, enforced) in cfg.source_overrides().items():
        marker = " (enforced)" if enforced else ""
        click.echo(f"   {key}: {value}{marker}")


# ── Sub-groups ──────────────────────────────────────────────────

from kitmanager.ui.cli.components import components  # noqa: E402

cli.add_command(components)


def main() -> None:
    """Entry point for the kitmgr console script."""
    cli(obj={})


if __name__ == "__main__":
    main()
