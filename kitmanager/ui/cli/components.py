"""
CLI commands for the installer component list.

Thin wrappers over ``kitmanager.core.use_cases.reconcile``.
"""

from __future__ import annotations

import json
import sys

import click


@click.group()
def components() -> None:
    """Components — installer view of the component list."""


@components.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def install(ctx: click.Context, as_json: bool) -> None:
    """Show default selection for a fresh installation."""
    from kitmanager.core.use_cases.reconcile import install_plan

    result = install_plan(snapshot_path=ctx.obj.get("snapshot_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    if not result.groups:
        click.secho("⚠️  Backend reported no components", fg="yellow")
        return

    click.secho("📦 Components:", fg="cyan", bold=True)
    for group in result.groups:
        click.secho(f"   {group.label}", fg="white", bold=True)
        for item in group.items:
            box = "[x]" if item.checked else "[ ]"
            lock = " 🔒" if item.disabled else ""
            click.echo(f"     {box} {item.label}{lock}")
    click.echo()
