"""
CLI commands for CI plugins.

Thin wrappers over ``pkgci.core.services.ci_plugins`` and the plan use
case. Nothing here renders templates; views are printed for inspection
or handed on as JSON.
"""

from __future__ import annotations

import json
import sys

import click
import yaml

from pkgci.core.config.loader import ConfigError, load_template
from pkgci.core.models.template import Template


def _load(ctx: click.Context) -> Template:
    """Load the template from --config or auto-detection, exiting on error."""
    try:
        return load_template(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


@click.group()
def ci() -> None:
    """CI plugins — inspect views, badges and the render plan."""


@ci.command("plugins")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def plugins(ctx: click.Context, as_json: bool) -> None:
    """List the template's plugins and how they are classified."""
    from pkgci.core.services import ci_plugins

    template = _load(ctx)
    rows = [
        {
            "kind": p.kind,
            "is_ci": ci_plugins.is_ci(p),
            "needs_username": ci_plugins.needs_username(p),
            "destination": ci_plugins.destination(p),
        }
        for p in template.plugins
    ]

    if as_json:
        click.echo(json.dumps(rows, indent=2))
        return

    if not rows:
        click.secho("No plugins configured.", fg="yellow")
        return

    for row in rows:
        icon = "⚙️ " if row["is_ci"] else "🧩"
        dest = f"  → {row['destination']}" if row["destination"] else ""
        click.echo(f"   {icon} {row['kind']:<12}{dest}")


@ci.command("view")
@click.argument("pkg")
@click.argument("kind")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def view(ctx: click.Context, pkg: str, kind: str, as_json: bool) -> None:
    """Print the template view for one plugin KIND of package PKG."""
    from pkgci.core.models.plugin import PLUGIN_KINDS
    from pkgci.core.services import ci_plugins

    if kind not in PLUGIN_KINDS:
        click.secho(
            f"❌ Unknown plugin kind '{kind}'. Known: {', '.join(sorted(PLUGIN_KINDS))}",
            fg="red",
        )
        sys.exit(1)

    template = _load(ctx)
    plugin = template.plugin(kind)
    if plugin is None:
        click.secho(f"❌ No '{kind}' plugin in template", fg="red")
        sys.exit(1)

    result = ci_plugins.view(plugin, template, pkg)

    if as_json:
        click.echo(json.dumps(result, indent=2))
        return

    click.echo(yaml.safe_dump(result, sort_keys=False, default_flow_style=False), nl=False)


@ci.command("plan")
@click.argument("pkg")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def plan(ctx: click.Context, pkg: str, as_json: bool) -> None:
    """Show which files would be rendered for package PKG."""
    from pkgci.core.use_cases.plan import build_plan

    template = _load(ctx)
    result = build_plan(template, pkg)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    if not result.files:
        click.secho("Nothing to render.", fg="yellow")
        return

    click.secho(f"📋 {pkg}", fg="cyan", bold=True)
    for f in result.files:
        click.echo(f"   📄 {f.destination:<18} ← {f.source}")

    if result.gitignore:
        click.echo(f"\n   .gitignore: {', '.join(result.gitignore)}")
    click.echo()


@ci.command("badges")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def badges(ctx: click.Context, as_json: bool) -> None:
    """Print README badges, CI badges first."""
    from pkgci.core.use_cases.plan import collect_badges

    template = _load(ctx)
    result = collect_badges(template)

    if as_json:
        click.echo(json.dumps([b.model_dump() for b in result], indent=2))
        return

    for badge in result:
        click.echo(badge.markdown())
