"""
Project Records API — CLI entrypoint.

Usage:
    projectapi --help
    projectapi serve --port 3000
    projectapi list --json
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from projectapi import __version__
from projectapi.core.observability.logging_config import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="projectapi")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to projectapi.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """Project Records API — CRUD over a JSON file of projects."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # Flags beat log_level from projectapi.yml / PAPI_LOG_LEVEL
    if debug:
        ctx.obj["log_level"] = "DEBUG"
    elif verbose:
        ctx.obj["log_level"] = "INFO"
    elif quiet:
        ctx.obj["log_level"] = "ERROR"
    else:
        ctx.obj["log_level"] = None


def _settings(ctx: click.Context):  # type: ignore[no-untyped-def]
    """Load settings and configure logging from them, or exit 1 on a config error."""
    from projectapi.core.config.loader import ConfigError, load_settings

    try:
        settings = load_settings(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    configure_logging(settings, ctx.obj.get("log_level"))
    return settings


def _service(ctx: click.Context):  # type: ignore[no-untyped-def]
    from projectapi.core.persistence.store import JsonFileStore
    from projectapi.core.services.projects import ProjectService

    settings = _settings(ctx)
    return ProjectService(JsonFileStore(settings.store, indent=settings.indent))


@cli.command()
@click.option("--host", default=None, help="Bind address (default: from config).")
@click.option("--port", "-p", default=None, type=int, help="Port number (default: from config).")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None) -> None:
    """Start the project API server."""
    from projectapi.ui.web.server import create_app, run_server

    settings = _settings(ctx)
    host = host or settings.host
    port = port or settings.port

    app = create_app(settings=settings)
    debug = ctx.obj.get("debug", False)

    click.echo()
    click.secho("⚡ Project Records API", bold=True)
    click.echo(f"   Listening: http://{host}:{port}")
    click.echo(f"   Store:     {settings.store}")
    if not settings.store.is_file():
        click.secho("   Store file missing, run 'projectapi init'", fg="yellow")
    if debug:
        click.secho("   Logging: DEBUG (all output)", fg="yellow")
    click.echo()

    run_server(app, host=host, port=port, debug=debug)


@cli.command()
@click.pass_context
def init(ctx: click.Context) -> None:
    """Create an empty project store if none exists."""
    from projectapi.core.errors import StorageError
    from projectapi.core.persistence.store import JsonFileStore

    settings = _settings(ctx)
    store = JsonFileStore(settings.store, indent=settings.indent)

    try:
        created = store.init()
    except StorageError as e:
        click.secho(f"❌ {e.message}", fg="red")
        sys.exit(1)

    if created:
        click.secho(f"✅ Created {settings.store}", fg="green")
    else:
        click.echo(f"   {settings.store} already exists, left untouched")


@cli.command("list")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_cmd(ctx: click.Context, as_json: bool) -> None:
    """List all projects."""
    from projectapi.core.errors import StorageError

    try:
        projects = _service(ctx).list_projects()
    except StorageError as e:
        click.secho(f"❌ {e.message}", fg="red")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps([p.to_dict() for p in projects], indent=2))
        return

    if not projects:
        click.echo("No projects.")
        return

    click.secho(f"\n📋 Projects: {len(projects)}", fg="cyan", bold=True)
    for p in projects:
        status_color = "green" if p.status == "active" else "white"
        click.echo(f"   {p.id:>4}  {p.name}  ", nl=False)
        click.secho(f"[{p.status or '-'}]", fg=status_color, nl=False)
        click.echo(f"  since {p.start_date or '-'}")
    click.echo()


@cli.command()
@click.argument("project_id")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def show(ctx: click.Context, project_id: str, as_json: bool) -> None:
    """Show one project by id."""
    from projectapi.core.errors import ProjectError

    try:
        project = _service(ctx).get_project(project_id)
    except ProjectError as e:
        if as_json:
            click.echo(json.dumps({"error": e.message}, indent=2))
        else:
            click.secho(f"❌ {e.message}", fg="red")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(project.to_dict(), indent=2))
        return

    click.secho(f"\n📋 {project.name}", fg="cyan", bold=True)
    click.echo(f"   {project.description}")
    click.echo(f"   id:        {project.id}")
    click.echo(f"   status:    {project.status or '-'}")
    click.echo(f"   startDate: {project.start_date or '-'}")
    click.echo()


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def check(ctx: click.Context, as_json: bool) -> None:
    """Validate configuration and verify the store loads."""
    from projectapi.core.errors import StorageError
    from projectapi.core.persistence.store import JsonFileStore

    settings = _settings(ctx)
    result: dict = {
        "config": str(settings.config_path) if settings.config_path else None,
        "store": str(settings.store),
        "host": settings.host,
        "port": settings.port,
    }

    try:
        projects = JsonFileStore(settings.store, indent=settings.indent).load_all()
        result["valid"] = True
        result["count"] = len(projects)
    except StorageError as e:
        result["valid"] = False
        result["error"] = e.message

    if as_json:
        click.echo(json.dumps(result, indent=2))
        sys.exit(0 if result["valid"] else 1)

    click.echo(f"   Config: {result['config'] or '(defaults)'}")
    click.echo(f"   Store:  {result['store']}")
    click.echo(f"   Listen: {settings.host}:{settings.port}")
    if result["valid"]:
        click.secho(f"✅ Store is valid ({result['count']} projects)", fg="green", bold=True)
    else:
        click.secho(f"❌ {result['error']}", fg="red", bold=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
