"""The ``bestinvestments replay`` command.

Replays a JSON command script against a fresh in-memory workspace, then
reports every project with its consultations and every package with its
balance.
"""

import json
import logging
from dataclasses import asdict
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from bestinvestments.bootstrap import bootstrap
from bestinvestments.config import InvalidIdGeneratorError
from bestinvestments.domain.errors import DomainError
from bestinvestments.service_layer.errors import ServiceError
from bestinvestments.service_layer.views import (
    PackageView,
    ProjectView,
    package_views,
    project_views,
)

from .helpers import ScriptError, error, load_commands, success

logger = logging.getLogger(__name__)


@click.command()
@click.argument(
    "script", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    show_default=True,
    help="Render the report as rich tables or as JSON on stdout.",
)
@click.pass_context
def replay(ctx: click.Context, script: Path, output_format: str) -> None:
    """Replay the commands in SCRIPT and report the resulting state."""

    try:
        commands = load_commands(script)
        workspace = bootstrap()
    except (ScriptError, InvalidIdGeneratorError) as e:
        error(str(e))
        ctx.exit(1)

    for position, cmd in enumerate(commands, start=1):
        try:
            workspace.handle(cmd)
        except (DomainError, ServiceError, ValueError) as e:
            error(f"Command {position} ({type(cmd).__name__}) failed: {e}")
            ctx.exit(1)

    logger.info("Replayed %d command(s) from %s", len(commands), script)

    projects = project_views(workspace.projects)
    packages = package_views(workspace.packages)

    if output_format.lower() == "json":
        report = {
            "projects": [asdict(view) for view in projects],
            "packages": [asdict(view) for view in packages],
        }
        click.echo(json.dumps(report, indent=2, default=str))
    else:
        console = Console()
        for project in projects:
            console.print(_project_table(project))
        if packages:
            console.print(_package_table(packages))

    success(f"Replayed {len(commands)} command(s).")


def _project_table(project: ProjectView) -> Table:
    table = Table(
        title=f"{project.project_reference}: {project.name} ({project.status})"
    )
    table.add_column("Consultation", no_wrap=True)
    table.add_column("Specialist", no_wrap=True)
    table.add_column("Created", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    for consultation in project.consultations:
        table.add_row(
            consultation.consultation_id,
            consultation.specialist_id,
            consultation.created_at.isoformat(),
            consultation.status,
        )
    return table


def _package_table(packages: list[PackageView]) -> Table:
    table = Table(title="Packages")
    table.add_column("Package", no_wrap=True)
    table.add_column("Client", no_wrap=True)
    table.add_column("Runs", no_wrap=True)
    table.add_column("Booked (min)", justify="right")
    table.add_column("Remaining (min)", justify="right")
    for package in packages:
        table.add_row(
            package.package_reference,
            package.client_id or "",
            f"{package.start_date} to {package.end_date}",
            str(package.booked_minutes),
            str(package.remaining_minutes),
        )
    return table
