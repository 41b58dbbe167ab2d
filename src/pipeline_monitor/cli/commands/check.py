"""Check command - Consistency report for a pipeline description."""

import json
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pipeline_monitor.checks import Severity, check_pipeline, has_errors
from pipeline_monitor.cli.commands import context_settings, resolve_pipeline
from pipeline_monitor.exceptions import MonitorError

console = Console()


@click.command()
@click.option(
    "-p", "--preset",
    default=None,
    help="Pipeline preset to check (default from settings)",
)
@click.pass_context
def check(ctx, preset: Optional[str]):
    """Check forward references and entity names.

    Exits with status 1 if any error is found. Warnings (duplicate or
    empty names) never fail the check.

    \b
    Examples:
      pipemon check
      pipemon --json check --preset classic_5stage
    """
    json_output = ctx.obj.get("json", False)

    try:
        pipeline = resolve_pipeline(context_settings(ctx), preset)
    except MonitorError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        raise SystemExit(1)

    issues = check_pipeline(pipeline)

    if json_output:
        click.echo(json.dumps([i.model_dump(mode="json") for i in issues], indent=2))
    elif not issues:
        console.print(f"[green]✓[/green] {escape(pipeline.name)}: no issues")
    else:
        table = Table(title=f"{escape(pipeline.name)} issues")
        table.add_column("Severity")
        table.add_column("Entity", style="cyan")
        table.add_column("Message")
        for issue in issues:
            color = "red" if issue.severity == Severity.ERROR else "yellow"
            table.add_row(
                f"[{color}]{issue.severity.value}[/{color}]",
                escape(issue.entity),
                escape(issue.message),
            )
        console.print(table)

    if has_errors(issues):
        raise SystemExit(1)
