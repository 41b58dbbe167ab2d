"""Show command - Inspect a pipeline description."""

import json
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from pipeline_monitor.cli.commands import context_settings, resolve_pipeline
from pipeline_monitor.exceptions import MonitorError
from pipeline_monitor.models import Pipeline
from pipeline_monitor.reports import FALSE_LITERAL

console = Console()


def _endpoint_name(pipeline: Pipeline, index: int) -> str:
    if 0 <= index < len(pipeline.stages):
        return escape(pipeline.stage(index).name)
    return f"[red]?{index}[/red]"


@click.command()
@click.option(
    "-p", "--preset",
    default=None,
    help="Pipeline preset to show (default from settings)",
)
@click.pass_context
def show(ctx, preset: Optional[str]):
    """Show stages, hazards and forwarding paths.

    \b
    Examples:
      pipemon show
      pipemon --json show --preset classic_5stage
    """
    json_output = ctx.obj.get("json", False)

    try:
        pipeline = resolve_pipeline(context_settings(ctx), preset)
    except MonitorError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        raise SystemExit(1)

    if json_output:
        click.echo(json.dumps(pipeline.model_dump(mode="json", by_alias=True), indent=2))
        return

    console.print(Panel(escape(pipeline.summary()), title="Pipeline", border_style="blue"))

    stages = Table(title="Stages")
    stages.add_column("#", justify="right")
    stages.add_column("Name", style="cyan")
    stages.add_column("Description")
    stages.add_column("Stall")
    stages.add_column("Flush")
    for idx, stage in enumerate(pipeline.stages):
        stages.add_row(
            str(idx),
            escape(stage.name),
            escape(stage.description),
            escape(stage.stall) if stage.stall is not None else f"[dim]{FALSE_LITERAL}[/dim]",
            escape(stage.flush) if stage.flush is not None else f"[dim]{FALSE_LITERAL}[/dim]",
        )
    console.print(stages)

    hazards = Table(title="Hazards")
    hazards.add_column("Name", style="yellow")
    hazards.add_column("Description")
    hazards.add_column("Condition")
    for hazard in pipeline.hazards:
        hazards.add_row(
            escape(hazard.name),
            escape(hazard.description),
            escape(hazard.condition),
        )
    console.print(hazards)

    forwards = Table(title="Forwards")
    forwards.add_column("Name", style="green")
    forwards.add_column("Path")
    forwards.add_column("Condition")
    for forward in pipeline.forwards:
        path = (
            f"{_endpoint_name(pipeline, forward.from_stage)} → "
            f"{_endpoint_name(pipeline, forward.to_stage)}"
        )
        forwards.add_row(escape(forward.name), path, escape(forward.condition))
    console.print(forwards)
