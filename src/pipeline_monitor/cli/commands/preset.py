"""Preset commands - Built-in pipeline descriptions."""

import json

import click
from rich.console import Console
from rich.table import Table

from pipeline_monitor.presets import PIPELINE_PRESETS

console = Console()


@click.group()
def preset():
    """Browse built-in pipeline presets.

    \b
    Examples:
      pipemon preset list
    """
    pass


@preset.command("list")
@click.pass_context
def preset_list(ctx):
    """List available presets."""
    json_output = ctx.obj.get("json", False)

    if json_output:
        data = [
            {
                "name": key,
                "title": p.name,
                "clock": p.clock.render(),
                "stages": len(p.stages),
                "hazards": len(p.hazards),
                "forwards": len(p.forwards),
            }
            for key, p in PIPELINE_PRESETS.items()
        ]
        click.echo(json.dumps(data, indent=2))
        return

    table = Table(title="Pipeline Presets")
    table.add_column("Preset", style="cyan")
    table.add_column("Title")
    table.add_column("Clock")
    table.add_column("Stages", justify="right")
    table.add_column("Hazards", justify="right")
    table.add_column("Forwards", justify="right")
    for key, p in PIPELINE_PRESETS.items():
        table.add_row(
            key,
            p.name,
            p.clock.render(),
            str(len(p.stages)),
            str(len(p.hazards)),
            str(len(p.forwards)),
        )
    console.print(table)
