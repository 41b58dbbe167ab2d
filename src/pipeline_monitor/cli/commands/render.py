"""Render command - Write a pipeline monitor testbench."""

import json
import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from pipeline_monitor.cli.commands import context_settings, resolve_pipeline
from pipeline_monitor.exceptions import MonitorError
from pipeline_monitor.testbench import generate_testbench

logger = logging.getLogger(__name__)

# stdout is reserved for the generated source
console = Console(stderr=True)


@click.command()
@click.option(
    "-p", "--preset",
    default=None,
    help="Pipeline preset to render (default from settings)",
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False),
    help="Write the monitor to this file instead of stdout",
)
@click.pass_context
def render(ctx, preset: Optional[str], output: Optional[str]):
    """Render a SystemVerilog pipeline monitor.

    \b
    Examples:
      pipemon render
      pipemon render --preset classic_5stage -o monitor.sv
    """
    json_output = ctx.obj.get("json", False)
    quiet = ctx.obj.get("quiet", False)

    try:
        settings = context_settings(ctx)
        pipeline = resolve_pipeline(settings, preset)
        source = generate_testbench(pipeline, settings.template_dir)
    except MonitorError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        raise SystemExit(1)

    if not output:
        click.echo(source)
        return

    output_path = Path(output)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(source + "\n", encoding="utf-8")
    except OSError as e:
        console.print(f"[red]✗[/red] Cannot write {escape(str(output_path))}: {escape(str(e))}")
        raise SystemExit(1)
    logger.info("Wrote %s monitor to %s", pipeline.name, output_path)

    if json_output:
        click.echo(
            json.dumps(
                {
                    "pipeline": pipeline.name,
                    "output": str(output_path),
                    "lines": source.count("\n") + 1,
                }
            )
        )
    elif not quiet:
        console.print(f"[green]✓[/green] Wrote {pipeline.name} monitor to {output_path}")
