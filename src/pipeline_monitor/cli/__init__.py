"""Pipeline Monitor CLI.

Command-line interface for rendering pipeline monitor testbenches.
"""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from pipeline_monitor import __version__

# Generated sources go to stdout; everything human-facing goes to stderr
console = Console(stderr=True)


def _configure_logging(verbose: int) -> None:
    logging.basicConfig(
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )
    if verbose >= 2:
        logging.getLogger().setLevel(logging.DEBUG)
    elif verbose == 1:
        logging.getLogger().setLevel(logging.INFO)


@click.group()
@click.version_option(version=__version__, prog_name="pipemon")
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (-v for info, -vv for debug)",
)
@click.option("--json", is_flag=True, help="Output in JSON format")
@click.option("--quiet", is_flag=True, help="Minimal output")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Settings file (default: .pipemon/config.yaml)",
)
@click.pass_context
def cli(ctx, verbose, json, quiet, config_path):
    """Pipeline Monitor - SystemVerilog status monitors for instruction pipelines.

    \b
    Examples:
      pipemon render --preset riscv_rv32i -o monitor.sv
      pipemon show --preset classic_5stage
      pipemon check
      pipemon preset list
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["json"] = json
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = config_path

    _configure_logging(verbose)

    if not quiet and not json and ctx.invoked_subcommand:
        console.print(
            Panel.fit(
                "[bold cyan]Pipeline Monitor[/bold cyan]\n"
                f"Version {__version__}",
                border_style="cyan",
            )
        )


def register_commands() -> None:
    """Attach all subcommands to the ``cli`` group."""
    from pipeline_monitor.cli.commands import check
    from pipeline_monitor.cli.commands import config
    from pipeline_monitor.cli.commands import preset
    from pipeline_monitor.cli.commands import render
    from pipeline_monitor.cli.commands import show

    cli.add_command(render.render)
    cli.add_command(check.check)
    cli.add_command(show.show)
    cli.add_command(preset.preset)
    cli.add_command(config.config)


def main():
    """Entry point for the CLI."""
    register_commands()
    cli(obj={})


if __name__ == "__main__":
    main()
