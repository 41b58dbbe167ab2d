"""Configuration management commands."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from pipeline_monitor.exceptions import SettingsError
from pipeline_monitor.settings import CONFIG_FILE, MonitorSettings, load_settings, save_settings

console = Console()


def _config_file(ctx) -> Path:
    path = ctx.obj.get("config_path")
    return Path(path) if path else CONFIG_FILE


@click.group()
def config():
    """Manage configuration settings.

    \b
    Examples:
      # Initialize configuration
      pipemon config init

      # Show current configuration
      pipemon config show
    """
    pass


@config.command()
@click.pass_context
def init(ctx):
    """Initialize configuration file."""
    json_output = ctx.obj.get("json", False)
    config_file = _config_file(ctx)

    if config_file.exists():
        console.print("[yellow]⚠[/yellow] Configuration file already exists")
        if not click.confirm("Overwrite?"):
            ctx.exit(0)

    save_settings(MonitorSettings(), config_file)

    if json_output:
        click.echo(json.dumps({"status": "success", "config_file": str(config_file)}))
    else:
        console.print(f"\n[green]✓[/green] Configuration initialized: {config_file}")
        console.print("\n[dim]Edit this file to customize your settings[/dim]")


@config.command()
@click.pass_context
def show(ctx):
    """Show current configuration."""
    json_output = ctx.obj.get("json", False)
    config_file = _config_file(ctx)

    if not config_file.exists():
        console.print("[yellow]⚠[/yellow] No configuration file found")
        console.print("\n[dim]Run 'pipemon config init' to create one[/dim]")
        ctx.exit(1)

    config_content = config_file.read_text(encoding="utf-8", errors="replace")

    if json_output:
        click.echo(json.dumps({"config_file": str(config_file), "content": config_content}))
    else:
        console.print(f"\n[bold]Configuration:[/bold] {config_file}\n")
        syntax = Syntax(config_content, "yaml", theme="monokai", line_numbers=True)
        console.print(syntax)


@config.command()
@click.pass_context
def validate(ctx):
    """Validate configuration."""
    json_output = ctx.obj.get("json", False)
    config_file = _config_file(ctx)

    if not config_file.exists():
        if json_output:
            click.echo(json.dumps({"valid": False, "error": "Config file not found"}))
        else:
            console.print("[bold red]❌ Error:[/bold red] Configuration file not found")
        ctx.exit(1)

    try:
        settings = load_settings(config_file)
    except SettingsError as e:
        if json_output:
            click.echo(json.dumps({"valid": False, "error": str(e)}))
        else:
            console.print(f"[bold red]❌ Error:[/bold red] {escape(str(e))}")
        ctx.exit(1)

    if json_output:
        click.echo(
            json.dumps(
                {
                    "valid": True,
                    "config_file": str(config_file),
                    "settings": settings.model_dump(mode="json"),
                }
            )
        )
    else:
        console.print("[green]✓[/green] Configuration is valid")
