#!/usr/bin/env python3
"""
Main CLI entry point for teamdeck
"""

import typer
from rich.table import Table

from teamdeck import __version__, content
from teamdeck.config.settings import get_env_info, validate_all_env_vars
from teamdeck.exceptions import TeamdeckError
from teamdeck.services.clipboard import SystemClipboard
from teamdeck.ui.gui import show
from teamdeck.utils.logging import setup_logging
from teamdeck.utils.output import console, print_json

app = typer.Typer(
    help="HIPAA Dev Team: 10 AI agents, one team.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-error output"),
):
    """
    teamdeck - browse the HIPAA Dev Team agents

    [bold]Examples:[/bold]

    Open the interactive page:
        [cyan]teamdeck show[/cyan]

    List the agents:
        [cyan]teamdeck agents[/cyan]

    Copy the install command:
        [cyan]teamdeck install-command --copy[/cyan]
    """
    if verbose and quiet:
        typer.echo("Error: --verbose and --quiet are mutually exclusive", err=True)
        raise typer.Exit(1)

    if verbose:
        setup_logging("DEBUG")
    elif quiet:
        setup_logging("ERROR")
    else:
        setup_logging()


app.command()(show)


@app.command()
def version():
    """Show teamdeck version"""
    typer.echo(f"teamdeck version {__version__}")


@app.command()
def agents(
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """List the agents on the team."""
    if as_json:
        print_json([agent.to_dict() for agent in content.AGENTS])
        return

    table = Table(title="Meet the Team")
    table.add_column("", width=2)
    table.add_column("Agent", style="bold")
    table.add_column("Model", style="dim")
    table.add_column("Phase")
    table.add_column("Key", style="dim")
    for agent in content.AGENTS:
        table.add_row(
            agent.icon,
            agent.name,
            agent.model,
            f"[{agent.color}]{agent.phase}[/{agent.color}]",
            agent.key,
        )
    console.print(table)


@app.command()
def agent(key: str = typer.Argument(..., help="Agent key, e.g. product-manager")):
    """Show one agent's details."""
    try:
        entry = content.get_agent(key)
    except TeamdeckError as e:
        console.print(f"[red]Error: {e}[/red]")
        console.print(f"[dim]Known keys: {', '.join(content.agent_keys())}[/dim]")
        raise typer.Exit(1) from e

    console.print(f"{entry.icon} [bold]{entry.name}[/bold]  [{entry.color}]{entry.phase}[/{entry.color}]")
    console.print(f"[dim]Model: {entry.model}[/dim]")
    console.print(entry.description)


@app.command()
def commands(
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """List the plugin's slash commands."""
    if as_json:
        print_json([command.to_dict() for command in content.COMMANDS])
        return

    table = Table(title="Slash Commands")
    table.add_column("Command", style="bold cyan")
    table.add_column("Description")
    for command in content.COMMANDS:
        table.add_row(command.name, command.description)
    console.print(table)


@app.command()
def stack():
    """List the pre-configured technology stack."""
    console.print("[bold]Pre-configured Stack[/bold]")
    for tech in content.TECH_STACK:
        console.print(f"  • {tech}")


@app.command()
def env():
    """Show TEAMDECK_* environment variables and whether they are valid."""
    table = Table(title="Environment")
    table.add_column("Variable", style="cyan", no_wrap=True)
    table.add_column("Value")
    table.add_column("Default", style="dim")
    table.add_column("Description")
    for name, info in get_env_info().items():
        if not info["is_set"]:
            value = "[dim]unset[/dim]"
        elif info["valid"]:
            value = str(info["value"])
        else:
            value = f"[red]{info['value']}[/red]"
        table.add_row(name, value, str(info["default"]), info["description"])
    console.print(table)

    errors = validate_all_env_vars()
    for error in errors:
        console.print(f"[red]❌ {error}[/red]")
    if errors:
        raise typer.Exit(1)


@app.command("install-command")
def install_command(
    copy: bool = typer.Option(False, "--copy", "-c", help="Copy the command to the clipboard"),
    url: bool = typer.Option(False, "--url", help="Also print the plugin download URL"),
):
    """Print the install command."""
    typer.echo(content.INSTALL_COMMAND)
    if url:
        typer.echo(content.DOWNLOAD_URL)
    if copy:
        try:
            SystemClipboard().write(content.INSTALL_COMMAND)
        except TeamdeckError as e:
            console.print(f"[yellow]⚠ Could not copy to clipboard: {e}[/yellow]")
            raise typer.Exit(1) from e
        console.print("[green]✓ Copied to clipboard[/green]")


def run():
    app()


if __name__ == "__main__":
    run()
