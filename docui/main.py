#!/usr/bin/env python3
"""
Main CLI entry point for docui
"""

import logging
import shutil
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from docui import __version__
from docui.config.constants import DOCKER_BINARY_ENV_VAR
from docui.config.ui_config import get_docker_binary, get_layout
from docui.exceptions import DocuiError
from docui.utils.logging import setup_tui_logging
from docui.utils.output import console, err_console

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="docui - keyboard-driven terminal dashboard for images, containers, volumes and networks",
    no_args_is_help=False,
)


def _start(docker_bin: Optional[str], verbose: bool) -> None:
    setup_tui_logging(verbose=verbose)
    binary = docker_bin or get_docker_binary()
    if shutil.which(binary) is None:
        err_console.print(f"[red]Error: container engine binary '{binary}' not found[/red]")
        raise typer.Exit(1)

    # Textual is only needed once we actually start the TUI
    from docui.docker.client import DockerClient
    from docui.ui.app import run_app

    logger.info(f"docui {__version__} starting with {binary}")
    try:
        run_app(DockerClient(binary), list_width_pct=get_layout()["list_width_pct"])
    except KeyboardInterrupt:
        pass
    except DocuiError as e:
        logger.error(f"docui failed to start: {e}", exc_info=True)
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """
    docui - browse and manage container engine resources from the keyboard.

    [bold]Examples:[/bold]

    Start the dashboard:
        [cyan]docui[/cyan]

    Use podman instead of docker:
        [cyan]docui run --docker-bin podman[/cyan]

    List every keybinding:
        [cyan]docui keybindings[/cyan]
    """
    if ctx.invoked_subcommand is None:
        _start(None, False)


@app.command()
def run(
    docker_bin: Optional[str] = typer.Option(
        None,
        "--docker-bin",
        "-b",
        envvar=DOCKER_BINARY_ENV_VAR,
        help="Container engine CLI to drive (docker, podman, ...)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG, including every key"),
):
    """Start the dashboard."""
    _start(docker_bin, verbose)


@app.command()
def version():
    """Show docui version"""
    typer.echo(f"docui version {__version__}")


@app.command()
def keybindings(
    panel: Optional[str] = typer.Option(None, "--panel", "-p", help="Only show one panel's keys"),
    config: Optional[Path] = typer.Option(None, "--config", help="Keybindings file to apply"),
    init: bool = typer.Option(False, "--init", help="Write an example keybindings.yaml"),
):
    """Show the effective keybindings, including user overrides."""
    from docui.ui.dashboard import keybinding_table
    from docui.ui.keybindings.config import get_config_path, save_example_config

    if init:
        path = config or get_config_path()
        if save_example_config(path):
            console.print(f"[green]Created {path}[/green]")
        else:
            console.print(f"[yellow]{path} already exists[/yellow]")
        return

    table = keybinding_table(keybindings_path=config)
    scopes = table.scopes()
    if panel is not None:
        if panel not in scopes:
            err_console.print(f"[red]Unknown panel '{panel}'. Panels: {', '.join(scopes)}[/red]")
            raise typer.Exit(1)
        scopes = [panel]

    output = Table(title="docui keybindings")
    output.add_column("Panel", style="cyan")
    output.add_column("Key", style="bold")
    output.add_column("Action")
    output.add_column("Description", style="dim")
    for scope in scopes:
        for entry in table.entries(scope):
            output.add_row(entry.scope, entry.label, entry.action, entry.description)
    console.print(output)


if __name__ == "__main__":
    app()
