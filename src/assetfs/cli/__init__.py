"""
CLI for assetfs.

Provides command-line access to directory scanning, classification,
nativization, relative paths and include resolution.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from assetfs.core import path_utils
from assetfs.core.diagnostics import CollectingDiagnosticSink
from assetfs.core.shell import open_directory_in_system_browser
from assetfs.services import ServicesContainer, create_services

# Initialize Rich Console
console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="assetfs",
    help="Asset path utilities - scan, classify and resolve includes",
    add_completion=False,
)

# Diagnostics beyond this count are summarized
_MAX_DIAGNOSTICS_SHOWN = 10


def _configure_logging(level: str, fmt: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format=fmt,
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


def _services(ctx: typer.Context) -> tuple[ServicesContainer, CollectingDiagnosticSink]:
    """Build services for a command, exiting cleanly on configuration errors."""
    config_path: Optional[Path] = ctx.obj.get("config_path") if ctx.obj else None
    verbose: bool = ctx.obj.get("verbose", False) if ctx.obj else False
    sink = CollectingDiagnosticSink()

    try:
        services = create_services(config_path=config_path, diagnostics=sink)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    level = "DEBUG" if verbose else services.config.logging.level
    try:
        _configure_logging(level, services.config.logging.format)
    except ValueError as e:
        console.print(f"[bold red]Error:[/bold red] Invalid logging level: {e}")
        raise typer.Exit(1)

    return services, sink


def _print_diagnostics(sink: CollectingDiagnosticSink) -> None:
    if not len(sink):
        return
    diagnostics = sink.diagnostics
    console.print(f"\n[yellow]{len(diagnostics)} warning(s):[/yellow]")
    for diagnostic in diagnostics[:_MAX_DIAGNOSTICS_SHOWN]:
        console.print(f"  - {diagnostic}", markup=False, highlight=False, style="yellow")
    if len(diagnostics) > _MAX_DIAGNOSTICS_SHOWN:
        console.print(f"  ... and {len(diagnostics) - _MAX_DIAGNOSTICS_SHOWN} more", style="yellow")


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Configuration file (.yaml, .yml or .json)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Asset path utilities."""
    load_dotenv()
    ctx.obj = {"config_path": config, "verbose": verbose}


@app.command()
def scan(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Directory to list"),
    dirs: bool = typer.Option(False, "--dirs", "-d", help="List subdirectories instead of files"),
    supported: bool = typer.Option(
        False, "--supported", "-s", help="Only supported images, scripts and models"
    ),
):
    """List the immediate contents of a directory."""
    services, sink = _services(ctx)

    if not path_utils.is_directory(path, sink):
        console.print(f"[bold red]Error:[/bold red] Path '{path}' is not a directory")
        raise typer.Exit(1)

    if dirs:
        entries = services.scanner.list_directories(path)
    elif supported:
        entries = services.scanner.list_supported_assets(path)
    else:
        entries = services.scanner.list_files(path)

    if not entries:
        console.print("[yellow]No entries found.[/yellow]")
        _print_diagnostics(sink)
        return

    table = Table(title=f"{path}", title_justify="left")
    table.add_column("Path", overflow="fold")
    if not dirs:
        table.add_column("Category", style="cyan")

    classifier = services.classifier
    for entry in entries:
        if dirs:
            table.add_row(entry)
            continue
        category = classifier.categorize(entry)
        native = classifier.native_category_of(entry)
        label = category.value if category else (f"engine {native.value}" if native else "-")
        table.add_row(entry, label)

    console.print(table)
    console.print(f"\n[bold]{len(entries)}[/bold] entries")
    _print_diagnostics(sink)


@app.command()
def classify(
    ctx: typer.Context,
    paths: list[str] = typer.Argument(..., help="Paths to classify"),
):
    """Show the supported and engine-native category of each path."""
    services, sink = _services(ctx)

    table = Table()
    table.add_column("Path", overflow="fold")
    table.add_column("Supported", style="cyan")
    table.add_column("Engine", style="green")
    table.add_column("Nativized", overflow="fold")

    for path in paths:
        category = services.classifier.categorize(path)
        native = services.classifier.native_category_of(path)
        nativized = services.resolver.nativize(path) if category else path
        table.add_row(
            path,
            category.value if category else "-",
            native.value if native else "-",
            nativized,
        )

    console.print(table)
    _print_diagnostics(sink)


@app.command()
def nativize(
    ctx: typer.Context,
    paths: list[str] = typer.Argument(..., help="Source asset paths"),
):
    """Print the engine-native path of each source asset."""
    services, sink = _services(ctx)
    for path in paths:
        console.print(services.resolver.nativize(path), markup=False, highlight=False)
    _print_diagnostics(sink)


@app.command()
def relpath(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Path to express relatively"),
    base: Optional[str] = typer.Option(
        None, "--base", "-b", help="Reference directory (default: working directory)"
    ),
):
    """Print a path relative to a base directory."""
    services, sink = _services(ctx)
    console.print(services.resolver.relative_path(path, base), markup=False, highlight=False)
    _print_diagnostics(sink)


@app.command()
def includes(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="File whose includes to resolve"),
):
    """Resolve the direct and nested includes of a file."""
    services, sink = _services(ctx)

    with console.status(f"[bold blue]Resolving includes of[/bold blue] {file}..."):
        dependencies = services.include_resolver.resolve_includes(file)

    if not dependencies:
        console.print("[yellow]No includes found.[/yellow]")
        _print_diagnostics(sink)
        return

    console.print(f"Found [bold]{len(dependencies)}[/bold] dependencies:\n")
    for i, dependency in enumerate(dependencies, 1):
        console.print(f"{i:>4}. {dependency}", markup=False, highlight=False)
    _print_diagnostics(sink)


@app.command("open")
def open_directory(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Directory to open"),
):
    """Open a directory in the system file browser."""
    _, sink = _services(ctx)

    if not path_utils.is_directory(path, sink):
        console.print(f"[bold red]Error:[/bold red] Path '{path}' is not a directory")
        raise typer.Exit(1)

    open_directory_in_system_browser(path, sink)
    _print_diagnostics(sink)


if __name__ == "__main__":
    app()
