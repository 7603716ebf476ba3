"""CLI commands using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from launchbox import __version__
from launchbox.config import ConfigError
from launchbox.context import create_context
from launchbox.discovery import CatalogLoadError
from launchbox.tui import TUI, LaunchboxApp
from launchbox.types import ItemKind

if TYPE_CHECKING:
    from launchbox.context import AppContext

app = typer.Typer(
    name="launchbox",
    help="Keyboard-driven launcher for applications, executables and documents",
    no_args_is_help=True,
)

config_app = typer.Typer(help="Configuration commands")

app.add_typer(config_app, name="config")

console = Console()
tui = TUI()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"launchbox v{__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Route log records through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable debug logging")] = False,
) -> None:
    """Keyboard-driven launcher for applications, executables and documents."""
    setup_logging(verbose)


def _load_context(config_dir: Path | None, _context: AppContext | None) -> AppContext:
    """Build the application context, exiting on configuration errors."""
    if _context is not None:
        return _context
    try:
        return create_context(config_dir=config_dir)
    except ConfigError as e:
        tui.show_error(str(e))
        raise typer.Exit(1) from e


# ============================================================================
# Launcher Commands
# ============================================================================


@app.command("run")
def run(
    config_dir: Annotated[
        Path | None, typer.Option("--config", "-c", help="Configuration directory")
    ] = None,
    _context=None,
) -> None:
    """Open the interactive launcher."""
    ctx = _load_context(config_dir, _context)
    try:
        session = ctx.create_session()
    except CatalogLoadError as e:
        tui.show_error(f"Could not load items: {e}")
        raise typer.Exit(1) from e

    LaunchboxApp(ctx, session).run()


@app.command("search")
def search(
    query: Annotated[str, typer.Argument(help="Text to type into the launcher")],
    limit: Annotated[int, typer.Option("--limit", "-n", help="Maximum results shown")] = 20,
    config_dir: Annotated[
        Path | None, typer.Option("--config", "-c", help="Configuration directory")
    ] = None,
    _context=None,
) -> None:
    """Type QUERY one character at a time and show the matches."""
    ctx = _load_context(config_dir, _context)
    try:
        session = ctx.create_session()
    except CatalogLoadError as e:
        tui.show_error(f"Could not load items: {e}")
        raise typer.Exit(1) from e

    session.start()
    result = None
    for char in query:
        result = session.type_character(char)
        if not result:
            tui.show_error(f"No items match '{session.query + char.lower()}'")
            raise typer.Exit(1)

    items = session.results[:limit]
    offsets = result.offsets[:limit] if result is not None else None
    tui.show_items(items, title=f"Results for '{session.query}'", offsets=offsets)
    if len(session.results) > limit:
        tui.show_info(f"{len(session.results) - limit} more not shown")


@app.command("list")
def list_items(
    kind: Annotated[
        str | None,
        typer.Option("--kind", "-k", help="application, executable or document"),
    ] = None,
    config_dir: Annotated[
        Path | None, typer.Option("--config", "-c", help="Configuration directory")
    ] = None,
    _context=None,
) -> None:
    """List the catalog in launcher order."""
    ctx = _load_context(config_dir, _context)
    try:
        wanted = ItemKind.from_name(kind) if kind else None
    except ValueError as e:
        tui.show_error(str(e))
        raise typer.Exit(1) from e

    try:
        session = ctx.create_session()
    except CatalogLoadError as e:
        tui.show_error(f"Could not load items: {e}")
        raise typer.Exit(1) from e

    items = [item for item in session.catalog.all() if wanted is None or item.kind is wanted]
    tui.show_items(items, title="Catalog")


@app.command("refresh")
def refresh(
    config_dir: Annotated[
        Path | None, typer.Option("--config", "-c", help="Configuration directory")
    ] = None,
    _context=None,
) -> None:
    """Rescan all directories and rewrite the item cache."""
    ctx = _load_context(config_dir, _context)
    try:
        items = ctx.loader.rescan()
    except (CatalogLoadError, OSError) as e:
        tui.show_error(f"Refresh failed: {e}")
        raise typer.Exit(1) from e
    tui.show_success(f"Found {len(items or [])} items")


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show(
    config_dir: Annotated[
        Path | None, typer.Option("--config", "-c", help="Configuration directory")
    ] = None,
    _context=None,
) -> None:
    """Show the effective configuration."""
    ctx = _load_context(config_dir, _context)
    tui.show_config(ctx.config)


@config_app.command("path")
def config_path(
    config_dir: Annotated[
        Path | None, typer.Option("--config", "-c", help="Configuration directory")
    ] = None,
    _context=None,
) -> None:
    """Show where the configuration and item cache live."""
    ctx = _load_context(config_dir, _context)
    manager = ctx.config_manager
    if manager is None:
        tui.show_warning("No configuration manager in use")
        return
    console.print(f"Config: {manager.config_file}")
    console.print(f"Item cache: {manager.cache_file(ctx.config)}")


@config_app.command("init")
def config_init(
    config_dir: Annotated[
        Path | None, typer.Option("--config", "-c", help="Configuration directory")
    ] = None,
    _context=None,
) -> None:
    """Write the current configuration (defaults if none) to disk."""
    ctx = _load_context(config_dir, _context)
    manager = ctx.config_manager
    if manager is None:
        tui.show_warning("No configuration manager in use")
        return
    if manager.config_file.exists():
        tui.show_info(f"Configuration already exists: {manager.config_file}")
        return
    manager.save(ctx.config)
    tui.show_success(f"Wrote {manager.config_file}")


if __name__ == "__main__":
    app()
