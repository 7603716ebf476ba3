"""Rich output for the non-interactive commands."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from launchbox.tui._utils import sanitize_terminal_text

if TYPE_CHECKING:
    from launchbox.config import LaunchboxConfig
    from launchbox.types import Item


console = Console()


class TUI:
    """Text output for launchbox (non-interactive mode)."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize TUI."""
        self.console = console or Console()

    def show_items(
        self,
        items: Sequence[Item],
        title: str = "Items",
        offsets: Sequence[int] | None = None,
    ) -> None:
        """Display items as a table.

        Args:
            items: Items in display order.
            title: Table title.
            offsets: Match offsets parallel to ``items``; shown if given.
        """
        if not items:
            self.console.print("[yellow]No items[/yellow]")
            return

        table = Table(title=title)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Name", style="cyan")
        table.add_column("Kind")
        if offsets:
            table.add_column("Match", justify="right")
        table.add_column("Command", overflow="fold")

        for index, item in enumerate(items, 1):
            row = [
                str(index),
                escape(sanitize_terminal_text(item.display_name)),
                item.kind.name.lower(),
            ]
            if offsets:
                row.append(str(offsets[index - 1]))
            row.append(escape(sanitize_terminal_text(item.command, max_length=200)))
            table.add_row(*row)

        self.console.print(table)

    def show_config(self, config: LaunchboxConfig) -> None:
        """Display the effective configuration."""
        table = Table(title=f"Configuration: {config.name}")
        table.add_column("Setting", style="cyan")
        table.add_column("Value")
        for key, value in config.model_dump().items():
            table.add_row(key, "-" if value is None else str(value))
        self.console.print(table)

    def show_success(self, message: str) -> None:
        """Show success message."""
        self.console.print(f"[green]\u2713[/green] {escape(message)}")

    def show_error(self, message: str) -> None:
        """Show error message."""
        self.console.print(f"[red]\u2717[/red] {escape(message)}")

    def show_warning(self, message: str) -> None:
        """Show warning message."""
        self.console.print(f"[yellow]![/yellow] {escape(message)}")

    def show_info(self, message: str) -> None:
        """Show info message."""
        self.console.print(f"[blue]i[/blue] {escape(message)}")
