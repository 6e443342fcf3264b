"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output:
colored status lines, a spinner for the sync run and the final summary.
Supports verbosity levels and the --no-color flag.
"""

from typing import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.spinner import Spinner
from rich.live import Live

from src.models.sync_result import SyncResult, SyncStatus


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Logging verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> with handler.spinner("Syncing pages..."):
        ...     result = engine.sync_from_webhook(page_id)
        >>> handler.print_summary(result)
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            force_terminal=not no_color,
            no_color=no_color,
            highlight=False,
        )

    def error(self, message: str) -> None:
        """Display error message in red."""
        self.console.print(f"[red]✗[/red] {message}", style="red")

    def warning(self, message: str) -> None:
        """Display warning message in yellow."""
        self.console.print(f"[yellow]⚠[/yellow] {message}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(message)

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Display spinner while a long operation runs.

        Example:
            >>> with handler.spinner("Syncing pages..."):
            ...     pass
        """
        spinner = Spinner("dots", text=message)
        with Live(spinner, console=self.console, refresh_per_second=10):
            yield

    def print_summary(self, result: SyncResult) -> None:
        """Display the sync result with color coding."""
        self.console.print("\n[bold]Sync Summary:[/bold]")
        self.console.print(f"  Pages synced: {result.pages_synced}")

        if result.status == SyncStatus.SUCCESS:
            self.console.print(
                f"\n[green]Sync completed successfully! Pages synced: {result.pages_synced}[/green]"
            )
        elif result.status == SyncStatus.PARTIAL:
            self.console.print(
                f"\n[yellow]Sync completed with issues. Pages synced: {result.pages_synced}[/yellow]"
            )
        else:
            self.console.print(
                f"\n[red]Sync failed. Pages synced: {result.pages_synced}[/red]"
            )
