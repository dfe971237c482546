"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output:
status messages, the collection listing and the import summary. Log records
go through the ``logging`` configuration in main.py instead.
"""

from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..folder_mapper.models import ImportResult
from ..outline_client.models import Collection


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbose: Whether per-file progress lines are shown
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbose=True, no_color=False)
        >>> handler.success("Import completed successfully")
    """

    def __init__(self, verbose: bool = False, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbose: Show info and per-file progress messages
            no_color: Disable color output if True
        """
        self.verbose = verbose
        self.console = Console(
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        """Display success message in green."""
        self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        """Display error message in red."""
        self.console.print(f"[red]✗[/red] {escape(message)}", style="red")

    def warning(self, message: str) -> None:
        """Display warning message in yellow."""
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only when verbose)."""
        if self.verbose:
            self.console.print(message)

    def print_progress(self, index: int, path: str) -> None:
        """Display a per-file progress line (only when verbose)."""
        if self.verbose:
            self.console.print(f"[dim][{index}][/dim] {escape(path)}")

    def print_collections(self, collections: Sequence[Collection]) -> None:
        """Display collections as a table.

        Args:
            collections: Collections in the order Outline returned them
        """
        if not collections:
            self.console.print("[yellow]No collections found[/yellow]")
            return

        table = Table(title="Collections")
        table.add_column("ID", no_wrap=True)
        table.add_column("Name")
        table.add_column("Description")
        for collection in collections:
            table.add_row(
                escape(collection.id),
                escape(collection.name),
                escape(collection.description),
            )
        self.console.print(table)

    def print_import_summary(self, result: ImportResult) -> None:
        """Display import summary with color coding.

        Args:
            result: Outcome of the import run
        """
        self.console.print("\n[bold]Import Summary:[/bold]")
        self.console.print(f"  [green]↑[/green] Imported: {result.succeeded} file(s)")

        if result.folders_created > 0:
            self.console.print(f"  [blue]+[/blue] Folders created: {result.folders_created}")

        if result.folder_failures:
            self.console.print(
                f"  [yellow]⚠[/yellow] Folder errors: {len(result.folder_failures)} "
                f"(files imported without a parent)"
            )
            for failure in result.folder_failures:
                self.console.print(f"      {escape(failure.path)}: {escape(failure.message)}")

        if result.import_failures:
            self.console.print(f"  [red]✗[/red] Failed: {result.failed_count} file(s)")
            for failure in result.import_failures:
                self.console.print(f"      {escape(failure.path)}: {escape(failure.message)}")

        if result.succeeded == 0 and not result.failures:
            self.console.print("\n[yellow]No Markdown files found[/yellow]")
        elif result.failures:
            self.console.print()
            self.warning("Import completed with errors")
        else:
            self.console.print()
            self.success("Import completed successfully")
