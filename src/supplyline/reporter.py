"""
Console reporter for load results.

Formats resolved configurations and skipped rows using Rich.
"""

from rich.console import Console
from rich.table import Table

from supplyline.pipeline import LoadResult


class ConsoleReporter:
    """Formats and displays load results to the console."""

    def __init__(self, console: Console) -> None:
        """
        Initialize console reporter.

        Args:
            console: Rich Console instance for output.
        """
        self.console = console

    def print_result(self, result: LoadResult) -> None:
        """
        Print resolved configurations and skipped rows.

        Args:
            result: Load result to display.
        """
        table = Table(
            title=f"Army Configurations (master sheet {result.sheet_id})",
            show_header=True,
        )
        table.add_column("#", justify="right", style="dim")
        table.add_column("Name", style="cyan", no_wrap=True)
        table.add_column("Sheet ID", style="blue")
        table.add_column("Webhook", style="green")
        table.add_column("Cells", justify="center")

        for index, record in enumerate(result.records):
            table.add_row(
                str(index),
                record.name,
                record.sheet_id,
                self._mask_webhook(record.webhook_url),
                f"{record.current_supplies_cell} / {record.daily_consumption_cell}",
            )

        self.console.print(table)
        self._print_skipped(result)
        self._print_summary(result)

    def _mask_webhook(self, url: str) -> str:
        """
        Hide the token part of a webhook URL.

        Args:
            url: Webhook URL.

        Returns:
            URL truncated after its host and first path segments.
        """
        head, sep, _ = url.rpartition("/")
        if not sep or "://" not in head:
            return url
        return f"{head}/…"

    def _print_skipped(self, result: LoadResult) -> None:
        if not result.skipped:
            return

        self.console.print()
        self.console.print("[bold yellow]Skipped rows:[/bold yellow]")
        for skipped in result.skipped:
            label = f" ({skipped.name})" if skipped.name else ""
            self.console.print(
                f"  Row {skipped.row_index}{label}: {skipped.detail}"
            )

    def _print_summary(self, result: LoadResult) -> None:
        self.console.print()
        self.console.print("[bold]Summary:[/bold]")
        self.console.print(f"  [green]Loaded: {len(result.records)}[/green]")
        self.console.print(f"  [yellow]Skipped: {len(result.skipped)}[/yellow]")
