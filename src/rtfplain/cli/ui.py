"""Rich terminal UI components for rtfplain."""

from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from dataclasses import dataclass, field
from typing import Optional
from datetime import datetime

from ..batch.results import BatchResult, DocumentResult
from ..converter.tokens import Token, describe

console = Console()


@dataclass
class ConvertStats:
    """Live statistics during a batch conversion."""

    total_files: int = 0
    processed: int = 0
    converted: int = 0
    fallback: int = 0
    errors: int = 0
    current_file: str = ""
    recent_errors: list = field(default_factory=list)


class ConvertUI:
    """
    Rich terminal UI for batch conversion progress.

    Shows a live-updating panel with:
    - Progress bar and percentage
    - Counts (converted, fallback, errors)
    - Recent errors feed
    - Current file being converted

    Usage:
        ui = ConvertUI()
        ui.start(total=100, source_path="/letters")

        for file in files:
            ui.update(converter.convert_file(file))

        ui.complete(batch_result)
    """

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.stats = ConvertStats()
        self.live: Optional[Live] = None
        self.start_time: Optional[datetime] = None
        self.source_path: str = ""

    def start(self, total: int, source_path: str = ""):
        """Start the live display."""
        self.stats = ConvertStats(total_files=total)
        self.start_time = datetime.now()
        self.source_path = source_path

        if self.quiet:
            return

        self.live = Live(
            self._render(),
            console=console,
            refresh_per_second=4,
            transient=True,  # Remove the live display when done
        )
        self.live.start()

    def update(self, result: DocumentResult):
        """Update with a document result."""
        self.stats.processed += 1
        self.stats.current_file = str(result.path)[-60:]

        if result.error:
            self.stats.errors += 1
            self.stats.recent_errors.append({"file": result.path.name, "error": result.error})
            self.stats.recent_errors = self.stats.recent_errors[-3:]
        else:
            self.stats.converted += 1

        if result.used_fallback:
            self.stats.fallback += 1

        if self.live:
            self.live.update(self._render())

    def complete(self, result: BatchResult):
        """Show completion summary."""
        if self.live:
            self.live.stop()

        if not self.quiet:
            console.print(self._render_summary(result))

    def _render(self) -> Panel:
        """Render the live display panel."""
        stats = self.stats

        # Progress bar
        pct = (stats.processed / stats.total_files * 100) if stats.total_files > 0 else 0
        filled = int(pct / 5)
        bar = "█" * filled + "░" * (20 - filled)

        # Elapsed time
        elapsed = ""
        if self.start_time:
            secs = (datetime.now() - self.start_time).total_seconds()
            elapsed = f" ({secs:.0f}s)"

        error_lines = []
        for item in stats.recent_errors:
            error_lines.append(f"  • {item['file'][:35]:<35} → {escape(item['error'][:40])}")

        content = f"""[bold]Converting...[/bold]  [{bar}]  {pct:.0f}%  {stats.processed:,}/{stats.total_files:,}{elapsed}

  [green]Converted[/green]     {stats.converted:>6,}
  [yellow]Fallback[/yellow]      {stats.fallback:>6,}
  [red]Errors[/red]        {stats.errors:>6,}

[bold]Recent Errors[/bold]
{chr(10).join(error_lines) if error_lines else '  [dim](none yet)[/dim]'}

[dim]Current: {stats.current_file}[/dim]"""

        return Panel(
            content,
            title="[blue]rtfplain[/blue]",
            border_style="blue",
            padding=(0, 1),
        )

    def _render_summary(self, result: BatchResult) -> Panel:
        """Render completion summary panel."""
        elapsed = ""
        if result.started_at and result.completed_at:
            secs = (result.completed_at - result.started_at).total_seconds()
            elapsed = f"in {secs:.1f}s"

        error_lines = []
        for doc in result.documents:
            if doc.error:
                error_lines.append(f"  {doc.path.name[:35]:<35} {escape(doc.error)}")

        if result.documents_errored > 0:
            title = "[yellow]⚠ Completed With Errors[/yellow]"
            border_style = "yellow"
            status = f"[bold yellow]⚠ Conversion Complete[/bold yellow] {elapsed}"
        else:
            title = "[green]✓ All Documents Converted[/green]"
            border_style = "green"
            status = f"[bold green]✓ Conversion Complete[/bold green] {elapsed}"

        content = f"""{status}

[bold]Summary[/bold]
  Total documents      {result.total_documents:>6,}
  Converted            {result.documents_converted:>6,}
  Used fallback        {result.documents_with_fallback:>6,}
  Errors               {result.documents_errored:>6,}
  Characters           {result.total_chars:>6,}

[bold]Errors[/bold]
{chr(10).join(error_lines[:10]) if error_lines else '  [dim](none)[/dim]'}"""

        return Panel(
            content,
            title=title,
            border_style=border_style,
            padding=(0, 1),
        )


def render_tokens(tokens: list[Token], limit: Optional[int] = None) -> Table:
    """Build a table of tokens for the `tokens` command."""
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Type")
    table.add_column("Value")

    shown = tokens if limit is None else tokens[:limit]
    for index, token in enumerate(shown):
        table.add_row(str(index), token.type.value, escape(describe(token)))

    return table


def print_error(message: str):
    """Print an error message."""
    console.print(f"[red]Error:[/red] {message}")


def print_warning(message: str):
    """Print a warning message."""
    console.print(f"[yellow]Warning:[/yellow] {message}")


def print_success(message: str):
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_info(message: str):
    """Print an info message."""
    console.print(f"[blue]ℹ[/blue] {message}")
