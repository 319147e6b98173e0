"""Console logging and result summaries using Rich."""

from __future__ import annotations

from datetime import datetime

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from mfademo.models.alignment import AlignmentResult, Interval

console = Console(stderr=True)

PHONE_PREVIEW_ROWS = 10


def log(message: str, *, style: str = "bold") -> None:
    """Log a timestamped message."""
    ts = datetime.now().strftime("%H:%M:%S")
    console.print(f"[dim]\\[{ts}][/dim] {message}", style=style, highlight=False)


def log_step(step: str, message: str) -> None:
    """Log a processing step."""
    ts = datetime.now().strftime("%H:%M:%S")
    console.print(
        f"[dim]\\[{ts}][/dim] [bold cyan]{step}[/bold cyan] {message}",
        highlight=False,
    )


def log_success(message: str) -> None:
    """Log a success message."""
    log(f"[green]✓[/green] {message}", style="")


def log_warning(message: str) -> None:
    """Log a warning message."""
    log(f"[yellow]⚠[/yellow] {message}", style="")


def log_error(message: str) -> None:
    """Log an error message."""
    log(f"[red]✗[/red] {message}", style="")


def show_result_summary(
    result: AlignmentResult, *, phone_rows: int = PHONE_PREVIEW_ROWS
) -> None:
    """Show statistics, word timings and the first few phonemes of a result."""
    stats = Table(show_header=False, box=None, padding=(0, 2))
    stats.add_column(style="bold")
    stats.add_column()
    stats.add_row("Total Duration", f"{result.total_duration:.3f}s")
    stats.add_row("Words", str(result.word_count))
    stats.add_row("Phonemes", str(result.phone_count))
    stats.add_row("Avg Word Duration", f"{result.average_word_duration:.3f}s")

    title = f"[bold]{escape(result.identifier)}[/bold]"
    console.print(Panel(stats, title=title, border_style="green"))
    console.print(_interval_table("Word Alignments", "Word", result.words))

    title = "Phoneme Alignments"
    if result.phone_count > phone_rows:
        title += f" (First {phone_rows})"
    console.print(_interval_table(title, "Phoneme", result.phones[:phone_rows]))
    if result.phone_count > phone_rows:
        console.print(
            f"[dim]... and {result.phone_count - phone_rows} more phonemes[/dim]"
        )


def _interval_table(title: str, label_header: str, intervals: list[Interval]) -> Table:
    table = Table(title=title)
    table.add_column(label_header, style="bold")
    table.add_column("Start Time", justify="right")
    table.add_column("End Time", justify="right")
    table.add_column("Duration", justify="right")
    for interval in intervals:
        table.add_row(
            escape(interval.label),
            f"{interval.start:.3f}s",
            f"{interval.end:.3f}s",
            f"{interval.duration:.3f}s",
        )
    return table
