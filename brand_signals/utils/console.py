"""
Rich console utilities for dual-mode CLI output.

Provides readable terminal output for humans and structured JSON for agents.
All output functions automatically adapt based on the global output_mode setting.

This module provides:
- OutputMode: Class to manage output format (text/json/quiet)
- Context managers: spinner(), create_progress_bar()
- Output functions: success(), error(), warning(), info()
- Display functions: print_banner(), print_analysis(), print_summary_table(),
  print_final_summary()

Human Mode (--format text):
    - Rich spinners, progress bars, colored tables
    - Panels for the brand analysis and batch summary

Agent Mode (--format json):
    - Structured JSON output to stdout
    - No ANSI codes or spinners

Examples:
    >>> from brand_signals.utils.console import output_mode, spinner, success
    >>> output_mode.format = "text"  # Human mode
    >>> with spinner("Analyzing..."):
    ...     result = analyzer.analyze(item)
    >>> success("Analysis complete")

    >>> output_mode.format = "json"  # Agent mode
    >>> success("Analysis complete")  # Buffers to JSON
    >>> output_mode.flush_json()   # Outputs JSON to stdout
"""

from __future__ import annotations

import json
import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
)
from rich.table import Table

from brand_signals.report.summary import RANK_BUCKETS

if TYPE_CHECKING:
    from brand_signals.extractor.models import AnalysisResult
    from brand_signals.report.summary import AnalysisSummary


class OutputMode:
    """
    Output mode configuration for dual-mode CLI.

    Attributes:
        format: Output format - "text" (human) or "json" (agent)
        quiet: If True, suppress non-essential output
        _json_buffer: Internal buffer for JSON output in agent mode

    Examples:
        >>> mode = OutputMode()
        >>> mode.is_human()
        True
        >>> mode.format = "json"
        >>> mode.is_agent()
        True
    """

    def __init__(self, format_type: str = "text", quiet: bool = False):
        """
        Initialize output mode.

        Raises:
            ValueError: If format_type is not "text" or "json"
        """
        if format_type not in ["text", "json"]:
            raise ValueError(f"Invalid format: {format_type}. Must be 'text' or 'json'")

        self.format = format_type
        self.quiet = quiet
        self._json_buffer: dict[str, Any] = {}

    def is_human(self) -> bool:
        return self.format == "text"

    def is_agent(self) -> bool:
        return self.format == "json"

    def add_json(self, key: str, value: Any) -> None:
        """
        Add key-value pair to JSON buffer.

        Used in agent mode to accumulate structured data before final output
        via flush_json().
        """
        self._json_buffer[key] = value

    def flush_json(self) -> None:
        """
        Output buffered JSON to stdout and clear buffer.

        Only outputs in agent mode. In human mode, this is a no-op.
        Non-ASCII text (CJK brand names) is written as-is.
        """
        if self.is_agent() and self._json_buffer:
            json.dump(self._json_buffer, sys.stdout, indent=2, ensure_ascii=False)
            sys.stdout.write("\n")
            sys.stdout.flush()
            self._json_buffer.clear()


# Global output mode instance (set by CLI flags)
output_mode = OutputMode()

# Global Rich console instances for human mode
console = Console()  # stdout
console_err = Console(stderr=True)  # stderr


@contextmanager
def spinner(message: str):
    """
    Context manager for showing a spinner during operations.

    Displays a Rich spinner with message in human mode, silent otherwise.
    """
    if output_mode.is_human() and not output_mode.quiet:
        with console.status(f"[bold blue]{message}", spinner="dots") as status:
            yield status
    else:
        yield None


def create_progress_bar() -> Progress | NoOpProgress:
    """
    Create a progress bar for batch analysis.

    Returns:
        Progress: Rich Progress instance in human mode
        NoOpProgress: No-op progress bar in agent/quiet modes
    """
    if output_mode.is_human() and not output_mode.quiet:
        return Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=console,
            transient=True,  # Auto-cleanup when done
        )
    return NoOpProgress()


class NoOpProgress:
    """
    No-op progress bar for agent mode.

    Provides the same interface as Rich Progress but does nothing.
    """

    def __enter__(self):
        return self

    def __exit__(self, *args):
        pass

    def add_task(self, _description: str, total: int | None = None) -> int:
        return 0

    def advance(self, _task_id: int, advance: float = 1.0) -> None:
        pass


def success(message: str) -> None:
    """
    Print a success message.

    Human mode: Green checkmark with message
    Agent mode: Buffer to JSON
    """
    if output_mode.is_human():
        console.print(f"[green]✓[/green] {message}")
    elif output_mode.is_agent():
        output_mode.add_json("status", "success")
        output_mode.add_json("message", message)


def error(message: str) -> None:
    """
    Print an error message.

    Human mode: Red X with message to stderr
    Agent mode: Buffer to JSON
    """
    if output_mode.is_human():
        console_err.print(f"[red]✗[/red] {message}", style="red")
    elif output_mode.is_agent():
        output_mode.add_json("status", "error")
        output_mode.add_json("error", message)


def warning(message: str) -> None:
    if output_mode.is_human():
        console.print(f"[yellow]⚠[/yellow] {message}", style="yellow")
    elif output_mode.is_agent():
        output_mode.add_json("warning", message)


def info(message: str) -> None:
    if output_mode.is_human() and not output_mode.quiet:
        console.print(f"[blue]ℹ[/blue] {message}")


def print_banner(version: str) -> None:
    """Print the startup banner (human mode only)."""
    if not output_mode.is_human() or output_mode.quiet:
        return

    banner = f"""
[bold cyan]╔{"═" * 39}╗
║   Brand Signals v{version:<21}║
║   Brand intelligence for LLM answers  ║
╚{"═" * 39}╝[/bold cyan]
"""

    console.print(banner)


def _format_rank(rank: int | None, implicit: bool = False) -> str:
    if not rank:
        return "[dim]-[/dim]"
    return f"#{rank}*" if implicit else f"#{rank}"


def print_analysis(result: AnalysisResult) -> None:
    """
    Print one analysis.

    Human mode: Brand panel plus a detected-competitor table
    Agent mode: Buffer the analysis record as JSON under "analysis"
    Quiet mode: Tab-separated brand rank, mention count, competitor count
    """
    if output_mode.is_agent():
        output_mode.add_json("analysis", result.to_dict())
        return

    brand = result.brand_analysis
    if output_mode.quiet:
        print(
            f"{brand.ranking.best_rank or '-'}\t{brand.total_mentions}\t"
            f"{len(result.detected)}"
        )
        return

    brand_text = (
        f"[bold]Brand:[/bold] {brand.name or '[dim](none)[/dim]'}\n"
        f"[bold]Mentions:[/bold] {brand.total_mentions}\n"
        f"[bold]Best rank:[/bold] {_format_rank(brand.ranking.best_rank)}\n"
        f"[bold]Provider:[/bold] {result.meta.provider or '-'}\n"
        f"[bold]Processing time:[/bold] {result.meta.processing_time}"
    )
    console.print(
        Panel(brand_text, title="Target Brand", border_style="cyan", box=box.ROUNDED)
    )

    if not result.detected:
        info("No competitors detected")
        return

    table = Table(title="Detected Competitors", box=box.ROUNDED)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Category", style="magenta")
    table.add_column("Mentions", justify="right")
    table.add_column("Rank", justify="right", style="green")
    table.add_column("Source", justify="center")

    for competitor in result.detected:
        ranking = competitor.ranking
        table.add_row(
            competitor.name,
            competitor.category,
            str(competitor.mentions),
            _format_rank(ranking.best_rank, ranking.is_implicit),
            "heuristic" if competitor.is_heuristic else "known",
        )

    console.print(table)
    console.print("[dim]* rank inferred from order of appearance[/dim]")


def print_summary_table(summary: AnalysisSummary) -> None:
    """
    Print the aggregate summary of a batch.

    Human mode: Top competitor table and per-provider table
    Agent mode: Buffer the summary as JSON under "summary"
    Quiet mode: Silent
    """
    if output_mode.is_agent():
        output_mode.add_json("summary", summary.to_dict())
        return

    if output_mode.quiet:
        return

    if summary.top_competitors:
        competitors = Table(title="Top Competitors", box=box.ROUNDED)
        competitors.add_column("Competitor", style="cyan", no_wrap=True)
        competitors.add_column("Mentions", justify="right")
        competitors.add_column("Avg rank", justify="right", style="green")
        for stat in summary.top_competitors:
            competitors.add_row(
                stat.name,
                str(stat.mentions),
                f"{stat.average_rank}" if stat.average_rank is not None else "-",
            )
        console.print(competitors)

    providers = Table(title="Providers", box=box.ROUNDED)
    providers.add_column("Provider", style="magenta", no_wrap=True)
    providers.add_column("Mentioned", justify="right")
    providers.add_column("Rate", justify="right")
    for bucket in RANK_BUCKETS:
        providers.add_column(bucket, justify="right")

    for stat in summary.providers:
        providers.add_row(
            stat.provider,
            f"{stat.mentioned}/{stat.total}",
            f"{stat.mention_rate * 100:.0f}%",
            *(str(stat.rank_buckets[bucket] or "-") for bucket in RANK_BUCKETS),
        )

    console.print(providers)


def print_final_summary(
    batch_id: str, summary: AnalysisSummary, outputs: list[str]
) -> None:
    """
    Print final batch statistics.

    Human mode: Rich panel with headline brand metrics
    Agent mode: Flush all buffered JSON including these final stats
    Quiet mode: Tab-separated values
    """
    average_rank = summary.average_rank if summary.average_rank is not None else "-"

    if output_mode.is_agent():
        output_mode.add_json("batch_id", batch_id)
        output_mode.add_json("outputs", outputs)
        output_mode.flush_json()
        return

    if output_mode.quiet:
        print(
            f"{batch_id}\t{summary.total_responses}\t{summary.mentioned_responses}"
            f"\t{average_rank}"
        )
        return

    summary_text = (
        f"[bold]Batch ID:[/bold] {batch_id}\n"
        f"[bold]Responses:[/bold] {summary.total_responses}\n"
        f"[bold]Brand mentioned:[/bold] {summary.mentioned_responses} "
        f"({summary.mention_rate * 100:.1f}%)\n"
        f"[bold]Average rank:[/bold] {average_rank}\n"
        f"[bold]Ranked #1:[/bold] {summary.first_rank_count}"
    )
    for path in outputs:
        summary_text += f"\n[bold]Wrote:[/bold] {path}"

    if summary.mentioned_responses == summary.total_responses:
        border_style = "green"
    elif summary.mentioned_responses > 0:
        border_style = "yellow"
    else:
        border_style = "red"

    console.print(
        Panel(
            summary_text,
            title="[bold]Batch Summary[/bold]",
            border_style=border_style,
            box=box.ROUNDED,
        )
    )
