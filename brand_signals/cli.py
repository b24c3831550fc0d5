"""
CLI entrypoint for brand-signals.

Provides a dual-mode command-line interface with:
- Human-friendly output: Rich spinners, tables, progress bars, colored text
- Agent-friendly output: Structured JSON for AI automation
- Quiet mode: Tab-separated minimal output for shell scripts

Commands:
    analyze: Analyze one LLM response
    batch: Analyze many responses and aggregate brand metrics
    validate: Validate an analyzer configuration

Exit codes:
    0: Success
    1: Configuration error (missing file, invalid YAML, schema violation)
    2: Input error (missing or malformed response/input file)
    3: Export error (cannot write JSON/CSV/HTML output)

Examples:
    # Human-friendly output
    brand-signals analyze --config analyzer.yaml --response answer.md

    # Agent-friendly JSON output, response piped on stdin
    cat answer.md | brand-signals analyze -c analyzer.yaml -r - --format json

    # Batch with CSV and HTML exports
    brand-signals batch -c analyzer.yaml -i responses.jsonl --csv out.csv
"""

import logging
import sys
from importlib.metadata import PackageNotFoundError
from pathlib import Path
from typing import NoReturn

import typer
from rich.traceback import install as install_rich_traceback

from brand_signals.config.loader import load_config
from brand_signals.config.schema import AnalysisInput, AnalyzerConfig
from brand_signals.exceptions import (
    ConfigFileNotFoundError,
    ConfigurationError,
    ExportError,
    InputError,
    InputFileNotFoundError,
)
from brand_signals.extractor.analyzer import ResponseAnalyzer
from brand_signals.report.generator import write_report
from brand_signals.report.summary import DEFAULT_TOP_N, summarize_analyses
from brand_signals.storage.exporter import (
    export_analyses_csv,
    export_competitors_csv,
)
from brand_signals.storage.reader import load_analysis_inputs
from brand_signals.storage.writer import write_json
from brand_signals.utils.console import (
    create_progress_bar,
    error,
    info,
    output_mode,
    print_analysis,
    print_banner,
    print_final_summary,
    print_summary_table,
    spinner,
    success,
    warning,
)
from brand_signals.utils.logging import get_logger, log_with_context, setup_logging
from brand_signals.utils.time import batch_id_from_timestamp

# Install Rich tracebacks for better error messages
install_rich_traceback(show_locals=False)

logger = get_logger("cli")

# Exit codes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1  # Config missing or invalid
EXIT_INPUT_ERROR = 2  # Response/input file missing or invalid
EXIT_EXPORT_ERROR = 3  # Output could not be written

STDIN_MARKER = "-"

app = typer.Typer(
    name="brand-signals",
    help="Extract brand mentions, rankings and competitors from LLM answers",
    add_completion=False,
)


def _configure_output(format: str, quiet: bool, verbose: bool) -> None:
    if format not in ("text", "json"):
        raise typer.BadParameter(
            f"Invalid format: {format}. Must be 'text' or 'json'",
            param_hint="--format",
        )

    output_mode.format = format
    output_mode.quiet = quiet

    # Logs go to stderr; keep them out of the way unless debugging
    setup_logging(verbose=verbose, quiet_logs=not verbose)


def _fail(message: str, exit_code: int, error_type: str) -> NoReturn:
    """Report an error in the current output mode and exit."""
    error(message)
    if output_mode.is_agent():
        output_mode.add_json("error_type", error_type)
        output_mode.flush_json()
    raise typer.Exit(exit_code)


def _load_analyzer_config(config: Path) -> AnalyzerConfig:
    try:
        with spinner("Loading configuration..."):
            analyzer_config = load_config(config)
    except ConfigFileNotFoundError as e:
        _fail(str(e), EXIT_CONFIG_ERROR, "file_not_found")
    except ConfigurationError as e:
        _fail(str(e), EXIT_CONFIG_ERROR, "validation_error")

    success(
        f"Loaded config for '{analyzer_config.target_brand or '(no target brand)'}' "
        f"with {len(analyzer_config.competitors)} known competitors"
    )
    return analyzer_config


def _read_response(source: str) -> str:
    """
    Read response text from a file path, or from stdin when source is "-".

    Raises:
        InputFileNotFoundError: If the file doesn't exist
        InputError: If the file can't be read as UTF-8 text
    """
    if source == STDIN_MARKER:
        return sys.stdin.read()

    path = Path(source)
    if not path.exists():
        raise InputFileNotFoundError(f"Response file not found: {path}")

    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Failed to read response file {path}: {e}") from e


@app.command()
def analyze(
    config: Path = typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to analyzer YAML configuration",
        dir_okay=False,
    ),
    response: str = typer.Option(
        ...,
        "--response",
        "-r",
        help="Path to the response text file, or '-' to read stdin",
    ),
    query: str | None = typer.Option(
        None, "--query", help="Query that produced the response"
    ),
    provider: str | None = typer.Option(
        None, "--provider", help="Provider/model identifier"
    ),
    timestamp: str | None = typer.Option(
        None, "--timestamp", help="Response timestamp (default: now, UTC)"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Also write the analysis record as JSON here"
    ),
    format: str = typer.Option(
        "text",
        "--format",
        "-f",
        help="Output format: 'text' (human-friendly) or 'json' (machine-readable)",
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Minimal output (tab-separated values)"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging"
    ),
):
    """
    Analyze one LLM response for brand mentions, ranks and competitors.

    Exit codes:
      0: Success
      1: Configuration error
      2: Response file missing or unreadable
      3: Output file could not be written

    Examples:
      brand-signals analyze -c analyzer.yaml -r answer.md --provider deepseek
      cat answer.md | brand-signals analyze -c analyzer.yaml -r - --format json
    """
    _configure_output(format, quiet, verbose)
    print_banner(_read_version())

    analyzer_config = _load_analyzer_config(config)

    try:
        text = _read_response(response)
    except InputFileNotFoundError as e:
        _fail(str(e), EXIT_INPUT_ERROR, "file_not_found")
    except InputError as e:
        _fail(str(e), EXIT_INPUT_ERROR, "input_error")

    if not text.strip():
        warning("Response is empty")

    analyzer = ResponseAnalyzer(analyzer_config)
    result = analyzer.analyze(
        AnalysisInput(
            query=query, provider=provider, response=text, timestamp=timestamp
        )
    )

    print_analysis(result)

    if output is not None:
        try:
            write_json(output, result.to_dict())
        except ExportError as e:
            _fail(str(e), EXIT_EXPORT_ERROR, "export_error")
        info(f"Wrote analysis to {output}")
        if output_mode.is_agent():
            output_mode.add_json("output", str(output))

    success(f"Analysis complete in {result.meta.processing_time}")
    output_mode.flush_json()
    raise typer.Exit(EXIT_SUCCESS)


@app.command()
def batch(
    config: Path = typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to analyzer YAML configuration",
        dir_okay=False,
    ),
    input: Path = typer.Option(
        ...,
        "--input",
        "-i",
        help="JSON array or JSON Lines file of {query, provider, response, timestamp}",
        dir_okay=False,
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write all analyses plus the summary as JSON"
    ),
    csv: Path | None = typer.Option(
        None, "--csv", help="Write a per-response CSV export"
    ),
    competitors_csv: Path | None = typer.Option(
        None, "--competitors-csv", help="Write a per-competitor CSV export"
    ),
    html: Path | None = typer.Option(None, "--html", help="Write an HTML report"),
    top_n: int = typer.Option(
        DEFAULT_TOP_N, "--top", min=1, help="Number of top competitors to report"
    ),
    format: str = typer.Option(
        "text",
        "--format",
        "-f",
        help="Output format: 'text' (human-friendly) or 'json' (machine-readable)",
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Minimal output (tab-separated values)"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging"
    ),
):
    """
    Analyze many responses and aggregate brand visibility.

    Exit codes:
      0: Success
      1: Configuration error
      2: Input file missing or invalid
      3: Output file could not be written

    Examples:
      brand-signals batch -c analyzer.yaml -i responses.jsonl
      brand-signals batch -c analyzer.yaml -i responses.json --format json
      brand-signals batch -c analyzer.yaml -i responses.jsonl --competitors-csv comp.csv
    """
    _configure_output(format, quiet, verbose)
    print_banner(_read_version())

    batch_id = batch_id_from_timestamp()
    analyzer_config = _load_analyzer_config(config)

    try:
        with spinner("Loading responses..."):
            inputs = load_analysis_inputs(input)
    except InputFileNotFoundError as e:
        _fail(str(e), EXIT_INPUT_ERROR, "file_not_found")
    except InputError as e:
        _fail(str(e), EXIT_INPUT_ERROR, "input_error")

    success(f"Loaded {len(inputs)} responses")

    analyzer = ResponseAnalyzer(analyzer_config)
    results = []
    with create_progress_bar() as progress:
        task = progress.add_task("Analyzing responses...", total=len(inputs))
        for item in inputs:
            results.append(analyzer.analyze(item))
            progress.advance(task)

    summary = summarize_analyses(results, top_n=top_n)
    print_summary_table(summary)

    outputs = []
    try:
        if output is not None:
            write_json(
                output,
                {
                    "batchId": batch_id,
                    "targetBrand": analyzer_config.target_brand,
                    "summary": summary.to_dict(),
                    "analyses": [result.to_dict() for result in results],
                },
            )
            outputs.append(str(output))
        if csv is not None:
            export_analyses_csv(csv, results)
            outputs.append(str(csv))
        if competitors_csv is not None:
            export_competitors_csv(competitors_csv, results)
            outputs.append(str(competitors_csv))
        if html is not None:
            write_report(
                html, results, summary, analyzer_config.target_brand, batch_id
            )
            outputs.append(str(html))
    except ExportError as e:
        _fail(str(e), EXIT_EXPORT_ERROR, "export_error")

    log_with_context(
        logger,
        logging.INFO,
        "Batch analyzed",
        context={
            "responses": summary.total_responses,
            "mentioned": summary.mentioned_responses,
            "outputs": outputs,
        },
        batch_id=batch_id,
    )

    print_final_summary(batch_id, summary, outputs)
    raise typer.Exit(EXIT_SUCCESS)


@app.command()
def validate(
    config: Path = typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to analyzer YAML configuration",
        dir_okay=False,
    ),
    format: str = typer.Option(
        "text",
        "--format",
        "-f",
        help="Output format: 'text' or 'json'",
    ),
):
    """
    Validate an analyzer configuration without analyzing anything.

    Checks:
    - YAML syntax is valid
    - Field values pass validation rules (non-blank, unique competitor names,
      non-negative context window, complete options block)

    Exit codes:
      0: Configuration is valid
      1: Configuration is invalid

    Examples:
      brand-signals validate --config analyzer.yaml
      brand-signals validate --config analyzer.yaml --format json
    """
    _configure_output(format, quiet=False, verbose=False)

    analyzer_config = _load_analyzer_config(config)

    keyword_count = sum(len(c.keywords) for c in analyzer_config.competitors)

    success("Configuration is valid")
    info(f"Target brand: {analyzer_config.target_brand or '(none)'}")
    info(f"Competitors: {len(analyzer_config.competitors)}")
    info(f"Keywords: {keyword_count}")

    if output_mode.is_agent():
        output_mode.add_json("valid", True)
        output_mode.add_json("target_brand", analyzer_config.target_brand)
        output_mode.add_json("competitors_count", len(analyzer_config.competitors))
        output_mode.add_json("keywords_count", keyword_count)
        output_mode.flush_json()

    raise typer.Exit(EXIT_SUCCESS)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
    ),
):
    """
    Brand Signals - rule-based brand intelligence for LLM answers.

    Finds how often your brand is mentioned, where it is ranked, and which
    known or previously unknown competitors appear alongside it.

    Use 'brand-signals COMMAND --help' for detailed command documentation.
    """
    if version:
        from rich.console import Console

        console = Console()
        console.print(
            f"[bold cyan]brand-signals[/bold cyan] version {_read_version()}"
        )
        raise typer.Exit(EXIT_SUCCESS)

    if ctx.invoked_subcommand is None:
        from rich.console import Console

        console = Console()
        console.print("[yellow]Use --help to see available commands[/yellow]")
        console.print()
        console.print("Commands:")
        console.print("  analyze   Analyze one LLM response")
        console.print("  batch     Analyze many responses and aggregate brand metrics")
        console.print("  validate  Validate an analyzer configuration")


def _read_version() -> str:
    """
    Read version from package metadata (pyproject.toml).

    Returns:
        Version string (e.g., "0.1.0")
    """
    try:
        from importlib.metadata import version

        return version("brand-signals")
    except PackageNotFoundError:
        # Running from a source checkout without installed metadata
        return "0.1.0"


if __name__ == "__main__":
    app()
