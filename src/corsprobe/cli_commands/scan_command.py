"""Scan CLI command."""

import time
from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from corsprobe import __version__
from corsprobe.errors import ReportWriteError, ScanConfigError
from corsprobe.modules.scanner import ScanResult

from .deps import cli_module
from .scan_helpers import (
    build_scan_config,
    normalize_report_format,
    normalize_verbose,
    resolve_output,
)
from .shared import USAGE, app, configure_logging, console


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"CORS Tool v{__version__}", highlight=False)
        raise typer.Exit()


def _notice(message: str) -> None:
    console.print(f"[blue]{escape(message)}[/blue]", highlight=False)


def _print_progress(result: ScanResult) -> None:
    url = escape(result.url)
    if result.error:
        message = f"[yellow]! {url}: {escape(result.error)}[/yellow]"
    elif result.has_cors:
        names = ", ".join(result.cors_headers)
        message = f"[green]✓ {url} ({result.status_code}) CORS: {names}[/green]"
    else:
        message = f"[dim]○ {url} ({result.status_code})[/dim]"
    console.print(message, highlight=False)


@app.command()
def scan(
    ctx: typer.Context,
    url: Optional[str] = typer.Option(None, "--url", "-u", help="Single URL to test"),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="File containing URLs (one per line)"
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Output file for results (default: cors_results.txt)"
    ),
    report_format: str = typer.Option("text", "--format", help="Report format: text, json"),
    method: Optional[str] = typer.Option(
        None, "--method", "-m", help="HTTP method to use (default: GET)"
    ),
    concurrency: Optional[int] = typer.Option(
        None, "--concurrency", "-c", help="Number of concurrent requests (default: 5)"
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", "-t", help="Request timeout in seconds (default: 10)"
    ),
    user_agent: Optional[str] = typer.Option(
        None, "--user-agent", help="User-Agent header sent with every request"
    ),
    header: Optional[List[str]] = typer.Option(
        None, "--header", "-H", help="Extra request header 'Name: Value' (repeatable)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version information",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Probe one URL or a list of URLs for CORS headers."""
    cli = cli_module()
    effective_verbose = normalize_verbose(verbose)
    configure_logging(effective_verbose)

    if not url and not file:
        console.print("[red]Error: Either --url or --file must be specified[/red]")
        console.print(USAGE, markup=False, highlight=False)
        console.print(ctx.get_help(), markup=False, highlight=False)
        raise typer.Exit(1)

    try:
        fmt = normalize_report_format(report_format)
        config = build_scan_config(method, concurrency, timeout, user_agent, header)
        if url:
            if effective_verbose:
                _notice(f"Testing single URL: {url}")
            targets = [url]
        else:
            if effective_verbose:
                _notice(f"Testing URLs from file: {file}")
            targets = cli.load_targets(file)
        started = time.perf_counter()
        results = cli.run_scan(
            targets,
            config,
            progress=_print_progress if effective_verbose else None,
        )
    except ScanConfigError as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]", highlight=False)
        raise typer.Exit(1) from exc

    if effective_verbose:
        elapsed = time.perf_counter() - started
        console.print(f"[dim]Scan completed in {elapsed:.2f}s[/dim]")

    output_path = resolve_output(output)
    try:
        cli.write_report(results, output_path, fmt)
    except ReportWriteError as exc:
        console.print(f"[red]Error saving results: {escape(str(exc))}[/red]", highlight=False)
        raise typer.Exit(1) from exc

    if effective_verbose:
        console.print(f"[dim]Results saved to: {escape(output_path)}[/dim]", highlight=False)

    cli.print_summary(results, console)
