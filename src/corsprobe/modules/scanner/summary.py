"""Run summary computation and console output."""

from collections.abc import Sequence
from dataclasses import dataclass

from rich.console import Console

from .models import ScanResult


@dataclass
class ScanSummary:
    """Aggregate counts for one scan."""

    total: int = 0
    successful: int = 0
    with_cors: int = 0

    @property
    def success_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return self.successful / self.total * 100


def summarize(results: Sequence[ScanResult]) -> ScanSummary:
    summary = ScanSummary(total=len(results))
    for result in results:
        if result.succeeded:
            summary.successful += 1
        if result.has_cors:
            summary.with_cors += 1
    return summary


def render_summary(summary: ScanSummary) -> list[str]:
    """Return the summary as plain text lines."""
    if summary.total > 0:
        rate = f"{summary.success_rate:.2f}%"
    else:
        rate = "0%"
    return [
        "=== CORS TEST SUMMARY ===",
        f"Total URLs tested: {summary.total}",
        f"Successful requests: {summary.successful}",
        f"URLs with CORS headers: {summary.with_cors}",
        f"Success rate: {rate}",
    ]


def print_summary(results: Sequence[ScanResult], console: Console) -> ScanSummary:
    """Print the run summary and return it."""
    summary = summarize(results)
    lines = render_summary(summary)
    console.print()
    console.print(f"[bold]{lines[0]}[/bold]")
    for line in lines[1:]:
        console.print(line, highlight=False)
    return summary
