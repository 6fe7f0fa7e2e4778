"""Report format dispatch."""

from collections.abc import Sequence
from pathlib import Path

from corsprobe.modules.scanner.models import ScanResult

from .json_report import write_json_report
from .text_report import write_text_report

REPORT_FORMATS = ("text", "json")


def write_report(results: Sequence[ScanResult], path: Path | str, fmt: str = "text") -> Path:
    """Write results in the requested format and return the report path."""
    fmt = (fmt or "text").strip().lower()
    if fmt == "text":
        return write_text_report(results, path)
    if fmt == "json":
        return write_json_report(results, path)
    raise ValueError(
        f"Unknown report format: {fmt}. Supported values: {', '.join(REPORT_FORMATS)}"
    )
