"""Plain-text report rendering."""

from collections.abc import Sequence
from pathlib import Path

from corsprobe.errors import ReportWriteError
from corsprobe.modules.scanner.models import ScanResult

SEPARATOR = "=" * 80


def render_result_block(result: ScanResult) -> list[str]:
    lines = [
        SEPARATOR,
        f"URL: {result.url}",
        f"Timestamp: {result.timestamp}",
        f"Status Code: {result.status_code}",
        f"Has CORS: {str(result.has_cors).lower()}",
    ]
    if result.error:
        lines.append(f"Error: {result.error}")

    if result.cors_headers:
        lines.append("CORS Headers Found:")
        for name in result.cors_headers:
            lines.append(f"  - {name}: {result.headers.get(name, '')}")

    lines.append("All Headers:")
    for name, value in result.headers.items():
        lines.append(f"  {name}: {value}")
    lines.append("")
    return lines


def render_text_report(results: Sequence[ScanResult]) -> str:
    lines: list[str] = []
    for result in results:
        lines.extend(render_result_block(result))
    return "\n".join(lines) + ("\n" if lines else "")


def write_text_report(results: Sequence[ScanResult], path: Path | str) -> Path:
    """Write one block per result to ``path``."""
    path = Path(path)
    try:
        path.write_text(render_text_report(results), encoding="utf-8")
    except OSError as exc:
        raise ReportWriteError(f"Error saving results to {path}: {exc}") from exc
    return path
