"""JSON report rendering."""

import json
from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path

from corsprobe import __version__
from corsprobe.errors import ReportWriteError
from corsprobe.modules.scanner.models import ScanResult
from corsprobe.modules.scanner.summary import summarize


def write_json_report(results: Sequence[ScanResult], path: Path | str) -> Path:
    """Write results plus run summary as a JSON document."""
    path = Path(path)
    summary = summarize(results)

    report_data = {
        "report_metadata": {
            "generated_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
            "tool": "corsprobe",
            "version": __version__,
        },
        "summary": {
            "total": summary.total,
            "successful": summary.successful,
            "with_cors": summary.with_cors,
            "success_rate": round(summary.success_rate, 2),
        },
        "results": [result.to_dict() for result in results],
    }

    try:
        path.write_text(json.dumps(report_data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ReportWriteError(f"Error saving results to {path}: {exc}") from exc
    return path
