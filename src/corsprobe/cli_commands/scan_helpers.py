"""Helpers for the scan command."""

from corsprobe.config import (
    get_default_concurrency,
    get_default_method,
    get_default_output,
    get_default_timeout,
    get_user_agent,
    is_verbose_env,
)
from corsprobe.errors import ScanConfigError
from corsprobe.modules.report import REPORT_FORMATS
from corsprobe.modules.scanner import ScanConfig


def normalize_verbose(verbose: bool) -> bool:
    """Resolve effective verbose flag from CLI arg and config."""
    effective = verbose if isinstance(verbose, bool) else False
    return effective or is_verbose_env()


def coerce_positive_int(value: int | None, default: int) -> int:
    """Return value when positive int-like, otherwise fallback default."""
    return max(1, int(value)) if isinstance(value, int) else default


def coerce_positive_float(value: float | None, default: float) -> float:
    """Return value when positive float-like, otherwise fallback default."""
    if isinstance(value, (int, float)) and value > 0:
        return float(value)
    return default


def parse_header_options(raw_headers: list[str] | None) -> dict[str, str]:
    """Parse repeated ``Name: Value`` options into a header mapping."""
    headers: dict[str, str] = {}
    for raw in raw_headers or []:
        name, sep, value = raw.partition(":")
        name = name.strip()
        if not sep or not name:
            raise ScanConfigError(f"Invalid header {raw!r}; expected 'Name: Value'")
        headers[name] = value.strip()
    return headers


def resolve_output(output: str | None) -> str:
    return output if output else get_default_output()


def build_scan_config(
    method: str | None,
    concurrency: int | None,
    timeout: float | None,
    user_agent: str | None,
    extra_headers: list[str] | None,
) -> ScanConfig:
    """Merge CLI options over configured defaults into a ScanConfig."""
    headers = {"User-Agent": user_agent or get_user_agent()}
    headers.update(parse_header_options(extra_headers))
    return ScanConfig(
        method=method or get_default_method(),
        headers=headers,
        timeout=coerce_positive_float(timeout, get_default_timeout()),
        concurrency=coerce_positive_int(concurrency, get_default_concurrency()),
    )


def normalize_report_format(report_format: str | None) -> str:
    """Normalize and validate the report format name."""
    fmt = report_format.strip().lower() if isinstance(report_format, str) else "text"
    if fmt not in REPORT_FORMATS:
        raise ScanConfigError(
            f"Unknown report format: {fmt}. Supported values: {', '.join(REPORT_FORMATS)}"
        )
    return fmt
