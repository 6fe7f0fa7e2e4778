"""Response header extraction and CORS header matching."""

from collections.abc import Iterable, Mapping

import httpx

CORS_HEADER_NAMES = (
    "access-control-allow-origin",
    "access-control-allow-methods",
    "access-control-allow-headers",
    "access-control-allow-credentials",
    "access-control-expose-headers",
    "access-control-max-age",
)


def collect_headers(headers: httpx.Headers) -> dict[str, str]:
    """Flatten response headers into a name -> value mapping.

    Names keep the casing of their first occurrence on the wire. Repeated
    headers are joined with ``", "``.
    """
    names: dict[str, str] = {}
    values: dict[str, list[str]] = {}
    encoding = headers.encoding
    for raw_name, raw_value in headers.raw:
        name = raw_name.decode(encoding)
        key = name.lower()
        if key not in names:
            names[key] = name
            values[key] = []
        values[key].append(raw_value.decode(encoding))
    return {names[key]: ", ".join(values[key]) for key in names}


def is_cors_header(name: str) -> bool:
    """Return True when a header name contains one of the CORS header names."""
    lowered = name.lower()
    return any(cors_name in lowered for cors_name in CORS_HEADER_NAMES)


def find_cors_headers(headers: Mapping[str, str] | Iterable[str]) -> list[str]:
    """Return the CORS header names present, in their original casing."""
    return [name for name in headers if is_cors_header(name)]
