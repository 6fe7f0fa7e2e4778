"""HTTP helpers for corsprobe."""

from .client import HTTPClient, HTTPResponse
from .headers import CORS_HEADER_NAMES, collect_headers, find_cors_headers, is_cors_header

__all__ = [
    "CORS_HEADER_NAMES",
    "HTTPClient",
    "HTTPResponse",
    "collect_headers",
    "find_cors_headers",
    "is_cors_header",
]
