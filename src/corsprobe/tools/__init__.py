"""Tools package for corsprobe."""

from corsprobe.tools.http import HTTPClient, HTTPResponse

__all__ = [
    "HTTPClient",
    "HTTPResponse",
]
