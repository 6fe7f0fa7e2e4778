"""Single-target CORS prober."""

import logging
from urllib.parse import urlsplit

import httpx

from corsprobe.tools.http import HTTPClient, find_cors_headers

from .models import ScanConfig, ScanResult, utc_timestamp

logger = logging.getLogger(__name__)

# Appended to the target's own origin so the value looks plausible but is
# never an origin the target actually trusts.
SPOOF_SUFFIX = "-test.cors.com"


def real_origin(target: str) -> str:
    """Return ``scheme://host[:port]`` for a URL, or an empty string."""
    parts = urlsplit(target)
    if not parts.scheme or not parts.netloc:
        return ""
    host = parts.netloc.rsplit("@", 1)[-1]
    return f"{parts.scheme}://{host}"


def spoofed_origin(target: str) -> str:
    """Derive the untrusted Origin value sent to a target."""
    origin = real_origin(target)
    return f"{origin}{SPOOF_SUFFIX}" if origin else ""


class Prober:
    """Send one crafted request per target and record its CORS headers.

    ``probe`` never raises for per-target problems; malformed URLs, transport
    failures and timeouts are returned as results with ``error`` set.
    """

    def __init__(self, config: ScanConfig, client: HTTPClient | None = None):
        self.config = config
        self.client = client

    def __enter__(self):
        if self.client is None:
            self.client = HTTPClient(
                timeout=self.config.timeout,
                follow_redirects=self.config.follow_redirects,
                verify_ssl=self.config.verify_ssl,
                max_connections=self.config.concurrency,
            )
        self.client.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.client:
            self.client.__exit__(exc_type, exc_val, exc_tb)

    def probe(self, target: str) -> ScanResult:
        if self.client is None or self.client.client is None:
            raise RuntimeError("Prober not started. Use context manager.")

        origin = spoofed_origin(target)
        headers = dict(self.config.headers)
        if origin:
            headers["Origin"] = origin

        try:
            request = self.client.build_request(self.config.method, target, headers=headers)
        except (httpx.InvalidURL, ValueError) as exc:
            logger.debug("Could not build request for %s: %s", target, exc)
            return ScanResult.failure(target, f"Error creating request: {exc}", origin)

        try:
            response = self.client.send(request)
        except httpx.HTTPError as exc:
            logger.debug("Request to %s failed: %s", target, exc)
            detail = str(exc) or type(exc).__name__
            return ScanResult.failure(target, f"Request failed: {detail}", origin)

        cors_headers = find_cors_headers(response.headers)
        logger.debug(
            "%s -> %d (%d CORS headers, %.2fs)",
            target,
            response.status_code,
            len(cors_headers),
            response.response_time,
        )
        return ScanResult(
            url=target,
            status_code=response.status_code,
            headers=response.headers,
            cors_headers=tuple(cors_headers),
            has_cors=bool(cors_headers),
            timestamp=utc_timestamp(),
            origin_sent=origin,
        )
