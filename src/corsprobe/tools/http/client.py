"""Synchronous HTTP client used by the prober."""

import time
from collections.abc import Mapping
from dataclasses import dataclass

import httpx

from .headers import collect_headers

SUPPORTED_SCHEMES = ("http", "https")


@dataclass
class HTTPResponse:
    """Represents an HTTP response."""

    url: str
    status_code: int
    headers: dict[str, str]
    response_time: float


class HTTPClient:
    """Thread-safe HTTP client shared by the workers of one scan."""

    def __init__(
        self,
        timeout: float = 10.0,
        follow_redirects: bool = True,
        verify_ssl: bool = False,
        max_connections: int = 10,
        transport: httpx.BaseTransport | None = None,
    ):
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.verify_ssl = verify_ssl
        self.max_connections = max_connections
        self.transport = transport
        self.client: httpx.Client | None = None

    def __enter__(self):
        self.client = httpx.Client(
            timeout=httpx.Timeout(self.timeout),
            follow_redirects=self.follow_redirects,
            verify=self.verify_ssl,
            limits=httpx.Limits(
                max_connections=self.max_connections,
                max_keepalive_connections=self.max_connections,
            ),
            transport=self.transport,
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.client:
            self.client.close()
            self.client = None

    def build_request(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Request:
        """Build a request without sending it.

        Raises ``httpx.InvalidURL`` for unparseable URLs and ``ValueError``
        for URLs that are not absolute http(s) URLs.
        """
        if not self.client:
            raise RuntimeError("Client not initialized. Use context manager.")

        parsed = httpx.URL(url)
        if parsed.scheme not in SUPPORTED_SCHEMES:
            raise ValueError(f"unsupported protocol scheme {parsed.scheme!r}")
        if not parsed.host:
            raise ValueError("no host in request URL")
        return self.client.build_request(method, parsed, headers=dict(headers or {}))

    def send(self, request: httpx.Request) -> HTTPResponse:
        """Send a prepared request and return once the response headers arrive.

        The body is never read. A response whose headers take longer than
        ``timeout`` in total raises ``httpx.ReadTimeout``; other transport
        failures raise ``httpx.HTTPError``.
        """
        if not self.client:
            raise RuntimeError("Client not initialized. Use context manager.")

        start = time.perf_counter()
        response = self.client.send(request, stream=True)
        try:
            elapsed = time.perf_counter() - start
            if elapsed > self.timeout:
                raise httpx.ReadTimeout(
                    f"Response took {elapsed:.2f}s, limit is {self.timeout}s",
                    request=request,
                )
            return HTTPResponse(
                url=str(response.url),
                status_code=response.status_code,
                headers=collect_headers(response.headers),
                response_time=elapsed,
            )
        finally:
            response.close()

    def request(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str] | None = None,
    ) -> HTTPResponse:
        """Build and send a request in one step."""
        return self.send(self.build_request(method, url, headers=headers))
