"""Data models for CORS probe configuration and results."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any

from corsprobe.errors import ScanConfigError

DEFAULT_USER_AGENT = "CORS-Testing-Tool/1.0"


def _default_headers() -> Mapping[str, str]:
    return MappingProxyType({"User-Agent": DEFAULT_USER_AGENT})


@dataclass(frozen=True)
class ScanConfig:
    """Settings shared read-only by every worker of a scan."""

    method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=_default_headers)
    timeout: float = 10.0
    concurrency: int = 5
    follow_redirects: bool = True
    verify_ssl: bool = False

    def __post_init__(self) -> None:
        method = (self.method or "").strip().upper()
        if not method:
            raise ScanConfigError("HTTP method must not be empty")
        if isinstance(self.concurrency, bool) or not isinstance(self.concurrency, int):
            raise ScanConfigError(f"Concurrency must be an integer, got {self.concurrency!r}")
        if self.concurrency < 1:
            raise ScanConfigError(f"Concurrency must be at least 1, got {self.concurrency}")
        if self.timeout <= 0:
            raise ScanConfigError(f"Timeout must be positive, got {self.timeout}")
        object.__setattr__(self, "method", method)
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))


def utc_timestamp() -> str:
    """Return the current time as a sortable, timezone-aware RFC 3339 string."""
    return datetime.now(timezone.utc).astimezone().isoformat(timespec="seconds")


@dataclass(frozen=True)
class ScanResult:
    """Outcome of probing one target URL."""

    url: str
    status_code: int = 0
    headers: Mapping[str, str] = field(default_factory=dict)
    cors_headers: tuple[str, ...] = ()
    has_cors: bool = False
    error: str | None = None
    timestamp: str = field(default_factory=utc_timestamp)
    origin_sent: str = ""

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, url: str, error: str, origin_sent: str = "") -> "ScanResult":
        """Build a result for a target whose request never completed."""
        return cls(url=url, error=error, origin_sent=origin_sent)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON report shape."""
        data: dict[str, Any] = {
            "url": self.url,
            "status_code": self.status_code,
            "headers": dict(self.headers),
            "has_cors": self.has_cors,
            "cors_headers": list(self.cors_headers),
            "timestamp": self.timestamp,
            "origin_sent": self.origin_sent,
        }
        if self.error is not None:
            data["error"] = self.error
        return data
