"""Target URL validation and loading."""

import logging
from collections.abc import Iterable
from pathlib import Path
from urllib.parse import urlparse

from corsprobe.errors import ScanConfigError

logger = logging.getLogger(__name__)


def is_valid_url(value: str) -> bool:
    """Return True when a URL has both a scheme and a host."""
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return bool(parsed.scheme and parsed.netloc)


def parse_targets(lines: Iterable[str]) -> list[str]:
    """Keep non-blank, syntactically valid URLs in input order."""
    targets: list[str] = []
    for line in lines:
        url = line.strip()
        if not url:
            continue
        if not is_valid_url(url):
            logger.debug("Skipping invalid URL: %s", url)
            continue
        targets.append(url)
    return targets


def load_targets(path: Path | str) -> list[str]:
    """Read a newline-delimited URL list.

    Raises ``ScanConfigError`` when the file cannot be read or holds no
    valid URL.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            targets = parse_targets(f)
    except OSError as exc:
        raise ScanConfigError(f"Error opening file: {exc}") from exc

    if not targets:
        raise ScanConfigError(f"No valid URLs found in file: {path}")
    logger.debug("Loaded %d target(s) from %s", len(targets), path)
    return targets
