"""Thread-safe collection of scan results."""

import threading

from .models import ScanResult


class ResultAggregator:
    """Collect results appended concurrently by scan workers.

    ``drain`` is only called after every worker has been joined.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._results: list[ScanResult] = []

    def append(self, result: ScanResult) -> None:
        with self._lock:
            self._results.append(result)

    def drain(self) -> list[ScanResult]:
        """Return every collected result and empty the store."""
        with self._lock:
            results, self._results = self._results, []
        return results

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)
