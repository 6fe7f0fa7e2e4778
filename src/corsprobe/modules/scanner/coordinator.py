"""Bounded-concurrency bulk scanning."""

import logging
import threading
import time
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor

from corsprobe.errors import ScanConfigError

from .aggregator import ResultAggregator
from .models import ScanConfig, ScanResult
from .prober import Prober

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[ScanResult], None]


class ConcurrencyGate:
    """Counting gate limiting how many probes are in flight at once."""

    def __init__(self, limit: int):
        if limit < 1:
            raise ScanConfigError(f"Concurrency must be at least 1, got {limit}")
        self.limit = limit
        self._semaphore = threading.BoundedSemaphore(limit)
        self._lock = threading.Lock()
        self.in_flight = 0
        self.peak = 0

    def __enter__(self):
        self._semaphore.acquire()
        with self._lock:
            self.in_flight += 1
            self.peak = max(self.peak, self.in_flight)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        with self._lock:
            self.in_flight -= 1
        self._semaphore.release()
        return False


class ScanCoordinator:
    """Probe every target once under the configured concurrency cap."""

    def __init__(
        self,
        config: ScanConfig,
        prober: Prober | None = None,
        aggregator_factory: Callable[[], ResultAggregator] = ResultAggregator,
    ):
        self.config = config
        self.prober = prober
        self.aggregator_factory = aggregator_factory
        self.gate: ConcurrencyGate | None = None

    def run(
        self,
        targets: Sequence[str],
        progress: ProgressCallback | None = None,
    ) -> list[ScanResult]:
        """Scan all targets and block until every one has a result."""
        if not targets:
            raise ScanConfigError("No valid URLs to scan")

        targets = list(targets)
        aggregator = self.aggregator_factory()
        # Each run owns its gate; the attribute only records the latest one.
        gate = ConcurrencyGate(self.config.concurrency)
        self.gate = gate
        workers = min(self.config.concurrency, len(targets))
        started = time.perf_counter()
        logger.info(
            "Scanning %d target(s) with concurrency %d", len(targets), self.config.concurrency
        )

        prober = self.prober or Prober(self.config)
        with prober:
            with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="corsprobe") as pool:
                futures = [
                    pool.submit(self._scan_one, gate, prober, target, aggregator, progress)
                    for target in targets
                ]

        for future in futures:
            future.result()
        results = aggregator.drain()
        logger.info(
            "Scan finished: %d result(s) in %.2fs",
            len(results),
            time.perf_counter() - started,
        )
        return results

    def _scan_one(
        self,
        gate: ConcurrencyGate,
        prober: Prober,
        target: str,
        aggregator: ResultAggregator,
        progress: ProgressCallback | None,
    ) -> None:
        with gate:
            logger.debug("Scanning %s (%d in flight)", target, gate.in_flight)
            try:
                result = prober.probe(target)
            except Exception as exc:
                logger.exception("Unexpected failure probing %s", target)
                result = ScanResult.failure(target, f"Unexpected probe failure: {exc}")
        aggregator.append(result)
        if progress:
            try:
                progress(result)
            except Exception:
                logger.warning("Progress callback failed for %s", target, exc_info=True)


def run_scan(
    targets: Sequence[str],
    config: ScanConfig,
    progress: ProgressCallback | None = None,
) -> list[ScanResult]:
    """Scan targets with a default prober."""
    return ScanCoordinator(config).run(targets, progress=progress)
