"""Scanner module for corsprobe - CORS header probing over many targets."""

from .aggregator import ResultAggregator
from .coordinator import ConcurrencyGate, ScanCoordinator, run_scan
from .models import ScanConfig, ScanResult
from .prober import Prober, spoofed_origin
from .summary import ScanSummary, print_summary, render_summary, summarize
from .targets import is_valid_url, load_targets, parse_targets

__all__ = [
    "ConcurrencyGate",
    "Prober",
    "ResultAggregator",
    "ScanConfig",
    "ScanCoordinator",
    "ScanResult",
    "ScanSummary",
    "is_valid_url",
    "load_targets",
    "parse_targets",
    "print_summary",
    "render_summary",
    "run_scan",
    "spoofed_origin",
    "summarize",
]
