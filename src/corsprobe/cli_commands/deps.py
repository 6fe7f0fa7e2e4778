"""Late lookup of the scan pipeline for the ``corsprobe`` command.

``scan`` fetches ``load_targets``, ``run_scan``, ``write_report`` and
``print_summary`` from ``corsprobe.cli`` on every invocation, so CLI tests can
replace the network scan or the report writer without touching the scanner.
"""

from importlib import import_module
from types import ModuleType


def cli_module() -> ModuleType:
    """Return the ``corsprobe.cli`` module."""
    return import_module("corsprobe.cli")
