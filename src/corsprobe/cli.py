"""corsprobe CLI - CORS misconfiguration probe."""

from corsprobe.cli_commands import scan_command  # noqa: F401
from corsprobe.cli_commands.shared import app, console
from corsprobe.modules.report import write_report
from corsprobe.modules.scanner import load_targets, print_summary, run_scan

__all__ = [
    "app",
    "console",
    "load_targets",
    "main",
    "print_summary",
    "run_scan",
    "write_report",
]


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
