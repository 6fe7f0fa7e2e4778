"""Report generation for CORS scan results."""

from .generator import REPORT_FORMATS, write_report
from .json_report import write_json_report
from .text_report import render_text_report, write_text_report

__all__ = [
    "REPORT_FORMATS",
    "render_text_report",
    "write_json_report",
    "write_report",
    "write_text_report",
]
