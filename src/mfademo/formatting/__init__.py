"""Renderers for alignment results."""

from mfademo.formatting.naming import (
    check_output_names,
    report_filename,
    textgrid_filename,
)
from mfademo.formatting.report import render_report
from mfademo.formatting.textgrid import render_textgrid

__all__ = [
    "check_output_names",
    "render_report",
    "render_textgrid",
    "report_filename",
    "textgrid_filename",
]
