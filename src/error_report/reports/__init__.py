"""Report rendering and channel routing."""

from error_report.reports.builder import (
    ReportResult,
    build_json_report,
    build_markdown_report,
    render_json_result,
    render_markdown_result,
)
from error_report.reports.templates import format_stack_trace_block, render_info_text

__all__ = [
    "ReportResult",
    "build_json_report",
    "build_markdown_report",
    "format_stack_trace_block",
    "render_info_text",
    "render_json_result",
    "render_markdown_result",
]
