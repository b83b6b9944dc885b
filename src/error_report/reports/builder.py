"""Report builder: never lets a rendering fault escape to the caller.

A crash reporter that crashes defeats its purpose, so every builder catches
failures at its boundary, logs them and hands back an empty report.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from error_report.core.context import ErrorContext
from error_report.core.errors import SerializationError
from error_report.reports.templates import render_json, render_markdown

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportResult:
    """Either the rendered report text or the error that prevented it."""

    text: str = ""
    error: SerializationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _render_safely(report_format: str, render: Callable[[], str]) -> ReportResult:
    try:
        return ReportResult(text=render())
    except Exception as e:
        logger.exception(
            "Error while erroring: could not build %s",
            report_format,
            extra={"report_format": report_format},
        )
        return ReportResult(error=SerializationError(report_format, str(e)))


def render_json_result(
    context: ErrorContext, comment: str, indent: int | None = None
) -> ReportResult:
    return _render_safely("json", lambda: render_json(context, comment, indent=indent))


def render_markdown_result(
    context: ErrorContext, comment: str, deduplicate_service: bool = False
) -> ReportResult:
    return _render_safely(
        "markdown",
        lambda: render_markdown(context, comment, deduplicate_service=deduplicate_service),
    )


def build_json_report(context: ErrorContext, comment: str, indent: int | None = None) -> str:
    """JSON report for *context*, or ``""`` if it could not be built."""
    return render_json_result(context, comment, indent=indent).text


def build_markdown_report(
    context: ErrorContext, comment: str, deduplicate_service: bool = False
) -> str:
    """Markdown report for *context*, or ``""`` if it could not be built."""
    return render_markdown_result(
        context, comment, deduplicate_service=deduplicate_service
    ).text
