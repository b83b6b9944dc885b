"""Tests for the report builder boundary."""

import json
import logging

import pytest

from error_report.core.context import ErrorContext
from error_report.core.errors import SerializationError
from error_report.reports import builder
from error_report.reports.builder import (
    build_json_report,
    build_markdown_report,
    render_json_result,
    render_markdown_result,
)


def _boom(*args, **kwargs):
    raise TypeError("encoder rejected input")


def test_build_json_report(context):
    doc = json.loads(build_json_report(context, ""))
    assert doc["exceptions"] == ["trace1"]


def test_build_markdown_report(context):
    md = build_markdown_report(context, "")
    assert md.startswith("## Exception\n")
    assert md.count("Crash log") == 1
    assert "\n```\ntrace1\n```\n" in md


def test_cross_format_consistency(make_context):
    ctx = make_context(stack_traces=["t1", "t2"])
    doc = json.loads(build_json_report(ctx, "c"))
    md = build_markdown_report(ctx, "c")
    labels = {
        "user_action": "User Action", "request": "Request",
        "content_language": "Content Language", "content_country": "Content Country",
        "app_language": "App Language", "service": "Service", "package": "Package",
        "version": "Version", "os": "OS", "time": "Timestamp",
    }
    for key, label in labels.items():
        assert f"* __{label}:__ {doc[key]}\n" in md
    for trace in doc["exceptions"]:
        assert f"\n```\n{trace}\n```\n" in md


def test_result_ok(context):
    result = render_json_result(context, "")
    assert result.ok
    assert result.error is None
    assert result.text


@pytest.mark.parametrize(
    "target, build",
    [("render_json", build_json_report), ("render_markdown", build_markdown_report)],
)
def test_failure_returns_empty_string(monkeypatch, caplog, context, target, build):
    monkeypatch.setattr(builder, target, _boom)
    with caplog.at_level(logging.ERROR, logger="error_report"):
        assert build(context, "") == ""
    records = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(records) == 1
    assert "Error while erroring" in records[0].getMessage()
    assert records[0].exc_info is not None


def test_failure_result_carries_error(monkeypatch, context):
    monkeypatch.setattr(builder, "render_markdown", _boom)
    result = render_markdown_result(context, "")
    assert not result.ok
    assert result.text == ""
    assert isinstance(result.error, SerializationError)
    assert result.error.report_format == "markdown"
    assert "encoder rejected input" in str(result.error)


class _Provider:
    def content_language_code(self):
        return "en"

    def content_country_code(self):
        return "GB"

    def app_language_tag(self):
        return "en-GB"

    def package_identifier(self):
        return "org.example.app"

    def app_version(self):
        return "1.0"

    def os_description(self):
        return "Linux 6.1 - 34"


def test_captured_timestamp_identical_in_both_formats():
    ctx = ErrorContext.capture(_Provider(), "search", "q", ["t1"])
    doc = json.loads(build_json_report(ctx, ""))
    md = build_markdown_report(ctx, "")
    assert doc["time"] == ctx.timestamp
    assert f"* __Timestamp:__ {ctx.timestamp}\n" in md


def test_surrogate_trace_builds_transmittable_reports(make_context):
    ctx = make_context(stack_traces=["bad \udcff byte"])
    for report in (build_json_report(ctx, ""), build_markdown_report(ctx, "")):
        assert report
        report.encode("utf-8")
