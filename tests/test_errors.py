"""Tests for the exception hierarchy."""

from error_report.core.errors import (
    ConfigError,
    ContextError,
    ErrorReportError,
    SerializationError,
)


def test_serialization_error():
    err = SerializationError("json", "bad input")
    assert err.report_format == "json"
    assert "json" in str(err)
    assert "bad input" in str(err)


def test_serialization_error_no_detail():
    assert str(SerializationError("markdown")) == "Could not build markdown."


def test_all_errors_are_subclasses_of_base():
    for cls in (ConfigError, ContextError, SerializationError):
        assert issubclass(cls, ErrorReportError)
