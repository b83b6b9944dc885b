"""Shared fixtures."""

from __future__ import annotations

import logging

import pytest

from error_report.core.context import ErrorContext
from error_report.diagnostics import LOGGER_NAME

EXAMPLE = {
    "user_action_description": "search",
    "request": "https://example.com",
    "content_language_code": "en",
    "content_country_code": "US",
    "app_language_tag": "en-US",
    "service_name": "YouTube",
    "package_identifier": "org.example.app",
    "app_version": "1.2.3",
    "os_description": "Linux Android 13 - 33",
    "timestamp": "2024-01-01T00:00:00+00:00",
    "stack_traces": ["trace1"],
}


@pytest.fixture()
def example_data():
    return dict(EXAMPLE)


@pytest.fixture()
def make_context():
    def _make(**overrides) -> ErrorContext:
        return ErrorContext(**{**EXAMPLE, **overrides})
    return _make


@pytest.fixture()
def context(make_context):
    return make_context()


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
