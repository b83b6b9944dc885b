"""Ordered report fields shared by every renderer."""

from __future__ import annotations

from typing import NamedTuple

from error_report.core.context import ErrorContext


class ReportField(NamedTuple):
    key: str
    label: str
    value: str


def collect_fields(context: ErrorContext) -> list[ReportField]:
    """Assemble the scalar fields of *context* in canonical (JSON) order."""
    return [
        ReportField("user_action", "User Action", context.user_action_description),
        ReportField("request", "Request", context.request),
        ReportField("content_language", "Content Language", context.content_language_code),
        ReportField("content_country", "Content Country", context.content_country_code),
        ReportField("app_language", "App Language", context.app_language_tag),
        ReportField("service", "Service", context.service_name),
        ReportField("package", "Package", context.package_identifier),
        ReportField("version", "Version", context.app_version),
        ReportField("os", "OS", context.os_description),
        ReportField("time", "Timestamp", context.timestamp),
    ]


# Key order per renderer. "service" appears twice in the Markdown list;
# existing report consumers count on it.
JSON_ORDER = (
    "user_action", "request", "content_language", "content_country", "app_language",
    "service", "package", "version", "os", "time",
)
MARKDOWN_ORDER = (
    "user_action", "request", "content_country", "content_language", "app_language",
    "service", "time", "package", "service", "version", "os",
)
INFO_ORDER = (
    "user_action", "request", "content_language", "content_country", "app_language",
    "service", "time", "package", "version", "os",
)


def select_fields(
    fields: list[ReportField], order: tuple[str, ...], unique: bool = False
) -> list[ReportField]:
    """Pick *fields* by key in *order*; *unique* drops repeated keys."""
    by_key = {f.key: f for f in fields}
    picked = []
    seen: set[str] = set()
    for key in order:
        if unique and key in seen:
            continue
        seen.add(key)
        picked.append(by_key[key])
    return picked
