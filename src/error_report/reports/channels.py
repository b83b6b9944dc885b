"""Channel routing: which report format each transmission path receives."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from error_report.config import ReportConfig
from error_report.core.context import ErrorContext
from error_report.reports.builder import build_json_report, build_markdown_report


class ReportChannel(str, Enum):
    CLIPBOARD = "clipboard"
    EMAIL = "email"
    ISSUE_TRACKER = "issue-tracker"
    SHARE = "share"


# Issue forms are filled by pasting, so they take the clipboard's Markdown.
MARKDOWN_CHANNELS = frozenset({ReportChannel.CLIPBOARD, ReportChannel.ISSUE_TRACKER})


def report_format(channel: ReportChannel) -> str:
    return "markdown" if channel in MARKDOWN_CHANNELS else "json"


def build_report_for_channel(
    channel: ReportChannel,
    context: ErrorContext,
    comment: str,
    config: ReportConfig | None = None,
) -> str:
    """Build the report *channel* expects; ``""`` if it could not be built."""
    config = config or ReportConfig()
    if report_format(channel) == "markdown":
        return build_markdown_report(
            context, comment, deduplicate_service=config.deduplicate_service
        )
    return build_json_report(context, comment, indent=config.json_indent)


def email_subject(app_name: str, version: str, config: ReportConfig | None = None) -> str:
    config = config or ReportConfig()
    return f"{config.email_subject_prefix} {app_name} {version}"


class ChannelTarget(NamedTuple):
    """Where a channel's report goes. Empty fields do not apply to the channel."""

    recipient: str = ""
    subject: str = ""
    url: str = ""


def channel_target(
    channel: ReportChannel,
    config: ReportConfig | None = None,
    app_name: str = "",
    version: str = "",
) -> ChannelTarget:
    """Destination for *channel*: mail recipient and subject, or issue page."""
    config = config or ReportConfig()
    if channel == ReportChannel.EMAIL:
        return ChannelTarget(
            recipient=config.email_address,
            subject=email_subject(app_name, version, config),
        )
    if channel == ReportChannel.ISSUE_TRACKER:
        return ChannelTarget(url=config.issue_url)
    return ChannelTarget()
