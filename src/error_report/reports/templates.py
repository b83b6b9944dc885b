"""Renderers for error reports: JSON, GitHub Markdown and plain text."""

from __future__ import annotations

import json
from typing import Sequence

from error_report.constants import STACK_TRACE_SEPARATOR
from error_report.core.context import ErrorContext
from error_report.reports.fields import (
    INFO_ORDER,
    JSON_ORDER,
    MARKDOWN_ORDER,
    collect_fields,
    select_fields,
)


def _encodes_as_utf8(text: str) -> bool:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def render_json(context: ErrorContext, comment: str, indent: int | None = None) -> str:
    """Render *context* as a JSON object with a fixed key order."""
    fields = select_fields(collect_fields(context), JSON_ORDER)
    doc: dict[str, object] = {f.key: f.value for f in fields}
    doc["exceptions"] = list(context.stack_traces)
    doc["user_comment"] = comment
    separators = (",", ":") if indent is None else None
    text = json.dumps(doc, ensure_ascii=False, indent=indent, separators=separators)
    if not _encodes_as_utf8(text):
        # Lone surrogates (e.g. from surrogateescape-decoded traces) survive
        # only as \u escapes.
        text = json.dumps(doc, ensure_ascii=True, indent=indent, separators=separators)
    return text


def render_markdown(
    context: ErrorContext, comment: str, deduplicate_service: bool = False
) -> str:
    """Render *context* as a GitHub issue body.

    Crash logs go into ``<details>`` blocks; several logs are additionally
    collapsed into one "Exceptions (n)" block to keep the issue short.
    Trace text is not escaped, so a trace holding a code fence breaks the
    fenced block.
    """
    fields = select_fields(
        collect_fields(context), MARKDOWN_ORDER, unique=deduplicate_service
    )
    traces = context.stack_traces
    count = len(traces)

    parts = []
    if comment:
        parts.append(f"{comment}\n")

    parts.append("## Exception\n")
    for f in fields:
        parts.append(f"* __{f.label}:__ {f.value}\n")

    if count > 1:
        parts.append(f"<details><summary><b>Exceptions ({count})</b></summary><p>\n")
    for i, trace in enumerate(traces, 1):
        index = str(i) if count > 1 else ""
        parts.append(f"<details><summary><b>Crash log {index}</b></summary><p>\n")
        parts.append(f"\n```\n{trace}\n```\n")
        parts.append("</details>\n")
    if count > 1:
        parts.append("</p></details>\n")

    parts.append("<hr>\n")
    text = "".join(parts)
    if not _encodes_as_utf8(text):
        text = text.encode("utf-8", "backslashreplace").decode("utf-8")
    return text


def render_info_text(context: ErrorContext) -> str:
    """Field values one per line, in info-panel order."""
    fields = select_fields(collect_fields(context), INFO_ORDER)
    return "\n".join(f.value for f in fields)


def format_stack_trace_block(traces: Sequence[str]) -> str:
    """Join *traces* with a separator line before each and after the last.

    Unlike the older panel text, a trace without a trailing newline gets one,
    so the separator never runs on into the last line of the trace.
    """
    sep = STACK_TRACE_SEPARATOR
    lines = [t if t.endswith("\n") else t + "\n" for t in traces]
    return sep + "\n" + (sep + "\n").join(lines) + sep
