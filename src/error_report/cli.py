"""CLI entry point: click-based commands."""

from __future__ import annotations

import sys

import click

from error_report import __version__
from error_report.core.context import ErrorContext, load_context
from error_report.core.errors import (
    EXIT_BAD_CONFIG,
    EXIT_BAD_CONTEXT,
    EXIT_OK,
    EXIT_REPORT_FAILED,
    ConfigError,
    ContextError,
)
from error_report.reports.channels import ReportChannel


@click.group()
@click.version_option(__version__, prog_name="error-report")
def main():
    """Render application failure context as JSON or Markdown reports."""
    from error_report.diagnostics import configure_logging
    configure_logging()


def _load(context_file: str) -> ErrorContext:
    try:
        return load_context(context_file)
    except ContextError as e:
        click.echo(str(e), err=True)
        sys.exit(EXIT_BAD_CONTEXT)


def _emit(report: str) -> None:
    if not report:
        click.echo("Report could not be built; see log for details.", err=True)
        sys.exit(EXIT_REPORT_FAILED)
    click.echo(report, nl=not report.endswith("\n"))
    sys.exit(EXIT_OK)


def _config(config_path: str | None):
    from error_report.config import ReportConfigStore

    try:
        return ReportConfigStore(config_path).load()
    except ConfigError as e:
        click.echo(str(e), err=True)
        sys.exit(EXIT_BAD_CONFIG)


# ── init ──────────────────────────────────────────────────────────

@main.command()
@click.option("--config", "config_path", default=None, metavar="FILE", help="Config file to create")
def init(config_path):
    """Create an error-report.json config with default values."""
    from error_report.config import ReportConfigStore

    store = ReportConfigStore(config_path)
    store.ensure_default()
    click.echo(f"Created {store.path}")


# ── json ──────────────────────────────────────────────────────────

@main.command("json")
@click.argument("context_file")
@click.option("--comment", default="", help="User comment to include")
@click.option("--config", "config_path", default=None, metavar="FILE", help="Config file")
def json_cmd(context_file, comment, config_path):
    """Print the JSON report for CONTEXT_FILE ('-' for stdin)."""
    from error_report.reports.builder import build_json_report

    config = _config(config_path)
    ctx = _load(context_file)
    _emit(build_json_report(ctx, comment, indent=config.json_indent))


# ── markdown ──────────────────────────────────────────────────────

@main.command()
@click.argument("context_file")
@click.option("--comment", default="", help="User comment to include")
@click.option("--dedupe-service", is_flag=True, help="List the Service field once")
@click.option("--config", "config_path", default=None, metavar="FILE", help="Config file")
def markdown(context_file, comment, dedupe_service, config_path):
    """Print the GitHub Markdown report for CONTEXT_FILE ('-' for stdin)."""
    from error_report.reports.builder import build_markdown_report

    config = _config(config_path)
    ctx = _load(context_file)
    dedupe = dedupe_service or config.deduplicate_service
    _emit(build_markdown_report(ctx, comment, deduplicate_service=dedupe))


# ── info ──────────────────────────────────────────────────────────

@main.command()
@click.argument("context_file")
def info(context_file):
    """Print the plain-text field summary and crash logs."""
    from error_report.reports.fields import INFO_ORDER, collect_fields, select_fields
    from error_report.reports.templates import format_stack_trace_block

    ctx = _load(context_file)
    fields = select_fields(collect_fields(ctx), INFO_ORDER)
    width = max(len(f.label) for f in fields)
    for f in fields:
        click.echo(f"{f.label.ljust(width)}  {f.value}")
    click.echo(format_stack_trace_block(ctx.stack_traces))


# ── channel ───────────────────────────────────────────────────────

@main.command()
@click.argument("name", type=click.Choice([c.value for c in ReportChannel]))
@click.argument("context_file")
@click.option("--comment", default="", help="User comment to include")
@click.option("--config", "config_path", default=None, metavar="FILE", help="Config file")
@click.option("--show-target", is_flag=True, help="Print recipient/subject or issue URL to stderr")
@click.option("--app-name", default=None, help="App name for the email subject (default: package)")
def channel(name, context_file, comment, config_path, show_target, app_name):
    """Print the report that channel NAME receives (clipboard, email, ...)."""
    from error_report.reports.channels import build_report_for_channel, channel_target

    config = _config(config_path)
    ctx = _load(context_file)
    report_channel = ReportChannel(name)
    if show_target:
        target = channel_target(
            report_channel, config,
            app_name=app_name or ctx.package_identifier,
            version=ctx.app_version,
        )
        if target.recipient:
            click.echo(f"To: {target.recipient}", err=True)
        if target.subject:
            click.echo(f"Subject: {target.subject}", err=True)
        if target.url:
            click.echo(f"URL: {target.url}", err=True)
    _emit(build_report_for_channel(report_channel, ctx, comment, config))
