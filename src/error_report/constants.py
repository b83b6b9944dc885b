"""Global constants."""

import pathlib


def _find_project_root() -> pathlib.Path:
    """Find the project root (directory containing error-report.json or .git).

    Walks up from cwd; falls back to cwd.
    """
    markers = ("error-report.json", ".git")
    start = pathlib.Path.cwd()
    for d in [start, *start.parents]:
        if any((d / m).exists() for m in markers):
            return d
    return start


PROJECT_ROOT = _find_project_root()

CONFIG_FILE = str(PROJECT_ROOT / "error-report.json")

# Sentinel service name when no backend service was involved
SERVICE_NONE = "none"

STACK_TRACE_SEPARATOR = "-" * 37

ERROR_EMAIL_ADDRESS = "crashreport@newpipe.schabi.org"
ERROR_EMAIL_SUBJECT = "Exception in"
ERROR_ISSUE_URL = "https://github.com/TeamNewPipe/NewPipe/issues"
