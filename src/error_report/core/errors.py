"""Custom exception hierarchy."""


class ErrorReportError(Exception):
    """Base exception for error-report."""


class ContextError(ErrorReportError):
    """Error context input could not be read or validated."""


class ConfigError(ErrorReportError):
    """Report configuration file could not be read or validated."""


class SerializationError(ErrorReportError):
    """A report could not be serialized into its output format."""

    def __init__(self, report_format: str, detail: str = ""):
        self.report_format = report_format
        self.detail = detail
        super().__init__(f"Could not build {report_format}. {detail}".rstrip())


# CLI exit codes
EXIT_OK = 0
EXIT_REPORT_FAILED = 1
EXIT_BAD_CONTEXT = 2
EXIT_BAD_CONFIG = 3
