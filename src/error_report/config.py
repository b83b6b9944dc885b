"""Report configuration management."""

from __future__ import annotations

import json
import pathlib
from typing import Optional

from pydantic import BaseModel, ValidationError

from error_report.constants import (
    CONFIG_FILE,
    ERROR_EMAIL_ADDRESS,
    ERROR_EMAIL_SUBJECT,
    ERROR_ISSUE_URL,
)
from error_report.core.errors import ConfigError


class ReportConfig(BaseModel):
    deduplicate_service: bool = False
    email_address: str = ERROR_EMAIL_ADDRESS
    email_subject_prefix: str = ERROR_EMAIL_SUBJECT
    issue_url: str = ERROR_ISSUE_URL
    json_indent: Optional[int] = None


class ReportConfigStore:
    """Manages error-report.json read/write."""

    def __init__(self, path: str | pathlib.Path | None = None):
        self.path = pathlib.Path(path or CONFIG_FILE)

    def load(self) -> ReportConfig:
        if not self.path.exists():
            return ReportConfig()
        try:
            return ReportConfig(**json.loads(self.path.read_text(encoding="utf-8")))
        except OSError as e:
            raise ConfigError(f"Cannot read config '{self.path}': {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Config '{self.path}' is not valid JSON: {e}") from e
        except (TypeError, ValidationError) as e:
            raise ConfigError(f"Config '{self.path}' is invalid:\n{e}") from e

    def save(self, config: ReportConfig) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(config.model_dump(exclude_none=True), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )

    def ensure_default(self) -> None:
        if not self.path.exists():
            self.save(ReportConfig())
