"""Error context: the immutable bundle of facts about one failure."""

from __future__ import annotations

import json
import locale
import pathlib
import platform
import sys
import traceback
from datetime import datetime
from typing import Iterable, Protocol

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from error_report import __version__
from error_report.constants import SERVICE_NONE
from error_report.core.errors import ContextError


def current_timestamp() -> str:
    """Local time as an ISO-8601 offset timestamp."""
    return datetime.now().astimezone().isoformat()


class ErrorContext(BaseModel):
    """Everything a report says about one failure. Never mutated."""

    model_config = ConfigDict(frozen=True)

    user_action_description: str
    request: str
    content_language_code: str
    content_country_code: str
    app_language_tag: str
    service_name: str = SERVICE_NONE
    package_identifier: str
    app_version: str
    os_description: str
    timestamp: str = Field(default_factory=current_timestamp)
    stack_traces: tuple[str, ...] = ()

    @classmethod
    def capture(
        cls,
        provider: ContextProvider,
        user_action: str,
        request: str,
        stack_traces: Iterable[str],
        service_name: str = SERVICE_NONE,
    ) -> ErrorContext:
        """Build a context from *provider*, stamping the current time once."""
        return cls(
            user_action_description=user_action,
            request=request,
            content_language_code=provider.content_language_code(),
            content_country_code=provider.content_country_code(),
            app_language_tag=provider.app_language_tag(),
            service_name=service_name,
            package_identifier=provider.package_identifier(),
            app_version=provider.app_version(),
            os_description=provider.os_description(),
            stack_traces=tuple(stack_traces),
        )


class ContextProvider(Protocol):
    """Supplies the environment facts a context needs."""

    def content_language_code(self) -> str: ...

    def content_country_code(self) -> str: ...

    def app_language_tag(self) -> str: ...

    def package_identifier(self) -> str: ...

    def app_version(self) -> str: ...

    def os_description(self) -> str: ...


class SystemContextProvider:
    """ContextProvider backed by the running interpreter's locale and platform."""

    def __init__(
        self,
        package: str = "error_report",
        version: str = __version__,
        fallback_locale: str = "en_US",
    ):
        self._package = package
        self._version = version
        self._fallback_locale = fallback_locale

    def _locale(self) -> tuple[str, str]:
        name = locale.getlocale()[0] or self._fallback_locale
        if name in ("C", "POSIX"):
            name = self._fallback_locale
        lang, _, country = name.partition("_")
        return lang, country

    def content_language_code(self) -> str:
        return self._locale()[0]

    def content_country_code(self) -> str:
        return self._locale()[1]

    def app_language_tag(self) -> str:
        lang, country = self._locale()
        return f"{lang}-{country}" if country else lang

    def package_identifier(self) -> str:
        return self._package

    def app_version(self) -> str:
        return self._version

    def os_description(self) -> str:
        return f"{platform.system()} {platform.release()} - {platform.version()}"


def stack_traces_from_exceptions(exceptions: Iterable[BaseException]) -> list[str]:
    """Format each exception (with its chain) into one trace string."""
    return [
        "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)).rstrip("\n")
        for exc in exceptions
    ]


def load_context(source: str | pathlib.Path) -> ErrorContext:
    """Read an ErrorContext from a JSON file, or stdin when *source* is ``-``."""
    try:
        if str(source) == "-":
            raw = sys.stdin.read()
        else:
            raw = pathlib.Path(source).read_text(encoding="utf-8")
        return ErrorContext.model_validate(json.loads(raw))
    except OSError as e:
        raise ContextError(f"Cannot read context '{source}': {e}") from e
    except json.JSONDecodeError as e:
        raise ContextError(f"Context '{source}' is not valid JSON: {e}") from e
    except ValidationError as e:
        raise ContextError(f"Context '{source}' is invalid:\n{e}") from e
