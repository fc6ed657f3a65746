"""Exceptions raised to callers of the checker."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .models import CheckResult

CHECK_FAILED_MESSAGE = "i18next check failed: missing translation keys found"


class I18nextCheckError(RuntimeError):
    """Missing translation keys were found and ``fail_on_error`` is enabled."""

    def __init__(self, message: str = CHECK_FAILED_MESSAGE, result: Optional["CheckResult"] = None) -> None:
        super().__init__(message)
        self.result = result


class ConfigError(ValueError):
    """A configuration file could not be read or decoded."""
