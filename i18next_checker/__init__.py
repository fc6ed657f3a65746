"""Check i18next translation keys used in source code against locale JSON files."""

from .config import CheckerSettings, get_settings, load_settings
from .core import (
    I18nextChecker,
    KeyCleaner,
    KeyComparator,
    KeyExtractor,
    LocaleReader,
    locale_parity,
)
from .errors import CHECK_FAILED_MESSAGE, ConfigError, I18nextCheckError
from .models import CheckResult, UsedKey
from .plugin import CheckerPlugin, i18next_checker
from .tree import flatten, prune

__version__ = "0.1.0"

__all__ = [
    "CHECK_FAILED_MESSAGE",
    "CheckResult",
    "CheckerPlugin",
    "CheckerSettings",
    "ConfigError",
    "I18nextCheckError",
    "I18nextChecker",
    "KeyCleaner",
    "KeyComparator",
    "KeyExtractor",
    "LocaleReader",
    "UsedKey",
    "flatten",
    "get_settings",
    "i18next_checker",
    "load_settings",
    "locale_parity",
    "prune",
]
