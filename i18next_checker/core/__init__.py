from .checker import I18nextChecker
from .cleaner import KeyCleaner
from .comparator import KeyComparator
from .extractor import KeyExtractor
from .parity import locale_parity
from .reader import LocaleReader

__all__ = [
    "I18nextChecker",
    "KeyCleaner",
    "KeyComparator",
    "KeyExtractor",
    "LocaleReader",
    "locale_parity",
]
