"""Remove unused keys from locale files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence

from ..obs.reporter import Reporter
from ..tree import prune
from ..utils.fs import write_file_safe
from .reader import load_locale, locale_file

logger = logging.getLogger("i18next_checker.cleaner")


def dump_locale(data: dict) -> str:
    """Serialize a locale object the way the files are written: 2-space indent, trailing newline."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


class KeyCleaner:
    """Rewrite locale files keeping only the keys in a used-key set.

    Files are rewritten in place and only when something was removed. Running
    the cleaner again with the same keys removes nothing and returns ``0``.
    """

    def __init__(self, reporter: Optional[Reporter] = None) -> None:
        self.reporter = reporter or Reporter()

    def clean(
        self,
        locale_dir: str | Path,
        languages: Sequence[str],
        namespaces: Sequence[str],
        used_keys: Iterable[str],
        verbose: bool = False,
    ) -> int:
        """Return the total number of keys removed across all files."""
        keys = set(used_keys)
        total = 0
        for lang in languages:
            for namespace in namespaces:
                total += self.clean_file(locale_dir, lang, namespace, keys, verbose)
        return total

    def clean_file(
        self,
        locale_dir: str | Path,
        language: str,
        namespace: str,
        used_keys: set[str],
        verbose: bool = False,
    ) -> int:
        path = locale_file(locale_dir, language, namespace)
        data = load_locale(path)
        if data is None:
            return 0

        cleaned, removed = prune(data, used_keys)
        if not removed:
            return 0

        if not write_file_safe(path, dump_locale(cleaned)):
            logger.error("Failed to write %s", path, extra={"path": path})
            return 0

        if verbose:
            for key in removed:
                self.reporter.success(f"[{language}/{namespace}] Removed: {key}")
        return len(removed)
