from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Sequence, Set

from ..models import DefinedKeyIndex
from ..tree import flatten
from ..utils.fs import parse_json_file

logger = logging.getLogger("i18next_checker.reader")


def locale_file(locale_dir: str | Path, language: str, namespace: str) -> Path:
    return Path(locale_dir) / language / f"{namespace}.json"


def load_locale(path: Path) -> Optional[dict[str, Any]]:
    """Return the decoded locale object at ``path``, or ``None``.

    ``None`` covers missing files, invalid JSON and documents whose top level
    is not an object.
    """
    data = parse_json_file(path)
    if not isinstance(data, dict):
        return None
    return data


class LocaleReader:
    """Load the keys defined in ``{locale_dir}/{language}/{namespace}.json``."""

    def read(
        self,
        locale_dir: str | Path,
        languages: Sequence[str],
        namespaces: Sequence[str],
    ) -> DefinedKeyIndex:
        # every requested language gets an entry, even an empty one
        return {lang: self.read_language(locale_dir, lang, namespaces) for lang in languages}

    def read_language(self, locale_dir: str | Path, language: str, namespaces: Sequence[str]) -> Set[str]:
        keys: Set[str] = set()
        for namespace in namespaces:
            keys |= self.read_namespace(locale_dir, language, namespace)
        return keys

    def read_namespace(self, locale_dir: str | Path, language: str, namespace: str) -> Set[str]:
        path = locale_file(locale_dir, language, namespace)
        data = load_locale(path)
        if data is None:
            logger.error("Failed to read or parse %s", path, extra={"path": path})
            return set()
        return flatten(data)
