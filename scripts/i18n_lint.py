#!/usr/bin/env python3
# i18n_lint.py
"""Ensure locale files define the same keys across languages."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

# Ensure the package is importable when running as a standalone script
BASE_DIR = Path(__file__).resolve().parents[1]
sys.path.append(str(BASE_DIR))

from i18next_checker.config import get_settings  # noqa: E402
from i18next_checker.core.parity import locale_parity  # noqa: E402
from i18next_checker.core.reader import LocaleReader  # noqa: E402


def lint(locale_dir: Path, languages: Sequence[str], namespaces: Sequence[str]) -> Dict[str, List[str]]:
    """Return keys each language lacks compared with the others."""
    defined = LocaleReader().read(locale_dir, languages, namespaces)
    return locale_parity(defined)


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Check locale files share the same keys")
    parser.add_argument("--locale-dir", type=Path, default=Path(settings.locale_dir))
    parser.add_argument("--language", dest="languages", action="append")
    parser.add_argument("--namespace", dest="namespaces", action="append")
    args = parser.parse_args(argv)

    missing = lint(
        args.locale_dir,
        args.languages or settings.languages,
        args.namespaces or settings.namespaces,
    )
    if missing:
        for lang, keys in missing.items():
            print(f"{lang} missing keys: {', '.join(keys)}")
        return 1

    print("All translation keys present.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
