#!/usr/bin/env python3
"""Check ``t()`` keys in a project's sources against its locale files.

Standalone wrapper around :func:`i18next_checker.cli.main` for checkouts where
the package is not installed.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the package is importable when running as a standalone script
BASE_DIR = Path(__file__).resolve().parents[1]
sys.path.append(str(BASE_DIR))

from i18next_checker.cli import main  # noqa: E402

if __name__ == "__main__":
    raise SystemExit(main())
