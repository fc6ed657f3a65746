"""Command line entry point for the translation key check."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from pydantic import ValidationError

from .config import find_config_file, load_settings
from .core.checker import I18nextChecker
from .errors import ConfigError, I18nextCheckError
from .obs.logging import configure_logging

logger = logging.getLogger("i18next_checker.cli")

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="i18next-checker",
        description="Check t() keys in source code against locale JSON files",
    )
    parser.add_argument(
        "project_root",
        nargs="?",
        default=".",
        help="Project root the directories are resolved against (default: .)",
    )
    parser.add_argument("--config", type=Path, help="JSON or YAML config file")
    parser.add_argument("--src-dir", help="Source directory (default: source)")
    parser.add_argument("--locale-dir", help="Locale directory (default: public/locale)")
    parser.add_argument(
        "--language",
        dest="languages",
        action="append",
        help="Language to check; repeat for several (default: zh-CN, en-US)",
    )
    parser.add_argument(
        "--namespace",
        dest="namespaces",
        action="append",
        help="Namespace file name without .json; repeat for several (default: console)",
    )
    parser.add_argument(
        "--fail-on-error",
        action="store_true",
        default=None,
        help="Exit non-zero when translation keys are missing",
    )
    parser.add_argument(
        "--no-check-unused",
        dest="check_unused",
        action="store_false",
        default=None,
        help="Do not report unused keys",
    )
    parser.add_argument(
        "--remove-unused",
        action="store_true",
        default=None,
        help="Delete unused keys from the locale files",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostic log level (default: WARNING)",
    )
    parser.add_argument("--log-json", action="store_true", help="Emit diagnostics as JSON lines")
    return parser


def _options(args: argparse.Namespace) -> dict[str, Any]:
    return {
        "src_dir": args.src_dir,
        "locale_dir": args.locale_dir,
        "languages": args.languages,
        "namespaces": args.namespaces,
        "fail_on_error": args.fail_on_error,
        "check_unused": args.check_unused,
        "remove_unused": args.remove_unused,
    }


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, json_format=args.log_json)

    config_path = args.config or find_config_file(args.project_root)
    try:
        settings = load_settings(_options(args), config_path=config_path)
    except (ConfigError, ValidationError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return EXIT_CONFIG

    try:
        I18nextChecker(settings).check(args.project_root)
    except I18nextCheckError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_FAILED
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
