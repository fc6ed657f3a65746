"""Run the full check: extract, read, compare, report, optionally prune."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from ..config import CheckerSettings, load_settings
from ..errors import CHECK_FAILED_MESSAGE, I18nextCheckError
from ..models import CheckResult
from ..obs.reporter import Reporter
from .cleaner import KeyCleaner
from .comparator import KeyComparator
from .extractor import KeyExtractor
from .reader import LocaleReader

logger = logging.getLogger("i18next_checker.checker")


class I18nextChecker:
    """Check translation keys for one project.

    Parameters
    ----------
    settings:
        Ready-made :class:`CheckerSettings`. When omitted, settings are built
        from ``options`` (snake_case or camelCase keys) and the environment.
    reporter:
        Destination of the human-readable report; stdout by default.
    """

    def __init__(
        self,
        settings: Optional[CheckerSettings] = None,
        reporter: Optional[Reporter] = None,
        **options: Any,
    ) -> None:
        if settings is None:
            settings = load_settings(options)
        elif options:
            settings = load_settings({**settings.model_dump(), **options})
        self.settings = settings
        self.reporter = reporter or Reporter()
        self.extractor = KeyExtractor()
        self.reader = LocaleReader()
        self.comparator = KeyComparator(self.reporter)
        self.cleaner = KeyCleaner(self.reporter)

    @property
    def options(self) -> CheckerSettings:
        """A copy of the effective settings."""
        return self.settings.model_copy(deep=True)

    def check(self, project_root: str | Path) -> CheckResult:
        """Check ``project_root`` and return the result.

        Raises :class:`I18nextCheckError` when keys are missing and
        ``fail_on_error`` is enabled.
        """
        opts = self.settings
        root = Path(project_root)
        src_path = (root / opts.src_dir).resolve()
        locale_path = (root / opts.locale_dir).resolve()
        logger.debug("checking %s against %s", src_path, locale_path)

        used_keys = self.extractor.extract(src_path)
        defined_keys = self.reader.read(locale_path, opts.languages, opts.namespaces)
        result = self.comparator.compare(used_keys, defined_keys, check_unused=opts.check_unused)
        self.comparator.report(used_keys, result, remove_unused=opts.remove_unused)

        if opts.prune_enabled and result.total_unused > 0:
            self.reporter.divider()
            self.reporter.title("Cleaning unused translations")
            self.reporter.divider()
            removed = self.cleaner.clean(
                locale_path,
                opts.languages,
                opts.namespaces,
                result.used_keys,
                verbose=True,
            )
            if removed > 0:
                self.reporter.divider()
                self.reporter.success(f"Total: Removed {removed} unused translation(s)")

        if result.has_errors and opts.fail_on_error:
            raise I18nextCheckError(CHECK_FAILED_MESSAGE, result=result)
        return result
