"""Build-tool integration.

:func:`i18next_checker` returns an object with two hooks. The host calls
``config_resolved`` once with its resolved configuration (anything exposing a
``root`` attribute or key) and ``build_start`` when a build begins.
"""

from __future__ import annotations

import os
from typing import Any, Mapping, Optional

from .core.checker import I18nextChecker
from .models import CheckResult
from .obs.reporter import Reporter

PLUGIN_NAME = "i18next-checker"


def _resolve_root(config: Any) -> Optional[str]:
    if isinstance(config, Mapping):
        root = config.get("root")
    else:
        root = getattr(config, "root", None)
    return os.fspath(root) if root else None


class CheckerPlugin:
    name = PLUGIN_NAME

    def __init__(self, options: Mapping[str, Any], reporter: Optional[Reporter] = None) -> None:
        self._options = dict(options)
        self._reporter = reporter
        self.checker: Optional[I18nextChecker] = None
        self.project_root: Optional[str] = None

    def _make_checker(self) -> I18nextChecker:
        return I18nextChecker(reporter=self._reporter, **self._options)

    def config_resolved(self, config: Any) -> None:
        self.project_root = _resolve_root(config)
        self.checker = self._make_checker()

    def build_start(self) -> CheckResult:
        """Run the check; raises :class:`~i18next_checker.errors.I18nextCheckError` on failure."""
        if self.checker is None:
            self.checker = self._make_checker()
        if not self.project_root:
            self.project_root = os.getcwd()
        return self.checker.check(self.project_root)


def i18next_checker(
    options: Optional[Mapping[str, Any]] = None,
    reporter: Optional[Reporter] = None,
    **kwargs: Any,
) -> CheckerPlugin:
    """Create the checker plugin.

    ``options`` and keyword arguments are merged, keywords winning, and may
    use snake_case (``src_dir``) or camelCase (``srcDir``) names.
    """
    merged = {**(options or {}), **kwargs}
    return CheckerPlugin(merged, reporter=reporter)
