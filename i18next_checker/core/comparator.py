"""Compare used keys against the keys defined per language."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Set

from ..models import CheckResult, DefinedKeyIndex, UsedKey
from ..obs.reporter import Reporter


class KeyComparator:
    """Compute missing and unused keys and print the report."""

    def __init__(self, reporter: Optional[Reporter] = None) -> None:
        self.reporter = reporter or Reporter()

    def compare(
        self,
        used_keys: Sequence[UsedKey],
        defined_keys: DefinedKeyIndex,
        check_unused: bool = True,
    ) -> CheckResult:
        """Return the per-language diff between ``used_keys`` and ``defined_keys``.

        Missing keys keep the order of their first use; unused keys are
        sorted. Only missing keys set ``has_errors``.
        """
        # dict keeps first-use order for the missing lists
        ordered_used = list(dict.fromkeys(k.key for k in used_keys))
        used_set = set(ordered_used)
        missing_keys: Dict[str, List[str]] = {}
        unused_keys: Dict[str, List[str]] = {}
        has_errors = False

        for lang, lang_keys in defined_keys.items():
            missing = [k for k in ordered_used if k not in lang_keys]
            if missing:
                missing_keys[lang] = missing
                has_errors = True
            if check_unused:
                unused = sorted(k for k in lang_keys if k not in used_set)
                if unused:
                    unused_keys[lang] = unused

        return CheckResult(
            has_errors=has_errors,
            used_keys=used_set,
            defined_keys=defined_keys,
            missing_keys=missing_keys,
            unused_keys=unused_keys,
        )

    def report(
        self,
        used_keys: Sequence[UsedKey],
        result: CheckResult,
        remove_unused: bool = False,
    ) -> None:
        """Print a human-readable report of ``result``.

        With ``remove_unused`` the unused total is left out of the summary,
        since the cleaner reports what it removed.
        """
        out = self.reporter
        total_missing = result.total_missing
        total_unused = result.total_unused

        if not result.has_errors and total_unused == 0:
            out.success("All translation keys are in sync")
            return

        out.title("i18next Translation Checker")
        out.info(
            f"   Scanning {len(result.used_keys)} translation keys "
            f"across {len(result.defined_keys)} languages"
        )
        out.divider()

        first_usage: Dict[str, UsedKey] = {}
        for usage in used_keys:
            first_usage.setdefault(usage.key, usage)

        for lang, lang_keys in result.defined_keys.items():
            self._report_language(lang, lang_keys, result, first_usage)

        out.divider()
        out.summary("Summary")
        if result.has_errors:
            out.error("Check failed")
            out.info(f"  Missing: {total_missing}")
            if total_unused and not remove_unused:
                out.info(f"  Unused: {total_unused}")
        elif total_unused and not remove_unused:
            out.success("All required translations present")
            out.info(f"  Unused: {total_unused}")
        else:
            out.success("Perfect! All translations match")
            out.info(f"  Keys checked: {len(result.used_keys)}")
        out.plain("")

    def _report_language(
        self,
        language: str,
        lang_keys: Set[str],
        result: CheckResult,
        first_usage: Dict[str, UsedKey],
    ) -> None:
        missing = result.missing_keys.get(language, [])
        unused = result.unused_keys.get(language, [])
        if not missing and not unused:
            return

        out = self.reporter
        out.language(f"Language: {language}")
        out.info(f"  Defined keys: {len(lang_keys)} | Used keys: {len(result.used_keys)}")

        if missing:
            out.section_title("Missing translations:", "red")
            for key in sorted(missing):
                out.error(key)
                usage = first_usage.get(key)
                if usage is not None:
                    out.dim(f"    └─ {usage.file}:{usage.line}")

        if unused:
            out.section_title("Unused translations:", "yellow")
            for key in sorted(unused):
                out.warning(key)
