"""Result types shared by the checker components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Set

# language code -> dotted keys defined across all namespaces
DefinedKeyIndex = Dict[str, Set[str]]


@dataclass(frozen=True)
class UsedKey:
    """One ``t('...')`` occurrence in a source file."""

    key: str
    file: str
    line: int


@dataclass
class CheckResult:
    """Outcome of comparing used keys with the defined ones.

    ``missing_keys`` and ``unused_keys`` only contain languages with at least
    one entry. ``has_errors`` is set by missing keys alone.
    """

    has_errors: bool
    used_keys: Set[str]
    defined_keys: DefinedKeyIndex
    missing_keys: Dict[str, List[str]] = field(default_factory=dict)
    unused_keys: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def total_missing(self) -> int:
        return sum(len(keys) for keys in self.missing_keys.values())

    @property
    def total_unused(self) -> int:
        return sum(len(keys) for keys in self.unused_keys.values())
