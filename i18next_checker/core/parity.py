from __future__ import annotations

from typing import Dict, List

from ..models import DefinedKeyIndex


def locale_parity(defined_keys: DefinedKeyIndex) -> Dict[str, List[str]]:
    """Return, per language, keys other languages define but it lacks.

    Languages with nothing missing are left out.
    """
    if not defined_keys:
        return {}
    all_keys = set().union(*defined_keys.values())
    return {
        lang: sorted(all_keys - keys)
        for lang, keys in defined_keys.items()
        if all_keys - keys
    }
