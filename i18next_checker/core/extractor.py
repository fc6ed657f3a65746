"""Extract translation keys from source files.

Extraction is a line-by-line regular expression match, not a parse: a call
such as ``t('common.save')`` is found, while a call whose string argument sits
on a following line is not. Keys containing ``${`` or ``{{`` are treated as
dynamic and skipped.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List

from ..models import UsedKey
from ..utils.fs import read_file_safe, scan_directory

logger = logging.getLogger("i18next_checker.extractor")

# t('key'), t("key") or t(`key`)
T_CALL_RE = re.compile(r"""\bt\s*\(\s*['"`]([^'"`]+)['"`]""")

_INTERPOLATION_MARKERS = ("${", "{{")


def has_interpolation(key: str) -> bool:
    return any(marker in key for marker in _INTERPOLATION_MARKERS)


class KeyExtractor:
    """Collect ``t()`` keys from a source tree."""

    def extract(self, src_dir: str | Path) -> List[UsedKey]:
        """Return every static key referenced under ``src_dir``.

        A missing directory yields an empty list. Results follow walk order,
        then line order, then position within the line.
        """
        keys: List[UsedKey] = []
        src = Path(src_dir)
        if not src.is_dir():
            logger.info("source directory %s not found", src, extra={"path": src})
            return keys
        for path in scan_directory(src):
            content = read_file_safe(path)
            if content is None:
                logger.warning("cannot read %s", path, extra={"path": path})
                continue
            keys.extend(self.extract_from_text(content, str(path)))
        return keys

    def extract_from_text(self, content: str, file: str) -> List[UsedKey]:
        keys: List[UsedKey] = []
        for index, line in enumerate(content.split("\n"), start=1):
            for match in T_CALL_RE.finditer(line):
                key = match.group(1)
                if key and not has_interpolation(key):
                    keys.append(UsedKey(key=key, file=file, line=index))
        return keys
