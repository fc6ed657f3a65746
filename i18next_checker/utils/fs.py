"""File system helpers that report failure instead of raising."""

from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Iterator, Sequence

SOURCE_EXTENSIONS: tuple[str, ...] = (".ts", ".tsx", ".js", ".jsx")
EXCLUDED_DIRS: frozenset[str] = frozenset({"node_modules", ".git", "dist", "build", "output"})

logger = logging.getLogger("i18next_checker.fs")


def scan_directory(
    root: str | Path,
    extensions: Sequence[str] = SOURCE_EXTENSIONS,
    exclude_dirs: frozenset[str] | set[str] = EXCLUDED_DIRS,
) -> Iterator[Path]:
    """Yield files under ``root`` with one of ``extensions``.

    Directories named in ``exclude_dirs`` and symlinked directories are not
    entered. Entries are visited in sorted order so repeated scans yield the
    same sequence. A missing or unreadable directory yields nothing.
    """
    root = Path(root)
    if not root.is_dir():
        return
    try:
        entries = sorted(root.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        logger.warning("cannot list %s: %s", root, exc)
        return
    suffixes = tuple(extensions)
    for entry in entries:
        # symlinked directories are never entered
        if entry.is_dir() and not entry.is_symlink():
            if entry.name not in exclude_dirs:
                yield from scan_directory(entry, extensions, exclude_dirs)
        elif entry.name.endswith(suffixes):
            yield entry


def read_file_safe(path: str | Path) -> str | None:
    """Return the text of ``path`` or ``None`` if it is missing or unreadable."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None


def write_file_safe(path: str | Path, content: str) -> bool:
    """Replace ``path`` with ``content``; return ``False`` on failure.

    The content is encoded first and written to a temporary file next to
    ``path``, which then replaces it. On any failure the original file is
    left as it was.
    """
    path = Path(path)
    try:
        data = content.encode("utf-8")
    except UnicodeError as exc:
        logger.debug("cannot encode content for %s: %s", path, exc)
        return False
    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        if path.exists():
            shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except OSError as exc:
        logger.debug("write failed for %s: %s", path, exc)
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        return False
    return True


def parse_json_file(path: str | Path) -> Any | None:
    """Decode the JSON document at ``path``.

    Returns ``None`` when the file is missing, empty or not valid JSON.
    """
    content = read_file_safe(path)
    if not content:
        return None
    try:
        return json.loads(content)
    except ValueError:
        return None
