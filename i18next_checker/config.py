# config.py

"""Checker configuration.

Explicit options passed to the checker take precedence.
Next come values from an optional ``i18next-checker.json`` or
``i18next-checker.yaml`` file, then ``I18N_CHECKER_*`` environment variables,
and finally the defaults below. Option keys may use either ``snake_case`` or
the ``camelCase`` names used by the JavaScript build plugins (``srcDir``,
``failOnError``...).
"""

from __future__ import annotations

import json
import re
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError

CONFIG_FILENAMES = ("i18next-checker.json", "i18next-checker.yaml", "i18next-checker.yml")

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


class CheckerSettings(BaseSettings):
    """Options controlling where keys are looked up and how failures surface."""

    model_config = SettingsConfigDict(env_prefix="I18N_CHECKER_", extra="forbid")

    src_dir: str = "source"
    locale_dir: str = "public/locale"
    languages: list[str] = ["zh-CN", "en-US"]
    namespaces: list[str] = ["console"]
    fail_on_error: bool = False
    check_unused: bool = True
    # only honoured together with check_unused
    remove_unused: bool = False

    @field_validator("src_dir", "locale_dir")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @property
    def prune_enabled(self) -> bool:
        return self.check_unused and self.remove_unused


def normalize_keys(options: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``options`` with camelCase keys converted to snake_case."""
    return {_CAMEL_RE.sub("_", str(k)).lower(): v for k, v in options.items()}


def find_config_file(project_root: str | Path) -> Optional[Path]:
    """Return the first checker config file found in ``project_root``."""
    root = Path(project_root)
    for name in CONFIG_FILENAMES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


def read_config_file(path: str | Path) -> dict[str, Any]:
    """Decode a JSON or YAML config file into a mapping of options."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}: {exc}") from exc
    try:
        if path.suffix.lower() == ".json":
            raw = json.loads(text) if text.strip() else {}
        else:
            raw = yaml.safe_load(text) or {}
    except (ValueError, yaml.YAMLError) as exc:
        raise ConfigError(f"invalid config file {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"config file {path} must contain a mapping")
    return normalize_keys(raw)


def load_settings(
    options: Optional[Mapping[str, Any]] = None,
    config_path: str | Path | None = None,
) -> CheckerSettings:
    """Build settings from a config file, the environment and ``options``."""
    data: dict[str, Any] = {}
    if config_path is not None:
        data.update(read_config_file(config_path))
    if options:
        data.update({k: v for k, v in normalize_keys(options).items() if v is not None})
    # Init kwargs take precedence over I18N_CHECKER_* variables.
    return CheckerSettings(**data)


@lru_cache
def get_settings() -> CheckerSettings:
    """Return settings for the current directory, cached.

    Tests call ``get_settings.cache_clear()`` after changing the environment.
    """
    return load_settings(config_path=find_config_file(Path.cwd()))
