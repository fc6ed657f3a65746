import logging
import os

import pytest

from i18next_checker.config import get_settings
from i18next_checker.obs.logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    # Keep I18N_CHECKER_* variables from the caller's shell out of the tests
    for name in list(os.environ):
        if name.upper().startswith("I18N_CHECKER_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
