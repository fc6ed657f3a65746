import io
import shutil
from pathlib import Path

import pytest

from i18next_checker.obs.reporter import Reporter

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def source_dir() -> Path:
    return FIXTURES / "source"


@pytest.fixture
def locale_dir() -> Path:
    return FIXTURES / "public" / "locale"


@pytest.fixture
def report_stream():
    return io.StringIO()


@pytest.fixture
def reporter(report_stream):
    return Reporter(report_stream, color=False)


@pytest.fixture
def project(tmp_path) -> Path:
    """Copy of the fixture project that tests may modify."""
    root = tmp_path / "project"
    shutil.copytree(FIXTURES, root)
    return root
