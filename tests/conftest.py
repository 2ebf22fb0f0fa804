import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"
FIXTURES_ROOT = TESTS_ROOT / "fixtures"

# Make src/ importable as 'layouts' and tests/ importable for helpers
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from layouts.core.logging import reset_logging_for_tests
from helpers.layout_files import LayoutDir

# Env overrides read by load_options(); a developer shell must not leak them into tests.
_LEAK_PRONE_ENV_KEYS = ["LAYOUTS_ROOT", "LAYOUTS_ENCODING"]


@pytest.fixture(autouse=True)
def _isolate_layouts_env(monkeypatch):
    for key in _LEAK_PRONE_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    reset_logging_for_tests()


@pytest.fixture
def layout_dir(tmp_path) -> LayoutDir:
    """Directory of layout files written by the test."""
    return LayoutDir(tmp_path)


@pytest.fixture
def fixtures_root() -> Path:
    return FIXTURES_ROOT
