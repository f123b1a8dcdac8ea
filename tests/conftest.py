"""
Shared pytest fixtures for all tests.
"""

import os
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Automatic test markers based on path
# ---------------------------------------------------------------------------
# We want to avoid sprinkling `@pytest.mark.unit` / `integration` decorators
# throughout the codebase.  Instead, assign the marker implicitly from the
# directory the test file lives in.


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]):
    """Dynamically add pytest markers depending on filepath.

    Any test located in ``tests/unit`` gets the ``unit`` marker and tests in
    ``tests/integration`` get ``integration``.

    This allows developers to drop explicit decorators in test source files
    while retaining the same marker-based selection semantics (e.g.
    ``pytest -m unit``).
    """

    root_path = Path(config.rootdir)

    for item in items:
        # Convert the file path to a string relative to the project root
        rel_path = Path(item.fspath).resolve().relative_to(root_path).as_posix()

        if rel_path.startswith("tests/unit/"):
            item.add_marker("unit")
        elif rel_path.startswith("tests/integration/"):
            item.add_marker("integration")


# ---------------------------------------------------------------------------
# Isolate tests from the developer's environment
# ---------------------------------------------------------------------------
# ``Settings()`` reads ``TEXTCHUNK_*`` variables.  A value exported in the
# shell (e.g. a smaller chunk size for local experiments) would silently
# change every default-configured splitter, so strip them for each test.


@pytest.fixture(autouse=True)
def _clean_textchunk_env(monkeypatch: pytest.MonkeyPatch):
    """Remove any ``TEXTCHUNK_*`` environment variable for the test's duration."""
    for key in list(os.environ):
        if key.startswith("TEXTCHUNK_"):
            monkeypatch.delenv(key)
    yield
