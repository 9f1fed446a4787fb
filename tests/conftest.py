"""Pytest configuration for test environment setup.

- Forces ``DISABLE_FILE_LOGS=1`` to avoid writing log files during tests.
- Ensures the project root is available on ``sys.path`` for imports.
- Provides a ``site_root`` fixture: a self-contained site source tree using
  the bundled templates and static files with small, known data.
"""

import json
import os
import shutil
import signal
import sys

os.environ.setdefault("DISABLE_FILE_LOGS", "1")  # Avoid creating log files during tests
from pathlib import Path

import pytest

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

_TEST_TIMEOUT = int(os.environ.get("PYTEST_TEST_TIMEOUT", "10"))


def _timeout_handler(signum, frame):
    """Test Timeout handler."""
    raise TimeoutError(f"Test exceeded {_TEST_TIMEOUT} seconds timeout")


def pytest_runtest_setup(item):
    """Test Pytest runtest setup."""
    if hasattr(signal, "SIGALRM"):
        signal.signal(signal.SIGALRM, _timeout_handler)
        signal.alarm(_TEST_TIMEOUT)


def pytest_runtest_teardown(item, nextitem):
    """Test Pytest runtest teardown."""
    if hasattr(signal, "SIGALRM"):
        signal.alarm(0)


SAMPLE_SECTIONS = [
    {
        "title": "Featured",
        "projects": [
            {"slug": "a", "title": "Alpha", "year": 2021, "filters": ["games"]},
            {"slug": "b", "title": "Beta", "year": 2022, "filters": ["tools"]},
        ],
    },
    {
        "title": "Cross-listed",
        "projects": [
            {"slug": "a", "title": "Alpha (dup)", "year": 2021},
            {
                "slug": "x",
                "title": "External",
                "year": 2022,
                "externalUrl": "https://example.com/x",
            },
        ],
    },
]

SAMPLE_TAGS = [
    {"key": "games", "name": "Games"},
    {"key": "tools", "name": "Tools"},
]


def write_file(path: Path, text: str) -> None:
    """Write helper that ensures parent directory exists."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def write_site_data(root: Path, sections=None, tags=None) -> None:
    """Write ``projects.json`` and ``filter-tags.json`` under ``root/data``."""
    data_dir = root / "data"
    write_file(
        data_dir / "projects.json",
        json.dumps({"sections": SAMPLE_SECTIONS if sections is None else sections}),
    )
    write_file(
        data_dir / "filter-tags.json",
        json.dumps(SAMPLE_TAGS if tags is None else tags),
    )


@pytest.fixture
def site_data_writer():
    """Return ``write_site_data`` for tests that need custom sections or tags."""
    return write_site_data


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Return a site source root with bundled templates/static and sample data."""
    root = tmp_path / "site"
    shutil.copytree(ROOT / "templates", root / "templates")
    shutil.copytree(ROOT / "static", root / "static")
    (root / "data" / "content").mkdir(parents=True)
    write_site_data(root)
    return root
