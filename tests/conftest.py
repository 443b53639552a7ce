"""Root test configuration — session-level cleanup of runtime artifacts"""

from pathlib import Path

import pytest


_PROJECT_ROOT = Path(__file__).parent.parent

_CLEANUP_FILES = ["chapterize.db", "test.db"]


@pytest.fixture(scope="session", autouse=True)
def cleanup_artifacts():
    """Remove DB files created during the test session."""
    yield
    for name in _CLEANUP_FILES:
        p = _PROJECT_ROOT / name
        if p.exists():
            p.unlink()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep developer CHAPTERIZE_* env vars from leaking into tests."""
    for name in ("CONFIG", "DB_URL", "STORAGE_DIR", "MIN_MANUSCRIPT_CHARS", "MIN_CHAPTER_CHARS",
                 "ANCHOR_SLUG_LENGTH", "LOG_LEVEL"):
        monkeypatch.delenv(f"CHAPTERIZE_{name}", raising=False)
