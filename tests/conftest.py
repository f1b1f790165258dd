"""Root test configuration: isolated site tree and post-writing helpers"""

import logging
from datetime import datetime, timezone
from pathlib import Path

import pytest


@pytest.fixture(name="now")
def now_fixture() -> datetime:
    """Fixed build time shared by pipeline and CLI tests."""
    return datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(name="post_source")
def post_source_fixture():
    """Frontmatter post source builder; omit date to leave it out of the header."""
    def _source(title: str, date: str = None, description: str = "A short summary.") -> str:
        header = f"title: {title}\n" + (f"date: '{date}'\n" if date else "")
        return f"---\n{header}---\n\n# {title}\n\n{description}\n"
    return _source


@pytest.fixture(name="site")
def site_fixture(tmp_path, monkeypatch) -> Path:
    """Run from a fresh tmp site root containing an empty pages/posts directory."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "pages" / "posts").mkdir(parents=True)
    return tmp_path


@pytest.fixture(name="write_post")
def write_post_fixture(site):
    """Write a post under pages/posts and return its relative path string."""
    def _write(rel: str, source: str) -> str:
        path = Path("pages") / "posts" / rel
        (site / path).parent.mkdir(parents=True, exist_ok=True)
        (site / path).write_text(source, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo root level changes made by configure_logging."""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
