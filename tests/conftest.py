"""Pytest configuration for test isolation.

Reports and log files default to project-relative ``./output`` and ``./logs``
directories. Each test gets its own temporary directories instead, so runs
never write into the working tree.
"""

import logging
from pathlib import Path

import pytest

from config import Config


@pytest.fixture(autouse=True)
def _isolate_output_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(Config, "OUTPUT_DIR", tmp_path / "output")
    monkeypatch.setattr(Config, "LOG_DIR", tmp_path / "logs")


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Entry points reconfigure the root logger; undo that after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def make_pdf(tmp_path: Path):
    """Build a PDF whose text layer holds the given lines, one page per text."""
    import fitz

    def _make(name: str, *pages: str) -> Path:
        path = tmp_path / name
        doc = fitz.open()
        for text in pages:
            page = doc.new_page()
            if text:
                page.insert_text((36, 48), text, fontsize=10)
        doc.save(path)
        doc.close()
        return path

    return _make
