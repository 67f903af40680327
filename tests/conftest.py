"""Shared pytest fixtures and test helpers for catalogctl tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from catalogctl.domain.book import Book


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def valid_book() -> Book:
    """A book that satisfies every rule."""
    return Book.of("1234567890", "Title", "Autor", 9.90, "Publisher")


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no catalogctl.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.delenv("CATALOGCTL_CONFIG", raising=False)
    monkeypatch.delenv("CATALOGCTL_VALIDATION__ISBN_CHECKSUM", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def book_record(**overrides: Any) -> dict[str, Any]:
    """A valid book mapping with *overrides* applied."""
    record: dict[str, Any] = {
        "isbn": "1234567890",
        "title": "Title",
        "author": "Author",
        "price": 9.90,
        "publisher": "Publisher",
    }
    record.update(overrides)
    return record


def write_json(path: Path, payload: Any) -> Path:
    """Write *payload* as JSON to *path* and return it."""
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
