"""Pytest configuration for test isolation.

The CLI adopts the user's collation locale via ``locale.setlocale``, which is
process-global. Restore ``LC_COLLATE`` after every test so ordering
assertions never depend on which tests ran before them, and keep a stray
``.env`` in the working tree (or a real token in the environment) from
leaking into CLI runs.
"""

from __future__ import annotations

import locale
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _restore_collation() -> Iterator[None]:
    saved = locale.setlocale(locale.LC_COLLATE)
    yield
    locale.setlocale(locale.LC_COLLATE, saved)


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    for var in (
        "LUNCH_MONEY_TOKEN",
        "LUNCH_MONEY_API_URL",
        "LUNCH_MONEY_TIMEOUT",
        "ACCOUNT_OVERVIEW_LOG_LEVEL",
        "FORCE_COLOR",
    ):
        # setenv first so teardown also removes values a test's .env introduced.
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
