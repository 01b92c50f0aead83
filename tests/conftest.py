"""
Pytest configuration and shared fixtures.
"""

import pytest
from pathlib import Path
from typing import List

from animalmatch.logger import get_logger, reset_logger

ENV_KEYS = [
    "ANIMALMATCH_CATALOG",
    "ANIMALMATCH_BONUS",
    "ANIMALMATCH_LOG_LEVEL",
    "ANIMALMATCH_LOG_DIR",
]


@pytest.fixture(autouse=True)
def quiet_logger():
    """Fresh global logger per test, console output off."""
    reset_logger()
    get_logger(enable_console=False)
    yield
    reset_logger()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Strip ANIMALMATCH_* variables so the host environment can't leak in.

    setenv first so teardown also removes values a .env load wrote directly.
    """
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


@pytest.fixture
def small_catalog() -> List[str]:
    """A handful of lower-cased animals, in catalog order."""
    return ["cat", "bobcat", "cattle", "wombat", "bat", "weasel", "dog"]


@pytest.fixture
def catalog_text(small_catalog) -> str:
    """The small catalog as a newline-delimited block."""
    return "\n".join(small_catalog) + "\n"


@pytest.fixture
def catalog_file(tmp_path, catalog_text) -> Path:
    """The small catalog written to disk."""
    path = tmp_path / "animals.txt"
    path.write_text(catalog_text, encoding="utf-8")
    return path
