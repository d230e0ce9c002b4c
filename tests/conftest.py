from __future__ import annotations

from pathlib import Path

import pytest

from spellfix.corpus import save_table
from spellfix.spellcheck import SpellChecker


@pytest.fixture
def table() -> dict[str, int]:
    return {"the": 100, "cat": 50, "bat": 10, "cot": 5, "kitten": 3, "hello": 1}


@pytest.fixture
def checker(table: dict[str, int]) -> SpellChecker:
    return SpellChecker(table)


@pytest.fixture
def table_file(tmp_path: Path, table: dict[str, int]) -> Path:
    path = tmp_path / "corpus.pkl"
    save_table(table, path)
    return path
