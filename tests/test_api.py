"""
Tests for the correction web service.
"""
from __future__ import annotations

from pathlib import Path

from fastapi.testclient import TestClient

from spellfix.api import create_app
from spellfix.config import Settings


class TestCorrectRoute:
    def test_exact_match(self, table: dict[str, int]) -> None:
        with TestClient(create_app(table)) as client:
            response = client.get("/correct/hello")

        assert response.status_code == 200
        assert response.json() == {"correct_word": "hello", "edits": 0, "found": True}

    def test_one_edit(self, table: dict[str, int]) -> None:
        with TestClient(create_app(table)) as client:
            response = client.get("/correct/teh")

        assert response.json() == {"correct_word": "the", "edits": 1, "found": True}

    def test_two_edits(self, table: dict[str, int]) -> None:
        with TestClient(create_app(table)) as client:
            response = client.get("/correct/katen")

        assert response.json() == {"correct_word": "kitten", "edits": 2, "found": True}

    def test_not_found(self, table: dict[str, int]) -> None:
        with TestClient(create_app(table)) as client:
            response = client.get("/correct/zzzzzz")

        assert response.json() == {"correct_word": "zzzzzz", "edits": 1, "found": False}

    def test_length_guard_from_settings(self, table: dict[str, int]) -> None:
        app = create_app(table, Settings(MAX_WORD_LENGTH=3))
        with TestClient(app) as client:
            short = client.get("/correct/teh").json()
            long = client.get("/correct/kiten").json()

        assert short["correct_word"] == "the"
        assert long == {"correct_word": "kiten", "edits": 1, "found": False}

    def test_loads_table_from_settings(self, table_file: Path) -> None:
        app = create_app(settings=Settings(CORPUS_PATH=str(table_file)))
        with TestClient(app) as client:
            response = client.get("/correct/cbt")

        assert response.json() == {"correct_word": "cat", "edits": 1, "found": True}


class TestHealthRoute:
    def test_health(self, table: dict[str, int]) -> None:
        with TestClient(create_app(table)) as client:
            response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["words"] == len(table)
        assert "timestamp" in data
