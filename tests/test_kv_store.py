"""
Tests for tts_mos/storage/kv_store.py

Covers the in-memory and JSON-file stores and the LanguagePreference
wrapper that reads and writes the "language" key.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import List, Optional

import pytest

from tts_mos.exceptions import ValidationError
from tts_mos.storage.kv_store import InMemoryStore, JsonFileStore, LanguagePreference


class TestInMemoryStore:

    def test_get_missing_returns_none(self, memory_store: InMemoryStore):
        assert memory_store.get("language") is None

    def test_set_then_get(self, memory_store: InMemoryStore):
        memory_store.set("language", "th")
        assert memory_store.get("language") == "th"

    def test_initial_contents_copied(self):
        initial = {"language": "en"}
        store = InMemoryStore(initial)
        store.set("language", "th")
        assert initial["language"] == "en"


class TestJsonFileStore:

    def test_missing_file_is_empty(self, tmp_path: Path):
        store = JsonFileStore(tmp_path / "prefs.json")
        assert store.get("language") is None

    def test_set_creates_file(self, tmp_path: Path):
        path = tmp_path / "nested" / "prefs.json"
        store = JsonFileStore(path)
        store.set("language", "th")
        assert json.loads(path.read_text(encoding="utf-8")) == {"language": "th"}

    def test_survives_new_instance(self, tmp_path: Path):
        path = tmp_path / "prefs.json"
        JsonFileStore(path).set("language", "th")
        assert JsonFileStore(path).get("language") == "th"

    def test_set_keeps_other_keys(self, tmp_path: Path):
        path = tmp_path / "prefs.json"
        path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")
        JsonFileStore(path).set("language", "en")
        assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "dark", "language": "en"}

    @pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
    def test_unreadable_file_is_empty(self, tmp_path: Path, content: str):
        path = tmp_path / "prefs.json"
        path.write_text(content, encoding="utf-8")
        assert JsonFileStore(path).get("language") is None


class TestLanguagePreference:

    def test_default_when_unset(self, memory_store: InMemoryStore):
        assert LanguagePreference(memory_store, "th").load() == "th"

    def test_stored_value_wins(self, memory_store: InMemoryStore):
        memory_store.set("language", "en")
        assert LanguagePreference(memory_store, "th").load() == "en"

    def test_unsupported_stored_value_falls_back(self, memory_store: InMemoryStore):
        memory_store.set("language", "de")
        assert LanguagePreference(memory_store, "en").load() == "en"

    def test_save_writes_language_key(self, memory_store: InMemoryStore):
        LanguagePreference(memory_store, "en").save("th")
        assert memory_store.get("language") == "th"

    def test_save_rejects_unsupported(self, memory_store: InMemoryStore):
        with pytest.raises(ValidationError) as exc_info:
            LanguagePreference(memory_store, "en").save("jp")
        assert exc_info.value.field == "language"

    def test_bad_default_rejected(self, memory_store: InMemoryStore):
        with pytest.raises(ValidationError, match="Unsupported default language"):
            LanguagePreference(memory_store, "xx")


class TestJsonFileStoreConcurrency:
    """Readers on other threads never see a half-written file."""

    def test_concurrent_set_and_get(self, tmp_path: Path):
        path = tmp_path / "prefs.json"
        JsonFileStore(path).set("language", "th")
        lost: List[Optional[str]] = []

        def writer():
            store = JsonFileStore(path)
            for _ in range(2000):
                store.set("language", "th")

        def reader():
            store = JsonFileStore(path)
            for _ in range(2000):
                value = store.get("language")
                if value != "th":
                    lost.append(value)

        threads = [threading.Thread(target=writer), threading.Thread(target=writer),
                   threading.Thread(target=reader)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert lost == []
        assert json.loads(path.read_text(encoding="utf-8")) == {"language": "th"}

    def test_no_temp_files_left_behind(self, tmp_path: Path):
        path = tmp_path / "prefs.json"
        store = JsonFileStore(path)
        store.set("language", "en")
        store.set("language", "th")
        assert sorted(p.name for p in tmp_path.iterdir()) == ["prefs.json"]
