"""
Key/value stores for durable UI preferences.

The pages only ever persist the language choice, but they talk to an
injected store so the backend can be swapped (an in-memory dict in
tests, a JSON file on disk when served).
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict, Optional, Protocol

from tts_mos.config import settings
from tts_mos.exceptions import ValidationError

logger = logging.getLogger(__name__)

_WRITE_LOCK = threading.Lock()


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class InMemoryStore:
    """Dict-backed store; contents live as long as the object."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """
    Store persisted as a flat JSON object on disk.

    The file is re-read on every ``get`` so that two pages sharing the
    same path see each other's writes. Writes go through a temp file
    and ``os.replace``. A missing or unreadable file behaves as an empty
    store. One file is one store: every session pointed at the same path
    shares its values.
    """

    def __init__(self, path: str | Path = settings.PREFERENCES_PATH):
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Preferences file unreadable (%s): %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Preferences file is not a JSON object: %s", self.path)
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        # Streamlit runs each session on its own thread; readers only ever
        # see the old or the new file, never a half-written one.
        with _WRITE_LOCK:
            data = self._load()
            data[key] = value
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self.path.parent,
                prefix=f".{self.path.name}.", suffix=".tmp", delete=False,
            ) as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
                tmp_path = Path(f.name)
            try:
                os.replace(tmp_path, self.path)
            except OSError:
                tmp_path.unlink(missing_ok=True)
                raise


class LanguagePreference:
    """Reads and writes the ``"language"`` key of a KeyValueStore."""

    def __init__(self, store: KeyValueStore, default: str):
        if default not in settings.SUPPORTED_LANGUAGES:
            raise ValidationError(f"Unsupported default language {default!r}", field="default")
        self.store = store
        self.default = default

    def load(self) -> str:
        """Stored language, or the default when unset or unsupported."""
        saved = self.store.get(settings.LANGUAGE_KEY)
        if saved is None:
            return self.default
        if saved not in settings.SUPPORTED_LANGUAGES:
            logger.warning("Ignoring unsupported stored language %r", saved)
            return self.default
        return saved

    def save(self, language: str) -> None:
        if language not in settings.SUPPORTED_LANGUAGES:
            raise ValidationError(f"Unsupported language {language!r}", field="language")
        self.store.set(settings.LANGUAGE_KEY, language)
