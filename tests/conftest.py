"""
Common fixtures for the TTS MOS test suite.

Provides a realistic ratings-table payload, in-memory stores, and a fake
HTTP session so individual test modules stay focused on their assertions.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest
import requests

from tts_mos.evaluation.ratings_table import TableResponse
from tts_mos.storage.kv_store import InMemoryStore


# ---------------------------------------------------------------------------
# Ratings table fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def table_payload() -> Dict[str, Any]:
    """Wire-format ratings table: ground truth plus three models."""
    return {
        "categories": [
            "Male-Seen Thai",
            "Male-Unseen English",
            "Male-Not Used",
            "Female-Seen Thai",
            "Female-Unseen Thai w/ Trans.",
            "Female-Not Used",
        ],
        "tableData": [
            {
                "modelId": "0",
                "modelName": "Ground Truth",
                "Male-Seen Thai": {"avg": 4.9, "count": 20},
                "Female-Seen Thai": {"avg": 4.8, "count": 18},
            },
            {
                "modelId": "1",
                "modelName": "VITS Multi",
                "Male-Seen Thai": {"avg": 3.456, "count": 12},
                "Male-Unseen English": {"avg": 2.5, "count": 7},
                "Female-Seen Thai": {"avg": 3.1, "count": 9},
            },
            {
                "modelId": "2",
                "modelName": "VITS Large",
                "Male-Seen Thai": {"avg": 4.125, "count": 15},
                "Female-Seen Thai": {"avg": 2.0, "count": 4},
                "Female-Unseen Thai w/ Trans.": {"avg": 3.75, "count": 8},
            },
            {
                "modelId": "5",
                "modelName": "VITS Small",
                "Male-Seen Thai": {"avg": 1.0, "count": 3},
                "Male-Unseen English": "n/a",
            },
        ],
        "totalRatings": 96,
    }


@pytest.fixture
def table_response(table_payload: Dict[str, Any]) -> TableResponse:
    return TableResponse.from_dict(table_payload)


# ---------------------------------------------------------------------------
# Store fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def memory_store() -> InMemoryStore:
    """Empty in-memory key/value store."""
    return InMemoryStore()


@pytest.fixture
def thai_store() -> InMemoryStore:
    """Store pre-seeded as if the user had picked Thai on a previous visit."""
    return InMemoryStore({"language": "th"})


# ---------------------------------------------------------------------------
# HTTP fakes
# ---------------------------------------------------------------------------


class FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200, raw: Optional[str] = None):
        self.payload = payload
        self.status_code = status_code
        self.raw = raw

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        if self.raw is not None:
            raise ValueError(f"Expecting value: {self.raw[:20]!r}")
        return self.payload


class FakeSession:
    """Records GET calls and returns a canned response or raises."""

    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def get(self, url: str, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def ok_session(table_payload: Dict[str, Any]) -> FakeSession:
    return FakeSession(FakeResponse(table_payload))


class StaticSource:
    """TableSource that returns a fixed table or raises a fixed error."""

    def __init__(self, table: Optional[TableResponse] = None, error: Optional[Exception] = None):
        self.table = table
        self.error = error
        self.fetch_count = 0

    def fetch(self) -> TableResponse:
        self.fetch_count += 1
        if self.error is not None:
            raise self.error
        return self.table
