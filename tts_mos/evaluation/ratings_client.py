from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urljoin

import requests

from tts_mos.config import settings
from tts_mos.evaluation.ratings_table import TableResponse
from tts_mos.exceptions import RatingsFetchError

logger = logging.getLogger(__name__)


def resolve_url(path: str, base_url: str = settings.API_BASE_URL) -> str:
    """Resolve an API-relative path (``/api/...``) against the API host."""
    return urljoin(base_url.rstrip("/") + "/", path.lstrip("/"))


class RatingsTableClient:
    """Fetches the precomputed ratings table in a single GET."""

    def __init__(
        self,
        base_url: str = settings.API_BASE_URL,
        timeout: float = settings.REQUEST_TIMEOUT_SEC,
        session: Optional[requests.Session] = None,
    ):
        self.url = resolve_url(settings.RATINGS_TABLE_PATH, base_url)
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch(self) -> TableResponse:
        """
        GET the ratings table and parse it.

        Raises RatingsFetchError on transport errors, non-2xx statuses and
        undecodable bodies; TableFormatError if the JSON has the wrong shape.
        """
        logger.info("Fetching ratings table: %s", self.url)
        try:
            resp = self.session.get(self.url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise RatingsFetchError(
                f"Ratings table request failed with HTTP {status}",
                url=self.url,
                status_code=status,
            ) from e
        except requests.RequestException as e:
            raise RatingsFetchError(f"Ratings table request failed: {e}", url=self.url) from e

        try:
            payload = resp.json()
        except ValueError as e:
            raise RatingsFetchError(
                "Ratings table response is not valid JSON",
                url=self.url,
                status_code=resp.status_code,
            ) from e

        table = TableResponse.from_dict(payload)
        logger.info(
            "Ratings table loaded: %d rows, %d categories, %d ratings",
            len(table.table_data), len(table.categories), table.total_ratings,
        )
        return table
