"""
Ratings Aggregate Viewer state.

One viewer instance corresponds to one mounted results page. It fetches
the table once, keeps the best scores in step with the data, and holds
the language choice. Failures land in an explicit FAILED state that the
page shows to the user.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional, Protocol

from tts_mos.config import settings
from tts_mos.evaluation.ratings_table import (
    TableResponse,
    TableView,
    build_table_view,
    compute_best_scores,
)
from tts_mos.exceptions import TTSMosError
from tts_mos.i18n.translations import Translation, results_translation
from tts_mos.storage.kv_store import KeyValueStore, LanguagePreference

logger = logging.getLogger(__name__)


class ViewerStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class TableSource(Protocol):
    def fetch(self) -> TableResponse:
        ...


class RatingsTableViewer:
    """
    State container for the results page.

    Transitions: LOADING -> READY on a successful fetch, LOADING -> FAILED
    on an error. Neither terminal state goes back to LOADING; a new
    viewer must be created for another attempt. After ``close()`` all
    completions are dropped.
    """

    def __init__(
        self,
        source: TableSource,
        store: KeyValueStore,
        default_language: str = settings.RESULTS_PAGE_DEFAULT_LANGUAGE,
    ):
        self.source = source
        self.preference = LanguagePreference(store, default_language)
        self.language = self.preference.load()
        self.status = ViewerStatus.LOADING
        self.data: Optional[TableResponse] = None
        self.best_scores: Dict[str, float] = {}
        self.error: Optional[Exception] = None
        self.closed = False

    # -- lifecycle ---------------------------------------------------------

    def mount(self) -> ViewerStatus:
        """Run the single fetch for this instance. A closed viewer does not fetch."""
        if self.closed or self.status is not ViewerStatus.LOADING:
            return self.status
        try:
            table = self.source.fetch()
        except TTSMosError as exc:
            self.on_failure(exc)
        except Exception as exc:
            logger.exception("Unexpected error fetching ratings table data")
            self.on_failure(exc)
        else:
            self.on_success(table)
        return self.status

    def on_success(self, table: TableResponse) -> None:
        if self.closed:
            logger.debug("Viewer closed, dropping fetched table")
            return
        if self.status is not ViewerStatus.LOADING:
            return
        self.set_data(table)
        self.status = ViewerStatus.READY

    def on_failure(self, exc: Exception) -> None:
        if self.closed:
            logger.debug("Viewer closed, dropping fetch error: %s", exc)
            return
        if self.status is not ViewerStatus.LOADING:
            return
        logger.error("Error fetching ratings table data: %s", exc)
        self.error = exc
        self.status = ViewerStatus.FAILED

    def close(self) -> None:
        """
        Tear the viewer down. Later completions are dropped.

        Streamlit has no session-teardown hook, so the served page never
        calls this; it exists for embedders that drive fetches themselves
        (e.g. from a worker thread) and outlive a page.
        """
        self.closed = True

    # -- data --------------------------------------------------------------

    def set_data(self, table: TableResponse) -> None:
        """Replace the table and recompute best scores from it."""
        self.data = table
        self.best_scores = compute_best_scores(table)

    # -- language ----------------------------------------------------------

    def set_language(self, language: str) -> None:
        self.preference.save(language)
        self.language = language

    @property
    def translation(self) -> Translation:
        return results_translation(self.language)

    def view(self) -> Optional[TableView]:
        """Rendered table for the current language, or None until READY."""
        if self.status is not ViewerStatus.READY or self.data is None:
            return None
        return build_table_view(self.data, self.translation, self.best_scores)
