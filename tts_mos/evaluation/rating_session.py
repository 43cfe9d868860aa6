from __future__ import annotations

from typing import List, Optional

from tts_mos.config import settings
from tts_mos.evaluation.rating_schema import Criterion, RatingCollector, Sample
from tts_mos.i18n.translations import Translation, rating_translation
from tts_mos.storage.kv_store import KeyValueStore, LanguagePreference


class RatingPageState:
    """Rating page state: the collector plus the persisted language choice."""

    def __init__(
        self,
        store: KeyValueStore,
        samples: Optional[List[Sample]] = None,
        default_language: str = settings.RATING_PAGE_DEFAULT_LANGUAGE,
    ):
        self.collector = RatingCollector(samples)
        self.preference = LanguagePreference(store, default_language)
        self.language = self.preference.load()

    @property
    def samples(self) -> List[Sample]:
        return self.collector.samples

    def update_rating(self, sample_id: int, criterion: Criterion | str, value: int) -> None:
        self.collector.update_rating(sample_id, criterion, value)

    def set_language(self, language: str) -> None:
        self.preference.save(language)
        self.language = language

    @property
    def translation(self) -> Translation:
        return rating_translation(self.language)
