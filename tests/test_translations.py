"""Tests for tts_mos/i18n/translations.py"""

from __future__ import annotations

import pytest

from tts_mos.exceptions import ValidationError
from tts_mos.i18n.translations import (
    RATING_TRANSLATIONS,
    RESULTS_TRANSLATIONS,
    rating_translation,
    results_translation,
    validate_language,
)


class TestBundles:

    @pytest.mark.parametrize("bundles", [RATING_TRANSLATIONS, RESULTS_TRANSLATIONS])
    def test_languages_share_keys(self, bundles):
        """Every language defines exactly the same keys."""
        assert set(bundles) == {"en", "th"}
        assert set(bundles["en"]) == set(bundles["th"])

    def test_results_notes_present(self):
        for lang in ("en", "th"):
            for n in (1, 2, 3):
                assert f"note{n}" in RESULTS_TRANSLATIONS[lang]


class TestLookup:

    def test_rating_translation(self):
        assert rating_translation("en")["title"] == "TTS Comparison and Rating"

    def test_results_translation(self):
        assert results_translation("th")["male"] == "ชาย"

    def test_unsupported_language(self):
        with pytest.raises(ValidationError, match="Unsupported language"):
            validate_language("fr")
