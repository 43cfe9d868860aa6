"""
Centralized configuration for the TTS MOS evaluation front-end.

Endpoints, paths, display constants and the editorial footnote mapping
live here. Import from this module instead of hardcoding values in
source files.
"""

from __future__ import annotations

import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

# Durable key/value store backing the language preference
PREFERENCES_PATH = Path(
    os.getenv("TTS_MOS_PREFERENCES_PATH", str(PROJECT_ROOT / ".tts_mos" / "preferences.json"))
)

# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

API_BASE_URL = os.getenv("TTS_MOS_API_BASE_URL", "http://localhost:3000")
RATINGS_TABLE_PATH = "/api/ratings-table"
REQUEST_TIMEOUT_SEC = float(os.getenv("TTS_MOS_REQUEST_TIMEOUT", "30"))

# Audio placeholder served next to the ratings API
PLACEHOLDER_AUDIO_PATH = "/api/placeholder/400/320"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("TTS_MOS_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s — %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# ---------------------------------------------------------------------------
# Language
# ---------------------------------------------------------------------------

LANGUAGE_KEY = "language"
SUPPORTED_LANGUAGES = ("en", "th")
LANGUAGE_LABELS = {
    "en": "English",
    "th": "ไทย",
}
RATING_PAGE_DEFAULT_LANGUAGE = "en"
RESULTS_PAGE_DEFAULT_LANGUAGE = "th"

# ---------------------------------------------------------------------------
# Rating scale
# ---------------------------------------------------------------------------

MIN_RATING = 0
MAX_RATING = 5

# ---------------------------------------------------------------------------
# Results table
# ---------------------------------------------------------------------------

# Row holding the original recordings; never competes for best score
REFERENCE_MODEL_ID = "0"

# Category label that hides the column entirely
NOT_USED_LABEL = "Not Used"

MALE = "Male"
FEMALE = "Female"

# Absolute tolerance when matching a cell against its category best
BEST_SCORE_TOLERANCE = 0.001

# model_id -> superscript footnote number. Note text lives in the
# translation bundles under note1..note3.
FOOTNOTE_MARKERS = {
    "5": 1,
    "2": 2,
    "1": 3,
}
