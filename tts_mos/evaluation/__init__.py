"""
Evaluation module for TTS listening tests.

Provides:
- RatingCollector / RatingPageState: per-sample naturalness and similarity scores
- RatingsTableClient: fetch of the aggregate MOS table
- RatingsTableViewer: results page state machine
- group_categories, compute_best_scores, format_cell: pure table derivations
"""

from tts_mos.evaluation.rating_schema import Criterion, RatingCollector, Sample
from tts_mos.evaluation.rating_session import RatingPageState
from tts_mos.evaluation.ratings_client import RatingsTableClient
from tts_mos.evaluation.ratings_table import (
    ABSENT,
    Absent,
    Present,
    TableResponse,
    TableRow,
    build_table_view,
    compute_best_scores,
    format_category,
    format_cell,
    group_categories,
    is_best_score,
)
from tts_mos.evaluation.viewer import RatingsTableViewer, ViewerStatus

__all__ = [
    "Criterion",
    "RatingCollector",
    "Sample",
    "RatingPageState",
    "RatingsTableClient",
    "ABSENT",
    "Absent",
    "Present",
    "TableResponse",
    "TableRow",
    "build_table_view",
    "compute_best_scores",
    "format_category",
    "format_cell",
    "group_categories",
    "is_best_score",
    "RatingsTableViewer",
    "ViewerStatus",
]
