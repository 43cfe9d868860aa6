"""
Rating Schema for TTS Naturalness/Similarity Scoring

This module defines the samples a rater scores on the rating page and
the in-memory collector holding their current scores. Scores live only
for the lifetime of the page session; there is no submission step.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, List, Optional

from tts_mos.config import settings


class Criterion(str, Enum):
    """The two axes every sample is rated on."""
    NATURALNESS = "naturalness"
    SIMILARITY = "similarity"


# Text spoken in every sample on the rating page
INFERENCED_TEXT = (
    "The rainbow arched across the sky after the storm, painting the world in "
    "vibrant colors. Birds began to sing again as sunshine broke through the "
    "clouds, creating a perfect moment of natural beauty."
)

REFERENCE_AUDIO_URL = settings.PLACEHOLDER_AUDIO_PATH


@dataclass(frozen=True)
class Sample:
    """
    A single synthesized audio sample and its current scores.

    Attributes:
        id: Identifier unique within the collector
        audio_url: Where the audio is served from (absolute or API-relative)
        name: Display name
        naturalness: Current naturalness score (0 = unrated, 1-5 = rated)
        similarity: Current similarity-to-reference score (0-5)
    """
    id: int
    audio_url: str
    name: str
    naturalness: int = 0
    similarity: int = 0

    def __post_init__(self):
        """Validate scores are within the star scale."""
        for attr in ("naturalness", "similarity"):
            value = getattr(self, attr)
            if not settings.MIN_RATING <= value <= settings.MAX_RATING:
                raise ValueError(
                    f"{attr} must be between {settings.MIN_RATING} and "
                    f"{settings.MAX_RATING}, got {value}"
                )

    def score(self, criterion: Criterion | str) -> int:
        return getattr(self, Criterion(criterion).value)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "audio_url": self.audio_url,
            "name": self.name,
            "naturalness": self.naturalness,
            "similarity": self.similarity,
        }


def default_samples() -> List[Sample]:
    """The three unrated placeholder samples shown on a fresh page."""
    return [
        Sample(id=i, audio_url=settings.PLACEHOLDER_AUDIO_PATH, name=f"Sample {i}")
        for i in (1, 2, 3)
    ]


class RatingCollector:
    """
    Ordered list of samples plus the single operation that changes them.

    Samples are immutable; ``update_rating`` swaps in a new Sample for the
    matching id and keeps every other entry as the same object.
    """

    def __init__(self, samples: Optional[List[Sample]] = None):
        self.samples: List[Sample] = list(samples) if samples is not None else default_samples()

    def update_rating(self, sample_id: int, criterion: Criterion | str, value: int) -> None:
        """Set one criterion of one sample. Unknown ids are ignored."""
        field_name = Criterion(criterion).value
        self.samples = [
            replace(sample, **{field_name: value}) if sample.id == sample_id else sample
            for sample in self.samples
        ]

    def get(self, sample_id: int) -> Optional[Sample]:
        for sample in self.samples:
            if sample.id == sample_id:
                return sample
        return None
