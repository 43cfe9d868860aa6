"""
Ratings Table: aggregate MOS results and their presentation logic

Parses the precomputed ``/api/ratings-table`` response into typed rows
and derives everything the results page shows from it: gender column
groups, translated category labels, the best (non-reference) score per
category, and the formatted cell text. Every function below is pure;
the viewer state lives in ``tts_mos.evaluation.viewer``.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from tts_mos.config import settings
from tts_mos.exceptions import TableFormatError
from tts_mos.i18n.translations import Translation


# ---------------------------------------------------------------------------
# Cells
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Absent:
    """No ratings collected for this model/category pair."""


@dataclass(frozen=True)
class Present:
    """Average score and number of ratings behind it."""
    avg: float
    count: int


Cell = Union[Absent, Present]
ABSENT = Absent()


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _finite_float(value: Any) -> Optional[float]:
    """``value`` as a finite float, or None (non-numbers, NaN, inf, ints too big for a float)."""
    if not _is_number(value):
        return None
    try:
        result = float(value)
    except OverflowError:
        return None
    return result if math.isfinite(result) else None


def parse_cell(raw: Any) -> Cell:
    """
    Turn a raw JSON cell into a Cell.

    Anything other than an object with a finite numeric ``avg`` and a
    non-negative integral ``count`` is treated as absent.
    """
    if not isinstance(raw, Mapping):
        return ABSENT
    raw_count = raw.get("count")
    avg = _finite_float(raw.get("avg"))
    count = _finite_float(raw_count)
    if avg is None or count is None:
        return ABSENT
    if count < 0 or not count.is_integer():
        return ABSENT
    return Present(avg=avg, count=raw_count if isinstance(raw_count, int) else int(count))


# ---------------------------------------------------------------------------
# Rows and response
# ---------------------------------------------------------------------------


@dataclass
class TableRow:
    model_id: str
    model_name: str
    cells: Dict[str, Cell] = field(default_factory=dict)

    @property
    def is_reference(self) -> bool:
        return self.model_id == settings.REFERENCE_MODEL_ID

    def cell(self, category: str) -> Cell:
        return self.cells.get(category, ABSENT)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], categories: List[str]) -> "TableRow":
        """Create a row from its wire form, keeping only known categories."""
        return cls(
            model_id=str(data.get("modelId", "")),
            model_name=str(data.get("modelName", "")),
            cells={c: parse_cell(data.get(c)) for c in categories},
        )


@dataclass
class TableResponse:
    table_data: List[TableRow]
    categories: List[str]
    total_ratings: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "TableResponse":
        """Create instance from the decoded JSON body."""
        if not isinstance(data, Mapping):
            raise TableFormatError("Ratings table response is not a JSON object")

        categories = data.get("categories")
        if not isinstance(categories, list):
            raise TableFormatError("Ratings table has no category list", field="categories")
        categories = [str(c) for c in categories]

        rows = data.get("tableData")
        if not isinstance(rows, list):
            raise TableFormatError("Ratings table has no row list", field="tableData")

        total = _finite_float(data.get("totalRatings", 0))
        return cls(
            table_data=[TableRow.from_dict(r, categories) for r in rows if isinstance(r, Mapping)],
            categories=categories,
            total_ratings=int(total) if total is not None else 0,
        )


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------


def split_category(category: str) -> Tuple[str, Optional[str]]:
    """``"Male-Seen Thai"`` -> ``("Male", "Seen Thai")``; label is None without a dash."""
    parts = category.split("-")
    return parts[0], parts[1] if len(parts) > 1 else None


@dataclass(frozen=True)
class GroupedCategories:
    male: List[str]
    female: List[str]

    @property
    def ordered(self) -> List[str]:
        """Column order of the rendered table: male block, then female block."""
        return self.male + self.female


def group_categories(categories: List[str]) -> GroupedCategories:
    """Split categories into male and female columns, dropping "Not Used" ones."""
    male: List[str] = []
    female: List[str] = []
    for category in categories:
        gender, label = split_category(category)
        if label == settings.NOT_USED_LABEL:
            continue
        if gender == settings.MALE:
            male.append(category)
        elif gender == settings.FEMALE:
            female.append(category)
    return GroupedCategories(male=male, female=female)


# (gender, label) -> translation key
CATEGORY_LABEL_KEYS: Dict[Tuple[str, str], str] = {
    (settings.MALE, "Seen Thai"): "seen_thai",
    (settings.MALE, "Unseen Thai"): "unseen_thai",
    (settings.MALE, "Unseen English"): "unseen_english",
    (settings.FEMALE, "Seen Thai"): "seen_thai",
    (settings.FEMALE, "Unseen Thai"): "unseen_thai",
    (settings.FEMALE, "Unseen Thai w/ Trans."): "unseen_thai_with_trans",
}


def format_category(category: str, translation: Translation) -> str:
    """Display label for a category column in the current language."""
    gender, label = split_category(category)
    if label is None or label == settings.NOT_USED_LABEL:
        return ""
    key = CATEGORY_LABEL_KEYS.get((gender, label))
    if key is None:
        return label
    return translation.get(key, label)


# ---------------------------------------------------------------------------
# Scores
# ---------------------------------------------------------------------------


def compute_best_scores(response: TableResponse) -> Dict[str, float]:
    """
    Highest average per category among non-reference rows.

    Categories where no non-reference row has data map to -inf, so no
    cell can ever match them.
    """
    best: Dict[str, float] = {c: -math.inf for c in response.categories}
    for row in response.table_data:
        if row.is_reference:
            continue
        for category in response.categories:
            cell = row.cell(category)
            if isinstance(cell, Present) and cell.avg > best[category]:
                best[category] = cell.avg
    return best


def is_best_score(row: TableRow, category: str, best_scores: Mapping[str, float]) -> bool:
    """Whether this cell is rendered bold."""
    if row.is_reference:
        return False
    cell = row.cell(category)
    if not isinstance(cell, Present):
        return False
    best = best_scores.get(category, -math.inf)
    return abs(cell.avg - best) < settings.BEST_SCORE_TOLERANCE


TWO_PLACES = Decimal("0.01")


def format_score(avg: float) -> str:
    """Two decimals, exact binary ties rounded away from zero (4.125 -> "4.13")."""
    # + 0.0 turns -0.0 into 0.0
    return str(Decimal(avg + 0.0).quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def format_cell(cell: Cell) -> str:
    """``Present(3.1, 9)`` -> ``"3.10/9"``; absent -> ``"-"``."""
    if isinstance(cell, Present):
        return f"{format_score(cell.avg)}/{cell.count}"
    return "-"


def footnote_marker(model_id: str, markers: Mapping[str, int] = settings.FOOTNOTE_MARKERS) -> Optional[int]:
    return markers.get(model_id)


# ---------------------------------------------------------------------------
# View model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RenderedCell:
    text: str
    bold: bool = False


@dataclass(frozen=True)
class RenderedRow:
    model_name: str
    footnote: Optional[int]
    cells: List[RenderedCell]


@dataclass(frozen=True)
class TableView:
    """Everything needed to draw the results table, already translated."""
    title: str
    model_header: str
    male_header: str
    female_header: str
    male_columns: List[str]
    female_columns: List[str]
    rows: List[RenderedRow]
    total_ratings_text: str
    notes_header: str
    notes: List[Tuple[int, str]]
    footer: str


def build_table_view(
    response: TableResponse,
    translation: Translation,
    best_scores: Mapping[str, float],
    footnotes: Mapping[str, int] = settings.FOOTNOTE_MARKERS,
) -> TableView:
    """Derive the rendered table from data, language and precomputed best scores."""
    grouped = group_categories(response.categories)

    rows = []
    for row in response.table_data:
        cells = [
            RenderedCell(
                text=format_cell(row.cell(category)),
                bold=is_best_score(row, category, best_scores),
            )
            for category in grouped.ordered
        ]
        rows.append(RenderedRow(
            model_name=row.model_name,
            footnote=footnote_marker(row.model_id, footnotes),
            cells=cells,
        ))

    notes = [
        (number, translation[f"note{number}"])
        for number in sorted(set(footnotes.values()))
        if f"note{number}" in translation
    ]

    return TableView(
        title=translation["title"],
        model_header=translation["model"],
        male_header=translation["male"],
        female_header=translation["female"],
        male_columns=[format_category(c, translation) for c in grouped.male],
        female_columns=[format_category(c, translation) for c in grouped.female],
        rows=rows,
        total_ratings_text=f"{translation['ratings']} {response.total_ratings}",
        notes_header=translation["notes"],
        notes=notes,
        footer=translation["footer"],
    )
