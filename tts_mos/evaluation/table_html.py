"""HTML rendering of a TableView for ``st.markdown(..., unsafe_allow_html=True)``."""

from __future__ import annotations

from html import escape
from typing import List

from tts_mos.evaluation.ratings_table import RenderedRow, TableView

TABLE_CSS = """
<style>
.mos-table {border-collapse: collapse; width: 100%; font-size: 0.875rem;}
.mos-table th, .mos-table td {border: 1px solid #E5E7EB; padding: 8px 16px; white-space: nowrap;}
.mos-table th {background: #F9FAFB; color: #6B7280; font-size: 0.75rem; font-weight: 500;
    text-transform: uppercase; letter-spacing: 0.05em; text-align: center;}
.mos-table th.mos-model {text-align: left;}
.mos-table td {text-align: center; color: #6B7280;}
.mos-table td.mos-model {text-align: left; color: #111827; font-weight: 500;}
.mos-table tr.mos-alt td {background: #F9FAFB;}
.mos-best {font-weight: 700;}
</style>
"""


def _header_html(view: TableView) -> str:
    top = [f'<th rowspan="2" class="mos-model">{escape(view.model_header)}</th>']
    if view.male_columns:
        top.append(f'<th colspan="{len(view.male_columns)}">{escape(view.male_header)}</th>')
    if view.female_columns:
        top.append(f'<th colspan="{len(view.female_columns)}">{escape(view.female_header)}</th>')
    sub = [f"<th>{escape(label)}</th>" for label in view.male_columns + view.female_columns]
    return f"<thead><tr>{''.join(top)}</tr><tr>{''.join(sub)}</tr></thead>"


def _row_html(row: RenderedRow, index: int) -> str:
    name = escape(row.model_name)
    if row.footnote is not None:
        name += f"<sup>{row.footnote}</sup>"
    cells: List[str] = [f'<td class="mos-model">{name}</td>']
    for cell in row.cells:
        text = escape(cell.text)
        if cell.bold:
            text = f'<span class="mos-best">{text}</span>'
        cells.append(f"<td>{text}</td>")
    css = ' class="mos-alt"' if index % 2 == 1 else ""
    return f"<tr{css}>{''.join(cells)}</tr>"


def render_table_html(view: TableView) -> str:
    """The results table as a self-contained HTML fragment."""
    body = "".join(_row_html(row, i) for i, row in enumerate(view.rows))
    return (
        f"{TABLE_CSS}<div style=\"overflow-x:auto;\">"
        f'<table class="mos-table">{_header_html(view)}<tbody>{body}</tbody></table></div>'
    )


def render_notes_html(view: TableView) -> str:
    items = "".join(f"<li><sup>{n}</sup> {escape(text)}</li>" for n, text in view.notes)
    return f"<p><strong>{escape(view.notes_header)}</strong></p><ol>{items}</ol>"
