"""Tests for tts_mos/evaluation/table_html.py"""

from __future__ import annotations

from tts_mos.evaluation.ratings_table import (
    TableResponse,
    build_table_view,
    compute_best_scores,
)
from tts_mos.evaluation.table_html import render_notes_html, render_table_html
from tts_mos.i18n.translations import results_translation


def _view(table: TableResponse, language: str = "en"):
    return build_table_view(table, results_translation(language), compute_best_scores(table))


class TestRenderTableHtml:

    def test_group_headers_have_colspans(self, table_response: TableResponse):
        html = render_table_html(_view(table_response))
        assert '<th rowspan="2" class="mos-model">Model</th>' in html
        assert '<th colspan="2">Male</th>' in html
        assert '<th colspan="2">Female</th>' in html

    def test_empty_gender_group_omitted(self):
        table = TableResponse.from_dict({
            "categories": ["Male-Seen Thai", "Female-Not Used", "Male-Not Used"],
            "tableData": [{"modelId": "1", "modelName": "A", "Male-Seen Thai": {"avg": 4, "count": 2}}],
            "totalRatings": 2,
        })
        html = render_table_html(_view(table))
        assert '<th colspan="1">Male</th>' in html
        assert "Female" not in html
        assert html.count("<th>") == 1
        assert "<th>Seen Thai</th>" in html

    def test_best_cell_bold(self, table_response: TableResponse):
        html = render_table_html(_view(table_response))
        assert '<span class="mos-best">4.13/15</span>' in html
        assert '<td>4.90/20</td>' in html

    def test_footnote_superscripts(self, table_response: TableResponse):
        html = render_table_html(_view(table_response))
        assert "VITS Small<sup>1</sup>" in html
        assert "VITS Large<sup>2</sup>" in html
        assert "VITS Multi<sup>3</sup>" in html
        assert "Ground Truth</td>" in html

    def test_alternating_rows(self, table_response: TableResponse):
        html = render_table_html(_view(table_response))
        assert html.count('<tr class="mos-alt">') == 2

    def test_model_name_escaped(self):
        table = TableResponse.from_dict({
            "categories": [],
            "tableData": [{"modelId": "7", "modelName": "<script>x</script>"}],
        })
        html = render_table_html(_view(table))
        assert "<script>x</script>" not in html
        assert "&lt;script&gt;" in html


class TestRenderNotesHtml:

    def test_notes_in_thai(self, table_response: TableResponse):
        html = render_notes_html(_view(table_response, "th"))
        assert "<strong>หมายเหตุ:</strong>" in html
        assert "<li><sup>1</sup> ฝึกฝนด้วย Tsync2 + Commonvoice</li>" in html
        assert html.count("<li>") == 3
