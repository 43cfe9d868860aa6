"""
TTS MOS Results Table

Aggregated naturalness Mean Opinion Scores per model, split into male and
female voice conditions. The best non-reference score in each column is
shown in bold.

Launch:
    streamlit run app/ratings_table_app.py
"""

from __future__ import annotations

import logging
from pathlib import Path

import streamlit as st

# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent

import sys
sys.path.insert(0, str(PROJECT_ROOT))

from tts_mos.config import settings
from tts_mos.evaluation.ratings_client import RatingsTableClient
from tts_mos.evaluation.table_html import render_notes_html, render_table_html
from tts_mos.evaluation.viewer import RatingsTableViewer, ViewerStatus
from tts_mos.storage.kv_store import JsonFileStore

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format=settings.LOG_FORMAT,
    datefmt=settings.LOG_DATEFMT,
)
logger = logging.getLogger(__name__)

VIEWER_KEY = "ratings_viewer"

SKELETON_HTML = """
<div style="background:#E5E7EB;border-radius:6px;height:2rem;width:16rem;margin-bottom:1.5rem;"></div>
<div style="background:#E5E7EB;border-radius:6px;height:16rem;width:100%;"></div>
"""


def get_viewer() -> RatingsTableViewer:
    """Viewer for this browser session; a new session is a fresh mount."""
    if VIEWER_KEY not in st.session_state:
        st.session_state[VIEWER_KEY] = RatingsTableViewer(
            source=RatingsTableClient(),
            store=JsonFileStore(settings.PREFERENCES_PATH),
        )
    return st.session_state[VIEWER_KEY]


def on_language_change():
    get_viewer().set_language(st.session_state["results_language"])


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------

def render_loading(viewer: RatingsTableViewer):
    """Placeholder blocks while the single fetch is pending."""
    placeholder = st.empty()
    with placeholder.container():
        st.markdown(SKELETON_HTML, unsafe_allow_html=True)
        st.caption(viewer.translation["loading"])
    viewer.mount()
    placeholder.empty()


def render_header(viewer: RatingsTableViewer):
    t = viewer.translation
    title_col, lang_col = st.columns([4, 1])
    with title_col:
        st.title(t["title"])
    with lang_col:
        st.selectbox(
            "🌐",
            options=list(settings.SUPPORTED_LANGUAGES),
            index=settings.SUPPORTED_LANGUAGES.index(viewer.language),
            format_func=lambda code: settings.LANGUAGE_LABELS[code],
            key="results_language",
            on_change=on_language_change,
        )


def render_results(viewer: RatingsTableViewer):
    view = viewer.view()
    if view is None:
        return
    st.markdown(render_table_html(view), unsafe_allow_html=True)
    st.caption(view.total_ratings_text)
    st.markdown(render_notes_html(view), unsafe_allow_html=True)


def main():
    st.set_page_config(
        page_title="TTS MOS Results",
        page_icon="📊",
        layout="wide",
    )

    viewer = get_viewer()
    if viewer.status is ViewerStatus.LOADING:
        render_loading(viewer)

    render_header(viewer)

    if viewer.status is ViewerStatus.FAILED:
        st.error(viewer.translation["error"])
    else:
        render_results(viewer)

    st.divider()
    st.caption(viewer.translation["footer"])


if __name__ == "__main__":
    main()
