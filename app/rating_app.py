"""
Streamlit TTS Rating App

Browser page for scoring synthesized speech samples against a reference
voice. Each sample gets two 1-5 star ratings: naturalness and similarity.
Ratings are held in the page session only; the language choice is
remembered across reloads.

Launch:
    streamlit run app/rating_app.py
    streamlit run app/rating_app.py --server.address 0.0.0.0  # LAN access
"""

from __future__ import annotations

import logging
from pathlib import Path

import streamlit as st

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Add project root to sys.path so we can import tts_mos.*
import sys
sys.path.insert(0, str(PROJECT_ROOT))

from tts_mos.config import settings
from tts_mos.evaluation.rating_schema import (
    INFERENCED_TEXT,
    REFERENCE_AUDIO_URL,
    Criterion,
    Sample,
)
from tts_mos.evaluation.rating_session import RatingPageState
from tts_mos.evaluation.ratings_client import resolve_url
from tts_mos.storage.kv_store import JsonFileStore

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format=settings.LOG_FORMAT,
    datefmt=settings.LOG_DATEFMT,
)
logger = logging.getLogger(__name__)

STATE_KEY = "rating_state"

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def get_state() -> RatingPageState:
    """Page state for this browser session, created on first render."""
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = RatingPageState(JsonFileStore(settings.PREFERENCES_PATH))
        logger.info("New rating session, language=%s", st.session_state[STATE_KEY].language)
    return st.session_state[STATE_KEY]


def on_language_change():
    state = get_state()
    state.set_language(st.session_state["rating_language"])


def star_rating(state: RatingPageState, sample: Sample, criterion: Criterion):
    """Five star buttons; clicking star i sets the score to i."""
    rating = sample.score(criterion)
    cols = st.columns(settings.MAX_RATING)
    for i, col in enumerate(cols):
        value = i + 1
        with col:
            st.button(
                "★" if i < rating else "☆",
                key=f"{criterion.value}_{sample.id}_{value}",
                help=f"Rate {value} of {settings.MAX_RATING}",
                on_click=state.update_rating,
                args=(sample.id, criterion, value),
            )


# ---------------------------------------------------------------------------
# Page sections
# ---------------------------------------------------------------------------

def section_header(state: RatingPageState):
    t = state.translation
    title_col, lang_col = st.columns([4, 1])
    with title_col:
        st.title(t["title"])
    with lang_col:
        st.selectbox(
            "🌐",
            options=list(settings.SUPPORTED_LANGUAGES),
            index=settings.SUPPORTED_LANGUAGES.index(state.language),
            format_func=lambda code: settings.LANGUAGE_LABELS[code],
            key="rating_language",
            on_change=on_language_change,
        )


def section_instructions(state: RatingPageState):
    t = state.translation
    st.info(
        f"**{t['instructions']}**\n\n"
        f"{t['step1']}\n\n"
        f"{t['step2']}\n\n"
        f"{t['step3']}\n"
        f"- {t['natural_desc']}\n"
        f"- {t['similarity_desc']}"
    )


def section_reference(state: RatingPageState):
    t = state.translation
    left, right = st.columns(2)
    with left:
        st.subheader(t["inferenced_text"])
        st.write(INFERENCED_TEXT)
    with right:
        st.subheader(t["reference_voice"])
        st.audio(resolve_url(REFERENCE_AUDIO_URL), format="audio/mpeg")


def section_samples(state: RatingPageState):
    t = state.translation

    head = st.columns(4)
    head[0].markdown(f"**{t['audio_sample']}**")
    head[1].markdown(f"**{t['audio']}**")
    head[2].markdown(f"**{t['naturalness']}**  \n{t['natural_scale']}")
    head[3].markdown(f"**{t['similarity']}**  \n{t['similarity_scale']}")

    for sample in state.samples:
        with st.container(border=True):
            name_col, audio_col, nat_col, sim_col = st.columns(4)
            with name_col:
                st.markdown(f"**{sample.name}**")
            with audio_col:
                st.audio(resolve_url(sample.audio_url), format="audio/mpeg")
            with nat_col:
                star_rating(state, sample, Criterion.NATURALNESS)
            with sim_col:
                star_rating(state, sample, Criterion.SIMILARITY)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main():
    st.set_page_config(
        page_title="TTS Rating",
        page_icon="🎧",
        layout="wide",
    )

    state = get_state()
    section_header(state)
    section_instructions(state)
    section_reference(state)
    st.divider()
    section_samples(state)


if __name__ == "__main__":
    main()
