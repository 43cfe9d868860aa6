"""
English/Thai string bundles for the rating page and the results page.

Each page has its own closed set of keys; every language must define
every key of its page.
"""

from __future__ import annotations

from typing import Dict

from tts_mos.config import settings
from tts_mos.exceptions import ValidationError

Translation = Dict[str, str]


RATING_TRANSLATIONS: Dict[str, Translation] = {
    "en": {
        "title": "TTS Comparison and Rating",
        "inferenced_text": "Inferenced Text",
        "reference_voice": "Reference Voice",
        "audio_sample": "Audio Sample",
        "audio": "Audio",
        "naturalness": "Naturalness",
        "similarity": "Similarity",
        "instructions": "Rating Instructions:",
        "step1": "1. First listen to the Reference Voice at the top right",
        "step2": "2. Then listen to each Audio Sample below",
        "step3": "3. Rate each sample on two criteria:",
        "natural_desc": "Naturalness: How natural the voice sounds (0 = robotic, 5 = human-like)",
        "similarity_desc": (
            "Similarity: How similar the voice is to the reference "
            "(0 = different person, 5 = same person)"
        ),
        "natural_scale": "(0 = robotic, 5 = completely natural)",
        "similarity_scale": "(0 = different person, 5 = same person)",
    },
    "th": {
        "title": "การเปรียบเทียบและการให้คะแนน TTS",
        "inferenced_text": "ข้อความที่ใช้ทดสอบ",
        "reference_voice": "เสียงอ้างอิง",
        "audio_sample": "ตัวอย่างเสียง",
        "audio": "เสียง",
        "naturalness": "ความเป็นธรรมชาติ",
        "similarity": "ความคล้ายคลึง",
        "instructions": "คำแนะนำในการให้คะแนน:",
        "step1": "1. ฟังเสียงอ้างอิงที่มุมบนขวาก่อน",
        "step2": "2. จากนั้นฟังตัวอย่างเสียงแต่ละชิ้นด้านล่าง",
        "step3": "3. ให้คะแนนแต่ละตัวอย่างตามเกณฑ์สองข้อ:",
        "natural_desc": (
            "ความเป็นธรรมชาติ: เสียงฟังดูเป็นธรรมชาติแค่ไหน "
            "(0 = เหมือนหุ่นยนต์, 5 = เหมือนมนุษย์)"
        ),
        "similarity_desc": (
            "ความคล้ายคลึง: เสียงมีความคล้ายคลึงกับเสียงอ้างอิงแค่ไหน "
            "(0 = คนละคน, 5 = คนเดียวกัน)"
        ),
        "natural_scale": "(0 = เหมือนหุ่นยนต์, 5 = เป็นธรรมชาติอย่างสมบูรณ์)",
        "similarity_scale": "(0 = คนละคน, 5 = คนเดียวกัน)",
    },
}


RESULTS_TRANSLATIONS: Dict[str, Translation] = {
    "en": {
        "title": "Naturalness Mean Opinion Score for TTS Models",
        "loading": "Loading data...",
        "error": "Could not load the ratings table. Please try again later.",
        "model": "Model",
        "male": "Male",
        "female": "Female",
        "seen_thai": "Seen Thai",
        "unseen_thai": "Unseen Thai",
        "unseen_english": "Unseen English",
        "unseen_thai_with_trans": "Unseen Thai w/ Trans.",
        "ratings": "Total Ratings:",
        "footer": "Table of averaged user ratings for TTS model comparison",
        "notes": "Notes:",
        "note1": "Trained on Tsync2 + Commonvoice",
        "note2": "Trained on Tsync2 + LJSpeech + Commonvoice + VCTK",
        "note3": "Trained on Tsync2 + LJSpeech + Commonvoice + VCTK + Thai Central",
    },
    "th": {
        "title": "คะแนนความเห็นเฉลี่ยด้านความเป็นธรรมชาติสำหรับโมเดล TTS",
        "loading": "กำลังโหลดข้อมูล...",
        "error": "ไม่สามารถโหลดตารางคะแนนได้ กรุณาลองใหม่อีกครั้งภายหลัง",
        "model": "Model",
        "male": "ชาย",
        "female": "หญิง",
        "seen_thai": "ไทย (เคยเห็น)",
        "unseen_thai": "ไทย (ไม่เคยเห็น)",
        "unseen_english": "อังกฤษ (ไม่เคยเห็น)",
        "unseen_thai_with_trans": "ไทย พร้อมแปล (ไม่เคยเห็น)",
        "ratings": "จำนวนการให้คะแนนทั้งหมด:",
        "footer": "ตารางคะแนนเฉลี่ยจากผู้ใช้สำหรับการเปรียบเทียบโมเดล TTS",
        "notes": "หมายเหตุ:",
        "note1": "ฝึกฝนด้วย Tsync2 + Commonvoice",
        "note2": "ฝึกฝนด้วย Tsync2 + LJSpeech + Commonvoice + VCTK",
        "note3": "ฝึกฝนด้วย Tsync2 + LJSpeech + Commonvoice + VCTK + Thai Central",
    },
}


def validate_language(language: str) -> str:
    """Return ``language`` if it is a supported code, else raise ValidationError."""
    if language not in settings.SUPPORTED_LANGUAGES:
        raise ValidationError(
            f"Unsupported language {language!r}; expected one of {settings.SUPPORTED_LANGUAGES}",
            field="language",
        )
    return language


def rating_translation(language: str) -> Translation:
    return RATING_TRANSLATIONS[validate_language(language)]


def results_translation(language: str) -> Translation:
    return RESULTS_TRANSLATIONS[validate_language(language)]
