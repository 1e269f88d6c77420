from __future__ import annotations

"""Supported metadata languages (ISO 639-1) for published videos."""

from typing import Optional

DEFAULT_LANGUAGE = "en"

LANGUAGE_MAP = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
    "nl": "Dutch",
    "sv": "Swedish",
    "no": "Norwegian",
    "da": "Danish",
    "fi": "Finnish",
    "pl": "Polish",
    "cs": "Czech",
    "ru": "Russian",
    "uk": "Ukrainian",
    "tr": "Turkish",
    "el": "Greek",
    "he": "Hebrew",
    "ar": "Arabic",
    "hi": "Hindi",
    "id": "Indonesian",
    "ja": "Japanese",
    "ko": "Korean",
    "zh": "Chinese",
}


def is_valid_language(code: str) -> bool:
    """True if the code is one of the supported languages."""
    return code in LANGUAGE_MAP


def get_language_name(code: str) -> Optional[str]:
    return LANGUAGE_MAP.get(code)
