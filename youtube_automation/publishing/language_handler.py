from __future__ import annotations

"""Language validation and fallback for videos about to be published.

Language metadata is best-effort: nothing in here is allowed to stop an
upload. Problems are logged and counted in Metrics instead of raised.
"""

from dataclasses import dataclass
from typing import Optional

from ..constants import is_valid_language
from ..storage.models import Video
from .errors import classify_error, new_language_error
from .logger import log_language_setting, log_youtube_error, log_youtube_warn
from .metrics import Metrics, youtube_metrics
from .upload_record import UploadSnippet


@dataclass(frozen=True)
class LanguageResult:
    """Outcome of validate_and_set_language. It has no error state."""

    language: str
    audio_language: str
    fallbacks: int = 0  # fields replaced by the default after failing validation
    applied: bool = True  # False if the upload record could not take any language
    used_default: bool = False  # True if the record got the default for both fields


def _requested_languages(video: Optional[Video], default_language: str) -> tuple[str, str]:
    if video is None:
        return default_language, default_language
    return video.get_language(default_language), video.get_audio_language(default_language)


def _validate(
    language: str, audio_language: str, default_language: str, metrics: Metrics, verb: str
) -> tuple[str, str, int]:
    fallbacks = 0
    if not is_valid_language(language):
        log_youtube_warn(
            "Invalid language code '%s', %s default '%s'", language, verb, default_language
        )
        metrics.inc_language_fallback()
        language = default_language
        fallbacks += 1

    if not is_valid_language(audio_language):
        log_youtube_warn(
            "Invalid audio language code '%s', %s default '%s'", audio_language, verb, default_language
        )
        metrics.inc_language_fallback()
        audio_language = default_language
        fallbacks += 1

    return language, audio_language, fallbacks


def set_language_safely(upload_record, language: str, audio_language: str):
    """Set both languages on the record's snippet, creating the snippet if missing.

    Raises a language YouTubeError when there is no record to set them on.
    """
    if upload_record is None:
        raise new_language_error(language)

    if upload_record.snippet is None:
        upload_record.snippet = UploadSnippet()

    upload_record.snippet.default_language = language
    upload_record.snippet.default_audio_language = audio_language


def validate_and_set_language(
    upload_record,
    video: Optional[Video],
    default_language: str,
    metrics: Optional[Metrics] = None,
) -> LanguageResult:
    """Validate the video's languages and set them on the upload record.

    Invalid codes fall back to default_language, per field. If the record
    rejects the values, the default is tried for both fields. Whatever
    happens, the chosen languages are stored on the video as
    applied_language / applied_audio_language, and no exception escapes.

    The applied fields always hold the per-field validated values. When the
    record rejected them and the default was set instead (result.used_default),
    the record carries default_language for both fields while the applied
    fields still show what was validated; check used_default to tell the two
    apart.
    """
    if metrics is None:
        metrics = youtube_metrics

    language, audio_language = _requested_languages(video, default_language)
    metrics.inc_language_validation()
    language, audio_language, fallbacks = _validate(
        language, audio_language, default_language, metrics, "falling back to"
    )

    applied = True
    used_default = False
    try:
        set_language_safely(upload_record, language, audio_language)
    except Exception as e:
        error = classify_error(e)
        log_language_setting(language, False, True, error)
        metrics.inc_language_set_failure()

        used_default = True
        try:
            set_language_safely(upload_record, default_language, default_language)
        except Exception as fallback_error:
            log_youtube_error(
                new_language_error(default_language, fallback_error),
                "Failed to set fallback language",
            )
            metrics.inc_language_set_failure()
            applied = False
        else:
            log_language_setting(default_language, True, True)
            metrics.inc_language_set_success()
    else:
        log_language_setting(language, True, False)
        metrics.inc_language_set_success()

    if video is not None:
        video.applied_language = language
        video.applied_audio_language = audio_language

    return LanguageResult(
        language=language,
        audio_language=audio_language,
        fallbacks=fallbacks,
        applied=applied,
        used_default=used_default,
    )


def get_language_with_fallback(
    video: Optional[Video], default_language: str, metrics: Optional[Metrics] = None
) -> tuple[str, str]:
    """Resolve (language, audio_language) without touching any upload record.

    Fallbacks are still counted; successes and failures are not.
    """
    if metrics is None:
        metrics = youtube_metrics
    language, audio_language = _requested_languages(video, default_language)
    language, audio_language, _ = _validate(
        language, audio_language, default_language, metrics, "using fallback"
    )
    return language, audio_language


def validate_language_code(language: str):
    """Raise a language YouTubeError if the code is not supported."""
    if not is_valid_language(language):
        raise new_language_error(language)
