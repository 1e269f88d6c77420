from __future__ import annotations

from .errors import (
    ErrorType,
    YouTubeError,
    classify_error,
    new_internal_error,
    new_language_error,
    new_upload_error,
)
from .language_handler import (
    LanguageResult,
    get_language_with_fallback,
    validate_and_set_language,
    validate_language_code,
)
from .metrics import Metrics, get_metrics, youtube_metrics
from .pipeline import PublishingPipeline
from .upload_record import UploadRecord, UploadSnippet

__all__ = [
    "ErrorType",
    "YouTubeError",
    "classify_error",
    "new_internal_error",
    "new_language_error",
    "new_upload_error",
    "LanguageResult",
    "get_language_with_fallback",
    "validate_and_set_language",
    "validate_language_code",
    "Metrics",
    "get_metrics",
    "youtube_metrics",
    "PublishingPipeline",
    "UploadRecord",
    "UploadSnippet",
]
