from __future__ import annotations

"""Structured logging for YouTube operations.

Context (error type, language, video id, ...) is attached to each record as
attributes via ``extra`` and repeated in the message so it survives a plain
text formatter.
"""

import logging
from typing import Optional, Union

from .errors import YouTubeError

_logger = logging.getLogger("youtube_automation.publishing")
youtube_log = logging.LoggerAdapter(_logger, {"component": "youtube"})


def _extra(**fields) -> dict:
    fields["component"] = "youtube"
    return fields


def set_log_level(level: Union[int, str]):
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    _logger.setLevel(level)


def log_youtube_error(error: Optional[YouTubeError], message: str):
    """Log a classified error with its category and any context it carries."""
    if error is None:
        _logger.error(message, extra=_extra())
        return

    fields = {"error_type": error.error_type.value, "retryable": error.retryable}
    if error.video_id:
        fields["video_id"] = error.video_id
    if error.language:
        fields["language"] = error.language

    context = " ".join(f"{k}={v}" for k, v in fields.items())
    exc_info = None
    if error.original_error is not None:
        original = error.original_error
        exc_info = (type(original), original, original.__traceback__)
    _logger.error(f"{message}: {error.message} [{context}]", exc_info=exc_info, extra=_extra(**fields))


def log_youtube_warn(message: str, *args):
    youtube_log.warning(message, *args)


def log_youtube_info(message: str, *args):
    youtube_log.info(message, *args)


def log_youtube_debug(message: str, *args):
    youtube_log.debug(message, *args)


def log_language_setting(
    language: str, success: bool, fallback: bool, error: Optional[BaseException] = None
):
    fields = {"language": language, "success": success, "fallback": fallback}
    context = f"[language={language} success={success} fallback={fallback}]"

    if error is not None:
        _logger.error(f"Language setting failed {context}: {error}", extra=_extra(**fields))
    elif fallback:
        _logger.warning(
            f"Language setting succeeded with fallback to default {context}", extra=_extra(**fields)
        )
    else:
        _logger.info(f"Language setting succeeded {context}", extra=_extra(**fields))


def log_upload_operation(video_id: str, success: bool, error: Optional[BaseException] = None):
    fields = {"video_id": video_id, "success": success}
    if error is not None:
        _logger.error(f"Upload operation failed [video_id={video_id}]: {error}", extra=_extra(**fields))
    else:
        _logger.info(f"Upload operation succeeded [video_id={video_id}]", extra=_extra(**fields))
