from __future__ import annotations

"""Categorized YouTube errors. Callers use the category to decide whether to
retry and how loudly to log."""

from enum import Enum
from typing import Optional


class ErrorType(str, Enum):
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    NETWORK = "network"
    INVALID = "invalid_request"
    SERVER = "server_error"
    LANGUAGE = "language_error"
    UPLOAD = "upload_error"
    UNKNOWN = "unknown"
    INTERNAL = "internal"  # raised by this application rather than YouTube


class YouTubeError(Exception):
    """A classified error from a YouTube operation. Not meant to be mutated."""

    def __init__(
        self,
        error_type: ErrorType,
        message: str,
        retryable: bool = False,
        original_error: Optional[BaseException] = None,
        video_id: str = "",
        language: str = "",
    ):
        super().__init__(message)
        self.error_type = error_type
        self.message = message
        self.retryable = retryable
        self.original_error = original_error
        self.video_id = video_id
        self.language = language
        if isinstance(original_error, BaseException):
            self.__cause__ = original_error

    def __str__(self) -> str:
        if self.original_error is not None:
            return (
                f"YouTube error [{self.error_type.value}]: {self.message} "
                f"(original: {self.original_error})"
            )
        return f"YouTube error [{self.error_type.value}]: {self.message}"

    def __repr__(self) -> str:
        return (
            f"YouTubeError(error_type={self.error_type.value!r}, message={self.message!r}, "
            f"retryable={self.retryable!r})"
        )


# Ordered keyword rules over the lowercased error message; first match wins.
KEYWORD_RULES = (
    (("authentication", "unauthorized"), ErrorType.AUTH,
     "Authentication failed or insufficient permissions", False),
    (("rate limit", "quota"), ErrorType.RATE_LIMIT,
     "Rate limit exceeded or quota exceeded", True),
    (("network", "timeout", "connection"), ErrorType.NETWORK,
     "Network connectivity issue", True),
    (("invalid", "bad request"), ErrorType.INVALID,
     "Invalid request or malformed data", False),
    (("server error", "internal server"), ErrorType.SERVER,
     "YouTube server error", True),
    (("language", "locale"), ErrorType.LANGUAGE,
     "Language setting error", False),
    (("upload", "video"), ErrorType.UPLOAD,
     "Video upload error", True),
)

UNKNOWN_RULE = (ErrorType.UNKNOWN, "Unknown error occurred", False)

_OUTCOMES = {rule[1]: rule[1:] for rule in KEYWORD_RULES}


def _status_code(error: BaseException) -> Optional[int]:
    """Pull an HTTP status from the shapes used by common API client libraries."""
    status = getattr(error, "status_code", None)
    if status is None:
        # googleapiclient.errors.HttpError
        status = getattr(getattr(error, "resp", None), "status", None)
    if status is None:
        # requests.HTTPError
        status = getattr(getattr(error, "response", None), "status_code", None)
    try:
        return int(status) if status is not None else None
    except (TypeError, ValueError):
        return None


def _classify_structured(error: BaseException, text: str) -> Optional[ErrorType]:
    status = _status_code(error)
    if status is not None:
        if status == 401:
            return ErrorType.AUTH
        if status == 403:
            if "quota" in text or "rate limit" in text:
                return ErrorType.RATE_LIMIT
            return ErrorType.AUTH
        if status == 429:
            return ErrorType.RATE_LIMIT
        if status in (400, 404, 409, 422):
            return ErrorType.INVALID
        if status >= 500:
            return ErrorType.SERVER
    if isinstance(error, (ConnectionError, TimeoutError)):
        return ErrorType.NETWORK
    return None


def classify_error(error: Optional[BaseException]) -> Optional[YouTubeError]:
    """Wrap an arbitrary exception in a categorized YouTubeError.

    Structured signals (HTTP status, connection/timeout exception types) are
    checked first. Otherwise the message is matched against KEYWORD_RULES.
    """
    if error is None:
        return None
    if isinstance(error, YouTubeError):
        return error

    text = str(error).lower()

    error_type = _classify_structured(error, text)
    if error_type is not None:
        _, message, retryable = _OUTCOMES[error_type]
        return YouTubeError(error_type, message, retryable, original_error=error)

    for keywords, error_type, message, retryable in KEYWORD_RULES:
        if any(k in text for k in keywords):
            return YouTubeError(error_type, message, retryable, original_error=error)

    error_type, message, retryable = UNKNOWN_RULE
    return YouTubeError(error_type, message, retryable, original_error=error)


def new_language_error(language: str, original_error: Optional[BaseException] = None) -> YouTubeError:
    return YouTubeError(
        ErrorType.LANGUAGE,
        f"Failed to set language to '{language}'",
        retryable=False,
        original_error=original_error,
        language=language,
    )


def new_upload_error(video_id: str, original_error: Optional[BaseException] = None) -> YouTubeError:
    return YouTubeError(
        ErrorType.UPLOAD,
        "Video upload failed",
        retryable=True,
        original_error=original_error,
        video_id=video_id,
    )


def new_internal_error(message: str, original_error: Optional[BaseException] = None) -> YouTubeError:
    return YouTubeError(ErrorType.INTERNAL, message, retryable=False, original_error=original_error)
