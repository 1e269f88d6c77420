from __future__ import annotations

from .models import Sponsorship, Video, VideoIndex
from .repository import (
    DecodeError,
    EncodeError,
    Repository,
    StorageError,
    VideoNotFoundError,
    WriteError,
)

__all__ = [
    "Sponsorship",
    "Video",
    "VideoIndex",
    "Repository",
    "StorageError",
    "VideoNotFoundError",
    "DecodeError",
    "EncodeError",
    "WriteError",
]
