from __future__ import annotations

import os
import logging
import tempfile
from pathlib import Path
from typing import Iterable, Optional

import yaml

from .models import Video, VideoIndex

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """Base exception raised when reading or writing video metadata fails."""


class VideoNotFoundError(StorageError, FileNotFoundError):
    """Raised when a video or index document does not exist."""


class DecodeError(StorageError):
    """Raised when a document exists but cannot be parsed."""


class EncodeError(StorageError):
    """Raised when metadata cannot be serialized."""


class WriteError(StorageError):
    """Raised when a serialized document cannot be written to disk."""


def _atomic_write(path: Path, text: str):
    """Write text next to the target and rename it into place."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise


class Repository:
    """Per-video YAML documents plus a list-form index of all videos.

    The per-video document is authoritative. The index is written separately
    and may lag behind it.
    """

    def __init__(self, index_path: str = "index.yaml", manuscript_dir: str = "manuscript"):
        self.index_path = index_path
        self.manuscript_dir = manuscript_dir

    def get_file_path(self, category: str, name: str, extension: str = "yaml") -> str:
        """Location of a video document: <manuscript>/<category>/<name>.<ext>."""
        category = category.lower().replace(" ", "-")
        name = name.lower().replace(" ", "-")
        return str(Path(self.manuscript_dir) / category / f"{name}.{extension}")

    # ------------------------------------------------------------------
    # Videos
    # ------------------------------------------------------------------

    def get_video(self, path: str) -> Video:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise VideoNotFoundError(f"Video file not found: {path}") from e
        except UnicodeDecodeError as e:
            raise DecodeError(f"Failed to unmarshal video data from {path}: {e}") from e
        except OSError as e:
            raise StorageError(f"Failed to read video file {path}: {e}") from e

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise DecodeError(f"Failed to unmarshal video data from {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise DecodeError(
                f"Failed to unmarshal video data from {path}: "
                f"expected a mapping, got {type(data).__name__}"
            )
        try:
            return Video.from_dict(data)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"Failed to unmarshal video data from {path}: {e}") from e

    def write_video(self, video: Video, path: str):
        """Serialize a video to YAML, replacing any existing file."""
        try:
            text = yaml.safe_dump(video.to_dict(), sort_keys=False, allow_unicode=True)
        except yaml.YAMLError as e:
            raise EncodeError(f"Failed to marshal video {video.name!r}: {e}") from e

        try:
            _atomic_write(Path(path), text)
        except OSError as e:
            raise WriteError(f"Failed to write video to {path}: {e}") from e
        logger.debug(f"Wrote video {video.name!r} to {path}")

    # ------------------------------------------------------------------
    # Index
    # ------------------------------------------------------------------

    def get_index(self, path: Optional[str] = None) -> list[VideoIndex]:
        path = path or self.index_path
        try:
            text = Path(path).read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise VideoNotFoundError(f"Index file not found: {path}") from e
        except UnicodeDecodeError as e:
            raise DecodeError(f"Failed to unmarshal video index from {path}: {e}") from e
        except OSError as e:
            raise StorageError(f"Failed to read index file {path}: {e}") from e

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise DecodeError(f"Failed to unmarshal video index from {path}: {e}") from e

        if data is None:
            return []
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise DecodeError(
                f"Failed to unmarshal video index from {path}: expected a list of mappings"
            )
        try:
            return [VideoIndex.from_dict(item) for item in data]
        except (TypeError, ValueError) as e:
            raise DecodeError(f"Failed to unmarshal video index from {path}: {e}") from e

    def write_index(
        self,
        entries: Iterable[VideoIndex],
        path: Optional[str] = None,
        strict: bool = False,
    ) -> bool:
        """Write the whole index. Returns False if the write failed.

        By default a failure is logged and swallowed so that index upkeep never
        blocks work on the videos themselves. Pass strict=True to raise instead.
        """
        path = path or self.index_path
        try:
            try:
                text = yaml.safe_dump(
                    [e.to_dict() for e in entries], sort_keys=False, allow_unicode=True
                )
            except yaml.YAMLError as e:
                raise EncodeError(f"Failed to marshal video index: {e}") from e
            try:
                _atomic_write(Path(path), text)
            except OSError as e:
                raise WriteError(f"Failed to write video index to {path}: {e}") from e
        except StorageError as e:
            if strict:
                raise
            logger.error(f"Index write failed, index may be stale: {e}")
            return False
        return True

    def upsert_index_entry(self, video: Video, path: Optional[str] = None) -> list[VideoIndex]:
        """Insert or replace the index entry for a video. Returns the new index."""
        try:
            entries = self.get_index(path)
        except VideoNotFoundError:
            entries = []

        entry = video.to_index()
        for i, existing in enumerate(entries):
            if existing.name == entry.name:
                entries[i] = entry
                break
        else:
            entries.append(entry)

        self.write_index(entries, path, strict=True)
        return entries

    def remove_index_entry(self, name: str, path: Optional[str] = None) -> bool:
        """Drop the entry with the given name. Returns False if it was not indexed."""
        entries = self.get_index(path)
        kept = [e for e in entries if e.name != name]
        if len(kept) == len(entries):
            return False
        self.write_index(kept, path, strict=True)
        return True
