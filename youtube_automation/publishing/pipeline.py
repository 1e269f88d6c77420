from __future__ import annotations

import logging
from typing import Optional

from ..config import get_publishing_config, get_storage_config, load_config
from ..constants import DEFAULT_LANGUAGE
from ..storage.models import Video
from ..storage.repository import Repository, StorageError
from ..utils.logging_config import setup_logging
from .language_handler import validate_and_set_language
from .metrics import Metrics, youtube_metrics

logger = logging.getLogger(__name__)


class PublishingPipeline:
    """Prepares a stored video for upload: video file -> languages -> video file + index.

    The upload call itself is made by the caller once prepare_languages returns.
    """

    def __init__(
        self,
        repo: Repository,
        default_language: str = DEFAULT_LANGUAGE,
        metrics: Optional[Metrics] = None,
    ):
        self.repo = repo
        self.default_language = default_language
        self.metrics = metrics

    @classmethod
    def from_config(cls, config: Optional[dict] = None,
                    metrics: Optional[Metrics] = None) -> "PublishingPipeline":
        """Build a pipeline (and process logging) from load_config() output.

        Without an explicit Metrics the process-wide youtube_metrics is used.
        """
        if config is None:
            config = load_config()
        setup_logging(config.get("log_file"), config.get("log_level", "INFO"))

        storage_cfg = get_storage_config(config)
        publishing_cfg = get_publishing_config(config)
        repo = Repository(storage_cfg["index_path"], storage_cfg["manuscript_dir"])
        return cls(
            repo,
            default_language=publishing_cfg["default_language"],
            metrics=metrics if metrics is not None else youtube_metrics,
        )

    def prepare_languages(self, video_path: str, upload_record) -> Video:
        """Load a video, apply its languages to upload_record and persist the result.

        Storage errors for the video document propagate. A failed index
        update is logged and does not fail the call, since the video file is
        the source of truth.
        """
        video = self.repo.get_video(video_path)

        result = validate_and_set_language(
            upload_record, video, self.default_language, metrics=self.metrics
        )
        logger.info(
            f"Languages for {video.name!r}: language={result.language} "
            f"audio={result.audio_language} fallbacks={result.fallbacks}"
        )

        self.repo.write_video(video, video_path)

        try:
            self.repo.upsert_index_entry(video)
        except StorageError as e:
            logger.error(f"Could not update index for {video.name!r}: {e}")

        return video
