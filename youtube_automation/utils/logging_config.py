import logging
import sys
from pathlib import Path

ROOT_LOGGER = "youtube_automation"

CONSOLE_FORMAT = "%(levelname)s [%(component)s]: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(component)s): %(message)s"


class ComponentFilter(logging.Filter):
    """Give every record a ``component`` so the formats above never fail.

    Publishing records carry component="youtube"; everything else is
    labelled after the last part of its logger name (e.g. "repository").
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "component"):
            record.component = record.name.rsplit(".", 1)[-1]
        return True


def _level(level) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)


def setup_logging(log_file: str = None, level: str = "INFO",
                  publishing_level: str = None) -> logging.Logger:
    """Configure the package logger for console and optional file output.

    publishing_level overrides the level of the YouTube publishing logger
    only, e.g. to see per-video language decisions at DEBUG.
    """
    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(_level(level))

    if publishing_level:
        logging.getLogger(f"{ROOT_LOGGER}.publishing").setLevel(_level(publishing_level))

    # Avoid duplicate handlers on repeated calls
    if root_logger.handlers:
        return root_logger

    console = logging.StreamHandler(sys.stderr)
    console.addFilter(ComponentFilter())
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root_logger.addHandler(console)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.addFilter(ComponentFilter())
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        root_logger.addHandler(file_handler)

    return root_logger
