import os
import logging
from pathlib import Path

import yaml
from dotenv import load_dotenv

from .constants import DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent


def load_config() -> dict:
    """Load configuration from .env and config.yaml. Env vars take precedence."""
    load_dotenv(PROJECT_ROOT / ".env")

    config_path = PROJECT_ROOT / "config.yaml"
    if config_path.exists():
        with open(config_path) as f:
            config = yaml.safe_load(f) or {}
    else:
        config = {}

    storage = config.get("storage", {})

    # Resolve storage paths relative to project root
    config["index_path"] = str(PROJECT_ROOT / storage.get("index_path", "index.yaml"))
    config["manuscript_dir"] = str(PROJECT_ROOT / storage.get("manuscript_dir", "manuscript"))

    # Resolve log file path
    log_rel = config.get("logging", {}).get("file")
    if log_rel:
        config["log_file"] = str(PROJECT_ROOT / log_rel)
    else:
        config["log_file"] = None

    config["log_level"] = os.getenv("LOG_LEVEL") or config.get("logging", {}).get("level", "INFO")

    return config


def get_storage_config(config: dict) -> dict:
    """Extract storage settings with defaults."""
    return {
        "index_path": config.get("index_path", "index.yaml"),
        "manuscript_dir": config.get("manuscript_dir", "manuscript"),
    }


def get_publishing_config(config: dict) -> dict:
    """Extract publishing settings with defaults."""
    pub = config.get("publishing", {})
    default_language = pub.get("default_language", DEFAULT_LANGUAGE)
    return {
        "default_language": default_language,
        "default_audio_language": pub.get("default_audio_language", default_language),
    }
