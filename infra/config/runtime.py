"""
Runtime configuration access.

Single source of truth: {home}/config.yaml

The only environment variable read here is MAKHTUT_HOME, which locates the
config directory. A .env file in the working directory is loaded first so
MAKHTUT_HOME and any ${VAR} referenced from config.yaml can live there.
"""

import os
from pathlib import Path
from functools import lru_cache

from dotenv import load_dotenv

from .schemas import AppConfig

load_dotenv()


def get_home() -> Path:
    """Get the config home directory from environment."""
    return Path(os.getenv('MAKHTUT_HOME', '~/Documents/makhtut')).expanduser().resolve()


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """
    Load and cache the configuration.

    Returns AppConfig with defaults if config.yaml doesn't exist.
    """
    from .app_config import load_config
    return load_config(get_home())


def reload_config() -> AppConfig:
    """Force reload of config (clears cache)."""
    get_config.cache_clear()
    return get_config()


def get_default_max_tokens() -> int:
    return get_config().translation.max_tokens


def get_translation_prompt() -> str:
    return get_config().translation.resolve_prompt()


def get_pipeline_logger(book_id: str, stage: str):
    """Build a PipelineLogger from the logging section of the config."""
    from infra.pipeline.logger import PipelineLogger

    config = get_config()
    return PipelineLogger(
        book_id=book_id,
        stage=stage,
        log_dir=config.resolve_log_dir(get_home()),
        console_output=config.logging.console,
        json_output=config.logging.json_output,
        level=config.logging.level,
    )
