"""
Configuration management for makhtut.

Config file: {home}/config.yaml, where home is MAKHTUT_HOME
(default ~/Documents/makhtut).

Usage:
    from infra.config import ConfigManager, get_config

    manager = ConfigManager(home)
    config = manager.load()

    max_tokens = get_config().translation.max_tokens
"""

from .schemas import (
    AppConfig,
    TranslationConfig,
    LoggingConfig,
    DEFAULT_TRANSLATION_PROMPT,
    resolve_env_vars,
)

from .app_config import (
    ConfigManager,
    load_config,
)

from .runtime import (
    get_home,
    get_config,
    reload_config,
    get_default_max_tokens,
    get_translation_prompt,
    get_pipeline_logger,
)


__all__ = [
    # Schemas
    "AppConfig",
    "TranslationConfig",
    "LoggingConfig",
    "DEFAULT_TRANSLATION_PROMPT",
    "resolve_env_vars",
    # Manager
    "ConfigManager",
    "load_config",
    # Runtime
    "get_home",
    "get_config",
    "reload_config",
    "get_default_max_tokens",
    "get_translation_prompt",
    "get_pipeline_logger",
]
