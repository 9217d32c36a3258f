from infra.config import (
    AppConfig,
    ConfigManager,
    get_config,
)

from infra.pipeline import PipelineLogger

__all__ = [
    "AppConfig",
    "ConfigManager",
    "get_config",

    "PipelineLogger",
]
