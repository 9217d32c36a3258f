"""
Configuration schemas for makhtut.

Defines the structure of the configuration file.
All config is stored in ~/Documents/makhtut/config.yaml (or MAKHTUT_HOME).
"""

from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field, field_validator
import os
import re


DEFAULT_TRANSLATION_PROMPT = """You are translating a classical Arabic manuscript into English.

The text below is split into segments. Each segment starts with a citation
label on its own line:
- P<n> is body text from page n
- P<n>_<m> is body text running from page n to page m
- F<n> and F<n>_<m> are footnotes from the same pages

Rules:
- Translate every segment, in order
- Keep each citation label exactly as given, on its own line
- Keep parenthetical reference markers such as (١) where they appear
- Do not summarize, merge, or skip segments"""


class TranslationConfig(BaseModel):
    """Settings for preparing translation batches."""
    max_tokens: int = Field(
        default=1000,
        ge=1,
        description="Token ceiling per translation batch"
    )
    prompt: str = Field(
        default=DEFAULT_TRANSLATION_PROMPT,
        description="Instructions placed before each batch (can use ${ENV_VAR} syntax)"
    )

    def resolve_prompt(self) -> str:
        return resolve_env_vars(self.prompt)


class LoggingConfig(BaseModel):
    """Where and how pipeline logs are written."""
    level: str = Field(default="INFO", description="DEBUG, INFO, WARNING, ERROR")
    log_dir: Optional[Path] = Field(
        None,
        description="Directory for JSONL logs (defaults to {home}/logs)"
    )
    console: bool = Field(default=False, description="Echo logs to the console")
    json_output: bool = Field(default=True, description="Write JSONL log files")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level


class AppConfig(BaseModel):
    """
    Top-level configuration.

    Stored at: {home}/config.yaml
    """
    translation: TranslationConfig = Field(
        default_factory=TranslationConfig,
        description="Translation batch settings"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging settings"
    )

    def resolve_log_dir(self, home: Path) -> Path:
        if self.logging.log_dir is not None:
            return Path(self.logging.log_dir).expanduser()
        return Path(home) / "logs"


def resolve_env_vars(value: str) -> str:
    """
    Resolve ${ENV_VAR} references in a string.

    Examples:
        "${TRANSLATION_PROMPT}" -> actual value from environment
        "literal-value" -> "literal-value"
        "${MISSING_VAR}" -> "" (empty string if not set)
    """
    if not isinstance(value, str):
        return value

    pattern = r'\$\{([^}]+)\}'

    def replace(match):
        var_name = match.group(1)
        return os.environ.get(var_name, "")

    return re.sub(pattern, replace, value)
