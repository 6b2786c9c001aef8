"""Gallery Server configuration.

Settings are read from ``GALLERY_*`` environment variables (and an optional
``.env`` file), falling back to the defaults below.  The CLI overrides
host/port/root on top of whatever was loaded.
"""

from __future__ import annotations

import functools
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORT = 3000
DEFAULT_INDEX_DOCUMENT = "000.html"


class Settings(BaseSettings):
    """Runtime settings for the gallery server."""

    model_config = SettingsConfigDict(
        env_prefix="GALLERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = "127.0.0.1"
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    root_dir: Path = Field(default_factory=Path.cwd)
    index_document: str = DEFAULT_INDEX_DOCUMENT
    strict_static_paths: bool = False
    log_level: str = "INFO"

    @field_validator("root_dir")
    @classmethod
    def _expand_root(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("index_document")
    @classmethod
    def _strip_leading_slash(cls, value: str) -> str:
        value = value.lstrip("/")
        if not value:
            raise ValueError("index_document must name a file")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def load(cls, **overrides) -> Settings:
        """Build settings from the environment, applying non-None *overrides*."""
        return cls(**{k: v for k, v in overrides.items() if v is not None})

    @property
    def resolved_root(self) -> Path:
        """Absolute gallery root with symlinks resolved."""
        return self.root_dir.resolve()


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings (loaded once)."""
    return Settings.load()
