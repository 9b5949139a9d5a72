"""Configuration for ytt.

Two layers:

* ``TranscriptConfig``: per-call (or per-instance) overrides, immutable
  for the duration of one fetch.
* ``YTTSettings``: process-wide defaults. Loading order (lowest to
  highest priority):
  1. ~/.config/ytt/config.toml (user-level)
  2. ./ytt.toml (project-level)
  3. Environment variables (YTT_USER_AGENT, YTT_TIMEOUT, etc.)
  4. Keyword overrides passed to ``load_settings``
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from ytt.fetcher.transport import DEFAULT_USER_AGENT, Fetcher

_USER_CONFIG = Path.home() / ".config" / "ytt" / "config.toml"
_PROJECT_CONFIG = Path("ytt.toml")

DEFAULT_CACHE_TTL = 3_600_000  # 1 hour, in milliseconds


class TranscriptConfig(BaseModel):
    """Optional overrides for a single fetch.

    The three fetch hooks are independently substitutable; any hook left
    unset uses the default httpx transport. Fields left as None fall back
    to ``YTTSettings``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    lang: str | None = None
    user_agent: str | None = None
    cache: Any = None  # any object with get(key) / set(key, value, ttl)
    cache_ttl: int | None = Field(default=None, ge=0)  # milliseconds
    disable_https: bool | None = None
    video_fetch: Optional[Fetcher] = None
    player_fetch: Optional[Fetcher] = None
    transcript_fetch: Optional[Fetcher] = None

    @field_validator("cache")
    @classmethod
    def _check_cache(cls, value: Any) -> Any:
        if value is None:
            return value
        if not (callable(getattr(value, "get", None)) and callable(getattr(value, "set", None))):
            raise ValueError("cache must provide get(key) and set(key, value, ttl) methods")
        return value


class YTTSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="YTT_",
        toml_file=[_USER_CONFIG, _PROJECT_CONFIG],
    )

    user_agent: str = DEFAULT_USER_AGENT
    disable_https: bool = False
    timeout: float = 30.0  # seconds, default transport only
    cache_ttl: int | None = Field(default=None, ge=0)  # milliseconds; None defers to the cache
    verbose: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, env_settings, TomlConfigSettingsSource(settings_cls))


def load_settings(**overrides: object) -> YTTSettings:
    """Load settings from all layers and merge.

    Args:
        **overrides: Direct overrides (e.g. timeout=5.0). None values are
            ignored so unset options keep their layered defaults.
    """
    return YTTSettings(**{k: v for k, v in overrides.items() if v is not None})


@lru_cache(maxsize=1)
def get_settings() -> YTTSettings:
    """Process-wide settings, loaded once."""
    return load_settings()
