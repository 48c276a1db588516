"""Application Configuration: env vars, .env and an optional TOML file via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - Priority: init kwargs > LINKHOP_* env vars > .env > TOML file > defaults
    - Cyclic alias definitions are rejected at load time (ValidationError)
    - search_url_template, when set, contains {query} and an http(s) scheme

Design Decisions:
    - Nested sections (history, server) use env_nested_delimiter "__",
      e.g. LINKHOP_HISTORY__ENABLED=true
    - TOML file is optional: missing file means defaults, not an error
"""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from linkhop.core.alias_resolver import find_alias_cycle
from linkhop.core.domain_types import SearchEngine
from linkhop.core.search import QUERY_PLACEHOLDER, build_search_url, engine_search_url

CONFIG_FILE_ENV = "LINKHOP_CONFIG_FILE"


def default_config_path() -> Path:
    override = os.environ.get(CONFIG_FILE_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "linkhop" / "config.toml"


class HistorySettings(BaseModel):
    """Best-effort command history store."""
    enabled: bool = False
    database_url: str = "sqlite+aiosqlite:///linkhop-history.db"
    max_entries: int = Field(default=1000, ge=1)

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v


class ServerSettings(BaseModel):
    address: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)
    log_level: str = "INFO"
    log_format: str = "json"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="LINKHOP_",
        env_nested_delimiter="__",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Fallback search
    default_search: SearchEngine = SearchEngine.GOOGLE
    search_url_template: str | None = None

    # User shortcuts, e.g. {"work": "gh mbinns"}
    aliases: dict[str, str] = Field(default_factory=dict)

    history: HistorySettings = Field(default_factory=HistorySettings)
    server: ServerSettings = Field(default_factory=ServerSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=default_config_path()),
            file_secret_settings,
        )

    @field_validator("search_url_template")
    @classmethod
    def check_search_template(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        v = v.strip()
        if QUERY_PLACEHOLDER not in v:
            raise ValueError(f"search_url_template must contain {QUERY_PLACEHOLDER}")
        if not v.startswith(("http://", "https://")):
            raise ValueError("search_url_template must start with http:// or https://")
        return v

    @field_validator("aliases")
    @classmethod
    def check_alias_keys(cls, v: dict[str, str]) -> dict[str, str]:
        cleaned = {}
        for key, expansion in v.items():
            key = key.strip()
            if not key:
                raise ValueError("alias names cannot be empty")
            if not expansion.strip():
                raise ValueError(f"alias '{key}' has an empty expansion")
            cleaned[key] = expansion
        return cleaned

    @model_validator(mode="after")
    def reject_alias_cycles(self):
        cycle = find_alias_cycle(self.aliases)
        if cycle:
            raise ValueError(f"cyclic alias definition: {' -> '.join(cycle)}")
        return self

    def search_url(self, query: str) -> str:
        """Default-search destination for unmatched input."""
        if self.search_url_template:
            return build_search_url(self.search_url_template, query)
        return engine_search_url(self.default_search, query)

    @property
    def search_label(self) -> str:
        return self.search_url_template or self.default_search.value


@lru_cache
def get_settings() -> Settings:
    return Settings()
