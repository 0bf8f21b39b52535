"""Process configuration from the environment and an optional .env file.

Real environment variables always win. The .env file is the first that
exists of:

1. the path in ``BOOKLISTS_ENV_FILE`` (relative paths start at the project root)
2. ``config/.env.dev`` for local development
3. ``config/.env`` for deployments
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "BOOKLISTS_ENV_FILE"


def _find_project_root() -> Path:
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / "config").is_dir() or (candidate / ".git").is_dir():
            return candidate
        if candidate == Path("/app"):  # container image
            return candidate
    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    return _find_project_root() / "config"


def _env_file_candidates() -> list[Path]:
    candidates = []
    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        candidates.append(path if path.is_absolute() else _find_project_root() / path)
    config_dir = get_config_dir()
    candidates += [config_dir / ".env.dev", config_dir / ".env"]
    return candidates


def _resolve_env_file_path() -> Path | None:
    return next((p for p in _env_file_candidates() if p.exists()), None)


class Settings(BaseSettings):
    """Typed view of the configuration.

    ``jwt_secret_key`` and ``postgres_password`` have no defaults; the
    process refuses to start without them. ``database_dsn`` replaces the
    ``postgres_*`` parts when set (tests point it at SQLite).
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Booklists"

    jwt_secret_key: SecretStr
    jwt_access_token_expire_hours: int = 1
    jwt_refresh_token_expire_days: int = 7
    registration_enabled: bool = True

    postgres_password: SecretStr
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_db: str = "booklists"
    database_dsn: str | None = None

    # Seconds a single list store call may take
    store_timeout_seconds: float = 5.0

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    # Comma separated; empty disables CORS
    api_cors_origins: str = ""

    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, v: Any) -> str:
        if isinstance(v, (list, tuple)):
            return ",".join(v)
        return str(v) if v else ""

    @field_validator("store_timeout_seconds")
    @classmethod
    def _positive_timeout(cls, v: float) -> float:
        if v <= 0:
            msg = "store_timeout_seconds must be positive"
            raise ValueError(msg)
        return v

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        if self.database_dsn:
            return self.database_dsn
        password = self.postgres_password.get_secret_value()
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]

    @property
    def database_type(self) -> str:
        """``postgresql``, ``sqlite``, ... taken from the URL scheme."""
        scheme = self.database_url.partition(":")[0]
        return scheme.partition("+")[0]


@lru_cache()
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]


def clear_settings_cache() -> None:
    get_settings.cache_clear()
