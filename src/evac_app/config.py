"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Literal, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="EVAC_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Evacuation Planning API"
    api_prefix: str = "/api"
    log_level: str = Field(default="INFO", description="Root log level applied at startup.")
    storage_backend: Literal["file", "redis"] = Field(
        default="file",
        description="Where the evacuation collections are persisted.",
    )
    data_root: Path = Field(default=Path("data"), description="Root directory for file-backed state.")
    redis_url: str = Field(default="redis://localhost:6379/0", description="Local Redis connection URL.")
    redis_cloud_host: Optional[str] = Field(
        default=None,
        description="Redis Cloud host. When set together with the password it takes precedence over redis_url.",
    )
    redis_cloud_password: Optional[str] = Field(default=None)
    redis_cloud_port: int = Field(default=18884, ge=1)
    redis_cloud_user: str = Field(default="default")
    max_reasonable_distance_km: float = Field(default=50.0, gt=0.0)
    capacity_warning_trips: int = Field(default=5, ge=1)
    max_reasonable_trips: int = Field(default=10, ge=1)
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("data_root", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @property
    def uses_redis_cloud(self) -> bool:
        return bool(self.redis_cloud_host and self.redis_cloud_password)


settings = Settings()
