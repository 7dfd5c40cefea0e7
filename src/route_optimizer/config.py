"""Application configuration and settings management."""

from typing import Any, Literal

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="ROUTE_OPT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Route Optimizer API"
    api_prefix: str = "/api"
    log_level: str = Field(default="INFO", description="Root logging level applied by create_app().")
    stop_duration_minutes: float = Field(
        default=15.0,
        ge=0.0,
        description="Dwell time spent at every non-hub stop before departing.",
    )
    default_average_speed_mph: float = Field(default=30.0, gt=0.0)
    default_start_time: str = Field(default="08:00", description="Departure time from the hub (HH:MM, 24-hour).")
    distance_unit: Literal["mi", "km"] = Field(
        default="mi",
        description="Unit of reported distances; speeds are always interpreted per this unit per hour.",
    )
    max_coordinates: int = Field(default=100, ge=2, description="Upper bound on stops per request or session.")
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

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

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> str:
        return str(value).strip().upper() or "INFO"


settings = Settings()
