"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Literal, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="ROUTEOPT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Delivery Route Optimizer API"
    api_prefix: str = "/api"
    deliveries_file: Path = Field(
        default=Path("data/pending_deliveries.csv"),
        description="Pending deliveries per driver.",
    )
    average_speed_kmh: float = Field(
        default=30.0,
        gt=0.0,
        description="Flat urban speed used to turn distances into travel minutes.",
    )
    default_stop_duration_minutes: float = Field(
        default=5.0,
        ge=0.0,
        description="Minutes spent at a stop that does not declare its own duration.",
    )
    max_two_opt_passes: Optional[int] = Field(
        default=None,
        ge=1,
        description="Upper bound on 2-opt passes. None runs until no reversal improves the route.",
    )
    current_location_id: str = Field(
        default="current-location",
        description="Identifier of the synthetic stop seeded at the driver's position.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "capacitor://localhost",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("deliveries_file", mode="before")
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


settings = Settings()
