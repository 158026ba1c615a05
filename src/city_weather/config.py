"""Typed settings loader for the city weather lookup."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import AnyHttpUrl, Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError

LookupMode = Literal["geocode", "direct"]
LayoutName = Literal["cards", "table"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    owm_api_key: str = Field(alias="OWM_API_KEY", repr=False)
    owm_base_url: AnyHttpUrl = Field(
        default="https://api.openweathermap.org",
        alias="OWM_BASE_URL",
    )
    weather_timeout_seconds: float = Field(default=10.0, alias="WEATHER_TIMEOUT_SECONDS")
    weather_lookup_mode: LookupMode = Field(default="geocode", alias="WEATHER_LOOKUP_MODE")
    forecast_max_days: int = Field(default=5, alias="FORECAST_MAX_DAYS")
    weather_layout: LayoutName = Field(default="cards", alias="WEATHER_LAYOUT")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        alias="LOG_LEVEL",
    )

    # Units are not configurable; display formatting assumes Celsius and m/s.
    units: Literal["metric"] = "metric"

    @model_validator(mode="after")
    def validate_fields(self) -> Settings:
        """Reject blank keys and nonsensical numeric limits."""
        if not self.owm_api_key.strip():
            raise ValueError("OWM_API_KEY must not be empty.")
        if self.weather_timeout_seconds <= 0:
            raise ValueError("WEATHER_TIMEOUT_SECONDS must be > 0.")
        if self.forecast_max_days <= 0:
            raise ValueError("FORECAST_MAX_DAYS must be > 0.")
        return self

    @property
    def base_url(self) -> str:
        return str(self.owm_base_url).rstrip("/")

    def safe_summary(self) -> dict[str, Any]:
        """Return config summary safe for logging (no credentials)."""
        return {
            "base_url": self.base_url,
            "units": self.units,
            "timeout_seconds": self.weather_timeout_seconds,
            "lookup_mode": self.weather_lookup_mode,
            "forecast_max_days": self.forecast_max_days,
            "layout": self.weather_layout,
        }


def load_settings() -> Settings:
    """Load and validate settings, raising ConfigError on failure."""
    try:
        return Settings()
    except ValidationError as exc:
        # str(exc) echoes raw input values, which would include the API key.
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'settings'}: {error['msg']}"
            for error in exc.errors(include_input=False)
        )
        raise ConfigError(f"Invalid configuration: {problems}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed reading environment/.env: {exc}") from exc
