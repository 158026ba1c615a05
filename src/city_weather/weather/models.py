"""Typed models for normalized OpenWeatherMap data."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field


class WeatherCondition(BaseModel):
    """First entry of the `weather` array on a current or forecast record."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    code: int | None = None
    main: str | None = None
    description: str = ""
    icon: str | None = None


class GeoLocation(BaseModel):
    """One geocoding match."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: str
    latitude: float
    longitude: float
    country: str | None = None
    state: str | None = None


class ForecastEntry(BaseModel):
    """One 3-hour forecast record."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    timestamp: datetime
    dt: int | None = None
    temperature: float
    humidity: int | None = Field(default=None, ge=0, le=100)
    wind_speed: float | None = None
    condition: WeatherCondition = Field(default_factory=WeatherCondition)


class DailyForecast(BaseModel):
    """Forecast entries for one calendar date, summarized by min/max temperature."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    day: date
    entries: list[ForecastEntry] = Field(min_length=1)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def min_temp(self) -> float:
        return min(entry.temperature for entry in self.entries)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def max_temp(self) -> float:
        return max(entry.temperature for entry in self.entries)


class CurrentWeather(BaseModel):
    """Current conditions for the resolved place."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: str
    country: str | None = None
    temperature: float
    feels_like: float | None = None
    humidity: int | None = Field(default=None, ge=0, le=100)
    wind_speed: float | None = None
    visibility: int | None = None
    condition: WeatherCondition = Field(default_factory=WeatherCondition)
    latitude: float | None = None
    longitude: float | None = None

    @property
    def place(self) -> str:
        return f"{self.name}, {self.country}" if self.country else self.name


class WeatherReport(BaseModel):
    """Everything one successful lookup produces for the display."""

    query: str
    location: GeoLocation | None = None
    current: CurrentWeather
    forecast: list[DailyForecast] = Field(default_factory=list)
    retrieved_at: datetime
