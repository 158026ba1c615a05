"""Provider-agnostic weather interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, model_validator

from .models import CurrentWeather, ForecastEntry, GeoLocation


class LocationQuery(BaseModel):
    """Either a free-text city name or a coordinate pair."""

    city: str | None = None
    latitude: float | None = None
    longitude: float | None = None

    @model_validator(mode="after")
    def check_one_form(self) -> LocationQuery:
        has_coords = self.latitude is not None and self.longitude is not None
        if has_coords == (self.city is not None):
            raise ValueError("Provide either a city name or both latitude and longitude.")
        return self

    @classmethod
    def from_location(cls, location: GeoLocation) -> LocationQuery:
        return cls(latitude=location.latitude, longitude=location.longitude)

    def as_params(self) -> dict[str, str | float]:
        if self.city is not None:
            return {"q": self.city}
        return {"lat": self.latitude, "lon": self.longitude}  # type: ignore[dict-item]


class WeatherProvider(ABC):
    """Base contract for the remote weather service used by the orchestrator."""

    @abstractmethod
    def geocode(self, city: str) -> list[GeoLocation]:
        """Resolve a city name to zero or more coordinate matches."""

    @abstractmethod
    def fetch_current(self, query: LocationQuery) -> CurrentWeather:
        """Fetch current conditions."""

    @abstractmethod
    def fetch_forecast(self, query: LocationQuery) -> list[ForecastEntry]:
        """Fetch the raw 3-hour forecast entries in API order."""

    @abstractmethod
    def close(self) -> None:
        """Release provider resources."""
