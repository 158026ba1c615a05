"""OpenWeatherMap (api.openweathermap.org) weather provider implementation."""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Any

import httpx

from ..config import Settings
from ..exceptions import WeatherProviderError
from ..redaction import sanitize_for_logging, sanitize_text
from .base import LocationQuery, WeatherProvider
from .models import CurrentWeather, ForecastEntry, GeoLocation, WeatherCondition

GEOCODING_PATH = "/geo/1.0/direct"
CURRENT_WEATHER_PATH = "/data/2.5/weather"
FORECAST_PATH = "/data/2.5/forecast"


def build_http_client(settings: Settings) -> httpx.Client:
    """Create the shared client carrying base URL, API key, units and timeout."""
    return httpx.Client(
        base_url=settings.base_url,
        params={"appid": settings.owm_api_key, "units": settings.units},
        timeout=settings.weather_timeout_seconds,
        headers={"Accept": "application/json"},
    )


class OpenWeatherProvider(WeatherProvider):
    """Fetches and normalizes geocoding, current weather and forecast data.

    Each call is a single attempt. Any transport error, non-2xx status or
    payload that lacks a required field raises WeatherProviderError.
    """

    def __init__(self, client: httpx.Client, logger: logging.Logger) -> None:
        self._client = client
        self.logger = logger

    def __enter__(self) -> OpenWeatherProvider:
        return self

    def __exit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def geocode(self, city: str) -> list[GeoLocation]:
        payload = self._request_json(GEOCODING_PATH, {"q": city}, context="geocoding lookup")
        if not isinstance(payload, list):
            raise WeatherProviderError(
                f"OpenWeatherMap geocoding returned {type(payload).__name__}, expected a list."
            )
        locations = [self._normalize_location(item) for item in payload if isinstance(item, dict)]
        self.logger.debug("Geocoding %r matched %d location(s)", city, len(locations))
        return locations

    def fetch_current(self, query: LocationQuery) -> CurrentWeather:
        payload = self._request_json(
            CURRENT_WEATHER_PATH, query.as_params(), context="current weather fetch"
        )
        if not isinstance(payload, dict):
            raise WeatherProviderError("OpenWeatherMap current weather payload is not an object.")
        return self._normalize_current(payload)

    def fetch_forecast(self, query: LocationQuery) -> list[ForecastEntry]:
        payload = self._request_json(FORECAST_PATH, query.as_params(), context="forecast fetch")
        if not isinstance(payload, dict):
            raise WeatherProviderError("OpenWeatherMap forecast payload is not an object.")
        raw_entries = payload.get("list")
        if not isinstance(raw_entries, list):
            raise WeatherProviderError("OpenWeatherMap forecast payload missing 'list' array.")
        return [self._normalize_entry(item) for item in raw_entries]

    def _request_json(
        self, path: str, params: dict[str, Any], context: str
    ) -> dict[str, Any] | list[Any]:
        try:
            response = self._client.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._log_failed_request(context, path, params)
            raise WeatherProviderError(
                f"OpenWeatherMap {context} failed with status {exc.response.status_code}: "
                f"{sanitize_text(exc.response.text[:300])}"
            ) from exc
        except httpx.HTTPError as exc:
            self._log_failed_request(context, path, params)
            raise WeatherProviderError(
                f"OpenWeatherMap {context} request failed ({type(exc).__name__}): "
                f"{sanitize_text(str(exc))}"
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise WeatherProviderError(
                f"OpenWeatherMap {context} returned a non-JSON response."
            ) from exc

        if not isinstance(payload, (dict, list)):
            raise WeatherProviderError(
                f"OpenWeatherMap {context} returned unexpected payload type "
                f"{type(payload).__name__}."
            )
        return payload

    def _log_failed_request(self, context: str, path: str, params: dict[str, Any]) -> None:
        sent = {**dict(self._client.params), **params}
        self.logger.warning(
            "OpenWeatherMap %s failed: path=%s params=%s",
            context,
            path,
            sanitize_for_logging(sent),
        )

    def _normalize_location(self, item: dict[str, Any]) -> GeoLocation:
        lat = self._as_float(item.get("lat"))
        lon = self._as_float(item.get("lon"))
        if lat is None or lon is None:
            raise WeatherProviderError("OpenWeatherMap geocoding match missing 'lat'/'lon'.")
        return GeoLocation(
            name=self._as_str(item.get("name")) or "",
            latitude=lat,
            longitude=lon,
            country=self._as_str(item.get("country")),
            state=self._as_str(item.get("state")),
        )

    def _normalize_current(self, payload: dict[str, Any]) -> CurrentWeather:
        main = self._as_dict(payload.get("main"))
        temperature = self._as_float(main.get("temp"))
        if temperature is None:
            raise WeatherProviderError("OpenWeatherMap current weather missing 'main.temp'.")
        name = self._as_str(payload.get("name"))
        if name is None:
            raise WeatherProviderError("OpenWeatherMap current weather missing 'name'.")

        coord = self._as_dict(payload.get("coord"))
        return CurrentWeather(
            name=name,
            country=self._as_str(self._as_dict(payload.get("sys")).get("country")),
            temperature=temperature,
            feels_like=self._as_float(main.get("feels_like")),
            humidity=self._as_humidity(main.get("humidity")),
            wind_speed=self._as_float(self._as_dict(payload.get("wind")).get("speed")),
            visibility=self._as_int(payload.get("visibility")),
            condition=self._normalize_condition(payload.get("weather")),
            latitude=self._as_float(coord.get("lat")),
            longitude=self._as_float(coord.get("lon")),
        )

    def _normalize_entry(self, item: Any) -> ForecastEntry:
        if not isinstance(item, dict):
            raise WeatherProviderError(
                f"OpenWeatherMap forecast entry is {type(item).__name__}, expected an object."
            )
        timestamp = self._parse_dt_txt(item.get("dt_txt"))
        if timestamp is None:
            raise WeatherProviderError("OpenWeatherMap forecast entry missing or invalid 'dt_txt'.")
        main = self._as_dict(item.get("main"))
        temperature = self._as_float(main.get("temp"))
        if temperature is None:
            raise WeatherProviderError(
                f"OpenWeatherMap forecast entry at {item.get('dt_txt')} missing 'main.temp'."
            )
        return ForecastEntry(
            timestamp=timestamp,
            dt=self._as_int(item.get("dt")),
            temperature=temperature,
            humidity=self._as_humidity(main.get("humidity")),
            wind_speed=self._as_float(self._as_dict(item.get("wind")).get("speed")),
            condition=self._normalize_condition(item.get("weather")),
        )

    def _normalize_condition(self, value: Any) -> WeatherCondition:
        if not isinstance(value, list) or not value or not isinstance(value[0], dict):
            return WeatherCondition()
        first = value[0]
        return WeatherCondition(
            code=self._as_int(first.get("id")),
            main=self._as_str(first.get("main")),
            description=self._as_str(first.get("description")) or "",
            icon=self._as_str(first.get("icon")),
        )

    @staticmethod
    def _as_dict(value: Any) -> dict[str, Any]:
        return value if isinstance(value, dict) else {}

    @staticmethod
    def _as_str(value: Any) -> str | None:
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None

    @staticmethod
    def _as_int(value: Any) -> int | None:
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float) and math.isfinite(value):
            return int(value)
        return None

    @staticmethod
    def _as_float(value: Any) -> float | None:
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return float(value)
        if isinstance(value, float) and math.isfinite(value):
            return value
        return None

    @classmethod
    def _as_humidity(cls, value: Any) -> int | None:
        humidity = cls._as_int(value)
        if humidity is None or not (0 <= humidity <= 100):
            return None
        return humidity

    @staticmethod
    def _parse_dt_txt(value: Any) -> datetime | None:
        # dt_txt is "YYYY-MM-DD HH:MM:SS" in UTC with no offset.
        if not isinstance(value, str) or not value.strip():
            return None
        try:
            return datetime.strptime(value.strip(), "%Y-%m-%d %H:%M:%S")
        except ValueError:
            return None
