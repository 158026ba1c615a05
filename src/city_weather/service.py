"""Fetch orchestration: validate, geocode, fan out, aggregate."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from datetime import UTC, datetime

from .config import LookupMode
from .exceptions import FetchError, NotFoundError, ValidationError, WeatherProviderError
from .weather.aggregation import MAX_FORECAST_DAYS, aggregate_daily
from .weather.base import LocationQuery, WeatherProvider
from .weather.models import GeoLocation, WeatherReport


def validate_city_name(city_name: str | None) -> str:
    """Return the trimmed city name or raise ValidationError."""
    city = (city_name or "").strip()
    if not city:
        raise ValidationError()
    return city


class WeatherService:
    """Turns a city name into a display-ready WeatherReport.

    In `geocode` mode the city is resolved to coordinates first and the
    follow-up requests go by lat/lon. In `direct` mode both requests carry the
    city name and the remote API resolves it. Either way the current-weather
    and forecast requests are issued together and the call returns only after
    both have settled.
    """

    def __init__(
        self,
        provider: WeatherProvider,
        logger: logging.Logger,
        *,
        lookup_mode: LookupMode = "geocode",
        max_days: int = MAX_FORECAST_DAYS,
    ) -> None:
        self.provider = provider
        self.logger = logger
        self.lookup_mode = lookup_mode
        self.max_days = max_days

    def fetch_weather(self, city_name: str) -> WeatherReport:
        city = validate_city_name(city_name)
        self.logger.info("Weather lookup start: city=%r mode=%s", city, self.lookup_mode)

        try:
            location: GeoLocation | None = None
            if self.lookup_mode == "geocode":
                matches = self.provider.geocode(city)
                if not matches:
                    self.logger.info("Geocoding found no match for %r", city)
                    raise NotFoundError(city)
                location = matches[0]
                query = LocationQuery.from_location(location)
            else:
                query = LocationQuery(city=city)

            with ThreadPoolExecutor(max_workers=2, thread_name_prefix="weather-fetch") as pool:
                current_future = pool.submit(self.provider.fetch_current, query)
                forecast_future = pool.submit(self.provider.fetch_forecast, query)
                wait([current_future, forecast_future])
            current = current_future.result()
            entries = forecast_future.result()
        except WeatherProviderError as exc:
            self.logger.error("Weather lookup failed for %r: %s", city, exc)
            raise FetchError() from exc

        forecast = aggregate_daily(entries, max_days=self.max_days)
        self.logger.info(
            "Weather lookup success: place=%r entries=%d days=%d",
            current.place,
            len(entries),
            len(forecast),
        )
        return WeatherReport(
            query=city,
            location=location,
            current=current,
            forecast=forecast,
            retrieved_at=datetime.now(UTC),
        )
