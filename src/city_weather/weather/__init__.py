"""OpenWeatherMap integration and forecast aggregation."""

from .aggregation import MAX_FORECAST_DAYS, aggregate_daily
from .base import LocationQuery, WeatherProvider
from .models import (
    CurrentWeather,
    DailyForecast,
    ForecastEntry,
    GeoLocation,
    WeatherCondition,
    WeatherReport,
)
from .openweather import OpenWeatherProvider, build_http_client

__all__ = [
    "MAX_FORECAST_DAYS",
    "CurrentWeather",
    "DailyForecast",
    "ForecastEntry",
    "GeoLocation",
    "LocationQuery",
    "OpenWeatherProvider",
    "WeatherCondition",
    "WeatherProvider",
    "WeatherReport",
    "aggregate_daily",
    "build_http_client",
]
