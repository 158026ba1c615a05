"""Shared fixtures: a mocked OpenWeatherMap and canned payloads."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import datetime, timedelta
from typing import Any

import httpx
import pytest
import respx

BASE_URL = "https://owm.test"
API_KEY = "test-key-123"


def make_forecast_payload(days: int = 6, per_day: int = 3, start: str = "2026-10-18") -> dict:
    base = datetime.strptime(start, "%Y-%m-%d")
    items: list[dict[str, Any]] = []
    for day in range(days):
        for slot in range(per_day):
            ts = base + timedelta(days=day, hours=slot * 3)
            items.append(
                {
                    "dt": int(ts.timestamp()),
                    "dt_txt": ts.strftime("%Y-%m-%d %H:%M:%S"),
                    "main": {"temp": 10.0 + day + slot, "humidity": 70},
                    "wind": {"speed": 4.1},
                    "weather": [
                        {"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}
                    ],
                }
            )
    return {"cod": "200", "cnt": len(items), "list": items}


CURRENT_PAYLOAD: dict[str, Any] = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [{"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"}],
    "main": {"temp": 14.2, "feels_like": 13.6, "humidity": 77},
    "visibility": 10000,
    "wind": {"speed": 5.66},
    "sys": {"country": "GB"},
    "name": "London",
}

GEOCODING_PAYLOAD: list[dict[str, Any]] = [
    {"name": "London", "lat": 51.5073, "lon": -0.1276, "country": "GB", "state": "England"}
]


@pytest.fixture
def owm() -> Iterator[respx.MockRouter]:
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
def http_client() -> Iterator[httpx.Client]:
    client = httpx.Client(
        base_url=BASE_URL,
        params={"appid": API_KEY, "units": "metric"},
        timeout=5.0,
    )
    yield client
    client.close()


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger("city_weather_tests")


def set_required_env(monkeypatch: pytest.MonkeyPatch, **overrides: str) -> None:
    monkeypatch.setenv("OWM_API_KEY", API_KEY)
    monkeypatch.setenv("OWM_BASE_URL", BASE_URL)
    for key, value in overrides.items():
        monkeypatch.setenv(key, value)
