"""Tests for the two screen layouts and the terminal app controller."""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime
from typing import Any

import pytest
from rich.console import Console

from city_weather.exceptions import FetchError
from city_weather.ui.app import WeatherApp
from city_weather.ui.formatting import format_day, format_temp, format_time, format_visibility
from city_weather.ui.screens import CardLayout, TableLayout, get_layout
from city_weather.ui.state import (
    DaySelected,
    DisplayState,
    SearchStarted,
    SearchSucceeded,
    reduce,
)
from city_weather.weather.aggregation import aggregate_daily
from city_weather.weather.models import (
    CurrentWeather,
    ForecastEntry,
    WeatherCondition,
    WeatherReport,
)


def _report(city: str = "London") -> WeatherReport:
    rain = WeatherCondition(code=500, description="light rain", icon="10d")
    entries = [
        ForecastEntry(
            timestamp=datetime(2026, 10, 18, 9), temperature=11.5, humidity=80,
            wind_speed=3.0, condition=rain,
        ),
        ForecastEntry(
            timestamp=datetime(2026, 10, 18, 15), temperature=16.25, humidity=65,
            wind_speed=4.5, condition=rain,
        ),
        ForecastEntry(timestamp=datetime(2026, 10, 19, 0), temperature=9.0, condition=rain),
    ]
    return WeatherReport(
        query=city,
        current=CurrentWeather(
            name=city,
            country="GB",
            temperature=14.2,
            feels_like=13.6,
            humidity=77,
            wind_speed=5.66,
            visibility=10000,
            condition=WeatherCondition(description="broken clouds"),
        ),
        forecast=aggregate_daily(entries),
        retrieved_at=datetime(2026, 10, 18, 8, tzinfo=UTC),
    )


def _render(layout: Any, state: DisplayState) -> str:
    console = Console(record=True, width=140)
    console.print(layout.render(state))
    return console.export_text()


def _loaded() -> DisplayState:
    state = reduce(DisplayState(city_input="London"), SearchStarted(1))
    return reduce(state, SearchSucceeded(1, _report()))


def test_formatting_helpers() -> None:
    assert format_temp(14.2) == "14.2°C"
    assert format_temp(None) == "-"
    assert format_day(date(2026, 10, 8)) == "08/10/2026"
    assert format_time(datetime(2026, 10, 18, 15, 0)) == "03:00 pm"
    assert format_time(datetime(2026, 10, 18, 0, 0)) == "12:00 am"
    assert format_visibility(10000) == "10 km"
    assert format_visibility(800) == "800 m"


def test_card_layout_renders_current_and_forecast() -> None:
    text = _render(CardLayout(), _loaded())
    assert "Weather App" in text
    assert "London, GB" in text
    assert "Temperature: 14.2°C" in text
    assert "Condition: Broken clouds" in text
    assert "Wind Speed: 5.66 m/s" in text
    assert "Humidity: 77%" in text
    assert "2-Day Forecast" in text
    assert "18/10/2026" in text
    assert "Min: 11.5°C | Max: 16.25°C" in text


def test_table_layout_adds_feels_like_and_visibility() -> None:
    text = _render(TableLayout(), _loaded())
    assert "Feels Like" in text
    assert "13.6°C" in text
    assert "10 km" in text
    assert "19/10/2026" in text


@pytest.mark.parametrize("layout", [CardLayout(), TableLayout()])
def test_detail_view_lists_every_entry(layout: Any) -> None:
    state = _loaded()
    app_state = reduce(state, DaySelected(state.forecast[0].day))
    text = _render(layout, app_state)
    assert "Details for 18/10/2026" in text
    assert "09:00 am" in text
    assert "03:00 pm" in text
    assert "Light rain" in text


def test_loading_and_error_states_render() -> None:
    loading = reduce(DisplayState(city_input="Paris"), SearchStarted(1))
    assert "[Loading...]" in _render(CardLayout(), loading)

    failed = DisplayState(error="Paris not found")
    text = _render(TableLayout(), failed)
    assert "Paris not found" in text
    assert "Forecast" not in text


def test_get_layout_rejects_unknown_name() -> None:
    assert isinstance(get_layout("table"), TableLayout)
    with pytest.raises(ValueError, match="Unknown layout"):
        get_layout("grid")


class _StubService:
    def __init__(self, outcomes: list[Any]) -> None:
        self.outcomes = outcomes
        self.calls: list[str] = []

    def fetch_weather(self, city: str) -> WeatherReport:
        self.calls.append(city)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def _app(service: _StubService) -> WeatherApp:
    return WeatherApp(
        service=service,  # type: ignore[arg-type]
        layout=CardLayout(),
        console=Console(record=True, width=140),
        logger=logging.getLogger("test_ui_app"),
    )


def test_app_blank_search_never_calls_service() -> None:
    service = _StubService([])
    app = _app(service)

    state = app.search("   ")

    assert service.calls == []
    assert state.error == "Please enter a city name"


def test_app_failed_fetch_shows_generic_message() -> None:
    service = _StubService([_report(), FetchError()])
    app = _app(service)

    app.search("London")
    state = app.search("Paris")

    assert state.error == "Failed to fetch weather data. Try again later."
    assert state.current is None
    assert state.forecast == ()
    assert state.request_seq == 2


def test_app_interactive_commands() -> None:
    service = _StubService([_report()])
    app = _app(service)

    assert app.handle_command("London") is True
    assert app.state.current is not None
    app.handle_command("d2")
    assert app.state.selected_day is not None
    assert app.state.selected_day.day == date(2026, 10, 19)
    app.handle_command("D9")
    assert app.state.selected_day.day == date(2026, 10, 19)
    app.handle_command("x")
    assert app.state.selected_day is None
    assert app.handle_command("q") is False
    assert service.calls == ["London"]


def test_app_numeric_input_is_searched_not_treated_as_day() -> None:
    service = _StubService([_report(), FetchError()])
    app = _app(service)

    app.handle_command("London")
    app.handle_command("2")

    assert service.calls == ["London", "2"]
    assert app.state.selected_day is None
    assert app.state.error == "Failed to fetch weather data. Try again later."
