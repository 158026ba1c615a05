"""Display formatting for temperatures, dates and measurements."""

from __future__ import annotations

from datetime import date, datetime

MISSING = "-"


def format_temp(value: float | None) -> str:
    if value is None:
        return MISSING
    return f"{value:g}°C"


def format_wind(value: float | None) -> str:
    if value is None:
        return MISSING
    return f"{value:g} m/s"


def format_humidity(value: int | None) -> str:
    if value is None:
        return MISSING
    return f"{value}%"


def format_visibility(meters: int | None) -> str:
    if meters is None:
        return MISSING
    if meters >= 1000:
        return f"{meters / 1000:g} km"
    return f"{meters} m"


def format_day(value: date) -> str:
    """Day-first calendar date, e.g. 18/10/2026."""
    return value.strftime("%d/%m/%Y")


def format_time(value: datetime) -> str:
    """Two-digit 12-hour clock with lowercase meridiem, e.g. 03:00 pm."""
    return value.strftime("%I:%M ") + ("am" if value.hour < 12 else "pm")


def format_description(text: str) -> str:
    return text.capitalize() if text else MISSING
