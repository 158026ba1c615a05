"""Bucket 3-hour forecast entries into calendar days."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from itertools import islice

from .models import DailyForecast, ForecastEntry

MAX_FORECAST_DAYS = 5


def aggregate_daily(
    entries: Iterable[ForecastEntry],
    max_days: int = MAX_FORECAST_DAYS,
) -> list[DailyForecast]:
    """Group entries by the date of their timestamp.

    Days come out in the order their first entry appears, entries keep their
    input order within a day, and only the first `max_days` days are kept.
    Days beyond the limit are dropped, never merged into earlier ones.
    """
    grouped: dict[date, list[ForecastEntry]] = {}
    for entry in entries:
        grouped.setdefault(entry.timestamp.date(), []).append(entry)

    return [
        DailyForecast(day=day, entries=day_entries)
        for day, day_entries in islice(grouped.items(), max_days)
    ]
