"""Display state and the events that move it."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date

from ..weather.models import CurrentWeather, DailyForecast, WeatherReport


@dataclass(frozen=True, slots=True)
class DisplayState:
    """Everything the screen needs to render, replaced wholesale on each event."""

    city_input: str = ""
    current: CurrentWeather | None = None
    forecast: tuple[DailyForecast, ...] = ()
    loading: bool = False
    error: str | None = None
    selected_day: DailyForecast | None = None
    request_seq: int = 0


@dataclass(frozen=True, slots=True)
class CityInputChanged:
    text: str


@dataclass(frozen=True, slots=True)
class SearchRejected:
    """Input failed validation; no request was issued."""

    message: str


@dataclass(frozen=True, slots=True)
class SearchStarted:
    seq: int


@dataclass(frozen=True, slots=True)
class SearchSucceeded:
    seq: int
    report: WeatherReport


@dataclass(frozen=True, slots=True)
class SearchFailed:
    seq: int
    message: str


@dataclass(frozen=True, slots=True)
class DaySelected:
    day: date


@dataclass(frozen=True, slots=True)
class DayDetailClosed:
    pass


DisplayEvent = (
    CityInputChanged
    | SearchRejected
    | SearchStarted
    | SearchSucceeded
    | SearchFailed
    | DaySelected
    | DayDetailClosed
)


def reduce(state: DisplayState, event: DisplayEvent) -> DisplayState:
    """Apply one event and return the next state.

    Responses tagged with anything other than the latest issued sequence
    number are stale and leave the state untouched.
    """
    if isinstance(event, CityInputChanged):
        return replace(state, city_input=event.text)

    if isinstance(event, SearchRejected):
        return replace(state, error=event.message)

    if isinstance(event, SearchStarted):
        return replace(
            state,
            request_seq=event.seq,
            loading=True,
            error=None,
            current=None,
            forecast=(),
            selected_day=None,
        )

    if isinstance(event, SearchSucceeded):
        if event.seq != state.request_seq:
            return state
        return replace(
            state,
            loading=False,
            error=None,
            current=event.report.current,
            forecast=tuple(event.report.forecast),
        )

    if isinstance(event, SearchFailed):
        if event.seq != state.request_seq:
            return state
        return replace(state, loading=False, error=event.message, current=None, forecast=())

    if isinstance(event, DaySelected):
        for day in state.forecast:
            if day.day == event.day:
                return replace(state, selected_day=day)
        return state

    if isinstance(event, DayDetailClosed):
        return replace(state, selected_day=None)

    raise TypeError(f"Unsupported display event: {type(event).__name__}")
