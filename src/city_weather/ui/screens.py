"""Two rich layouts of the same weather screen."""

from __future__ import annotations

from abc import ABC, abstractmethod

from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..weather.models import CurrentWeather, DailyForecast
from .formatting import (
    format_day,
    format_description,
    format_humidity,
    format_temp,
    format_time,
    format_visibility,
    format_wind,
)
from .state import DisplayState

APP_TITLE = "Weather App"


class ScreenLayout(ABC):
    """Shared title, search line and error message; subclasses lay out the data."""

    name: str

    def render(self, state: DisplayState) -> RenderableType:
        parts: list[RenderableType] = [self._build_header(state)]
        if state.error:
            parts.append(Text(state.error, style="bold red", justify="center"))
        if state.current is not None:
            parts.append(self.build_current(state.current))
        if state.forecast:
            parts.append(self.build_forecast(state.forecast))
        if state.selected_day is not None:
            parts.append(self.build_detail(state.selected_day))
        return Group(*parts)

    def _build_header(self, state: DisplayState) -> Panel:
        text = Text(justify="center")
        text.append(APP_TITLE, style="bold blue")
        text.append("\n")
        text.append("City: ", style="bold")
        if state.city_input:
            text.append(state.city_input)
        else:
            text.append("Enter city name...", style="dim")
        text.append("  ")
        if state.loading:
            text.append("[Loading...]", style="bold white on grey50")
        else:
            text.append("[Search]", style="bold white on blue")
        return Panel(text, border_style="blue")

    @abstractmethod
    def build_current(self, current: CurrentWeather) -> RenderableType:
        """Render the current-conditions panel."""

    @abstractmethod
    def build_forecast(self, forecast: tuple[DailyForecast, ...]) -> RenderableType:
        """Render the per-day summary."""

    @abstractmethod
    def build_detail(self, day: DailyForecast) -> RenderableType:
        """Render every 3-hour entry of the selected day."""


class CardLayout(ScreenLayout):
    """Centered panels with one card per forecast day."""

    name = "cards"

    def build_current(self, current: CurrentWeather) -> RenderableType:
        lines = [
            f"Temperature: {format_temp(current.temperature)}",
            f"Condition: {format_description(current.condition.description)}",
            f"Wind Speed: {format_wind(current.wind_speed)}",
            f"Humidity: {format_humidity(current.humidity)}",
        ]
        return Panel(
            Text("\n".join(lines), justify="center"),
            title=Text(current.place),
            border_style="white",
        )

    def build_forecast(self, forecast: tuple[DailyForecast, ...]) -> RenderableType:
        cards = [
            Panel(
                Text(
                    f"Min: {format_temp(day.min_temp)} | Max: {format_temp(day.max_temp)}",
                    justify="center",
                ),
                title=f"[{index}] {format_day(day.day)}",
                border_style="cyan",
            )
            for index, day in enumerate(forecast, start=1)
        ]
        return Panel(
            Columns(cards, equal=True, expand=True),
            title=f"{len(forecast)}-Day Forecast",
            border_style="cyan",
        )

    def build_detail(self, day: DailyForecast) -> RenderableType:
        cards = []
        for entry in day.entries:
            body = "\n".join(
                [
                    f"Temp: {format_temp(entry.temperature)}",
                    format_description(entry.condition.description),
                    f"Wind: {format_wind(entry.wind_speed)}",
                    f"Humidity: {format_humidity(entry.humidity)}",
                ]
            )
            cards.append(Panel(Text(body, justify="center"), title=format_time(entry.timestamp)))
        return Panel(
            Columns(cards, equal=True, expand=True),
            title=f"Details for {format_day(day.day)}",
            subtitle="x to close",
            border_style="green",
        )


class TableLayout(ScreenLayout):
    """Compact tabular variant with feels-like and visibility."""

    name = "table"

    def build_current(self, current: CurrentWeather) -> RenderableType:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Temperature", format_temp(current.temperature))
        table.add_row("Feels Like", format_temp(current.feels_like))
        table.add_row("Condition", format_description(current.condition.description))
        table.add_row("Wind Speed", format_wind(current.wind_speed))
        table.add_row("Humidity", format_humidity(current.humidity))
        table.add_row("Visibility", format_visibility(current.visibility))
        return Panel(table, title=Text(current.place), border_style="white")

    def build_forecast(self, forecast: tuple[DailyForecast, ...]) -> RenderableType:
        table = Table(title=f"{len(forecast)}-Day Forecast", header_style="bold")
        table.add_column("#", justify="right", width=3)
        table.add_column("Date")
        table.add_column("Min", justify="right")
        table.add_column("Max", justify="right")
        table.add_column("Entries", justify="right")
        for index, day in enumerate(forecast, start=1):
            table.add_row(
                str(index),
                format_day(day.day),
                format_temp(day.min_temp),
                format_temp(day.max_temp),
                str(len(day.entries)),
            )
        return table

    def build_detail(self, day: DailyForecast) -> RenderableType:
        table = Table(title=f"Details for {format_day(day.day)}", header_style="bold")
        table.add_column("Time")
        table.add_column("Temp", justify="right")
        table.add_column("Condition", overflow="fold")
        table.add_column("Wind", justify="right")
        table.add_column("Humidity", justify="right")
        for entry in day.entries:
            table.add_row(
                format_time(entry.timestamp),
                format_temp(entry.temperature),
                format_description(entry.condition.description),
                format_wind(entry.wind_speed),
                format_humidity(entry.humidity),
            )
        return table


LAYOUTS: dict[str, type[ScreenLayout]] = {
    CardLayout.name: CardLayout,
    TableLayout.name: TableLayout,
}


def get_layout(name: str) -> ScreenLayout:
    try:
        return LAYOUTS[name]()
    except KeyError:
        raise ValueError(f"Unknown layout {name!r}; expected one of {sorted(LAYOUTS)}.") from None
