"""Terminal front end wiring the service, display state and a layout."""

from __future__ import annotations

import logging
import re

from rich.console import Console
from rich.prompt import Prompt

from ..exceptions import ValidationError, WeatherLookupError
from ..service import WeatherService, validate_city_name
from .screens import ScreenLayout
from .state import (
    CityInputChanged,
    DayDetailClosed,
    DaySelected,
    DisplayEvent,
    DisplayState,
    SearchFailed,
    SearchRejected,
    SearchStarted,
    SearchSucceeded,
    reduce,
)

QUIT_COMMANDS = {"q", "quit", "exit"}
CLOSE_COMMANDS = {"x", "close"}
DAY_COMMAND_RE = re.compile(r"d(\d+)", re.IGNORECASE)


class WeatherApp:
    """Single-screen weather lookup driven by explicit state transitions."""

    def __init__(
        self,
        *,
        service: WeatherService,
        layout: ScreenLayout,
        console: Console,
        logger: logging.Logger,
    ) -> None:
        self.service = service
        self.layout = layout
        self.console = console
        self.logger = logger
        self.state = DisplayState()
        self._next_seq = 0

    def dispatch(self, event: DisplayEvent) -> DisplayState:
        self.state = reduce(self.state, event)
        return self.state

    def search(self, city: str) -> DisplayState:
        """Run one lookup and fold its outcome into the display state."""
        self.dispatch(CityInputChanged(city))
        try:
            validate_city_name(city)
        except ValidationError as exc:
            return self.dispatch(SearchRejected(exc.user_message))

        self._next_seq += 1
        seq = self._next_seq
        self.dispatch(SearchStarted(seq))
        try:
            report = self.service.fetch_weather(city)
        except WeatherLookupError as exc:
            return self.dispatch(SearchFailed(seq, exc.user_message))
        return self.dispatch(SearchSucceeded(seq, report))

    def select_day(self, index: int) -> DisplayState:
        """Open the detail view for the 1-based forecast card `index`."""
        if not 1 <= index <= len(self.state.forecast):
            self.logger.warning(
                "Day %d is out of range (1-%d)", index, len(self.state.forecast)
            )
            return self.state
        return self.dispatch(DaySelected(self.state.forecast[index - 1].day))

    def close_detail(self) -> DisplayState:
        return self.dispatch(DayDetailClosed())

    def render(self) -> None:
        self.console.print(self.layout.render(self.state))

    def handle_command(self, command: str) -> bool:
        """Apply one line of interactive input. Returns False to stop the loop."""
        text = command.strip()
        lowered = text.lower()
        if lowered in QUIT_COMMANDS:
            return False
        if lowered in CLOSE_COMMANDS:
            self.close_detail()
        elif DAY_COMMAND_RE.fullmatch(text):
            self.select_day(int(text[1:]))
        else:
            self.search(text)
        return True

    def run_interactive(self) -> None:
        self.console.print(
            "Type a city name to search, d<N> for day N details, "
            "'x' to close details, 'q' to quit."
        )
        self.render()
        while True:
            try:
                command = Prompt.ask("[bold]City[/bold]", console=self.console, default="")
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                break
            if not self.handle_command(command):
                break
            self.render()
