"""Terminal presentation: display state, layouts and the interactive app."""

from .app import WeatherApp
from .screens import CardLayout, ScreenLayout, TableLayout, get_layout
from .state import DisplayState, reduce

__all__ = [
    "CardLayout",
    "DisplayState",
    "ScreenLayout",
    "TableLayout",
    "WeatherApp",
    "get_layout",
    "reduce",
]
