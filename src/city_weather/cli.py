"""CLI: look up a city's weather and render it in the terminal."""

from __future__ import annotations

import argparse
import sys

from rich.console import Console

from .config import load_settings
from .exceptions import ConfigError
from .log_setup import setup_logger
from .service import WeatherService
from .ui.app import WeatherApp
from .ui.screens import LAYOUTS, get_layout
from .weather.openweather import OpenWeatherProvider, build_http_client


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse weather CLI arguments."""
    parser = argparse.ArgumentParser(
        description="Show current weather and a 5-day forecast for a city."
    )
    parser.add_argument("city", nargs="?", default=None, help="City name to look up.")
    parser.add_argument(
        "--layout",
        choices=sorted(LAYOUTS),
        default=None,
        help="Screen layout (defaults to WEATHER_LAYOUT).",
    )
    parser.add_argument(
        "--lookup-mode",
        choices=["geocode", "direct"],
        default=None,
        help="Resolve the city via geocoding first, or query by name directly.",
    )
    parser.add_argument(
        "--day",
        type=int,
        default=None,
        help="Also show 3-hour details for this forecast day (1-based).",
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Keep prompting for cities after the first lookup.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run one lookup, or the interactive prompt loop."""
    args = parse_args(argv)
    logger = setup_logger()
    console = Console()

    try:
        settings = load_settings()
    except ConfigError as exc:
        logger.error("Configuration failure: %s", exc)
        return 2

    logger.setLevel(settings.log_level)
    logger.debug("Settings loaded: %s", settings.safe_summary())

    if args.day is not None and args.day <= 0:
        logger.error("--day must be > 0 when provided.")
        return 2

    exit_code = 0
    try:
        with OpenWeatherProvider(build_http_client(settings), logger) as provider:
            service = WeatherService(
                provider,
                logger,
                lookup_mode=args.lookup_mode or settings.weather_lookup_mode,
                max_days=settings.forecast_max_days,
            )
            app = WeatherApp(
                service=service,
                layout=get_layout(args.layout or settings.weather_layout),
                console=console,
                logger=logger,
            )

            if args.city is None or args.interactive:
                if args.city is not None:
                    app.search(args.city)
                app.run_interactive()
                return 0

            state = app.search(args.city)
            if args.day is not None and state.error is None:
                app.select_day(args.day)
            app.render()
            if app.state.error is not None:
                exit_code = 4
    except Exception as exc:  # pragma: no cover - defensive catch for CLI runtime
        exit_code = 99
        logger.exception("Unexpected weather CLI failure: %s", exc)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
