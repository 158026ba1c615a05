"""Application exception classes."""

FETCH_FAILED_MESSAGE = "Failed to fetch weather data. Try again later."
EMPTY_CITY_MESSAGE = "Please enter a city name"


class ConfigError(Exception):
    """Raised when configuration is invalid or incomplete."""


class WeatherProviderError(Exception):
    """Raised when weather provider requests or normalization fail."""


class WeatherLookupError(Exception):
    """Base class for failures shown to the user as a single message."""

    def __init__(self, user_message: str) -> None:
        super().__init__(user_message)
        self.user_message = user_message


class ValidationError(WeatherLookupError):
    """Raised when the city name is empty, before any request is made."""

    def __init__(self, user_message: str = EMPTY_CITY_MESSAGE) -> None:
        super().__init__(user_message)


class NotFoundError(WeatherLookupError):
    """Raised when geocoding returns no match for the city."""

    def __init__(self, city: str) -> None:
        super().__init__(f"{city} not found")
        self.city = city


class FetchError(WeatherLookupError):
    """Raised when either weather request (or geocoding) fails."""

    def __init__(self, user_message: str = FETCH_FAILED_MESSAGE) -> None:
        super().__init__(user_message)
