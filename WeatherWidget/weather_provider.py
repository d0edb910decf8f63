"""Weather provider abstraction - the widget only needs "give me the current payload"."""
from abc import ABC, abstractmethod
from weather_data import WeatherPayload

FETCH_ERROR_MESSAGE = "Failed to fetch weather data"


class WeatherProviderBase(ABC):
    """Abstract base class for weather data providers."""

    @abstractmethod
    def get_current(self) -> WeatherPayload:
        """
        Fetch current weather data.

        Returns:
            WeatherPayload: Current weather as sent by the API

        Raises:
            FetchError: If the provider fails to fetch data
        """
        pass


class FetchError(Exception):
    """
    Raised when the weather could not be fetched.

    The message is always the generic, user-facing text; the cause is logged
    where the failure happens.
    """

    def __init__(self, message: str = FETCH_ERROR_MESSAGE):
        super().__init__(message)
