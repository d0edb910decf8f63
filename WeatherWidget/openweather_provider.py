"""OpenWeather Current Weather API provider implementation."""
import logging
import requests
from typing import Optional
from weather_provider import WeatherProviderBase, FetchError
from weather_data import WeatherPayload

# Riyadh. Fixed at configuration time, the widget shows a single location.
DEFAULT_LAT = 24.774265
DEFAULT_LON = 46.738586


class OpenWeatherProvider(WeatherProviderBase):
    """
    Weather provider using OpenWeather Current Weather API.

    Uses the free Current Weather API: https://openweathermap.org/current
    No "units" parameter is sent, so temperatures come back in Kelvin.
    """

    BASE_URL = "https://api.openweathermap.org/data/2.5/weather"

    def __init__(
        self,
        api_key: str,
        lat: float = DEFAULT_LAT,
        lon: float = DEFAULT_LON,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize OpenWeather provider.

        Args:
            api_key: OpenWeather API key
            lat: Latitude (-90 to 90)
            lon: Longitude (-180 to 180)
            timeout: HTTP request timeout in seconds (None waits for the network stack)
            session: Optional requests session, the module-level API is used otherwise
        """
        self.api_key = api_key
        self.lat = lat
        self.lon = lon
        self.timeout = timeout
        self.session = session

    def get_current(self) -> WeatherPayload:
        """
        Fetch current weather from OpenWeather Current Weather API.

        Returns:
            WeatherPayload: Current weather, fields copied verbatim

        Raises:
            FetchError: On network failure, non-2xx status or a non-JSON body
        """
        params = {
            "lat": self.lat,
            "lon": self.lon,
            "appid": self.api_key,
        }

        try:
            logging.info(f"Making OpenWeather API request: {self.BASE_URL}")
            logging.debug(f"Request parameters: lat={self.lat}, lon={self.lon}")

            http = self.session or requests
            response = http.get(self.BASE_URL, params=params, timeout=self.timeout)

            logging.info(f"API response status: {response.status_code}")

            if not response.ok:
                logging.error(f"API request failed with status {response.status_code}")
                self._log_error_response(response)
                raise FetchError()

            data = response.json()
            if not isinstance(data, dict):
                raise ValueError(f"expected a JSON object, got {type(data).__name__}")
            logging.debug(f"API response data keys: {list(data.keys())}")

            payload = WeatherPayload.from_json(data)
            logging.info(f"Weather payload received for {payload.name or 'unknown location'}")
            return payload

        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during API request: {e}")
            raise FetchError() from e
        except ValueError as e:
            logging.error(f"Failed to decode API response: {e}")
            raise FetchError() from e

    def _log_error_response(self, response: requests.Response) -> None:
        """Log the OpenWeather error body; the caller only sees the generic message."""
        try:
            error_data = response.json()
            cod = error_data.get("cod", response.status_code)
            message = error_data.get("message", "Unknown error")
            logging.error(f"OpenWeather API error {cod}: {message}")
        except (ValueError, AttributeError):
            logging.error(f"Non-JSON error response: HTTP {response.status_code}, body: {response.text[:200]}")
