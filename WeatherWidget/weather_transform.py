"""Display values derived from a weather payload - pure functions for testability."""
import math
from dataclasses import dataclass
from typing import Optional, Union
from weather_data import WeatherPayload

NOT_AVAILABLE = "N/A"
ICON_URL_TEMPLATE = "https://openweathermap.org/img/wn/{icon}@2x.png"

Temperature = Union[int, str]


def kelvin_to_celsius(kelvin: float) -> int:
    """
    Convert Kelvin to whole degrees Celsius.

    Halves round up (toward +infinity), so 0 K is -273 and not -274.
    """
    return math.floor(kelvin - 273.15 + 0.5)


def _reading(payload: Optional[WeatherPayload], field: str) -> Temperature:
    if payload is None or payload.main is None:
        return NOT_AVAILABLE
    value = getattr(payload.main, field)
    if value is None:
        return NOT_AVAILABLE
    return kelvin_to_celsius(value)


def temperature_in_celsius(payload: Optional[WeatherPayload]) -> Temperature:
    return _reading(payload, "temp")


def min_temperature(payload: Optional[WeatherPayload]) -> Temperature:
    return _reading(payload, "temp_min")


def max_temperature(payload: Optional[WeatherPayload]) -> Temperature:
    return _reading(payload, "temp_max")


def weather_description(payload: Optional[WeatherPayload]) -> str:
    if payload is None or not payload.weather or not payload.weather[0].description:
        return NOT_AVAILABLE
    return payload.weather[0].description


def weather_icon_url(payload: Optional[WeatherPayload]) -> Optional[str]:
    """Icon URL for the first condition, or None when there is nothing to show."""
    if payload is None or not payload.weather or not payload.weather[0].icon:
        return None
    return ICON_URL_TEMPLATE.format(icon=payload.weather[0].icon)


@dataclass(frozen=True)
class DisplayValues:
    """Everything the presenter needs from a payload."""
    temperature: Temperature
    min_temperature: Temperature
    max_temperature: Temperature
    description: str
    icon_url: Optional[str]


def derive_display_values(payload: Optional[WeatherPayload]) -> DisplayValues:
    return DisplayValues(
        temperature=temperature_in_celsius(payload),
        min_temperature=min_temperature(payload),
        max_temperature=max_temperature(payload),
        description=weather_description(payload),
        icon_url=weather_icon_url(payload),
    )
