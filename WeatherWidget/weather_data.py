"""Weather payload model - the subset of the OpenWeather response the widget reads."""
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class MainReadings:
    """Temperatures from the response's "main" block, in Kelvin."""
    temp: Optional[float] = None
    temp_min: Optional[float] = None
    temp_max: Optional[float] = None


@dataclass(frozen=True)
class Condition:
    """One entry of the response's "weather" array."""
    description: str = ""
    icon: str = ""


@dataclass(frozen=True)
class WeatherPayload:
    """
    Current weather as received from the API.

    Missing blocks stay missing (main=None, weather=()). Deciding what to show
    for them is left to weather_transform.
    """
    name: Optional[str] = None
    main: Optional[MainReadings] = None
    weather: Tuple[Condition, ...] = ()

    @classmethod
    def from_json(cls, data: dict) -> "WeatherPayload":
        """Build a payload from the decoded JSON body."""
        main_data = data.get("main")
        main = None
        if isinstance(main_data, dict):
            main = MainReadings(
                temp=main_data.get("temp"),
                temp_min=main_data.get("temp_min"),
                temp_max=main_data.get("temp_max"),
            )

        weather = tuple(
            Condition(
                description=_text(entry.get("description")),
                icon=_text(entry.get("icon")),
            )
            for entry in data.get("weather") or []
            if isinstance(entry, dict)
        )

        return cls(name=_text(data.get("name")) or None, main=main, weather=weather)


def _text(value) -> str:
    """JSON null and non-string values read as an empty string."""
    return value if isinstance(value, str) else ""
