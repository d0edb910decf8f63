"""Widget state record and the single update function that advances it."""
import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Union

from locale_state import LocaleState, ENGLISH, toggle_locale, format_timestamp
from weather_data import WeatherPayload


@dataclass(frozen=True)
class Loading:
    """A fetch is outstanding."""


@dataclass(frozen=True)
class Success:
    payload: WeatherPayload


@dataclass(frozen=True)
class Failed:
    reason: str


FetchStatus = Union[Loading, Success, Failed]


@dataclass(frozen=True)
class WidgetState:
    """
    Everything the widget shows, as one immutable value.

    request_id identifies the most recent fetch; results carrying any other
    id are stale and get dropped.
    """
    locale: LocaleState = ENGLISH
    status: FetchStatus = Loading()
    timestamp: str = ""
    request_id: int = 0


# Events


@dataclass(frozen=True)
class Mounted:
    now: datetime


@dataclass(frozen=True)
class Toggled:
    now: datetime


@dataclass(frozen=True)
class FetchResolved:
    request_id: int
    payload: WeatherPayload


@dataclass(frozen=True)
class FetchFailed:
    request_id: int
    reason: str


Event = Union[Mounted, Toggled, FetchResolved, FetchFailed]


def initial_state() -> WidgetState:
    return WidgetState()


def update(state: WidgetState, event: Event) -> WidgetState:
    """
    Return the state that follows event.

    Mounted and Toggled start a new fetch cycle: status goes back to Loading,
    the timestamp is re-formatted for the (new) locale and request_id moves
    forward. The caller reads request_id from the result to tag the fetch it
    starts.
    """
    if isinstance(event, Mounted):
        return replace(
            state,
            status=Loading(),
            timestamp=format_timestamp(event.now, state.locale.locale_code),
            request_id=state.request_id + 1,
        )

    if isinstance(event, Toggled):
        locale = toggle_locale(state.locale)
        return replace(
            state,
            locale=locale,
            status=Loading(),
            timestamp=format_timestamp(event.now, locale.locale_code),
            request_id=state.request_id + 1,
        )

    if isinstance(event, (FetchResolved, FetchFailed)):
        if event.request_id != state.request_id:
            logging.debug(
                "Discarding stale fetch result %s (current request %s)",
                event.request_id,
                state.request_id,
            )
            return state
        if isinstance(event, FetchResolved):
            return replace(state, status=Success(event.payload))
        return replace(state, status=Failed(event.reason))

    raise TypeError(f"Unknown event: {event!r}")
