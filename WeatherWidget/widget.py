"""The weather widget: owns the state record, starts fetches and renders."""
import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from datetime import datetime
from typing import Callable, Optional

from layout import calculate_layout, render_view
from weather_provider import WeatherProviderBase, FetchError
from widget_state import (
    Event,
    FetchFailed,
    FetchResolved,
    FetchStatus,
    Failed,
    Mounted,
    Success,
    Toggled,
    WidgetState,
    initial_state,
    update,
)


def fetch_status(provider: WeatherProviderBase) -> FetchStatus:
    """Run one fetch and return its outcome as Success or Failed."""
    try:
        return Success(provider.get_current())
    except FetchError as e:
        return Failed(str(e))


class WeatherWidget:
    """
    Single-screen weather widget.

    mount() and toggle() return immediately; the fetch they start runs on the
    executor and its result comes back through the same update function as
    every other event. Results of superseded fetches are discarded.
    """

    def __init__(
        self,
        provider: WeatherProviderBase,
        executor: Optional[Executor] = None,
        clock: Callable[[], datetime] = datetime.now,
        on_change: Optional[Callable[[WidgetState], None]] = None
    ):
        """
        Args:
            provider: Where the weather comes from
            executor: Runs fetches; a single-thread pool is created when None
            clock: Source of the current instant for the display timestamp
            on_change: Called with the new state after every transition
        """
        self.provider = provider
        self.clock = clock
        self.on_change = on_change
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="weather-fetch")
        self._lock = threading.Lock()
        self._render_lock = threading.Lock()
        self._state = initial_state()

    @property
    def state(self) -> WidgetState:
        return self._state

    def dispatch(self, event: Event) -> WidgetState:
        """Apply one event and notify the listener."""
        with self._lock:
            self._state = update(self._state, event)
            new_state = self._state
        logging.debug("State after %s: %s", type(event).__name__, new_state)
        if self.on_change:
            self.on_change(new_state)
        return new_state

    def mount(self) -> Future:
        """Start the first fetch cycle."""
        logging.info("Mounting weather widget")
        state = self.dispatch(Mounted(self.clock()))
        return self._start_fetch(state.request_id)

    def toggle(self) -> Future:
        """Switch language and start a new fetch cycle."""
        state = self.dispatch(Toggled(self.clock()))
        logging.info("Language switched to %s (%s)", state.locale.locale_code, state.locale.direction)
        return self._start_fetch(state.request_id)

    def _start_fetch(self, request_id: int) -> Future:
        logging.info("Starting weather fetch #%s", request_id)
        return self._executor.submit(self._fetch, request_id)

    def _fetch(self, request_id: int) -> WidgetState:
        status = fetch_status(self.provider)
        if isinstance(status, Success):
            logging.info("Weather fetch #%s succeeded", request_id)
            return self.dispatch(FetchResolved(request_id, status.payload))
        logging.warning("Weather fetch #%s failed: %s", request_id, status.reason)
        return self.dispatch(FetchFailed(request_id, status.reason))

    def render(self, canvas) -> None:
        """Draw the current state onto canvas, one frame at a time."""
        with self._render_lock:
            render_view(canvas, calculate_layout(self._state))

    def close(self) -> None:
        """Drop the executor if this widget created it. State is not persisted."""
        if self._owns_executor:
            self._executor.shutdown(wait=False)
