"""Forecast widget: owns the search state and the two operations that mutate it.

Input capture commits a city; retrieval fetches and transforms its forecast.
Views are derived from the state by reporting.view.render and never write
back into it.
"""

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime
from typing import Protocol

from weatherfinder.config.loader import require_api_key
from weatherfinder.config.schema import OPENWEATHER_ICON_URL, FinderConfig
from weatherfinder.ingest.city_input import normalize_city
from weatherfinder.ingest.forecast_builder import build_forecasts
from weatherfinder.ingest.openweather_client import (
    ForecastClientError,
    OpenWeatherClient,
)
from weatherfinder.ingest.payload import ForecastPayload, ForecastPayloadError
from weatherfinder.models.state import SearchState

logger = logging.getLogger(__name__)

CITY_NOT_FOUND = "City not found"


class ForecastSource(Protocol):
    async def get_forecast(self, encoded_city: str) -> ForecastPayload: ...


class ForecastWidget:
    def __init__(
        self,
        client: ForecastSource,
        icon_base_url: str = OPENWEATHER_ICON_URL,
        discard_stale_responses: bool = False,
        clock: Callable[[], datetime] | None = None,
    ):
        self.client = client
        self.icon_base_url = icon_base_url
        self.discard_stale_responses = discard_stale_responses
        self.clock = clock
        self.state = SearchState()
        self._listeners: list[Callable[[SearchState], None]] = []
        self._tasks: set[asyncio.Task] = set()
        self._latest_token = 0

    def subscribe(self, listener: Callable[[SearchState], None]) -> None:
        """Register a callback invoked after every state change."""
        self._listeners.append(listener)

    def _changed(self) -> None:
        for listener in self._listeners:
            listener(self.state)

    # --- Input capture ---

    def set_input(self, text: str) -> None:
        self.state.raw_input = text
        self._changed()

    def _commit(self) -> str | None:
        """Commit the current input as the active city.

        Blank input is ignored. Returns the encoded city, or None.
        """
        city = normalize_city(self.state.raw_input)
        if city is None:
            return None
        self.state.active_city = city
        self.state.raw_input = ""
        self._changed()
        return city

    def search(self) -> asyncio.Task | None:
        """Commit and schedule a retrieval on the running event loop.

        Every committed city gets exactly one retrieval. Earlier retrievals
        still in flight are left running.
        """
        city = self._commit()
        if city is None:
            return None
        task = asyncio.get_running_loop().create_task(self.retrieve(city))
        self._tasks.add(task)
        task.add_done_callback(self._task_done)
        return task

    def _task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Forecast retrieval crashed", exc_info=exc)

    async def wait_idle(self) -> None:
        """Wait until every scheduled retrieval has finished.

        Crashed retrievals are logged by their done callback, not raised here.
        """
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    # --- Retrieval ---

    async def retrieve(self, city: str) -> None:
        self._latest_token += 1
        token = self._latest_token

        self.state.is_loading = True
        self.state.error_message = ""
        self._changed()

        try:
            payload = await self.client.get_forecast(city)
            if not self._is_stale(token):
                self._apply(payload)
        except (ForecastClientError, ForecastPayloadError) as e:
            logger.warning("Forecast lookup failed for %s: %s", city, e)
            if not self._is_stale(token):
                self.state.error_message = CITY_NOT_FOUND
        finally:
            if self._is_stale(token):
                logger.info("Dropped stale forecast response for %s", city)
            else:
                self.state.is_loading = False
                self._changed()

    def _is_stale(self, token: int) -> bool:
        return self.discard_stale_responses and token != self._latest_token

    def _apply(self, payload: ForecastPayload) -> None:
        now = self.clock() if self.clock else None
        forecasts = build_forecasts(payload, self.icon_base_url, now)
        self.state.resolved_city = payload.city.name
        self.state.resolved_country = payload.city.country
        self.state.forecasts = forecasts


def build_widget(config: FinderConfig) -> ForecastWidget:
    """Wire a widget to the OpenWeatherMap client described by config."""
    client = OpenWeatherClient(
        api_key=require_api_key(config),
        forecast_url=config.api.forecast_url,
        units=config.api.units,
        timeout=config.api.timeout_seconds,
    )
    return ForecastWidget(
        client,
        icon_base_url=config.api.icon_base_url,
        discard_stale_responses=config.widget.discard_stale_responses,
    )
