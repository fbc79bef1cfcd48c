"""OpenWeatherMap forecast-by-city client."""

import logging
from urllib.parse import urlencode

import httpx

from weatherfinder.config.schema import OPENWEATHER_FORECAST_URL
from weatherfinder.ingest.payload import (
    ForecastPayload,
    ForecastPayloadError,
    parse_payload,
)

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "weatherfinder/0.1.0"


class ForecastClientError(Exception):
    """Raised when the forecast request fails or returns a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class OpenWeatherClient:
    """Issues one GET per lookup; no retries, no caching."""

    def __init__(
        self,
        api_key: str,
        forecast_url: str = OPENWEATHER_FORECAST_URL,
        units: str = "metric",
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.api_key = api_key
        self.forecast_url = forecast_url
        self.units = units
        self.timeout = timeout
        self.user_agent = user_agent

    async def get_forecast(self, encoded_city: str) -> ForecastPayload:
        """Fetch and validate the forecast for an already percent-encoded city.

        The city goes into the URL verbatim so it is not encoded twice.
        """
        params = urlencode({"appid": self.api_key, "units": self.units})
        url = f"{self.forecast_url}?q={encoded_city}&{params}"
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        logger.debug("GET %s city=%s", self.forecast_url, encoded_city)
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(url, headers=headers)
        except httpx.RequestError as e:
            raise ForecastClientError(f"Request failed: {e}") from e

        if not resp.is_success:
            raise ForecastClientError(
                f"HTTP {resp.status_code} for city={encoded_city}",
                resp.status_code,
            )
        try:
            body = resp.json()
        except ValueError as e:
            raise ForecastPayloadError(f"Response is not JSON: {e}") from e
        return parse_payload(body)
