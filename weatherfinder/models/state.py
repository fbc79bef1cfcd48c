"""Transient search state owned by the forecast widget."""

from dataclasses import dataclass

from weatherfinder.models.forecast import ForecastEntry


@dataclass
class SearchState:
    raw_input: str = ""
    active_city: str = ""  # transport-encoded
    resolved_city: str = ""
    resolved_country: str = ""
    is_loading: bool = False
    error_message: str = ""
    forecasts: tuple[ForecastEntry, ...] = ()
