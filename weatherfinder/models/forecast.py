"""Day-card data derived from the provider's 3-hour samples."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ForecastEntry:
    sequence_index: int
    label: str  # "Today", "Tomorrow", weekday name or ""
    temperature_celsius: int
    description: str
    icon_url: str
