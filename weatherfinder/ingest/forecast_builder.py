"""Reduces 3-hour forecast samples to one day-card per day."""

from datetime import datetime

from weatherfinder.formatting.dates import format_date_label
from weatherfinder.formatting.text import capitalize_each_word, round_half_up
from weatherfinder.ingest.payload import ForecastPayload, ForecastPayloadError
from weatherfinder.models.forecast import ForecastEntry

SAMPLES_PER_DAY = 8  # 24h / 3h
ICON_TEMPLATE = "{base}/{icon}.png"


def build_forecasts(
    payload: ForecastPayload,
    icon_base_url: str,
    now: datetime | None = None,
) -> tuple[ForecastEntry, ...]:
    """Take every 8th sample from index 0 (below cnt) as one day-card."""
    entries: list[ForecastEntry] = []
    for seq, i in enumerate(range(0, payload.cnt, SAMPLES_PER_DAY)):
        sample = payload.samples[i]
        condition = sample.weather[0]
        try:
            moment = datetime.fromtimestamp(sample.dt)
        except (OverflowError, OSError, ValueError) as e:
            raise ForecastPayloadError(f"Bad timestamp dt={sample.dt}") from e
        entries.append(
            ForecastEntry(
                sequence_index=seq,
                label=format_date_label(moment, now),
                temperature_celsius=round_half_up(sample.main.temp),
                description=capitalize_each_word(condition.description),
                icon_url=ICON_TEMPLATE.format(
                    base=icon_base_url.rstrip("/"), icon=condition.icon
                ),
            )
        )
    return tuple(entries)
