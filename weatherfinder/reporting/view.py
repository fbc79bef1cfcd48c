"""Pure projection of SearchState onto a small view tree."""

from dataclasses import dataclass

from weatherfinder.models.state import SearchState

LOADING_TEXT = "Loading..."
EMPTY_HINT = "Search for a city to see its forecast"


@dataclass(frozen=True)
class DayCard:
    key: int
    icon_url: str
    temperature: str  # e.g. "22 °C"
    description: str
    label: str


@dataclass(frozen=True)
class LoadingView:
    text: str = LOADING_TEXT


@dataclass(frozen=True)
class ErrorView:
    message: str


@dataclass(frozen=True)
class EmptyView:
    hint: str = EMPTY_HINT


@dataclass(frozen=True)
class ForecastView:
    header: str
    cards: tuple[DayCard, ...]


View = LoadingView | ErrorView | EmptyView | ForecastView


def render(state: SearchState) -> View:
    """Loading wins over an error, which wins over the empty hint."""
    if state.is_loading:
        return LoadingView()
    if state.error_message:
        return ErrorView(state.error_message)
    if not state.forecasts:
        return EmptyView()
    cards = tuple(
        DayCard(
            key=f.sequence_index,
            icon_url=f.icon_url,
            temperature=f"{f.temperature_celsius} °C",
            description=f.description,
            label=f.label,
        )
        for f in sorted(state.forecasts, key=lambda f: f.sequence_index)
    )
    header = f"Forecast for {state.resolved_city} - {state.resolved_country}"
    return ForecastView(header=header, cards=cards)
