"""Pydantic v2 configuration schema with strict validation."""

from typing import Literal

from pydantic import BaseModel, Field

OPENWEATHER_FORECAST_URL = "https://api.openweathermap.org/data/2.5/forecast"
OPENWEATHER_ICON_URL = "https://openweathermap.org/img/wn"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    forecast_url: str = OPENWEATHER_FORECAST_URL
    icon_base_url: str = OPENWEATHER_ICON_URL
    units: Literal["metric"] = "metric"
    timeout_seconds: float = Field(default=30.0, gt=0.0)


class WidgetConfig(BaseModel):
    model_config = {"extra": "forbid"}

    discard_stale_responses: bool = False


class DashboardConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8777, ge=1, le=65535)


class FinderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api_key: str = ""
    api: ApiConfig = ApiConfig()
    widget: WidgetConfig = WidgetConfig()
    dashboard: DashboardConfig = DashboardConfig()
