"""Shared test fixtures."""

from datetime import datetime, timedelta
from pathlib import Path

import pytest
import yaml

from weatherfinder.config.schema import FinderConfig

# A Wednesday, away from DST transitions
FIXED_NOW = datetime(2026, 2, 11, 12, 0, 0)


def _payload_dict(
    start: datetime = FIXED_NOW,
    count: int = 40,
    temps: list[float] | None = None,
    description: str = "light rain",
    icon: str = "10d",
    city: str = "São Paulo",
    country: str = "BR",
) -> dict:
    samples = []
    for i in range(count):
        moment = start + timedelta(hours=3 * i)
        temp = temps[i] if temps is not None and i < len(temps) else 20.0 + i / 10
        samples.append({
            "dt": int(moment.timestamp()),
            "main": {"temp": temp, "humidity": 80},
            "weather": [{"id": 500, "main": "Rain", "description": description, "icon": icon}],
            "dt_txt": moment.strftime("%Y-%m-%d %H:%M:%S"),
        })
    return {
        "cod": "200",
        "message": 0,
        "cnt": count,
        "list": samples,
        "city": {"id": 3448439, "name": city, "country": country, "timezone": -10800},
    }


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def payload_factory():
    """Build OpenWeatherMap forecast bodies with 3-hour samples."""
    return _payload_dict


@pytest.fixture
def forecast_body() -> dict:
    return _payload_dict()


@pytest.fixture
def finder_config() -> FinderConfig:
    return FinderConfig(api_key="test-key")


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"timeout_seconds": 5.0},
        "widget": {"discard_stale_responses": True},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
