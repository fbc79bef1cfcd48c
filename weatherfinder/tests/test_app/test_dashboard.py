"""Tests for the FastAPI web widget."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from weatherfinder.dashboard import create_app
from weatherfinder.ingest.openweather_client import ForecastClientError
from weatherfinder.ingest.payload import parse_payload
from weatherfinder.widget import ForecastWidget


class QueueSource:
    def __init__(self, outcomes):
        self.outcomes = list(outcomes)

    async def get_forecast(self, encoded_city: str):
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def widget(forecast_body: dict, fixed_now: datetime) -> ForecastWidget:
    source = QueueSource([parse_payload(forecast_body), ForecastClientError("HTTP 404", 404)])
    return ForecastWidget(source, clock=lambda: fixed_now)


@pytest.fixture
def client(widget: ForecastWidget):
    with TestClient(create_app(widget)) as c:
        yield c


class TestDashboard:
    def test_initial_page(self, client: TestClient):
        resp = client.get("/")
        assert resp.status_code == 200
        assert "Weather Finder" in resp.text
        assert 'class="hint"' in resp.text
        assert 'http-equiv="refresh"' not in resp.text

    def test_search_and_view(self, client: TestClient):
        resp = client.post("/api/search?wait=true", json={"city": "São Paulo"})
        assert resp.json() == {"committed": True, "city": "S%C3%A3o%20Paulo"}

        view = client.get("/api/view").json()
        assert view["kind"] == "forecast"
        assert view["header"] == "Forecast for São Paulo - BR"
        assert [c["label"] for c in view["cards"]][:2] == ["Today", "Tomorrow"]

        page = client.get("/")
        assert page.text.count('class="card"') == 5

    def test_blank_search_not_committed(self, client: TestClient, widget: ForecastWidget):
        resp = client.post("/api/search", json={"city": "  "})
        assert resp.json() == {"committed": False}
        assert widget.state.active_city == ""

    def test_missing_city_rejected(self, client: TestClient):
        resp = client.post("/api/search", json={})
        assert resp.status_code == 422

    def test_error_replaces_forecast(self, client: TestClient):
        client.post("/api/search?wait=true", json={"city": "São Paulo"})
        client.post("/api/search?wait=true", json={"city": "Atlantis"})
        view = client.get("/api/view").json()
        assert view == {"kind": "error", "message": "City not found"}

    def test_loading_page_refreshes(self, client: TestClient, widget: ForecastWidget):
        widget.state.is_loading = True
        page = client.get("/")
        assert 'http-equiv="refresh"' in page.text
        assert "Loading..." in page.text
