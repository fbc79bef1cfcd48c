"""Tests for forecast payload validation."""

import pytest

from weatherfinder.ingest.payload import ForecastPayloadError, parse_payload


class TestParsePayload:
    def test_valid(self, forecast_body: dict):
        payload = parse_payload(forecast_body)
        assert payload.city.name == "São Paulo"
        assert payload.city.country == "BR"
        assert payload.cnt == 40
        assert len(payload.samples) == 40
        assert payload.samples[0].weather[0].icon == "10d"

    def test_missing_city(self, forecast_body: dict):
        del forecast_body["city"]
        with pytest.raises(ForecastPayloadError):
            parse_payload(forecast_body)

    def test_cnt_beyond_samples(self, forecast_body: dict):
        forecast_body["cnt"] = 41
        with pytest.raises(ForecastPayloadError, match="exceeds"):
            parse_payload(forecast_body)

    def test_empty_weather_list(self, forecast_body: dict):
        forecast_body["list"][8]["weather"] = []
        with pytest.raises(ForecastPayloadError):
            parse_payload(forecast_body)

    def test_non_numeric_temp(self, forecast_body: dict):
        forecast_body["list"][0]["main"]["temp"] = "warm"
        with pytest.raises(ForecastPayloadError):
            parse_payload(forecast_body)

    def test_not_a_mapping(self):
        with pytest.raises(ForecastPayloadError):
            parse_payload(["not", "a", "payload"])

    def test_cnt_below_samples_allowed(self, forecast_body: dict):
        forecast_body["cnt"] = 9
        assert parse_payload(forecast_body).cnt == 9
