"""Tests for payload decoding and the weather service."""

from datetime import timedelta

import pytest

from yr_report.weather.models import Coordinate, Place, YrForecastResponse
from yr_report.weather.service import build_series, parse_timestamp


class TestBuildSeries:
    """Decoding of the met.no compact payload."""

    def test_decodes_entries(self, payload, base_time):
        series = build_series(YrForecastResponse.model_validate(payload))

        assert len(series) == 3
        first = series[0]
        assert first.timestamp == base_time
        assert first.temperature_c == 2.0
        assert first.wind_speed_ms == 3.4
        assert first.wind_from_degrees == 180.0
        assert first.forecast.condition_code == "partlycloudy_night"
        assert series[1].forecast.precipitation_mm == 1.0

    def test_falls_back_to_six_hour_outlook(self, payload):
        series = build_series(YrForecastResponse.model_validate(payload))
        assert series[2].forecast.condition_code == "fair_day"

    def test_skips_malformed_timestamps(self, payload):
        payload["properties"]["timeseries"][1]["time"] = "not-a-time"
        series = build_series(YrForecastResponse.model_validate(payload))
        assert [obs.temperature_c for obs in series] == [2.0, 5.0]

    def test_missing_outlook_and_direction(self, payload):
        entry = payload["properties"]["timeseries"][0]["data"]
        entry.pop("next_1_hours")
        entry["instant"]["details"].pop("wind_from_direction")

        first = build_series(YrForecastResponse.model_validate(payload))[0]
        assert first.forecast is None
        assert first.wind_from_degrees is None

    def test_forecast_point(self, payload):
        point = YrForecastResponse.model_validate(payload).geometry.to_forecast_point()
        assert (point.latitude, point.longitude, point.altitude) == (59.9139, 10.7522, 23)


def test_parse_timestamp_is_utc(base_time):
    assert parse_timestamp("2024-06-01T00:00:00Z") == base_time


class TestWeatherService:
    """Location resolution and report assembly."""

    @pytest.mark.asyncio
    async def test_report_for_coordinates(self, make_service, payload, base_time):
        place = Place(coordinate=Coordinate(latitude=59.81, longitude=10.75), locality="Oslo", country="Norway")
        service = make_service(payload, place=place, distance=12400)

        result = await service.get_report(lat=59.92, lon=10.75, now=base_time)

        assert result.location_name == "12km N of Oslo, Norway"
        assert result.timezone == "UTC"
        assert result.has_data
        assert result.report.startswith("Weather forecast for 12km N of Oslo, Norway (next 24 hours):")
        assert "🌧️ Precipitation around 01:00" in result.report
        service.client.get_weather_forecast.assert_awaited_once_with(59.92, 10.75)

    @pytest.mark.asyncio
    async def test_report_for_city(self, make_service, payload, base_time):
        oslo = Coordinate(latitude=59.91, longitude=10.75)
        service = make_service(payload, forward_place=Place(coordinate=oslo, locality="Oslo", country="Norway"))

        result = await service.get_report(city="Oslo", now=base_time)

        assert result.location_name == "Oslo, Norway"
        service.geocoding_service.forward_geocode.assert_called_once_with("Oslo")
        service.client.get_weather_forecast.assert_awaited_once_with(59.91, 10.75)

    @pytest.mark.asyncio
    async def test_report_without_place(self, make_service, payload, base_time):
        service = make_service(payload, place=None)

        result = await service.get_report(lat=59.91, lon=10.75, now=base_time)

        assert result.location_name is None
        assert result.report.startswith("Weather forecast (next 24 hours):")

    @pytest.mark.asyncio
    async def test_local_timezone(self, make_service, payload, base_time):
        service = make_service(payload, tz_name="Europe/Oslo")

        result = await service.get_report(lat=59.91, lon=10.75, timezone_option="local", now=base_time)

        assert result.timezone == "Europe/Oslo"
        assert "Precipitation around 03:00" in result.report

    @pytest.mark.asyncio
    async def test_stale_forecast_has_no_data(self, make_service, payload, base_time):
        service = make_service(payload)

        result = await service.get_report(lat=59.91, lon=10.75, now=base_time + timedelta(days=2))

        assert not result.has_data
        assert result.report.endswith("No forecast data available for the next 24 hours.")
