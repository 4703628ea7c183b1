"""Shared fixtures for yr-report tests."""

from datetime import datetime, timedelta, timezone
from typing import Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from yr_report.weather.client import YrWeatherClient
from yr_report.weather.geocoding import GeocodingService
from yr_report.weather.models import Observation, PeriodForecast, YrForecastResponse
from yr_report.weather.service import WeatherService

BASE_TIME = datetime(2024, 6, 1, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def base_time() -> datetime:
    return BASE_TIME


@pytest.fixture
def make_observation():
    """Factory for observations offset in hours from BASE_TIME."""
    def _make(
        hour: float,
        temp: float,
        code: Optional[str] = None,
        precip: Optional[float] = None,
        wind: float = 2.0,
        wind_from: Optional[float] = None
    ) -> Observation:
        forecast = PeriodForecast(condition_code=code, precipitation_mm=precip) if code else None
        return Observation(
            timestamp=BASE_TIME + timedelta(hours=hour),
            temperature_c=temp,
            wind_speed_ms=wind,
            wind_from_degrees=wind_from,
            forecast=forecast
        )
    return _make


def yr_entry(time: datetime, temp: float, symbol: Optional[str] = "cloudy", precip: float = 0.0,
             period: str = "next_1_hours", wind_from: Optional[float] = 180.0) -> dict:
    details = {"air_temperature": temp, "wind_speed": 3.4}
    if wind_from is not None:
        details["wind_from_direction"] = wind_from
    data = {"instant": {"details": details}}
    if symbol is not None:
        data[period] = {
            "summary": {"symbol_code": symbol},
            "details": {"precipitation_amount": precip}
        }
    return {"time": time.strftime("%Y-%m-%dT%H:%M:%SZ"), "data": data}


def yr_payload(start: datetime) -> dict:
    """Compact met.no payload with three hourly entries from ``start``."""
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [10.7522, 59.9139, 23]},
        "properties": {
            "meta": {"updated_at": start.strftime("%Y-%m-%dT%H:%M:%SZ")},
            "timeseries": [
                yr_entry(start, 2.0, "partlycloudy_night"),
                yr_entry(start + timedelta(hours=1), 8.0, "rain", precip=1.0),
                yr_entry(start + timedelta(hours=2), 5.0, "fair_day", period="next_6_hours"),
            ]
        }
    }


@pytest.fixture
def payload() -> dict:
    return yr_payload(BASE_TIME)


@pytest.fixture
def make_service():
    """Factory for a WeatherService backed by mocked collaborators."""
    def _make(payload: dict, place=None, forward_place=None, distance: float = 0.0, tz_name: str = "UTC"):
        client = AsyncMock(spec=YrWeatherClient)
        client.get_weather_forecast.return_value = YrForecastResponse.model_validate(payload)

        geocoding = MagicMock(spec=GeocodingService)
        geocoding.reverse_geocode.return_value = place
        geocoding.forward_geocode.return_value = forward_place
        geocoding.distance_meters.return_value = distance
        geocoding.get_timezone.return_value = tz_name

        return WeatherService(client=client, geocoding_service=geocoding)
    return _make


@pytest.fixture
def make_payload():
    return yr_payload
