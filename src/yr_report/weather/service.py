"""Weather service tying location lookup, fetching and report rendering together."""

import logging
import zoneinfo
from datetime import datetime, timezone
from typing import List, Optional

from yr_report.config import DEFAULT_LAT, DEFAULT_LON
from yr_report.report.formatter import format_report
from yr_report.report.location import name_location
from yr_report.weather.client import YrWeatherClient
from yr_report.weather.geocoding import GeocodingService
from yr_report.weather.models import (
    Coordinate, Observation, PeriodForecast, Place, WeatherReportResponse,
    YrForecastResponse, YrTimeseriesEntry
)

logger = logging.getLogger(__name__)


def parse_timestamp(timestamp_str: str) -> datetime:
    """Parse an ISO timestamp ending in 'Z' into an aware UTC datetime."""
    parsed = datetime.fromisoformat(timestamp_str.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def observation_from_entry(entry: YrTimeseriesEntry) -> Observation:
    """Convert a yr.no timeseries entry, preferring the 1-hour outlook."""
    details = entry.data.instant.details
    period = entry.data.next_1_hours or entry.data.next_6_hours

    forecast = None
    if period is not None:
        forecast = PeriodForecast(
            condition_code=period.summary.symbol_code,
            precipitation_mm=period.details.precipitation_amount
        )

    return Observation(
        timestamp=parse_timestamp(entry.time),
        temperature_c=details.air_temperature,
        wind_speed_ms=details.wind_speed,
        wind_from_degrees=details.wind_from_direction,
        forecast=forecast
    )


def build_series(forecast: YrForecastResponse) -> List[Observation]:
    """Decode the timeseries, skipping entries with malformed timestamps.

    Args:
        forecast: Validated yr.no response

    Returns:
        Observations in provider order
    """
    series = []
    for entry in forecast.properties.timeseries:
        try:
            series.append(observation_from_entry(entry))
        except ValueError as e:
            logger.warning(f"Skipping timeseries entry with invalid time '{entry.time}': {e}")
            continue

    logger.info(f"Decoded {len(series)} of {len(forecast.properties.timeseries)} timeseries entries")
    return series


class WeatherService:
    """Service producing 24-hour weather reports."""

    def __init__(
        self,
        client: Optional[YrWeatherClient] = None,
        geocoding_service: Optional[GeocodingService] = None
    ):
        """Initialize the weather service.

        Args:
            client: Weather client instance (creates default if None)
            geocoding_service: Geocoding service instance (creates default if None)
        """
        self.client = client or YrWeatherClient()
        self.geocoding_service = geocoding_service or GeocodingService()

    def resolve_location(
        self,
        lat: float,
        lon: float,
        city: Optional[str] = None
    ) -> tuple[Coordinate, Optional[str]]:
        """Resolve the forecast coordinate and a display name for it.

        Args:
            lat: Latitude in decimal degrees (ignored when city is given)
            lon: Longitude in decimal degrees (ignored when city is given)
            city: Optional location name to geocode

        Returns:
            Tuple of (coordinate, location name or None)

        Raises:
            GeocodingError: If the city cannot be geocoded
        """
        if city:
            place = self.geocoding_service.forward_geocode(city)
            coordinate = place.coordinate
        else:
            coordinate = Coordinate(latitude=lat, longitude=lon)
            place = self.geocoding_service.reverse_geocode(lat, lon)

        if place is None:
            return coordinate, None
        return coordinate, self.name_place(coordinate, place)

    def name_place(self, observer: Coordinate, place: Place) -> Optional[str]:
        name = name_location(observer, place, self.geocoding_service.distance_meters)
        return name or None

    def resolve_timezone(self, coordinate: Coordinate, timezone_option: str) -> str:
        if timezone_option == "local":
            tz_name = self.geocoding_service.get_timezone(coordinate.latitude, coordinate.longitude)
            logger.info(f"Using auto-detected timezone: {tz_name}")
            return tz_name
        logger.info("Using UTC timezone")
        return "UTC"

    async def get_report(
        self,
        lat: float = DEFAULT_LAT,
        lon: float = DEFAULT_LON,
        city: Optional[str] = None,
        timezone_option: str = "utc",
        now: Optional[datetime] = None
    ) -> WeatherReportResponse:
        """Get the 24-hour report for a location.

        Args:
            lat: Latitude in decimal degrees
            lon: Longitude in decimal degrees
            city: Optional location name used instead of coordinates
            timezone_option: 'utc' or 'local' for auto-detected timezone
            now: Reference instant (defaults to the current time)

        Returns:
            WeatherReportResponse with the rendered report

        Raises:
            GeocodingError: If geocoding fails
            ValueError: If coordinates or the response are invalid
            httpx.HTTPError: If API request fails
        """
        coordinate, location_name = self.resolve_location(lat, lon, city)
        tz_name = self.resolve_timezone(coordinate, timezone_option)

        logger.info(
            f"Getting report for lat={coordinate.latitude}, lon={coordinate.longitude}, "
            f"location={location_name}, timezone={tz_name}"
        )

        forecast = await self.client.get_weather_forecast(coordinate.latitude, coordinate.longitude)
        series = build_series(forecast)

        report = format_report(
            series,
            now or datetime.now(timezone.utc),
            forecast_point=forecast.geometry.to_forecast_point(),
            location_name=location_name,
            tz=zoneinfo.ZoneInfo(tz_name)
        )

        return WeatherReportResponse(
            location_name=location_name,
            timezone=tz_name,
            has_data=report.has_data,
            summary=report.summary,
            report=report.text
        )

    async def aclose(self):
        """Close the weather client."""
        if self.client:
            try:
                await self.client.aclose()
            except Exception as e:
                logger.error(f"Error closing weather client: {e}")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()
