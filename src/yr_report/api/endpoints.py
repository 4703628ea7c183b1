"""API endpoints for the weather report service."""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from yr_report.config import (
    DEFAULT_LAT, DEFAULT_LON, DEFAULT_CITY, SERVICE_VERSION
)
from yr_report.weather.geocoding import GeocodingError
from yr_report.weather.models import WeatherReportResponse
from yr_report.weather.service import WeatherService

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/weather", tags=["weather"])


def get_weather_service() -> WeatherService:
    """Dependency to get weather service instance."""
    return WeatherService()


async def build_report(
    lat: Optional[float],
    lon: Optional[float],
    city: Optional[str],
    timezone_option: str
) -> WeatherReportResponse:
    """Validate parameters, produce the report and map failures to HTTP errors."""
    lat, lon, city = validate_weather_parameters(lat, lon, city)

    try:
        weather_service = get_weather_service()
        async with weather_service:
            report = await weather_service.get_report(
                lat=lat,
                lon=lon,
                city=city,
                timezone_option=timezone_option
            )

        logger.info(f"Successfully built report for {report.location_name or 'unnamed location'} (has_data={report.has_data})")
        return report

    except GeocodingError as e:
        logger.error(f"Geocoding error: {e}")
        raise HTTPException(status_code=404, detail=str(e))

    except ValidationError as e:
        logger.error(f"Data validation error: {e}")
        raise HTTPException(status_code=500, detail="Internal server error: data validation failed")

    except ValueError as e:
        logger.error(f"Error building report: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    except Exception as e:
        logger.error(f"Unexpected error building report: {e}")
        raise HTTPException(status_code=502, detail="Weather service temporarily unavailable")


@router.get("/", response_model=WeatherReportResponse)
async def get_weather_report(
    lat: Optional[float] = Query(None, ge=-90, le=90, description="Latitude in decimal degrees (use with lon)"),
    lon: Optional[float] = Query(None, ge=-180, le=180, description="Longitude in decimal degrees (use with lat)"),
    city: Optional[str] = Query(None, description="Location name (alternative to lat/lon, not both)"),
    timezone_option: str = Query(
        "utc",
        pattern="^(utc|local)$",
        description="Timezone option: 'utc' (default) or 'local' (auto-detected)"
    )
) -> WeatherReportResponse:
    """Get the 24-hour report as JSON.

    Args:
        lat: Latitude in decimal degrees (must provide with lon)
        lon: Longitude in decimal degrees (must provide with lat)
        city: Location name as alternative to lat/lon
        timezone_option: 'utc' (default) or 'local' for auto-detected timezone

    Returns:
        WeatherReportResponse with summary and report text
    """
    return await build_report(lat, lon, city, timezone_option)


@router.get("/report", response_class=PlainTextResponse)
async def get_weather_report_text(
    lat: Optional[float] = Query(None, ge=-90, le=90, description="Latitude in decimal degrees (use with lon)"),
    lon: Optional[float] = Query(None, ge=-180, le=180, description="Longitude in decimal degrees (use with lat)"),
    city: Optional[str] = Query(None, description="Location name (alternative to lat/lon, not both)"),
    timezone_option: str = Query(
        "utc",
        pattern="^(utc|local)$",
        description="Timezone option: 'utc' (default) or 'local' (auto-detected)"
    )
) -> PlainTextResponse:
    """Get the 24-hour report as fixed-width text."""
    report = await build_report(lat, lon, city, timezone_option)
    return PlainTextResponse(report.report + "\n")


def validate_weather_parameters(
    lat: Optional[float],
    lon: Optional[float],
    city: Optional[str]
) -> tuple[float, float, Optional[str]]:
    """
    Validate and normalize weather request parameters.

    Args:
        lat: Latitude in decimal degrees
        lon: Longitude in decimal degrees
        city: Location name

    Returns:
        Tuple of (latitude, longitude, city)

    Raises:
        HTTPException: If validation fails
    """
    has_coordinates = lat is not None or lon is not None
    has_city = city is not None

    if has_coordinates and has_city:
        raise HTTPException(
            status_code=400,
            detail="Cannot provide both coordinates and city name. Use either lat/lon OR city."
        )

    if not has_coordinates and not has_city:
        lat = DEFAULT_LAT
        lon = DEFAULT_LON
        logger.info(f"Using default location: {DEFAULT_CITY}")
    elif has_coordinates:
        if lat is None or lon is None:
            raise HTTPException(
                status_code=400,
                detail="Both latitude and longitude must be provided when using coordinates."
            )
    else:
        lat = DEFAULT_LAT
        lon = DEFAULT_LON

    return lat, lon, city


@router.get("/health")
async def health_check() -> dict:
    """Health check endpoint.

    Returns:
        Health status response
    """
    return {"status": "healthy", "service": "yr-report"}


@router.get("/info")
async def get_service_info() -> dict:
    """Get service information.

    Returns:
        Service information including default location and features
    """
    return {
        "service": "Yr.no 24-hour Weather Report",
        "version": SERVICE_VERSION,
        "default_location": {
            "city": DEFAULT_CITY,
            "latitude": DEFAULT_LAT,
            "longitude": DEFAULT_LON
        },
        "features": [
            "24-hour summary with high/low and precipitation window",
            "Temperature sparkline",
            "Hourly table with conditions, precipitation and wind"
        ],
        "data_source": "MET Norway yr.no API"
    }
