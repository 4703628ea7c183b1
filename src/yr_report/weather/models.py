"""Data models for the weather report service."""

from datetime import datetime
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from yr_report.report.conditions import ConditionCategory


class Coordinate(BaseModel):
    """Geographic coordinate in decimal degrees."""
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")


class Place(BaseModel):
    """Best-effort geocoding result."""
    model_config = ConfigDict(frozen=True)

    coordinate: Optional[Coordinate] = Field(None, description="Coordinate of the place itself")
    locality: Optional[str] = Field(None, description="City, town or village name")
    country: Optional[str] = Field(None, description="Country name")


class PeriodForecast(BaseModel):
    """Short-range outlook attached to an observation."""
    model_config = ConfigDict(frozen=True)

    condition_code: str = Field(..., description="Provider symbol code, e.g. 'partlycloudy_night'")
    precipitation_mm: Optional[float] = Field(None, description="Expected precipitation in mm")


class Observation(BaseModel):
    """One timestamped point of the forecast series."""
    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(..., description="Instant the values apply to")
    temperature_c: float = Field(..., description="Air temperature in Celsius")
    wind_speed_ms: float = Field(..., description="Wind speed in m/s")
    wind_from_degrees: Optional[float] = Field(None, description="Direction the wind blows from")
    forecast: Optional[PeriodForecast] = Field(None, description="Nearest short-range outlook")


class ForecastPoint(BaseModel):
    """Exact grid point the provider computed the forecast for."""
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    altitude: Optional[float] = Field(None, description="Elevation in metres")


class TemperatureMark(BaseModel):
    """A temperature extreme and the time it occurs."""
    model_config = ConfigDict(frozen=True)

    value: float
    time: Optional[datetime] = None


class PrecipitationEpisode(BaseModel):
    """Span between the first and last precipitating observation."""
    model_config = ConfigDict(frozen=True)

    first_time: datetime
    last_time: datetime


class Summary(BaseModel):
    """Window-level statistics."""
    model_config = ConfigDict(frozen=True)

    has_observations: bool = Field(..., description="False when the window was empty")
    high: TemperatureMark
    low: TemperatureMark
    dominant_code: Optional[str] = Field(None, description="Most frequent condition code")
    dominant_category: ConditionCategory = ConditionCategory.UNKNOWN
    precipitation_episode: Optional[PrecipitationEpisode] = None
    temperatures: Tuple[float, ...] = ()
    sparkline: str = ""


class ForecastReport(BaseModel):
    """Rendered report plus the data it was built from."""
    model_config = ConfigDict(frozen=True)

    text: str
    has_data: bool
    summary: Summary


class YrInstantDetails(BaseModel):
    """Instantaneous readings of a yr.no timeseries entry."""
    air_temperature: float
    wind_speed: float
    wind_from_direction: Optional[float] = None


class YrInstant(BaseModel):
    details: YrInstantDetails


class YrPeriodSummary(BaseModel):
    symbol_code: str


class YrPeriodDetails(BaseModel):
    precipitation_amount: Optional[float] = None


class YrPeriod(BaseModel):
    """A next_1_hours / next_6_hours block."""
    summary: YrPeriodSummary
    details: YrPeriodDetails = Field(default_factory=YrPeriodDetails)


class YrEntryData(BaseModel):
    instant: YrInstant
    next_1_hours: Optional[YrPeriod] = None
    next_6_hours: Optional[YrPeriod] = None


class YrTimeseriesEntry(BaseModel):
    """Raw timeseries entry from yr.no API."""
    time: str = Field(..., description="ISO timestamp")
    data: YrEntryData = Field(..., description="Weather data")


class YrGeometry(BaseModel):
    """GeoJSON point; coordinates are [lon, lat, altitude?]."""
    type: str = "Point"
    coordinates: List[float] = Field(..., min_length=2)

    def to_forecast_point(self) -> ForecastPoint:
        altitude = self.coordinates[2] if len(self.coordinates) > 2 else None
        return ForecastPoint(
            latitude=self.coordinates[1],
            longitude=self.coordinates[0],
            altitude=altitude
        )


class YrProperties(BaseModel):
    timeseries: List[YrTimeseriesEntry] = Field(default_factory=list)


class YrForecastResponse(BaseModel):
    """Raw response from yr.no Locationforecast API."""
    type: str = Field(..., description="GeoJSON type")
    geometry: YrGeometry = Field(..., description="Location geometry")
    properties: YrProperties = Field(..., description="Forecast properties")


class WeatherReportResponse(BaseModel):
    """JSON report response model."""
    location_name: Optional[str] = Field(None, description="Qualified location label")
    timezone: str = Field(..., description="Timezone used for displayed times")
    has_data: bool = Field(..., description="False when no forecast falls in the next 24 hours")
    summary: Summary
    report: str = Field(..., description="Formatted text report")


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Additional error details")
