"""HTTP client for yr.no weather API."""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from yr_report.config import YR_API_BASE_URL, USER_AGENT, HTTP_TIMEOUT_SECONDS
from yr_report.weather.models import YrForecastResponse

logger = logging.getLogger(__name__)


class YrWeatherClient:
    """Async client for fetching weather data from yr.no API."""

    def __init__(
        self,
        base_url: str = YR_API_BASE_URL,
        user_agent: str = USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """Initialize the weather client.

        Args:
            base_url: Base URL for yr.no API
            user_agent: User-Agent header for API requests
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url
        self.user_agent = user_agent
        self.client = httpx.AsyncClient(
            headers={"User-Agent": self.user_agent},
            timeout=HTTP_TIMEOUT_SECONDS,
            transport=transport
        )

    async def get_weather_forecast(self, lat: float, lon: float) -> YrForecastResponse:
        """Fetch weather forecast for given coordinates.

        Args:
            lat: Latitude in decimal degrees
            lon: Longitude in decimal degrees

        Returns:
            Decoded forecast response from yr.no API

        Raises:
            ValueError: If coordinates are invalid or the response format is invalid
            httpx.HTTPError: If API request fails
        """
        if not (-90 <= lat <= 90) or not (-180 <= lon <= 180):
            raise ValueError(f"Invalid coordinates: lat={lat}, lon={lon}")

        params = {"lat": round(lat, 4), "lon": round(lon, 4)}

        logger.info(f"Fetching forecast for lat={params['lat']}, lon={params['lon']}")

        try:
            response = await self.client.get(self.base_url, params=params)
            response.raise_for_status()

            forecast = YrForecastResponse.model_validate(response.json())

            logger.info(f"Successfully fetched forecast with {len(forecast.properties.timeseries)} timeseries entries")
            return forecast

        except ValidationError as e:
            logger.error(f"Invalid API response format: {e}")
            raise ValueError(f"Invalid API response format: {e}") from e
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error from yr.no API: {e.response.status_code} - {e.response.text}")
            raise
        except httpx.RequestError as e:
            logger.error(f"Request error to yr.no API: {e}")
            raise

    async def aclose(self):
        """Close the async HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()
