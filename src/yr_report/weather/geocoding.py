"""Geocoding service for weather reports."""

import logging
from functools import lru_cache
from typing import Optional

from geopy.distance import geodesic
from geopy.exc import GeocoderServiceError, GeocoderTimedOut, GeocoderUnavailable
from geopy.geocoders import Nominatim
from timezonefinder import TimezoneFinder

from yr_report.config import GEOCODING_USER_AGENT
from yr_report.weather.models import Coordinate, Place

logger = logging.getLogger(__name__)

# Address components tried in order for a locality name
LOCALITY_KEYS = ("city", "town", "village", "municipality", "county")


class GeocodingError(Exception):
    """Raised when geocoding fails."""
    pass


def geodesic_distance_meters(origin: Coordinate, target: Coordinate) -> float:
    """Geodesic (WGS-84) distance between two coordinates in metres."""
    return geodesic(
        (origin.latitude, origin.longitude),
        (target.latitude, target.longitude)
    ).meters


def place_from_location(location) -> Place:
    """Build a Place from a geopy Location returned by Nominatim."""
    address = location.raw.get("address", {}) if location.raw else {}
    locality = next((address[key] for key in LOCALITY_KEYS if address.get(key)), None)
    return Place(
        coordinate=Coordinate(latitude=location.latitude, longitude=location.longitude),
        locality=locality,
        country=address.get("country")
    )


class GeocodingService:
    """Service for geocoding operations and timezone detection."""

    def __init__(self, geolocator: Optional[Nominatim] = None, timezone_finder: Optional[TimezoneFinder] = None):
        """Initialize the geocoding service.

        Args:
            geolocator: Geocoder instance (creates Nominatim if None)
            timezone_finder: TimezoneFinder instance (creates one if None)
        """
        self.tf = timezone_finder or TimezoneFinder(in_memory=True)
        self.geolocator = geolocator or Nominatim(user_agent=GEOCODING_USER_AGENT)
        logger.info("GeocodingService initialized with timezonefinder and Nominatim")

    @lru_cache(maxsize=1000)
    def forward_geocode(self, name: str) -> Place:
        """Convert a location name to a Place.

        Args:
            name: Location name, e.g. "Oslo" or "New York, USA"

        Returns:
            Place with the coordinate of the match

        Raises:
            GeocodingError: If geocoding fails
        """
        try:
            logger.info(f"Geocoding location: {name}")
            location = self.geolocator.geocode(name, addressdetails=True)

            if not location:
                raise GeocodingError(f"Could not find coordinates for '{name}'")

            place = place_from_location(location)
            logger.info(f"Successfully geocoded '{name}' to ({location.latitude}, {location.longitude})")
            return place

        except (GeocoderUnavailable, GeocoderTimedOut) as e:
            logger.error(f"Geocoding service unavailable for '{name}': {e}")
            raise GeocodingError("Geocoding service temporarily unavailable") from e
        except GeocoderServiceError as e:
            logger.error(f"Geocoding failed for '{name}': {e}")
            raise GeocodingError(f"Failed to find location '{name}': {e}") from e

    @lru_cache(maxsize=1000)
    def reverse_geocode(self, lat: float, lon: float) -> Optional[Place]:
        """Convert coordinates to the nearest named Place.

        Args:
            lat: Latitude
            lon: Longitude

        Returns:
            Place if found, None otherwise
        """
        try:
            lat_rounded = round(lat, 4)
            lon_rounded = round(lon, 4)

            logger.info(f"Reverse geocoding coordinates: ({lat_rounded}, {lon_rounded})")
            location = self.geolocator.reverse((lat_rounded, lon_rounded))

            if location and location.raw.get("address"):
                place = place_from_location(location)
                logger.info(f"Successfully reverse geocoded ({lat_rounded}, {lon_rounded}) to '{place.locality}'")
                return place

            logger.info(f"No place found for coordinates ({lat_rounded}, {lon_rounded})")
            return None

        except (GeocoderUnavailable, GeocoderTimedOut) as e:
            logger.warning(f"Reverse geocoding service unavailable for ({lat}, {lon}): {e}")
            return None
        except GeocoderServiceError as e:
            logger.warning(f"Reverse geocoding failed for ({lat}, {lon}): {e}")
            return None

    def get_timezone(self, lat: float, lon: float) -> str:
        """Get timezone for coordinates.

        Args:
            lat: Latitude
            lon: Longitude

        Returns:
            Timezone string (e.g., "Europe/Oslo") or "UTC" if not found
        """
        logger.info(f"Finding timezone for coordinates: ({lat}, {lon})")
        timezone = self.tf.timezone_at(lng=lon, lat=lat)

        if timezone:
            logger.info(f"Found timezone '{timezone}' for ({lat}, {lon})")
            return timezone

        logger.warning(f"No timezone found for ({lat}, {lon}), defaulting to UTC")
        return "UTC"

    def distance_meters(self, origin: Coordinate, target: Coordinate) -> float:
        """Geodesic distance between two coordinates in metres."""
        return geodesic_distance_meters(origin, target)
