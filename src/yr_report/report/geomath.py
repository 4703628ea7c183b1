"""Bearing and compass helpers."""

import math

from yr_report.weather.models import Coordinate

COMPASS_POINTS_16 = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)

# Indexed by the sector the wind blows FROM
WIND_ARROWS_8 = ("↓", "↙", "←", "↖", "↑", "↗", "→", "↘")


def bearing_degrees(origin: Coordinate, target: Coordinate) -> float:
    """Initial great-circle bearing from ``origin`` to ``target`` in [0, 360)."""
    lat1 = math.radians(origin.latitude)
    lat2 = math.radians(target.latitude)
    d_lon = math.radians(target.longitude - origin.longitude)

    y = math.sin(d_lon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lon)
    bearing = math.degrees(math.atan2(y, x))
    return (bearing + 360.0) % 360.0


def compass16(bearing: float) -> str:
    """Bucket a bearing into one of the 16 compass points."""
    return COMPASS_POINTS_16[math.floor((bearing + 11.25) / 22.5) % 16]


def compass_arrow8(from_degrees: float) -> str:
    """Arrow glyph for a wind-from direction."""
    return WIND_ARROWS_8[math.floor((from_degrees + 22.5) / 45.0) % 8]
