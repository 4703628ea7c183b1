"""Human-readable location labels."""

from typing import Callable

from yr_report.config import LOCATION_PREFIX_MIN_KM
from yr_report.report.geomath import bearing_degrees, compass16
from yr_report.weather.models import Coordinate, Place

DistanceFunc = Callable[[Coordinate, Coordinate], float]


def base_label(place: Place) -> str:
    return ", ".join(part for part in (place.locality, place.country) if part)


def name_location(
    observer: Coordinate,
    place: Place,
    distance_meters: DistanceFunc,
    min_prefix_km: float = LOCATION_PREFIX_MIN_KM
) -> str:
    """Label a place, qualified with distance and direction when far away.

    Args:
        observer: Coordinate the forecast is for
        place: Geocoded place near the observer
        distance_meters: Geodesic distance between two coordinates in metres
        min_prefix_km: Distance from which the label is qualified

    Returns:
        e.g. ``"Oslo, Norway"`` or ``"12km NE of Oslo, Norway"``
    """
    label = base_label(place)
    if place.coordinate is None:
        return label

    distance_km = distance_meters(observer, place.coordinate) / 1000
    if distance_km < min_prefix_km:
        return label

    # Direction reads from the place towards the observer
    direction = compass16(bearing_degrees(place.coordinate, observer))
    return f"{distance_km:.0f}km {direction} of {label}"
