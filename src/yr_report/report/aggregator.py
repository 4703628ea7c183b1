"""Window-level statistics for the report summary."""

import logging
from collections import Counter
from typing import Optional, Sequence

from yr_report.report.conditions import ConditionCategory, categorize
from yr_report.report.trend import render_sparkline
from yr_report.weather.models import (
    Observation, PrecipitationEpisode, Summary, TemperatureMark
)

logger = logging.getLogger(__name__)

# Extremes start outside any real reading; check Summary.has_observations
HIGH_SENTINEL = -999.0
LOW_SENTINEL = 999.0

# (lower bound inclusive, label), highest first
PRECIPITATION_LEVELS = (
    (5.0, "Heavy"),
    (2.0, "Moderate"),
    (0.5, "Light"),
)
DRIZZLE = "Drizzle"


def precipitation_category(amount: Optional[float]) -> str:
    """Severity label for an hourly precipitation amount, empty when dry."""
    if amount is None or amount <= 0:
        return ""
    for lower_bound, label in PRECIPITATION_LEVELS:
        if amount >= lower_bound:
            return label
    return DRIZZLE


def summarize(window: Sequence[Observation]) -> Summary:
    """Compute extremes, dominant condition, precipitation span and sparkline.

    Args:
        window: Windowed observations in time order

    Returns:
        Immutable Summary of the window
    """
    high = TemperatureMark(value=HIGH_SENTINEL)
    low = TemperatureMark(value=LOW_SENTINEL)
    condition_counts: Counter = Counter()
    precipitating = []
    temperatures = []

    for obs in window:
        temperatures.append(obs.temperature_c)

        if obs.temperature_c > high.value:
            high = TemperatureMark(value=obs.temperature_c, time=obs.timestamp)
        if obs.temperature_c < low.value:
            low = TemperatureMark(value=obs.temperature_c, time=obs.timestamp)

        if obs.forecast is None:
            continue
        condition_counts[obs.forecast.condition_code] += 1
        if obs.forecast.precipitation_mm is not None and obs.forecast.precipitation_mm > 0:
            precipitating.append(obs.timestamp)

    # max() keeps the first-counted code on ties
    dominant_code = max(condition_counts, key=condition_counts.get) if condition_counts else None

    episode = None
    if precipitating:
        episode = PrecipitationEpisode(first_time=precipitating[0], last_time=precipitating[-1])

    logger.debug(
        f"Summarized {len(temperatures)} observations: dominant={dominant_code}, "
        f"precipitating hours={len(precipitating)}"
    )

    return Summary(
        has_observations=bool(temperatures),
        high=high,
        low=low,
        dominant_code=dominant_code,
        dominant_category=categorize(dominant_code) if dominant_code else ConditionCategory.UNKNOWN,
        precipitation_episode=episode,
        temperatures=tuple(temperatures),
        sparkline=render_sparkline(temperatures)
    )
