"""Text rendering of the 24-hour forecast report."""

import logging
from datetime import datetime, timezone, tzinfo
from typing import Iterable, List, Optional

from yr_report.config import SPARKLINE_MIN_SAMPLES, WINDOW_HOURS
from yr_report.report.aggregator import precipitation_category, summarize
from yr_report.report.conditions import ConditionCategory, classify
from yr_report.report.geomath import compass_arrow8
from yr_report.report.window import select_window
from yr_report.weather.models import (
    ForecastPoint, ForecastReport, Observation, Summary
)

logger = logging.getLogger(__name__)

PRECIPITATION_SYMBOL = "🌧️"
NO_DATA_MESSAGE = f"No forecast data available for the next {WINDOW_HOURS} hours."

# Column widths of the hourly table
SYMBOL_WIDTH = 2
TEXT_WIDTH = 13
PRECIP_WIDTH = 8
CONDITION_BLANK = " " * (2 + SYMBOL_WIDTH + 1 + TEXT_WIDTH + 2 + PRECIP_WIDTH + 2)


def _clock(moment: Optional[datetime], tz: tzinfo) -> str:
    if moment is None:
        return "--:--"
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(tz).strftime("%H:%M")


def header_line(location_name: Optional[str]) -> str:
    if location_name:
        return f"Weather forecast for {location_name} (next {WINDOW_HOURS} hours):"
    return f"Weather forecast (next {WINDOW_HOURS} hours):"


def forecast_point_line(point: ForecastPoint) -> str:
    elevation = f"{point.altitude:.0f}m" if point.altitude is not None else "unknown"
    return f"Forecast point: {point.latitude:.4f}°N, {point.longitude:.4f}°E, {elevation} elevation"


def summary_line(summary: Summary, tz: tzinfo) -> str:
    """One-line prose summary with the day's extremes."""
    dominant = classify(summary.dominant_code)
    symbol = dominant.symbol
    episode = summary.precipitation_episode

    if episode is not None:
        first, last = _clock(episode.first_time, tz), _clock(episode.last_time, tz)
        text = f"Precipitation around {first}" if first == last else f"Precipitation {first}-{last}"
        symbol = PRECIPITATION_SYMBOL
    elif dominant.category in (ConditionCategory.CLEAR_SKY, ConditionCategory.FAIR):
        text = "Clear skies"
    elif dominant.category in (ConditionCategory.PARTLY_CLOUDY, ConditionCategory.CLOUDY):
        text = "Cloudy"
    else:
        text = dominant.text

    return (
        f"{symbol} {text}. "
        f"High: {int(summary.high.value)}°C at {_clock(summary.high.time, tz)}, "
        f"low: {int(summary.low.value)}°C at {_clock(summary.low.time, tz)}"
    )


def sparkline_line(summary: Summary) -> Optional[str]:
    temperatures = summary.temperatures
    if len(temperatures) < SPARKLINE_MIN_SAMPLES:
        return None
    return (
        f"Temperature: {summary.sparkline} "
        f"({int(temperatures[0])}°→{int(summary.high.value)}°→{int(temperatures[-1])}°C)"
    )


def hourly_row(obs: Observation, tz: tzinfo) -> str:
    """Fixed-width table row; missing columns are padded with blanks."""
    line = f"{_clock(obs.timestamp, tz)}  {obs.temperature_c:3.0f}°C"

    if obs.forecast is not None:
        condition = classify(obs.forecast.condition_code)
        precip = precipitation_category(obs.forecast.precipitation_mm)
        line += f"  {condition.symbol} {condition.text:<{TEXT_WIDTH}}  {precip:<{PRECIP_WIDTH}}  "
    else:
        line += CONDITION_BLANK

    arrow = compass_arrow8(obs.wind_from_degrees) if obs.wind_from_degrees is not None else " "
    return line + f"{arrow} {obs.wind_speed_ms:3.1f} m/s"


def format_report(
    series: Iterable[Observation],
    now: datetime,
    forecast_point: Optional[ForecastPoint] = None,
    location_name: Optional[str] = None,
    tz: tzinfo = timezone.utc
) -> ForecastReport:
    """Build the report for the window starting at ``now``.

    Args:
        series: Decoded observations ordered by timestamp
        now: Reference instant the window starts at
        forecast_point: Provider grid point, printed under the header
        location_name: Qualified location label for the header
        tz: Timezone used for displayed clock times

    Returns:
        ForecastReport; ``has_data`` is False when the window is empty
    """
    window = select_window(series, now)
    summary = summarize(window)

    lines: List[str] = [header_line(location_name)]
    if forecast_point is not None:
        lines.append(forecast_point_line(forecast_point))
    lines.append("")

    if not summary.has_observations:
        logger.info("No observations in the forecast window")
        lines.append(NO_DATA_MESSAGE)
        return ForecastReport(text="\n".join(lines), has_data=False, summary=summary)

    lines.append(summary_line(summary, tz))
    sparkline = sparkline_line(summary)
    if sparkline is not None:
        lines.append(sparkline)
    lines.append("")
    lines.extend(hourly_row(obs, tz) for obs in window)

    return ForecastReport(text="\n".join(lines), has_data=True, summary=summary)
