"""Selection of the next-24-hour window from a forecast series."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Iterable, List

from yr_report.config import WINDOW_HOURS
from yr_report.weather.models import Observation

logger = logging.getLogger(__name__)


def _as_utc(moment: datetime) -> datetime:
    # Naive instants are taken to be UTC, like the provider's timestamps
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def select_window(
    series: Iterable[Observation],
    now: datetime,
    hours: int = WINDOW_HOURS
) -> List[Observation]:
    """Keep observations with ``now <= timestamp < now + hours``, in order.

    Args:
        series: Observations ordered by timestamp
        now: Reference instant
        hours: Window length

    Returns:
        The windowed observations; possibly empty
    """
    start = _as_utc(now)
    end = start + timedelta(hours=hours)

    window = [obs for obs in series if start <= _as_utc(obs.timestamp) < end]
    logger.debug(f"Selected {len(window)} observations between {start.isoformat()} and {end.isoformat()}")
    return window
