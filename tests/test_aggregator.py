"""Tests for window statistics."""

import pytest

from yr_report.report.aggregator import (
    HIGH_SENTINEL, LOW_SENTINEL, precipitation_category, summarize
)
from yr_report.report.conditions import ConditionCategory


@pytest.mark.parametrize("amount, expected", [
    (0.0, ""),
    (None, ""),
    (0.3, "Drizzle"),
    (0.5, "Light"),
    (1.9, "Light"),
    (2.0, "Moderate"),
    (4.9, "Moderate"),
    (5.0, "Heavy"),
    (25.0, "Heavy"),
])
def test_precipitation_category(amount, expected):
    assert precipitation_category(amount) == expected


class TestSummarize:
    """Extremes, dominant condition and precipitation episodes."""

    def test_three_hour_window(self, make_observation, base_time):
        window = [
            make_observation(0, 2.0),
            make_observation(1, 8.0, code="rain", precip=1.0),
            make_observation(2, 5.0),
        ]
        summary = summarize(window)

        assert summary.has_observations
        assert (summary.high.value, summary.high.time.hour) == (8.0, 1)
        assert (summary.low.value, summary.low.time.hour) == (2.0, 0)
        assert summary.precipitation_episode.first_time == summary.precipitation_episode.last_time
        assert summary.precipitation_episode.first_time.hour == 1
        assert summary.dominant_code == "rain"
        assert summary.dominant_category is ConditionCategory.RAIN
        assert summary.temperatures == (2.0, 8.0, 5.0)
        assert summary.sparkline == "▁█▄"

    def test_ties_keep_earliest_extremes(self, make_observation):
        window = [
            make_observation(0, 5.0),
            make_observation(1, 8.0),
            make_observation(2, 8.0),
            make_observation(3, 2.0),
            make_observation(4, 2.0),
        ]
        summary = summarize(window)
        assert summary.high.time.hour == 1
        assert summary.low.time.hour == 3

    def test_dominant_tie_keeps_first_encountered(self, make_observation):
        codes = ["cloudy", "rain", "rain", "cloudy", "fair_day"]
        window = [make_observation(i, 1.0, code=code) for i, code in enumerate(codes)]
        assert summarize(window).dominant_code == "cloudy"

    def test_episode_spans_dry_hours(self, make_observation):
        window = [
            make_observation(0, 1.0, code="cloudy", precip=0.0),
            make_observation(1, 1.0, code="rain", precip=0.4),
            make_observation(2, 1.0, code="cloudy", precip=0.0),
            make_observation(3, 1.0, code="cloudy"),
            make_observation(4, 1.0, code="rain", precip=2.5),
            make_observation(5, 1.0, code="cloudy", precip=0.0),
        ]
        episode = summarize(window).precipitation_episode
        assert episode.first_time.hour == 1
        assert episode.last_time.hour == 4

    def test_no_forecasts(self, make_observation):
        summary = summarize([make_observation(0, 1.0), make_observation(1, 2.0)])
        assert summary.dominant_code is None
        assert summary.dominant_category is ConditionCategory.UNKNOWN
        assert summary.precipitation_episode is None

    def test_empty_window_reports_sentinels(self):
        summary = summarize([])
        assert not summary.has_observations
        assert summary.high.value == HIGH_SENTINEL
        assert summary.low.value == LOW_SENTINEL
        assert summary.high.time is None
        assert summary.sparkline == ""
