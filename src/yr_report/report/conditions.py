"""Classification of met.no symbol codes into weather categories."""

from enum import Enum
from typing import NamedTuple, Optional, Tuple


class ConditionCategory(str, Enum):
    """Weather classes derived from a provider condition code."""
    CLEAR_SKY = "clear_sky"
    FAIR = "fair"
    PARTLY_CLOUDY = "partly_cloudy"
    CLOUDY = "cloudy"
    FOG = "fog"
    HEAVY_RAIN = "heavy_rain"
    LIGHT_RAIN = "light_rain"
    RAIN = "rain"
    SLEET = "sleet"
    SNOW = "snow"
    THUNDER = "thunder"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        return _PRESENTATION[self][2]

    def symbol(self, is_night: bool = False) -> str:
        day_symbol, night_symbol, _ = _PRESENTATION[self]
        return night_symbol if is_night else day_symbol


# category -> (day symbol, night symbol, text label)
_PRESENTATION = {
    ConditionCategory.CLEAR_SKY: ("☀️", "🌙", "Clear Sky"),
    ConditionCategory.FAIR: ("🌤️", "🌙", "Fair"),
    ConditionCategory.PARTLY_CLOUDY: ("⛅", "⛅", "Partly Cloudy"),
    ConditionCategory.CLOUDY: ("☁️", "☁️", "Cloudy"),
    ConditionCategory.FOG: ("🌫️", "🌫️", "Fog"),
    ConditionCategory.HEAVY_RAIN: ("🌧️", "🌧️", "Heavy Rain"),
    ConditionCategory.LIGHT_RAIN: ("🌦️", "🌦️", "Light Rain"),
    ConditionCategory.RAIN: ("🌧️", "🌧️", "Rain"),
    ConditionCategory.SLEET: ("🌨️", "🌨️", "Sleet"),
    ConditionCategory.SNOW: ("❄️", "❄️", "Snow"),
    ConditionCategory.THUNDER: ("⛈️", "⛈️", "Thunderstorm"),
    ConditionCategory.UNKNOWN: ("🌡️", "🌡️", "Unknown"),
}

# Evaluated top to bottom, first match wins. Each pattern is a tuple of
# alternatives; an alternative matches when every substring in it is present.
CONDITION_PATTERNS: Tuple[Tuple[Tuple[Tuple[str, ...], ...], ConditionCategory], ...] = (
    ((("clearsky",),), ConditionCategory.CLEAR_SKY),
    ((("fair",),), ConditionCategory.FAIR),
    ((("partlycloudy",),), ConditionCategory.PARTLY_CLOUDY),
    ((("cloudy",),), ConditionCategory.CLOUDY),
    ((("fog",),), ConditionCategory.FOG),
    ((("heavyrain",), ("rain", "heavy")), ConditionCategory.HEAVY_RAIN),
    ((("lightrain",), ("rain", "light")), ConditionCategory.LIGHT_RAIN),
    ((("rain",),), ConditionCategory.RAIN),
    ((("sleet",),), ConditionCategory.SLEET),
    ((("snow",),), ConditionCategory.SNOW),
    ((("thunder",),), ConditionCategory.THUNDER),
)


class Classification(NamedTuple):
    category: ConditionCategory
    symbol: str
    text: str


def categorize(code: str) -> ConditionCategory:
    """Return the first category whose pattern matches ``code``."""
    for alternatives, category in CONDITION_PATTERNS:
        if any(all(part in code for part in alternative) for alternative in alternatives):
            return category
    return ConditionCategory.UNKNOWN


def is_night_code(code: str) -> bool:
    return "night" in code


def classify(code: Optional[str], is_night: Optional[bool] = None) -> Classification:
    """Map a provider condition code to category, symbol and text label.

    Args:
        code: Provider symbol code such as ``"heavyrain_showers"``
        is_night: Use the night symbol; derived from the code when None

    Returns:
        Classification; unrecognized or empty codes resolve to UNKNOWN
    """
    code = code or ""
    if is_night is None:
        is_night = is_night_code(code)

    category = categorize(code)
    return Classification(category, category.symbol(is_night), category.label)
