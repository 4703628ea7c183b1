"""Configuration settings for the weather report service."""

import os
from typing import Final
from dotenv import load_dotenv

load_dotenv()

SERVICE_NAME: Final[str] = "yr-report"
SERVICE_VERSION: Final[str] = "0.1.0"

# API Configuration
YR_API_BASE_URL: str = os.getenv(
    "YR_API_BASE_URL", "https://api.met.no/weatherapi/locationforecast/2.0/compact"
)
USER_AGENT: str = os.getenv("USER_AGENT", f"YrReport/{SERVICE_VERSION} (user@example.com)")
GEOCODING_USER_AGENT: str = os.getenv("GEOCODING_USER_AGENT", f"yr-report/{SERVICE_VERSION}")
HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "30"))

# Default location (Oslo)
DEFAULT_LAT: float = float(os.getenv("DEFAULT_LAT", "59.9139"))
DEFAULT_LON: float = float(os.getenv("DEFAULT_LON", "10.7522"))
DEFAULT_CITY: str = os.getenv("DEFAULT_CITY", "Oslo")

# Server configuration
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "8000"))
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Report settings
WINDOW_HOURS: Final[int] = 24
SPARKLINE_MAX_SAMPLES: Final[int] = 12
SPARKLINE_MIN_SAMPLES: Final[int] = 3
LOCATION_PREFIX_MIN_KM: Final[float] = 5.0
