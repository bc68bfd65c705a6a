# ABOUTME: Application configuration including target beach and criteria profiles
# ABOUTME: Centralized config so the beach and forecast source come from the environment

import os
from dotenv import load_dotenv

from surf_alert.scoring.models import CriteriaProfile

load_dotenv()


def _optional_float(value: str):
    return float(value) if value else None


class Config:
    """Application configuration"""

    # Beach slug as used in the forecast site's URLs
    TARGET_BEACH = os.getenv("TARGET_BEACH", "default-beach")

    # Forecast source
    SURF_FORECAST_URL = os.getenv("SURF_FORECAST_URL", "https://www.surf-forecast.com")

    # Passed through to requests; empty string disables the timeout
    REQUEST_TIMEOUT_SECONDS = _optional_float(os.getenv("REQUEST_TIMEOUT_SECONDS", "10"))

    # Good: waist-to-head high groundswell from the south/west, light offshore wind
    GOOD_CONDITIONS = CriteriaProfile(
        name="good",
        wave_height_range=(1.0, 2.0),     # meters
        wave_period_range=(12.0, 21.0),   # seconds
        preferred_wave_directions=frozenset({"S", "SW", "W"}),
        max_wind_speed=15.0,              # km/h
        wind_direction_tolerance=2,       # compass steps from dead offshore
    )

    # Perfect: cleaner, longer-period swell and near-glassy offshore wind
    PERFECT_CONDITIONS = CriteriaProfile(
        name="perfect",
        wave_height_range=(1.0, 1.5),
        wave_period_range=(15.0, 21.0),
        preferred_wave_directions=frozenset({"S", "SW"}),
        max_wind_speed=10.0,
        wind_direction_tolerance=1,
    )

    # Debug mode
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"
