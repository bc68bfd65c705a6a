# ABOUTME: Main orchestrator coordinating scrape, normalization and evaluation
# ABOUTME: Produces one ConditionsSnapshot per check; only fetch failures escape

import logging
from datetime import datetime
from typing import Optional

from surf_alert.config import Config
from surf_alert.debug import debug_log
from surf_alert.forecast.compass import CompassDirection
from surf_alert.forecast.models import ConditionsSnapshot
from surf_alert.forecast.normalizer import ForecastNormalizer
from surf_alert.forecast.scraper import FetchError, ForecastScraper

log = logging.getLogger(__name__)


class ScrapeError(Exception):
    """A forecast check failed because the page could not be fetched"""


class ForecastOrchestrator:
    """Orchestrates scraper and normalizer to build condition snapshots"""

    def __init__(
        self,
        scraper: Optional[ForecastScraper] = None,
        normalizer: Optional[ForecastNormalizer] = None
    ):
        self.scraper = scraper or ForecastScraper(
            base_url=Config.SURF_FORECAST_URL,
            timeout=Config.REQUEST_TIMEOUT_SECONDS
        )
        self.normalizer = normalizer or ForecastNormalizer(
            good=Config.GOOD_CONDITIONS,
            perfect=Config.PERFECT_CONDITIONS
        )

    def check_conditions(
        self,
        beach_id: Optional[str] = None,
        now: Optional[datetime] = None
    ) -> ConditionsSnapshot:
        """
        Run one forecast check for a beach.

        Args:
            beach_id: Beach slug (defaults to Config.TARGET_BEACH)
            now: Local time of the check (defaults to datetime.now())

        Returns:
            ConditionsSnapshot with the full 7-day grid; slots that could
            not be parsed are None

        Raises:
            ScrapeError: If the forecast page could not be fetched
        """
        beach_id = beach_id or Config.TARGET_BEACH
        now = now or datetime.now()

        try:
            raw = self.scraper.fetch(beach_id)
        except FetchError as e:
            raise ScrapeError(f"Failed to scrape surf conditions for {beach_id}: {e}") from e

        normalized = self.normalizer.normalize(raw.cells, today=now.date())
        current = normalized.current

        if current is None:
            log.warning(f"No forecast cells parsed for {beach_id}")
            snapshot = ConditionsSnapshot(
                wave_height=0.0,
                wave_period=0.0,
                wave_direction=CompassDirection.UNKNOWN,
                wind_speed=0.0,
                wind_direction=CompassDirection.UNKNOWN,
                temperature=raw.temperature,
                rating=raw.rating,
                timestamp=now.isoformat(),
                is_good=False,
                is_perfect=False,
                detailed_forecast=normalized.detailed_forecast,
            )
        else:
            snapshot = ConditionsSnapshot(
                wave_height=current.wave.height,
                wave_period=current.wave.period,
                wave_direction=current.wave.direction,
                wind_speed=current.wind.speed,
                wind_direction=current.wind.direction,
                temperature=raw.temperature,
                rating=raw.rating,
                timestamp=now.isoformat(),
                is_good=current.is_good,
                is_perfect=current.is_perfect,
                detailed_forecast=normalized.detailed_forecast,
            )

        debug_log(f"{beach_id}: {snapshot} ({len(raw.cells)} cells parsed)", "ORCHESTRATOR")
        return snapshot
