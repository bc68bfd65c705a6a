# ABOUTME: Favorability checks applying a criteria profile to one forecast slot
# ABOUTME: Fails closed: any unknown direction or unmet threshold yields False

import logging

from surf_alert.debug import debug_log
from surf_alert.forecast.compass import is_favorable_relative_direction
from surf_alert.forecast.models import PeriodSlot
from surf_alert.scoring.models import CriteriaProfile

log = logging.getLogger(__name__)


class FavorabilityEvaluator:
    """Decides whether a forecast slot meets a good/perfect criteria profile"""

    def evaluate(self, slot: PeriodSlot, profile: CriteriaProfile) -> bool:
        """
        Check a slot against every condition of the profile.

        All five must hold:
        - Wave height within wave_height_range (inclusive)
        - Wave period within wave_period_range (inclusive)
        - Wave direction one of preferred_wave_directions
        - Wind speed at most max_wind_speed
        - Wind offshore relative to swell within wind_direction_tolerance

        Args:
            slot: Forecast slot to check
            profile: Criteria for one favorability tier

        Returns:
            True if every condition holds
        """
        if slot is None or slot.wave is None or slot.wind is None:
            return False

        wave, wind = slot.wave, slot.wind
        height_min, height_max = profile.wave_height_range
        period_min, period_max = profile.wave_period_range

        checks = {
            "height": height_min <= wave.height <= height_max,
            "period": period_min <= wave.period <= period_max,
            "direction": wave.direction in profile.preferred_wave_directions,
            "wind_speed": wind.speed <= profile.max_wind_speed,
            "wind_direction": is_favorable_relative_direction(
                wave.direction, wind.direction, profile.wind_direction_tolerance
            ),
        }
        debug_log(f"{profile.name} checks for {slot}: {checks}", "EVALUATOR")

        return all(checks.values())

    def rate(
        self,
        slot: PeriodSlot,
        good: CriteriaProfile,
        perfect: CriteriaProfile
    ) -> tuple[bool, bool]:
        """
        Evaluate a slot against both tiers.

        The two results are independent; a perfect slot is not required
        to also be good.

        Returns:
            (is_good, is_perfect)
        """
        is_good = self.evaluate(slot, good)
        is_perfect = self.evaluate(slot, perfect)
        if is_perfect:
            log.info(f"Perfect conditions detected: {slot}")
        elif is_good:
            log.info(f"Good conditions detected: {slot}")
        return is_good, is_perfect
