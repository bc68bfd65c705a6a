# ABOUTME: Maps the scraper's flat cell sequence onto the 7-day x 3-period grid
# ABOUTME: Builds dated period slots and flags each one good/perfect

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional

from surf_alert.debug import debug_log
from surf_alert.forecast.models import (
    DAY_KEYS,
    PERIOD_KEYS,
    DayForecast,
    PeriodSlot,
    RawCell,
    WaveReading,
    WindReading,
    empty_grid,
)
from surf_alert.scoring.evaluator import FavorabilityEvaluator
from surf_alert.scoring.models import CriteriaProfile

log = logging.getLogger(__name__)


@dataclass
class NormalizedForecast:
    """Fully keyed grid plus the earliest parsed slot (current conditions)"""
    detailed_forecast: dict[str, DayForecast]
    current: Optional[PeriodSlot] = None


def grid_position(index: int) -> tuple[int, int]:
    """(day_offset, period_of_day) for a 0-based cell index"""
    return divmod(index, len(PERIOD_KEYS))


def day_key(day_offset: int) -> str:
    return "today" if day_offset == 0 else f"day{day_offset + 1}"


def format_date(day: date) -> str:
    """Short label like "Mon, Oct 19" """
    return f"{day:%a, %b} {day.day}"


class ForecastNormalizer:
    """Turns decoded forecast cells into the fixed multi-day grid"""

    def __init__(
        self,
        good: CriteriaProfile,
        perfect: CriteriaProfile,
        evaluator: Optional[FavorabilityEvaluator] = None
    ):
        self.good = good
        self.perfect = perfect
        self.evaluator = evaluator or FavorabilityEvaluator()

    def normalize(self, cells: list[RawCell], today: date) -> NormalizedForecast:
        """
        Place each cell in its day/period slot and evaluate it.

        Args:
            cells: Decoded cells, each tagged with its table index
            today: Local calendar date of the first forecast day

        Returns:
            NormalizedForecast whose grid always has all 7 days and
            3 periods, with None where no cell decoded
        """
        grid = empty_grid()
        current = None
        current_index = None

        for cell in cells:
            day_offset, period_of_day = grid_position(cell.index)
            if cell.index < 0 or day_offset >= len(DAY_KEYS):
                log.warning(f"Ignoring forecast cell outside the grid: index {cell.index}")
                continue

            slot = self._build_slot(cell, today + timedelta(days=day_offset))
            setattr(grid[day_key(day_offset)], PERIOD_KEYS[period_of_day], slot)

            if current_index is None or cell.index < current_index:
                current, current_index = slot, cell.index

        debug_log(
            f"Normalized {len(cells)} cells, current slot index {current_index}",
            "NORMALIZER"
        )
        return NormalizedForecast(detailed_forecast=grid, current=current)

    def _build_slot(self, cell: RawCell, day: date) -> PeriodSlot:
        midnight = datetime.combine(day, time.min)
        slot = PeriodSlot(
            wave=WaveReading(
                height=cell.wave_height,
                period=cell.wave_period,
                direction=cell.wave_direction,
                swells=list(cell.swells),
            ),
            wind=WindReading(speed=cell.wind_speed, direction=cell.wind_direction),
            timestamp=midnight.isoformat(),
            formatted_date=format_date(day),
        )
        slot.is_good, slot.is_perfect = self.evaluator.rate(slot, self.good, self.perfect)
        return slot
