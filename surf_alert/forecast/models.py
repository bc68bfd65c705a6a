# ABOUTME: Data models for scraped forecast cells, period slots, and snapshots
# ABOUTME: Provides the fixed 7-day x 3-period grid structure returned to callers

from dataclasses import dataclass, field
from typing import Optional

from surf_alert.forecast.compass import CompassDirection

DAY_KEYS = ("today", "day2", "day3", "day4", "day5", "day6", "day7")
PERIOD_KEYS = ("morning", "afternoon", "night")
GRID_SIZE = len(DAY_KEYS) * len(PERIOD_KEYS)


@dataclass
class SwellComponent:
    """One swell train from a wave cell's swell-state payload"""
    height: float
    period: float
    direction: CompassDirection

    def to_dict(self) -> dict:
        return {
            "height": self.height,
            "period": self.period,
            "direction": self.direction.label(),
        }


@dataclass
class WaveReading:
    """Summary wave height (m), period (s) and swell direction"""
    height: float
    period: float
    direction: CompassDirection = CompassDirection.UNKNOWN
    swells: list[SwellComponent] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "height": self.height,
            "period": self.period,
            "direction": self.direction.label(),
            "swells": [swell.to_dict() for swell in self.swells],
        }


@dataclass
class WindReading:
    """Wind speed (km/h) and the direction it blows from"""
    speed: float
    direction: CompassDirection = CompassDirection.UNKNOWN

    def to_dict(self) -> dict:
        return {"speed": self.speed, "direction": self.direction.label()}


@dataclass
class RawCell:
    """One decoded wave cell, tagged with its position in the forecast table"""
    index: int
    wave_height: float
    wave_period: float
    wave_direction: CompassDirection
    wind_speed: float
    wind_direction: CompassDirection
    swells: list[SwellComponent] = field(default_factory=list)


@dataclass
class RawForecast:
    """Everything the scraper pulls out of one forecast page"""
    cells: list[RawCell]
    rating: str = "N/A"
    temperature: float = 0.0


@dataclass
class PeriodSlot:
    """Forecast for one day and time of day"""
    wave: WaveReading
    wind: WindReading
    timestamp: str
    formatted_date: str
    is_good: bool = False
    is_perfect: bool = False

    def __str__(self) -> str:
        return (
            f"{self.formatted_date}: {self.wave.height}m @ {self.wave.period}s "
            f"{self.wave.direction.label()}, wind {self.wind.speed}km/h "
            f"{self.wind.direction.label()}"
        )

    def to_dict(self) -> dict:
        return {
            "wave": self.wave.to_dict(),
            "wind": self.wind.to_dict(),
            "timestamp": self.timestamp,
            "formattedDate": self.formatted_date,
            "isGood": self.is_good,
            "isPerfect": self.is_perfect,
        }


@dataclass
class DayForecast:
    """Morning, afternoon and night slots; a slot is None when no data parsed"""
    morning: Optional[PeriodSlot] = None
    afternoon: Optional[PeriodSlot] = None
    night: Optional[PeriodSlot] = None

    def slots(self) -> dict[str, Optional[PeriodSlot]]:
        return {key: getattr(self, key) for key in PERIOD_KEYS}

    def to_dict(self) -> dict:
        return {
            key: slot.to_dict() if slot else None
            for key, slot in self.slots().items()
        }


def empty_grid() -> dict[str, DayForecast]:
    return {day_key: DayForecast() for day_key in DAY_KEYS}


@dataclass
class ConditionsSnapshot:
    """Result of one forecast check: current readings plus the full grid"""
    wave_height: float
    wave_period: float
    wave_direction: CompassDirection
    wind_speed: float
    wind_direction: CompassDirection
    temperature: float
    rating: str
    timestamp: str
    is_good: bool
    is_perfect: bool
    detailed_forecast: dict[str, DayForecast] = field(default_factory=empty_grid)

    def __str__(self) -> str:
        return (
            f"Waves: {self.wave_height}m @ {self.wave_period}s {self.wave_direction.label()}, "
            f"Wind: {self.wind_speed}km/h {self.wind_direction.label()}, "
            f"Rating: {self.rating}"
        )

    def good_slots(self) -> list[tuple[str, str, PeriodSlot]]:
        """(day_key, period_key, slot) for every slot flagged good or perfect"""
        matches = []
        for day_key in DAY_KEYS:
            for period_key, slot in self.detailed_forecast[day_key].slots().items():
                if slot and (slot.is_good or slot.is_perfect):
                    matches.append((day_key, period_key, slot))
        return matches

    def to_dict(self) -> dict:
        return {
            "waveHeight": self.wave_height,
            "wavePeriod": self.wave_period,
            "waveDirection": self.wave_direction.label(),
            "windSpeed": self.wind_speed,
            "windDirection": self.wind_direction.label(),
            "temperature": self.temperature,
            "rating": self.rating,
            "timestamp": self.timestamp,
            "isGood": self.is_good,
            "isPerfect": self.is_perfect,
            "detailedForecast": {
                day_key: self.detailed_forecast[day_key].to_dict()
                for day_key in DAY_KEYS
            },
        }
