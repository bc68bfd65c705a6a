# ABOUTME: Criteria profiles describing one favorability tier ("good", "perfect")
# ABOUTME: Validated once at construction so evaluation needs no null checks

from dataclasses import dataclass, field

from surf_alert.forecast.compass import OPPOSITE, CompassDirection


@dataclass(frozen=True)
class CriteriaProfile:
    """Thresholds a forecast slot must meet to count for this tier"""
    name: str
    wave_height_range: tuple[float, float]
    wave_period_range: tuple[float, float]
    preferred_wave_directions: frozenset = field(default_factory=frozenset)
    max_wind_speed: float = 0.0
    wind_direction_tolerance: int = 2

    def __post_init__(self):
        for label, bounds in (
            ("wave_height_range", self.wave_height_range),
            ("wave_period_range", self.wave_period_range),
        ):
            if len(bounds) != 2:
                raise ValueError(f"{label} must be a (min, max) pair, got {bounds}")
            low, high = float(bounds[0]), float(bounds[1])
            if low < 0 or high < low:
                raise ValueError(f"{label} must satisfy 0 <= min <= max, got {bounds}")
            object.__setattr__(self, label, (low, high))

        directions = set()
        for raw in self.preferred_wave_directions:
            direction = CompassDirection.parse(raw)
            if not direction.is_known:
                raise ValueError(f"Unknown preferred wave direction: {raw!r}")
            directions.add(direction)
        object.__setattr__(self, "preferred_wave_directions", frozenset(directions))

        if self.max_wind_speed < 0:
            raise ValueError(f"max_wind_speed must be >= 0, got {self.max_wind_speed}")
        object.__setattr__(self, "max_wind_speed", float(self.max_wind_speed))

        if not 0 <= self.wind_direction_tolerance <= OPPOSITE:
            raise ValueError(
                f"wind_direction_tolerance must be 0-{OPPOSITE}, "
                f"got {self.wind_direction_tolerance}"
            )
