# ABOUTME: 16-point compass directions and wind-versus-swell offshore arithmetic
# ABOUTME: Unparseable direction text maps to an explicit UNKNOWN member

from enum import Enum
from typing import Optional

POINTS = 16
OPPOSITE = POINTS // 2


class CompassDirection(Enum):
    """Compass point bound to its clockwise index (N=0 ... NNW=15)"""
    N = 0
    NNE = 1
    NE = 2
    ENE = 3
    E = 4
    ESE = 5
    SE = 6
    SSE = 7
    S = 8
    SSW = 9
    SW = 10
    WSW = 11
    W = 12
    WNW = 13
    NW = 14
    NNW = 15
    UNKNOWN = -1

    @property
    def index(self) -> int:
        return self.value

    @property
    def is_known(self) -> bool:
        return self is not CompassDirection.UNKNOWN

    @classmethod
    def parse(cls, text: Optional[str]) -> "CompassDirection":
        """
        Parse direction letters into a CompassDirection.

        Accepts bare letters ("SW") or a title-style label whose first word
        is the letters ("SW (225°)"). Anything else is UNKNOWN.
        """
        if isinstance(text, CompassDirection):
            return text
        if not isinstance(text, str):
            return cls.UNKNOWN
        words = text.strip().split()
        if not words:
            return cls.UNKNOWN
        letters = words[0].upper()
        return cls.__members__.get(letters, cls.UNKNOWN)

    def label(self) -> str:
        return self.name if self.is_known else "N/A"


def circular_distance(swell: CompassDirection, wind: CompassDirection) -> int:
    """Clockwise steps from the swell bearing to the wind bearing (0-15)"""
    return (wind.index - swell.index + POINTS) % POINTS


def is_favorable_relative_direction(
    swell_direction: CompassDirection,
    wind_direction: CompassDirection,
    tolerance: int
) -> bool:
    """
    Check whether the wind blows offshore relative to the swell.

    Offshore is the bearing opposite the swell (8 steps away). Any distance
    within 8 +/- tolerance steps counts as favorable.

    Args:
        swell_direction: Direction the swell arrives from
        wind_direction: Direction the wind blows from
        tolerance: Allowed deviation from the exact opposite, in compass steps

    Returns:
        True if favorable, False otherwise (always False for UNKNOWN)
    """
    if not swell_direction.is_known or not wind_direction.is_known:
        return False

    distance = circular_distance(swell_direction, wind_direction)
    return OPPOSITE - tolerance <= distance <= OPPOSITE + tolerance
