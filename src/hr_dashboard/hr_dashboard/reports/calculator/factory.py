from __future__ import annotations

from ...core.enums import HalfDayCounting
from .base import PresenceCalculator
from .standard_calculator import StandardPresenceCalculator
from .whole_half_day_calculator import WholeHalfDayCalculator


def calculator_for(counting: HalfDayCounting | str) -> PresenceCalculator:
    """Factory Pattern: pick the half-day rule configured for this deployment."""

    if HalfDayCounting(counting) == HalfDayCounting.WHOLE:
        return WholeHalfDayCalculator()
    return StandardPresenceCalculator()
