"""
Shared utility functions for cycle-related services.

These utilities are used across multiple service modules to handle common
operations like cycle ordering, date iteration, period bounds and rounding.
"""
import math
from typing import Iterator, List, Optional
from datetime import date, timedelta

from cyclekit.models.cycle import Cycle
from cyclekit.models.settings import CycleSettings
from cyclekit.services.constants import DEFAULT_SETTINGS

def resolve_settings(settings: Optional[CycleSettings]) -> CycleSettings:
    """Return the given settings, or the defaults when none were passed."""
    return settings if settings is not None else DEFAULT_SETTINGS

def sort_cycles(cycles: List[Cycle], reverse: bool = True) -> List[Cycle]:
    """
    Sort cycles by period start date.

    Args:
        cycles: Cycles in any order
        reverse: Whether to sort newest first (default)

    Returns:
        New sorted list; the input is left untouched

    Example:
        >>> newest_first = sort_cycles(cycles)
        >>> oldest_first = sort_cycles(cycles, reverse=False)
    """
    return sorted(cycles, key=lambda c: c.period_start_date, reverse=reverse)

def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with halves rounded up.

    The built-in round() uses banker's rounding (27.5 -> 28 but 28.5 -> 28),
    which would make averages drift depending on parity.

    Example:
        >>> round_half_up(28.5)
        29
    """
    return int(math.floor(value + 0.5))

def iterate_dates(start: date, end: date) -> Iterator[date]:
    """
    Yield every date from start through end inclusive.

    Yields nothing when start is after end.
    """
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)

def calculate_period_end(cycle: Cycle, settings: Optional[CycleSettings] = None) -> date:
    """
    Get the last menstrual day of a cycle.

    Uses the recorded end date when it is on or after the start; otherwise
    substitutes the default period length.

    Args:
        cycle: Cycle to inspect
        settings: Optional engine settings

    Returns:
        Last day of bleeding (inclusive)
    """
    settings = resolve_settings(settings)
    end = cycle.period_end_date
    if end is not None and end >= cycle.period_start_date:
        return end
    return cycle.period_start_date + timedelta(days=settings.default_period_length - 1)
