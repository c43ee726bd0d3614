"""
Service module for ovulation and fertile-window estimation.

An ovulation date is either the user-confirmed marker on the cycle or the
estimate `period_start + (cycle_length - ovulation_offset)`. The fertile
window surrounds it by fixed offsets taken from the engine settings.

Typical usage:
    ovulation = get_ovulation_date(cycle, average_length)
    window = get_fertile_window(ovulation)
    upcoming = get_next_predicted_ovulation(cycles, average_length, today)
"""
from typing import List, Optional
from datetime import date, timedelta

from cyclekit.models.cycle import Cycle
from cyclekit.models.phase import FertileWindow
from cyclekit.models.settings import CycleSettings
from cyclekit.services.utils import resolve_settings, sort_cycles

def estimate_ovulation_date(
    period_start: date,
    cycle_length: int,
    settings: Optional[CycleSettings] = None
) -> date:
    """Estimate ovulation from a period start and a cycle length."""
    settings = resolve_settings(settings)
    return period_start + timedelta(days=cycle_length - settings.ovulation_offset)

def get_ovulation_date(
    cycle: Cycle,
    cycle_length: int,
    settings: Optional[CycleSettings] = None
) -> date:
    """
    Get the ovulation date for a cycle.

    Args:
        cycle: Cycle to inspect
        cycle_length: Average (or per-cycle) cycle length in days
        settings: Optional engine settings

    Returns:
        The confirmed ovulation date when recorded, otherwise the estimate

    Example:
        >>> cycle = Cycle(id="1", period_start_date="2024-01-01")
        >>> get_ovulation_date(cycle, 28)
        datetime.date(2024, 1, 15)
    """
    if cycle.ovulation_date is not None:
        return cycle.ovulation_date
    return estimate_ovulation_date(cycle.period_start_date, cycle_length, settings)

def get_fertile_window(
    ovulation_date: date,
    settings: Optional[CycleSettings] = None
) -> FertileWindow:
    """
    Get the inclusive fertile window around an ovulation date.

    Example:
        >>> window = get_fertile_window(date(2024, 1, 15))
        >>> window.start, window.end
        (datetime.date(2024, 1, 11), datetime.date(2024, 1, 16))
    """
    settings = resolve_settings(settings)
    return FertileWindow(
        start=ovulation_date - timedelta(days=settings.fertile_window_before),
        end=ovulation_date + timedelta(days=settings.fertile_window_after)
    )

def predict_future_periods(last_period_start: date, cycle_length: int, count: int = 12) -> List[date]:
    """
    Project the next `count` period start dates from the latest start.

    Example:
        >>> predict_future_periods(date(2024, 1, 1), 28, count=2)
        [datetime.date(2024, 1, 29), datetime.date(2024, 2, 26)]
    """
    return [
        last_period_start + timedelta(days=cycle_length * i)
        for i in range(1, count + 1)
    ]

def get_next_predicted_period(
    cycles: List[Cycle],
    cycle_length: int,
    today: date
) -> Optional[date]:
    """
    Get the next projected period start on or after today.

    Projects one cycle from the most recent start and, if that date has
    already passed, rolls forward by whole cycles.

    Args:
        cycles: Recorded cycles in any order
        cycle_length: Average cycle length in days
        today: Reference date

    Returns:
        Projected start date, or None when there are no cycles
    """
    if not cycles:
        return None

    last_start = sort_cycles(cycles)[0].period_start_date
    next_period = last_start + timedelta(days=cycle_length)

    if next_period < today:
        cycles_passed = -(-(today - next_period).days // cycle_length)
        next_period += timedelta(days=cycle_length * cycles_passed)

    return next_period

def get_next_predicted_ovulation(
    cycles: List[Cycle],
    cycle_length: int,
    today: date,
    settings: Optional[CycleSettings] = None
) -> Optional[date]:
    """
    Get the next projected ovulation on or after today.

    Ovulation is placed `ovulation_offset` days before the next projected
    period; if that has passed it moves one cycle later.

    Returns:
        Projected ovulation date, or None when there are no cycles
    """
    settings = resolve_settings(settings)
    next_period = get_next_predicted_period(cycles, cycle_length, today)
    if next_period is None:
        return None

    ovulation = next_period - timedelta(days=settings.ovulation_offset)
    if ovulation < today:
        ovulation += timedelta(days=cycle_length)
    return ovulation
