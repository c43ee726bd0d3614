"""
Service module combining recorded-cycle classification and projection per day.

A date inside a recorded cycle is classified from that cycle. Any date the
recorded cycles leave unclassified, such as days past the latest cycle's end,
is projected from the averages when at least two cycles exist and flagged as
a prediction.
"""
from typing import List, Optional
from datetime import date

from cyclekit.models.cycle import Cycle
from cyclekit.models.phase import DayPhase
from cyclekit.models.settings import CycleSettings
from cyclekit.services.phase import find_cycle_for_date, get_next_cycle_start, get_phase_for_date
from cyclekit.services.prediction import get_predicted_phase_for_date
from cyclekit.services.statistics import (
    calculate_average_cycle_length,
    calculate_average_period_duration
)
from cyclekit.services.utils import iterate_dates, resolve_settings

def get_day_phase(
    target_date: date,
    cycles: List[Cycle],
    today: date,
    cycle_length: Optional[int] = None,
    average_period_length: Optional[int] = None,
    settings: Optional[CycleSettings] = None
) -> DayPhase:
    """
    Classify one calendar day.

    Args:
        target_date: Date to classify
        cycles: Recorded cycles in any order
        today: Reference date for the prediction horizon
        cycle_length: Average cycle length, computed from cycles if None
        average_period_length: Average period duration, computed if None
        settings: Optional engine settings

    Returns:
        DayPhase with the phase (possibly None) and whether it was projected
    """
    settings = resolve_settings(settings)
    if cycle_length is None:
        cycle_length = calculate_average_cycle_length(cycles, settings)

    cycle = find_cycle_for_date(target_date, cycles)
    if cycle is not None:
        next_cycle_start = get_next_cycle_start(cycle, cycles)
        recorded = get_phase_for_date(target_date, cycle, next_cycle_start, cycle_length, settings)
        if recorded is not None:
            return DayPhase(date=target_date, phase=recorded, is_prediction=False)

    if len(cycles) >= 2:
        if average_period_length is None:
            average_period_length = (
                calculate_average_period_duration(cycles, settings)
                or settings.default_period_length
            )
        predicted = get_predicted_phase_for_date(
            target_date, cycles, cycle_length, today, average_period_length, settings
        )
        return DayPhase(
            date=target_date,
            phase=predicted,
            is_prediction=predicted is not None
        )

    return DayPhase(date=target_date)

def get_phases_for_range(
    start: date,
    end: date,
    cycles: List[Cycle],
    today: date,
    settings: Optional[CycleSettings] = None
) -> List[DayPhase]:
    """
    Classify every day from start through end inclusive.

    Averages are computed once for the whole range.

    Example:
        >>> month = get_phases_for_range(date(2024, 2, 1), date(2024, 2, 29), cycles, today)
        >>> len(month)
        29
    """
    settings = resolve_settings(settings)
    cycle_length = calculate_average_cycle_length(cycles, settings)
    period_length = (
        calculate_average_period_duration(cycles, settings)
        or settings.default_period_length
    )
    return [
        get_day_phase(day, cycles, today, cycle_length, period_length, settings)
        for day in iterate_dates(start, end)
    ]
