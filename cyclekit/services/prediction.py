"""
Service module for projecting phases beyond recorded cycles.

Projection uses only averaged parameters: the day's offset from the most
recent period start is folded into a single average-length cycle and
classified with the same priority rules as recorded cycles.

Typical usage:
    length = calculate_average_cycle_length(cycles)
    period = calculate_average_period_duration(cycles) or settings.default_period_length
    phase = get_predicted_phase_for_date(day, cycles, length, today, period)
"""
from typing import List, Optional
from datetime import date, timedelta
from aws_lambda_powertools import Logger

from cyclekit.models.cycle import Cycle
from cyclekit.models.phase import PhaseType
from cyclekit.models.settings import CycleSettings
from cyclekit.services.utils import resolve_settings, sort_cycles

logger = Logger()

def classify_cycle_day(
    day_in_cycle: int,
    cycle_length: int,
    average_period_length: int,
    settings: Optional[CycleSettings] = None
) -> PhaseType:
    """
    Classify a zero-based day within an averaged cycle.

    Args:
        day_in_cycle: Days since the projected period start (0-based)
        cycle_length: Average cycle length in days
        average_period_length: Average period duration in days
        settings: Optional engine settings

    Returns:
        Phase for that day

    Example:
        >>> classify_cycle_day(14, 28, 5)
        <PhaseType.OVULATION: 'ovulation'>
    """
    settings = resolve_settings(settings)
    ovulation_day = cycle_length - settings.ovulation_offset
    fertile_start = ovulation_day - settings.fertile_window_before
    fertile_end = ovulation_day + settings.fertile_window_after

    if day_in_cycle < average_period_length:
        return PhaseType.MENSTRUAL
    if day_in_cycle == ovulation_day:
        return PhaseType.OVULATION
    if fertile_start <= day_in_cycle <= fertile_end:
        return PhaseType.FERTILE
    if day_in_cycle < fertile_start:
        return PhaseType.FOLLICULAR
    return PhaseType.LUTEAL

def get_predicted_phase_for_date(
    target_date: date,
    cycles: List[Cycle],
    cycle_length: int,
    today: date,
    average_period_length: Optional[int] = None,
    settings: Optional[CycleSettings] = None
) -> Optional[PhaseType]:
    """
    Project the phase of a date that no recorded cycle covers.

    Args:
        target_date: Date to classify
        cycles: Recorded cycles in any order
        cycle_length: Average cycle length in days
        today: Reference date for the prediction horizon
        average_period_length: Average period duration, default length if None
        settings: Optional engine settings

    Returns:
        Projected phase, or None with fewer than two cycles, a non-positive
        cycle length, or a date beyond the prediction horizon
    """
    settings = resolve_settings(settings)

    if len(cycles) < 2 or cycle_length <= 0:
        return None

    horizon = today + timedelta(days=settings.prediction_horizon_days)
    if target_date > horizon:
        logger.debug("Date beyond prediction horizon", extra={
            "target_date": str(target_date),
            "horizon": str(horizon)
        })
        return None

    if average_period_length is None:
        average_period_length = settings.default_period_length

    last_start = sort_cycles(cycles)[0].period_start_date
    days_since_start = (target_date - last_start).days
    # Floored modulo keeps dates before last_start in [0, cycle_length)
    day_in_cycle = days_since_start % cycle_length

    return classify_cycle_day(day_in_cycle, cycle_length, average_period_length, settings)
