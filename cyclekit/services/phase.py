"""
Service module for classifying calendar days into cycle phases.

A day is classified against the recorded cycle it belongs to. Phase rules
are checked in priority order, first match wins, because the intervals can
overlap for short cycles:

    1. MENSTRUAL   period start through period end (or default length)
    2. OVULATION   the ovulation day itself
    3. FERTILE     the rest of the fertile window
    4. FOLLICULAR  after the period, before the fertile window
    5. LUTEAL      after the fertile window, through the end of the cycle

Typical usage:
    >>> cycle = find_cycle_for_date(day, cycles)
    >>> next_start = get_next_cycle_start(cycle, cycles)
    >>> phase = get_phase_for_date(day, cycle, next_start, average_length)
"""
from typing import List, Optional
from datetime import date, timedelta

from cyclekit.models.cycle import Cycle
from cyclekit.models.phase import PhaseType
from cyclekit.models.settings import CycleSettings
from cyclekit.services.ovulation import get_fertile_window, get_ovulation_date
from cyclekit.services.utils import (
    calculate_period_end,
    iterate_dates,
    resolve_settings,
    sort_cycles
)

def calculate_cycle_end(
    cycle: Cycle,
    next_cycle_start: Optional[date],
    cycle_length: int
) -> date:
    """
    Get the last day of a cycle.

    The day before the next recorded start, or `start + cycle_length - 1`
    for the most recent cycle.
    """
    if next_cycle_start is not None:
        return next_cycle_start - timedelta(days=1)
    return cycle.period_start_date + timedelta(days=cycle_length - 1)

def get_phase_for_date(
    target_date: date,
    cycle: Optional[Cycle],
    next_cycle_start: Optional[date],
    cycle_length: int,
    settings: Optional[CycleSettings] = None
) -> Optional[PhaseType]:
    """
    Determine the phase of a date within a recorded cycle.

    Args:
        target_date: Date to classify
        cycle: Cycle the date belongs to, or None
        next_cycle_start: Start of the following cycle, None for the latest cycle
        cycle_length: Average cycle length in days
        settings: Optional engine settings

    Returns:
        Phase, or None when there is no cycle or the date falls in a gap

    Example:
        >>> cycle = Cycle(id="1", period_start_date="2024-01-01", period_end_date="2024-01-05")
        >>> get_phase_for_date(date(2024, 1, 15), cycle, date(2024, 1, 29), 28)
        <PhaseType.OVULATION: 'ovulation'>
    """
    if cycle is None:
        return None

    settings = resolve_settings(settings)
    period_start = cycle.period_start_date
    period_end = calculate_period_end(cycle, settings)

    if period_start <= target_date <= period_end:
        return PhaseType.MENSTRUAL

    ovulation_date = get_ovulation_date(cycle, cycle_length, settings)
    if target_date == ovulation_date:
        return PhaseType.OVULATION

    fertile_window = get_fertile_window(ovulation_date, settings)
    if fertile_window.contains(target_date):
        return PhaseType.FERTILE

    if period_end < target_date < fertile_window.start:
        return PhaseType.FOLLICULAR

    cycle_end = calculate_cycle_end(cycle, next_cycle_start, cycle_length)
    if fertile_window.end < target_date <= cycle_end:
        return PhaseType.LUTEAL

    return None

def find_cycle_for_date(target_date: date, cycles: List[Cycle]) -> Optional[Cycle]:
    """
    Find the recorded cycle a date belongs to.

    A cycle owns every date from its start up to, but excluding, the next
    cycle's start. The most recent cycle is open-ended.

    Returns:
        Owning cycle, or None when the date precedes all recorded cycles
    """
    newer_start = None
    for cycle in sort_cycles(cycles):
        if cycle.period_start_date <= target_date and (
            newer_start is None or target_date < newer_start
        ):
            return cycle
        newer_start = cycle.period_start_date
    return None

def get_next_cycle_start(cycle: Cycle, cycles: List[Cycle]) -> Optional[date]:
    """
    Get the start date of the cycle following `cycle`.

    Returns:
        Next start date, or None if `cycle` is the most recent one
    """
    later_starts = [
        c.period_start_date for c in cycles
        if c.period_start_date > cycle.period_start_date
    ]
    return min(later_starts) if later_starts else None

def get_phase_dates(
    cycle: Cycle,
    phase: PhaseType,
    cycle_length: int,
    next_cycle_start: Optional[date] = None,
    settings: Optional[CycleSettings] = None
) -> List[date]:
    """
    Get every date of a cycle that classifies as the given phase.

    Dates are taken from the period start through the cycle end and run
    through the same priority rules as get_phase_for_date, so phases never
    share a day.

    Args:
        cycle: Cycle to expand
        phase: Phase to collect
        cycle_length: Average cycle length in days
        next_cycle_start: Start of the following cycle, if any
        settings: Optional engine settings

    Returns:
        Dates in ascending order, empty when the phase has no days
    """
    cycle_end = calculate_cycle_end(cycle, next_cycle_start, cycle_length)
    return [
        day for day in iterate_dates(cycle.period_start_date, cycle_end)
        if get_phase_for_date(day, cycle, next_cycle_start, cycle_length, settings) == phase
    ]
