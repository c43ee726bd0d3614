"""
Statistics calculation service for cycle tracking data.

This module derives cycle-length and period-duration statistics from recorded
cycles. Every calculation is bounded to a trailing window of the most recent
cycles, and implausible intervals are discarded instead of failing the whole
computation.

Typical usage:
    cycles = store.get_all_cycles()
    average = calculate_average_cycle_length(cycles)   # always an int
    stats = get_cycle_length_stats(cycles)              # StatsRecord or None
    durations = get_period_duration_stats(cycles)       # StatsRecord or None
"""
from typing import List, Optional, Tuple
from aws_lambda_powertools import Logger

from cyclekit.models.cycle import Cycle
from cyclekit.models.settings import CycleSettings
from cyclekit.models.statistics import StatsRecord
from cyclekit.services.utils import resolve_settings, round_half_up, sort_cycles

logger = Logger()

def _is_plausible_interval(length: int, settings: CycleSettings) -> bool:
    return 0 < length < settings.max_cycle_length

def _recent_cycle_lengths(cycles: List[Cycle], settings: CycleSettings) -> List[int]:
    """
    Collect plausible intervals between consecutive period starts.

    Only the most recent `stats_window` intervals are considered, so at most
    `stats_window + 1` cycles are consulted. Discarded intervals are not
    replaced with older ones.
    """
    recent_cycles = sort_cycles(cycles)[:settings.stats_window + 1]
    lengths = []

    for current, previous in zip(recent_cycles, recent_cycles[1:]):
        length = (current.period_start_date - previous.period_start_date).days
        if not _is_plausible_interval(length, settings):
            logger.warning(
                "Discarding implausible cycle interval",
                extra={
                    "previous_start": str(previous.period_start_date),
                    "current_start": str(current.period_start_date),
                    "interval_days": length
                }
            )
            continue
        lengths.append(length)

    return lengths

def _build_stats(values: List[int]) -> StatsRecord:
    return StatsRecord(
        min=min(values),
        max=max(values),
        average=round_half_up(sum(values) / len(values))
    )

def calculate_average_cycle_length(
    cycles: List[Cycle],
    settings: Optional[CycleSettings] = None
) -> int:
    """
    Calculate the average cycle length over the trailing window.

    Args:
        cycles: Recorded cycles in any order
        settings: Optional engine settings

    Returns:
        Rounded average interval between period starts in days, or the
        default cycle length when fewer than two cycles exist or every
        interval was discarded

    Example:
        >>> calculate_average_cycle_length([])
        28
    """
    settings = resolve_settings(settings)

    if len(cycles) < 2:
        logger.debug("Not enough cycles for an average, using default", extra={
            "cycles": len(cycles),
            "default_cycle_length": settings.default_cycle_length
        })
        return settings.default_cycle_length

    lengths = _recent_cycle_lengths(cycles, settings)
    if not lengths:
        logger.info("No plausible cycle intervals, using default", extra={
            "cycles": len(cycles),
            "default_cycle_length": settings.default_cycle_length
        })
        return settings.default_cycle_length

    return round_half_up(sum(lengths) / len(lengths))

def get_cycle_length_stats(
    cycles: List[Cycle],
    settings: Optional[CycleSettings] = None
) -> Optional[StatsRecord]:
    """
    Get min, max and average cycle length over the trailing window.

    Args:
        cycles: Recorded cycles in any order
        settings: Optional engine settings

    Returns:
        StatsRecord, or None when fewer than two cycles exist or no interval
        survived the sanity filter
    """
    settings = resolve_settings(settings)
    if len(cycles) < 2:
        return None

    lengths = _recent_cycle_lengths(cycles, settings)
    if not lengths:
        return None
    return _build_stats(lengths)

def get_cycle_length_variation(
    cycles: List[Cycle],
    settings: Optional[CycleSettings] = None
) -> Optional[Tuple[int, int]]:
    """
    Get the shortest and longest plausible cycle over the whole history.

    Unlike the windowed statistics this looks at every consecutive pair.

    Returns:
        Tuple of (min, max) or None when no plausible interval exists
    """
    settings = resolve_settings(settings)
    ordered = sort_cycles(cycles, reverse=False)
    lengths = [
        (current.period_start_date - previous.period_start_date).days
        for previous, current in zip(ordered, ordered[1:])
    ]
    lengths = [length for length in lengths if _is_plausible_interval(length, settings)]

    if not lengths:
        return None
    return min(lengths), max(lengths)

def calculate_period_duration(cycle: Cycle, settings: Optional[CycleSettings] = None) -> int:
    """
    Calculate the period duration of a single cycle.

    Both boundary days are counted, so a period that starts and ends on the
    same day lasts one day.

    Args:
        cycle: Cycle to measure
        settings: Optional engine settings

    Returns:
        Duration in days; the default period length when the end date is
        missing or precedes the start

    Example:
        >>> calculate_period_duration(Cycle(id="1", period_start_date="2024-01-01",
        ...                                 period_end_date="2024-01-05"))
        5
    """
    settings = resolve_settings(settings)
    if cycle.period_end_date is None:
        return settings.default_period_length

    duration = (cycle.period_end_date - cycle.period_start_date).days + 1
    return duration if duration > 0 else settings.default_period_length

def _recent_period_durations(cycles: List[Cycle], settings: CycleSettings) -> List[int]:
    """
    Collect observed period durations for the most recent cycles with an end date.

    Cycles whose end precedes their start are excluded and logged.
    """
    observed = []
    for cycle in cycles:
        if cycle.period_end_date is None:
            continue
        if cycle.period_end_date < cycle.period_start_date:
            logger.warning(
                "Discarding period that ends before it starts",
                extra={
                    "cycle_id": cycle.id,
                    "start_date": str(cycle.period_start_date),
                    "end_date": str(cycle.period_end_date)
                }
            )
            continue
        observed.append(cycle)

    recent = sort_cycles(observed)[:settings.stats_window]
    return [calculate_period_duration(cycle, settings) for cycle in recent]

def get_period_duration_stats(
    cycles: List[Cycle],
    settings: Optional[CycleSettings] = None
) -> Optional[StatsRecord]:
    """
    Get min, max and average period duration over the trailing window.

    Only cycles with an explicit end date contribute.

    Args:
        cycles: Recorded cycles in any order
        settings: Optional engine settings

    Returns:
        StatsRecord, or None when no cycle has a usable end date
    """
    settings = resolve_settings(settings)
    durations = _recent_period_durations(cycles, settings)
    if not durations:
        return None
    return _build_stats(durations)

def calculate_average_period_duration(
    cycles: List[Cycle],
    settings: Optional[CycleSettings] = None
) -> Optional[int]:
    """
    Calculate the average observed period duration.

    Returns:
        Rounded average in days, or None when no cycle has an end date. Callers
        substitute the default period length where they need a value.
    """
    stats = get_period_duration_stats(cycles, settings)
    return stats.average if stats else None

def get_days_until_ovulation_stats(
    cycles: List[Cycle],
    settings: Optional[CycleSettings] = None
) -> Optional[StatsRecord]:
    """
    Get min, max and average days from period start to estimated ovulation.

    Each plausible interval in the trailing window contributes
    `cycle_length - ovulation_offset`.

    Returns:
        StatsRecord, or None when fewer than two cycles exist or no interval
        survived the sanity filter
    """
    settings = resolve_settings(settings)
    if len(cycles) < 2:
        return None

    lengths = _recent_cycle_lengths(cycles, settings)
    if not lengths:
        return None
    return _build_stats([length - settings.ovulation_offset for length in lengths])
