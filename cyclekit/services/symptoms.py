"""
Service module for correlating logged symptoms with cycle phases.

For each of the most recent cycles the dates of the requested phase are
expanded, and every symptom logged on one of those dates counts once for that
cycle. The result ranks symptoms by the number of cycles they appeared in.

Typical usage:
    history = get_symptoms_for_phase_history(
        PhaseType.MENSTRUAL, cycles, symptoms, average_length
    )
    for entry in history:
        print(get_symptom_label(entry.symptom, custom_types), entry.percentage)
"""
from typing import Dict, List, Optional, Set
from datetime import date
from aws_lambda_powertools import Logger

from cyclekit.models.cycle import Cycle
from cyclekit.models.phase import PhaseType
from cyclekit.models.settings import CycleSettings
from cyclekit.models.statistics import PhaseSymptomHistory
from cyclekit.models.symptom import (
    BuiltinSymptom,
    CustomSymptom,
    CustomSymptomType,
    SymptomOccurrence,
    SymptomRef
)
from cyclekit.services.constants import PERIOD_PAIN_LEVELS, SYMPTOM_LABELS
from cyclekit.services.phase import get_phase_dates
from cyclekit.services.utils import resolve_settings, round_half_up, sort_cycles

logger = Logger()

def get_symptoms_for_phase_history(
    phase: PhaseType,
    cycles: List[Cycle],
    symptoms: List[SymptomOccurrence],
    cycle_length: int,
    max_cycles: Optional[int] = None,
    settings: Optional[CycleSettings] = None
) -> List[PhaseSymptomHistory]:
    """
    Get symptoms that occurred during a phase in the most recent cycles.

    Args:
        phase: Phase to analyze
        cycles: Recorded cycles in any order
        symptoms: Full symptom log
        cycle_length: Average cycle length in days
        max_cycles: Trailing window size, defaults to settings.stats_window
        settings: Optional engine settings

    Returns:
        Entries sorted by occurrences descending, ties by symptom identity.
        Empty when there are no cycles.

    Example:
        >>> history = get_symptoms_for_phase_history(PhaseType.MENSTRUAL, cycles, symptoms, 28)
        >>> history[0].symptom, history[0].occurrences, history[0].percentage
        (BuiltinSymptom(kind='builtin', id='cramps'), 2, 100)
    """
    settings = resolve_settings(settings)
    window = max_cycles if max_cycles is not None else settings.stats_window

    recent_cycles = sort_cycles(cycles)[:window]
    if not recent_cycles:
        return []

    symptoms_by_date: Dict[date, Set[SymptomRef]] = {}
    for occurrence in symptoms:
        symptoms_by_date.setdefault(occurrence.date, set()).add(occurrence.symptom)

    counts: Dict[SymptomRef, int] = {}
    for index, cycle in enumerate(recent_cycles):
        next_cycle_start = recent_cycles[index - 1].period_start_date if index > 0 else None
        phase_dates = get_phase_dates(cycle, phase, cycle_length, next_cycle_start, settings)

        seen_in_cycle: Set[SymptomRef] = set()
        for day in phase_dates:
            seen_in_cycle.update(symptoms_by_date.get(day, ()))

        for symptom in seen_in_cycle:
            counts[symptom] = counts.get(symptom, 0) + 1

    cycles_analyzed = len(recent_cycles)
    logger.debug("Correlated symptoms with phase", extra={
        "phase": phase.value,
        "cycles_analyzed": cycles_analyzed,
        "distinct_symptoms": len(counts)
    })

    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0].sort_key))
    return [
        PhaseSymptomHistory(
            symptom=symptom,
            occurrences=occurrences,
            percentage=round_half_up(occurrences / cycles_analyzed * 100)
        )
        for symptom, occurrences in ranked
    ]

def get_symptom_label(symptom: SymptomRef, custom_types: List[CustomSymptomType]) -> str:
    """
    Get a display label for a symptom.

    Unknown built-in keys fall back to the key with underscores replaced by
    spaces; custom symptoms whose type was deleted get a generic label.

    Example:
        >>> get_symptom_label(BuiltinSymptom(id="breast_tenderness"), [])
        'Breast Tenderness'
    """
    if isinstance(symptom, CustomSymptom):
        for custom_type in custom_types:
            if custom_type.id == symptom.id:
                return custom_type.name
        return f"Custom symptom #{symptom.id}"

    return SYMPTOM_LABELS.get(symptom.id, symptom.id.replace("_", " "))

def get_pain_level(symptom: SymptomRef) -> Optional[int]:
    """
    Get the period pain level (1-10) a symptom represents.

    Returns:
        Pain level, or None when the symptom is not a period pain entry
    """
    if isinstance(symptom, BuiltinSymptom):
        return PERIOD_PAIN_LEVELS.get(symptom.id)
    return None

def calculate_average_pain(history: List[PhaseSymptomHistory]) -> Optional[float]:
    """
    Calculate the occurrence-weighted average pain level from a phase history.

    Returns:
        Average rounded to one decimal, or None when no pain was logged
    """
    total_pain = 0
    total_occurrences = 0
    for entry in history:
        level = get_pain_level(entry.symptom)
        if level is None:
            continue
        total_pain += level * entry.occurrences
        total_occurrences += entry.occurrences

    if total_occurrences == 0:
        return None
    return round_half_up(total_pain / total_occurrences * 10) / 10
