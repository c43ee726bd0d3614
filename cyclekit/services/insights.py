"""
Service module for building the cycle insights summary.

Typical usage:
    store = resolve_record_store(user_id)
    insights = load_cycle_insights(store)
    print(insights.average_cycle_length)
"""
from typing import List, Optional
from aws_lambda_powertools import Logger

from cyclekit.models.cycle import Cycle
from cyclekit.models.settings import CycleSettings
from cyclekit.models.statistics import CycleInsights
from cyclekit.models.symptom import SymptomOccurrence
from cyclekit.services.constants import INSIGHT_PHASES
from cyclekit.services.statistics import (
    get_cycle_length_stats,
    get_days_until_ovulation_stats,
    get_period_duration_stats
)
from cyclekit.services.symptoms import get_symptoms_for_phase_history
from cyclekit.services.utils import resolve_settings
from cyclekit.storage.base import RecordStore

logger = Logger()

def get_cycle_insights(
    cycles: List[Cycle],
    symptoms: List[SymptomOccurrence],
    settings: Optional[CycleSettings] = None
) -> CycleInsights:
    """
    Summarize cycle statistics and per-phase symptom histories.

    Args:
        cycles: Recorded cycles in any order
        symptoms: Full symptom log
        settings: Optional engine settings

    Returns:
        CycleInsights; statistics are None where history is insufficient
    """
    settings = resolve_settings(settings)
    cycle_length_stats = get_cycle_length_stats(cycles, settings)
    average_cycle_length = (
        cycle_length_stats.average if cycle_length_stats else settings.default_cycle_length
    )

    phase_symptoms = {
        phase: get_symptoms_for_phase_history(
            phase, cycles, symptoms, average_cycle_length, settings=settings
        )
        for phase in INSIGHT_PHASES
    }

    return CycleInsights(
        cycles_recorded=len(cycles),
        average_cycle_length=average_cycle_length,
        cycle_length=cycle_length_stats,
        period_duration=get_period_duration_stats(cycles, settings),
        days_until_ovulation=get_days_until_ovulation_stats(cycles, settings),
        phase_symptoms=phase_symptoms
    )

def load_cycle_insights(store: RecordStore, settings: Optional[CycleSettings] = None) -> CycleInsights:
    """
    Read one snapshot from a record store and build insights from it.

    Raises:
        RecordStoreError: If the store fails to read
    """
    cycles = store.get_all_cycles()
    symptoms = store.get_all_symptoms()
    logger.info("Building cycle insights", extra={
        "cycles": len(cycles),
        "symptoms": len(symptoms)
    })
    return get_cycle_insights(cycles, symptoms, settings)
