"""
Derived statistics models.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from cyclekit.models.phase import PhaseType
from cyclekit.models.symptom import SymptomRef

class StatsRecord(BaseModel):
    """
    Minimum, maximum and rounded average over a trailing window of cycles.
    """
    model_config = ConfigDict(frozen=True)

    min: int
    max: int
    average: int

class PhaseSymptomHistory(BaseModel):
    """
    How often a symptom co-occurred with a phase across recent cycles.
    """
    model_config = ConfigDict(frozen=True)

    symptom: SymptomRef
    occurrences: int = Field(..., ge=0)
    percentage: int = Field(..., ge=0, le=100)

class CycleInsights(BaseModel):
    """
    Aggregated statistics and phase-symptom histories for a cycle history.
    """
    cycles_recorded: int
    average_cycle_length: int
    cycle_length: Optional[StatsRecord] = None
    period_duration: Optional[StatsRecord] = None
    days_until_ovulation: Optional[StatsRecord] = None
    phase_symptoms: dict[PhaseType, list[PhaseSymptomHistory]] = Field(default_factory=dict)
