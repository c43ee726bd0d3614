"""
Tests for model parsing and identity.
"""
import pytest
from datetime import date
from pydantic import ValidationError

from cyclekit.models.cycle import Cycle
from cyclekit.models.phase import DayPhase, PhaseType
from cyclekit.models.settings import CycleSettings
from cyclekit.models.symptom import BuiltinSymptom, CustomSymptom, SymptomOccurrence

def test_cycle_parses_iso_dates():
    """Date strings are parsed on construction."""
    cycle = Cycle(id="1", period_start_date="2024-01-01", period_end_date="2024-01-05")
    assert cycle.period_start_date == date(2024, 1, 1)
    assert cycle.period_end_date == date(2024, 1, 5)
    assert cycle.ovulation_date is None

def test_cycle_is_immutable():
    """Recorded cycles can't be changed in place."""
    cycle = Cycle(id="1", period_start_date="2024-01-01")
    with pytest.raises(ValidationError):
        cycle.period_end_date = date(2024, 1, 5)

def test_cycle_requires_start_date():
    """The start date anchors every cycle."""
    with pytest.raises(ValidationError):
        Cycle(id="1")

def test_symptom_identity_by_value():
    """Equal references hash and compare equal; kinds never collide."""
    assert BuiltinSymptom(id="cramps") == BuiltinSymptom(id="cramps")
    assert len({BuiltinSymptom(id="cramps"), BuiltinSymptom(id="cramps")}) == 1
    assert BuiltinSymptom(id="3") != CustomSymptom(id=3)

def test_occurrence_discriminates_on_kind():
    """Plain dicts are routed to the right variant."""
    occurrence = SymptomOccurrence(
        id="s1",
        date="2024-01-02",
        symptom={"kind": "custom", "id": 5}
    )
    assert occurrence.symptom == CustomSymptom(id=5)

    with pytest.raises(ValidationError):
        SymptomOccurrence(id="s2", date="2024-01-02", symptom={"kind": "other", "id": "x"})

def test_day_phase_defaults():
    """An unclassified day is neither phased nor predicted."""
    day = DayPhase(date=date(2024, 1, 1))
    assert day.phase is None
    assert day.is_prediction is False
    assert PhaseType("luteal") == PhaseType.LUTEAL

def test_settings_reject_non_positive_lengths():
    """Lengths must be at least one day."""
    with pytest.raises(ValidationError):
        CycleSettings(default_cycle_length=0)
    with pytest.raises(ValidationError):
        CycleSettings(stats_window=0)
