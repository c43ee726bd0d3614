"""Tests for phase projection beyond recorded cycles."""
import pytest
from datetime import date, timedelta

from cyclekit.models.phase import PhaseType
from cyclekit.models.settings import CycleSettings
from cyclekit.services.prediction import classify_cycle_day, get_predicted_phase_for_date
from tests.factories import make_cycle

@pytest.mark.parametrize("day_in_cycle,expected", [
    (0, PhaseType.MENSTRUAL),
    (4, PhaseType.MENSTRUAL),
    (5, PhaseType.FOLLICULAR),
    (9, PhaseType.FOLLICULAR),
    (10, PhaseType.FERTILE),
    (13, PhaseType.FERTILE),
    (14, PhaseType.OVULATION),
    (15, PhaseType.FERTILE),
    (16, PhaseType.LUTEAL),
    (27, PhaseType.LUTEAL),
])
def test_classify_cycle_day(day_in_cycle, expected):
    """Zero-based days of an averaged 28-day cycle with a 5-day period."""
    assert classify_cycle_day(day_in_cycle, 28, 5) == expected

def test_predicted_next_period(scenario_cycles):
    """One average cycle after the latest start is a new period."""
    today = date(2024, 2, 1)
    assert get_predicted_phase_for_date(date(2024, 2, 26), scenario_cycles, 28, today, 5) == PhaseType.MENSTRUAL

def test_predicted_ovulation(scenario_cycles):
    """Day 14 of the projected cycle is ovulation."""
    today = date(2024, 2, 1)
    assert get_predicted_phase_for_date(date(2024, 3, 11), scenario_cycles, 28, today, 5) == PhaseType.OVULATION

def test_prediction_before_latest_start(scenario_cycles):
    """Dates before the latest start fold back into the averaged cycle."""
    today = date(2024, 2, 1)
    # 9 days before Jan 29 is day 19 of the averaged cycle
    assert get_predicted_phase_for_date(date(2024, 1, 20), scenario_cycles, 28, today, 5) == PhaseType.LUTEAL

def test_prediction_default_period_length(scenario_cycles):
    """Without an average period length the default five days is used."""
    today = date(2024, 2, 1)
    assert get_predicted_phase_for_date(date(2024, 3, 1), scenario_cycles, 28, today) == PhaseType.MENSTRUAL
    assert get_predicted_phase_for_date(date(2024, 3, 2), scenario_cycles, 28, today) == PhaseType.FOLLICULAR

@pytest.mark.parametrize("offset,has_phase", [
    (364, True),
    (365, True),
    (366, False),
])
def test_prediction_horizon(scenario_cycles, offset, has_phase):
    """Nothing is projected more than a year past today."""
    today = date(2024, 2, 1)
    phase = get_predicted_phase_for_date(today + timedelta(days=offset), scenario_cycles, 28, today, 5)
    assert (phase is not None) == has_phase

def test_prediction_custom_horizon(scenario_cycles):
    """The horizon comes from the settings."""
    today = date(2024, 2, 1)
    settings = CycleSettings(prediction_horizon_days=30)
    assert get_predicted_phase_for_date(date(2024, 3, 2), scenario_cycles, 28, today, 5, settings) is not None
    assert get_predicted_phase_for_date(date(2024, 3, 3), scenario_cycles, 28, today, 5, settings) is None

def test_prediction_needs_two_cycles():
    """A single cycle gives no basis for projection."""
    cycles = [make_cycle("1", date(2024, 1, 1), date(2024, 1, 5))]
    assert get_predicted_phase_for_date(date(2024, 2, 1), cycles, 28, date(2024, 1, 10)) is None
    assert get_predicted_phase_for_date(date(2024, 2, 1), [], 28, date(2024, 1, 10)) is None

def test_prediction_rejects_non_positive_length(scenario_cycles):
    """A zero cycle length can't be projected."""
    assert get_predicted_phase_for_date(date(2024, 3, 1), scenario_cycles, 0, date(2024, 2, 1)) is None
