"""
Pytest configuration and shared fixtures.
"""
import pytest
from datetime import date, timedelta
from typing import List

from cyclekit.models.cycle import Cycle
from tests.factories import make_cycle

@pytest.fixture
def scenario_cycles() -> List[Cycle]:
    """Two cycles 28 days apart; only the first has an end date."""
    return [
        make_cycle("1", date(2024, 1, 1), date(2024, 1, 5)),
        make_cycle("2", date(2024, 1, 29)),
    ]

@pytest.fixture
def regular_cycles() -> List[Cycle]:
    """Five 28-day cycles with 5-day periods, starting 2024-01-01."""
    cycles = []
    for i in range(5):
        start = date(2024, 1, 1) + timedelta(days=i * 28)
        cycles.append(make_cycle(str(i + 1), start, start + timedelta(days=4)))
    return cycles

@pytest.fixture
def irregular_cycles() -> List[Cycle]:
    """Cycles of 24, 31 and 26 days, listed out of order."""
    return [
        make_cycle("3", date(2024, 2, 25)),
        make_cycle("1", date(2024, 1, 1)),
        make_cycle("4", date(2024, 3, 22)),
        make_cycle("2", date(2024, 1, 25)),
    ]
