"""
Phase model definitions for menstrual cycle phases and derived intervals.
"""
from enum import Enum
from typing import Optional
from datetime import date
from pydantic import BaseModel, ConfigDict

class PhaseType(str, Enum):
    """
    Cycle phases a calendar day can be classified into.
    """
    MENSTRUAL = "menstrual"
    FOLLICULAR = "follicular"
    FERTILE = "fertile"
    OVULATION = "ovulation"
    LUTEAL = "luteal"

class FertileWindow(BaseModel):
    """
    Inclusive date interval around an ovulation date.
    """
    model_config = ConfigDict(frozen=True)

    start: date
    end: date

    def contains(self, target_date: date) -> bool:
        """Check if a date falls inside the window."""
        return self.start <= target_date <= self.end

class DayPhase(BaseModel):
    """
    Phase classification of a single calendar day.

    `is_prediction` marks days classified from averaged parameters rather than
    from a recorded cycle, so they can be rendered distinctly.
    """
    model_config = ConfigDict(frozen=True)

    date: date
    phase: Optional[PhaseType] = None
    is_prediction: bool = False
