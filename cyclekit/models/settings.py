"""
Settings model for the cycle engine's tunable parameters.
"""
from pydantic import BaseModel, ConfigDict, Field

class CycleSettings(BaseModel):
    """
    Tunable parameters shared by every engine component.

    The fertile window runs from `fertile_window_before` days before ovulation
    through `fertile_window_after` days after it. Follicular ends the day
    before the window opens and luteal starts the day after it closes.
    """
    model_config = ConfigDict(frozen=True)

    default_cycle_length: int = Field(28, ge=1)
    default_period_length: int = Field(5, ge=1)
    ovulation_offset: int = Field(14, ge=0)
    fertile_window_before: int = Field(4, ge=0)
    fertile_window_after: int = Field(1, ge=0)
    stats_window: int = Field(6, ge=1)
    prediction_horizon_days: int = Field(365, ge=0)
    max_cycle_length: int = Field(60, ge=2)
