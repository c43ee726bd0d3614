"""
Cycle model definition for recorded menstrual cycles.
"""
from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

class Cycle(BaseModel):
    """
    One recorded menstrual cycle, anchored by its period start date.

    The end date and ovulation date are optional. A missing end date means the
    period is ongoing or was never closed; a present ovulation date is a
    user-confirmed marker that overrides the estimate for this cycle only.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    period_start_date: date
    period_end_date: Optional[date] = None
    ovulation_date: Optional[date] = None
    created_at: Optional[datetime] = None
