"""
Symptom model definitions.

Symptom identity is a discriminated union: a built-in symptom is identified by
its catalogue key, a custom symptom by the id of the user-defined type. Both
variants are immutable and hashable so they can be counted and compared by
value.
"""
from enum import Enum
from datetime import date
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

class SymptomType(str, Enum):
    """
    Built-in symptom catalogue.
    """
    # Physical
    CRAMPS = "cramps"
    HEADACHE = "headache"
    BLOATING = "bloating"
    BREAST_TENDERNESS = "breast_tenderness"
    FATIGUE = "fatigue"
    BACKACHE = "backache"
    NAUSEA = "nausea"

    # Flow
    FLOW_LIGHT = "flow_light"
    FLOW_MEDIUM = "flow_medium"
    FLOW_HEAVY = "flow_heavy"
    SPOTTING = "spotting"

    # Mood
    MOOD_HAPPY = "mood_happy"
    MOOD_SAD = "mood_sad"
    MOOD_IRRITABLE = "mood_irritable"
    MOOD_ANXIOUS = "mood_anxious"
    MOOD_CALM = "mood_calm"
    MOOD_HORNY = "mood_horny"

    # Other
    ACNE = "acne"
    INSOMNIA = "insomnia"
    CRAVINGS = "cravings"

    # Period pain, 1-10 scale
    PERIOD_PAIN_1 = "period_pain_1"
    PERIOD_PAIN_2 = "period_pain_2"
    PERIOD_PAIN_3 = "period_pain_3"
    PERIOD_PAIN_4 = "period_pain_4"
    PERIOD_PAIN_5 = "period_pain_5"
    PERIOD_PAIN_6 = "period_pain_6"
    PERIOD_PAIN_7 = "period_pain_7"
    PERIOD_PAIN_8 = "period_pain_8"
    PERIOD_PAIN_9 = "period_pain_9"
    PERIOD_PAIN_10 = "period_pain_10"

class BuiltinSymptom(BaseModel):
    """
    Reference to a catalogue symptom. Unknown keys are kept as-is.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["builtin"] = "builtin"
    id: str

    @property
    def sort_key(self) -> str:
        return f"builtin:{self.id}"

class CustomSymptom(BaseModel):
    """
    Reference to a user-defined symptom type.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["custom"] = "custom"
    id: int

    @property
    def sort_key(self) -> str:
        return f"custom:{self.id:010d}"

SymptomRef = Annotated[Union[BuiltinSymptom, CustomSymptom], Field(discriminator="kind")]

class SymptomOccurrence(BaseModel):
    """
    A symptom logged on a calendar day, optionally linked to a cycle.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    date: date
    symptom: SymptomRef
    cycle_id: Optional[str] = None

class CustomSymptomType(BaseModel):
    """
    A user-defined symptom type.
    """
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    category: str = Field("physical", pattern="^(physical|mood)$")
