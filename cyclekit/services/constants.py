"""
Constants and shared data for cycle-related services.
"""
from typing import Dict, List
from cyclekit.models.phase import PhaseType
from cyclekit.models.settings import CycleSettings
from cyclekit.models.symptom import SymptomType

DEFAULT_SETTINGS = CycleSettings()

# Fertile overlaps its neighbours and is not reported on its own
INSIGHT_PHASES: List[PhaseType] = [
    PhaseType.MENSTRUAL,
    PhaseType.FOLLICULAR,
    PhaseType.OVULATION,
    PhaseType.LUTEAL,
]

SYMPTOM_LABELS: Dict[str, str] = {
    SymptomType.CRAMPS.value: "Cramps",
    SymptomType.HEADACHE.value: "Headache",
    SymptomType.BLOATING.value: "Bloating",
    SymptomType.BREAST_TENDERNESS.value: "Breast Tenderness",
    SymptomType.FATIGUE.value: "Fatigue",
    SymptomType.BACKACHE.value: "Backache",
    SymptomType.NAUSEA.value: "Nausea",
    SymptomType.ACNE.value: "Acne",
    SymptomType.INSOMNIA.value: "Insomnia",
    SymptomType.CRAVINGS.value: "Cravings",
    SymptomType.FLOW_LIGHT.value: "Light Flow",
    SymptomType.FLOW_MEDIUM.value: "Medium Flow",
    SymptomType.FLOW_HEAVY.value: "Heavy Flow",
    SymptomType.SPOTTING.value: "Spotting",
    SymptomType.MOOD_HAPPY.value: "Happy",
    SymptomType.MOOD_SAD.value: "Sad",
    SymptomType.MOOD_IRRITABLE.value: "Irritable",
    SymptomType.MOOD_ANXIOUS.value: "Anxious",
    SymptomType.MOOD_CALM.value: "Calm",
    SymptomType.MOOD_HORNY.value: "Horny",
    **{
        SymptomType(f"period_pain_{level}").value: f"Period Pain {level}/10"
        for level in range(1, 11)
    },
}

PERIOD_PAIN_LEVELS: Dict[str, int] = {
    SymptomType.PERIOD_PAIN_1.value: 1,
    SymptomType.PERIOD_PAIN_2.value: 2,
    SymptomType.PERIOD_PAIN_3.value: 3,
    SymptomType.PERIOD_PAIN_4.value: 4,
    SymptomType.PERIOD_PAIN_5.value: 5,
    SymptomType.PERIOD_PAIN_6.value: 6,
    SymptomType.PERIOD_PAIN_7.value: 7,
    SymptomType.PERIOD_PAIN_8.value: 8,
    SymptomType.PERIOD_PAIN_9.value: 9,
    SymptomType.PERIOD_PAIN_10.value: 10,
}
