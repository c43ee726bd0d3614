"""
In-memory record store.
"""
from typing import Iterable, List, Optional

from cyclekit.models.cycle import Cycle
from cyclekit.models.symptom import CustomSymptomType, SymptomOccurrence
from cyclekit.storage.base import RecordStore

class InMemoryRecordStore(RecordStore):
    """
    Record store holding records in process memory.

    Reads return new lists, so callers can't mutate the store's contents
    through them.
    """

    def __init__(
        self,
        cycles: Optional[Iterable[Cycle]] = None,
        symptoms: Optional[Iterable[SymptomOccurrence]] = None,
        custom_symptom_types: Optional[Iterable[CustomSymptomType]] = None
    ):
        self._cycles = list(cycles or [])
        self._symptoms = list(symptoms or [])
        self._custom_symptom_types = list(custom_symptom_types or [])

    def get_all_cycles(self) -> List[Cycle]:
        return list(self._cycles)

    def get_all_symptoms(self) -> List[SymptomOccurrence]:
        return list(self._symptoms)

    def get_custom_symptom_types(self) -> List[CustomSymptomType]:
        return list(self._custom_symptom_types)
