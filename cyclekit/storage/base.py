"""
Record-access interface consumed by the cycle engine, and item converters.

Stored records arrive as plain mappings with ISO date strings. Converters turn
them into models at this boundary; symptom identifiers written in the legacy
string form (`custom_<n>` for user-defined types) are resolved here, once, so
nothing downstream parses string conventions.
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, TypeVar
from pydantic import TypeAdapter, ValidationError

from cyclekit.models.cycle import Cycle
from cyclekit.models.symptom import (
    BuiltinSymptom,
    CustomSymptom,
    CustomSymptomType,
    SymptomOccurrence,
    SymptomRef
)
from cyclekit.utils.logging import logger

CUSTOM_SYMPTOM_PREFIX = "custom_"

T = TypeVar("T")

_symptom_ref_adapter = TypeAdapter(SymptomRef)

class RecordStore(ABC):
    """Read access to one user's cycle and symptom records."""

    @abstractmethod
    def get_all_cycles(self) -> List[Cycle]:
        """Return every recorded cycle, in no particular order."""

    @abstractmethod
    def get_all_symptoms(self) -> List[SymptomOccurrence]:
        """Return every logged symptom occurrence."""

    @abstractmethod
    def get_custom_symptom_types(self) -> List[CustomSymptomType]:
        """Return the user's custom symptom definitions."""

def parse_symptom_identifier(value: Any) -> SymptomRef:
    """
    Convert a stored symptom identifier into a SymptomRef.

    Accepts the structured form ({"kind": ..., "id": ...}) and the legacy
    string form, where `custom_<n>` refers to custom type n and anything else
    is a built-in key.

    Raises:
        ValueError: If the identifier is empty or malformed

    Example:
        >>> parse_symptom_identifier("custom_3")
        CustomSymptom(kind='custom', id=3)
        >>> parse_symptom_identifier("cramps")
        BuiltinSymptom(kind='builtin', id='cramps')
    """
    if isinstance(value, dict):
        return _symptom_ref_adapter.validate_python(value)

    if not isinstance(value, str) or not value:
        raise ValueError(f"Invalid symptom identifier: {value!r}")

    if value.startswith(CUSTOM_SYMPTOM_PREFIX):
        suffix = value[len(CUSTOM_SYMPTOM_PREFIX):]
        if not suffix.isdigit():
            raise ValueError(f"Invalid custom symptom identifier: {value!r}")
        return CustomSymptom(id=int(suffix))

    return BuiltinSymptom(id=value)

def cycle_from_item(item: Dict[str, Any]) -> Cycle:
    """Build a Cycle from a stored item."""
    return Cycle(
        id=str(item["id"]),
        period_start_date=item["period_start_date"],
        period_end_date=item.get("period_end_date") or None,
        ovulation_date=item.get("ovulation_date") or None,
        created_at=item.get("created_at") or None
    )

def symptom_from_item(item: Dict[str, Any]) -> SymptomOccurrence:
    """Build a SymptomOccurrence from a stored item."""
    cycle_id = item.get("cycle_id")
    return SymptomOccurrence(
        id=str(item["id"]),
        date=item["date"],
        symptom=parse_symptom_identifier(item.get("symptom", item.get("symptom_type"))),
        cycle_id=str(cycle_id) if cycle_id is not None else None
    )

def custom_symptom_type_from_item(item: Dict[str, Any]) -> CustomSymptomType:
    """Build a CustomSymptomType from a stored item."""
    return CustomSymptomType(
        id=item["id"],
        name=item["name"],
        category=item.get("category", "physical")
    )

def convert_items(
    items: List[Dict[str, Any]],
    converter: Callable[[Dict[str, Any]], T],
    record_type: str
) -> List[T]:
    """
    Convert stored items, skipping the ones that fail validation.

    A single malformed record is logged and dropped so that the rest of the
    history stays usable.
    """
    records = []
    for item in items:
        try:
            records.append(converter(item))
        except (KeyError, ValueError, ValidationError) as e:
            logger.warning("Skipping malformed stored record", extra={
                "record_type": record_type,
                "record_id": item.get("id"),
                "error": str(e)
            })
    return records
