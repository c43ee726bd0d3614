"""
Tests for record stores and stored-item conversion.
"""
import pytest
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import Mock, patch
from botocore.exceptions import ClientError

from cyclekit.models.symptom import BuiltinSymptom, CustomSymptom
from cyclekit.services.exceptions import RecordStoreAccessError, StoreConfigurationError
from cyclekit.storage import resolve_record_store
from cyclekit.storage import dynamo
from cyclekit.storage.base import (
    convert_items,
    custom_symptom_type_from_item,
    cycle_from_item,
    parse_symptom_identifier,
    symptom_from_item
)
from cyclekit.storage.dynamo import (
    DynamoDBClient,
    DynamoRecordStore,
    create_custom_symptom_sk,
    create_cycle_sk,
    create_pk,
    create_symptom_sk
)
from cyclekit.storage.memory import InMemoryRecordStore
from tests.factories import make_cycle, make_symptom

@pytest.mark.parametrize("value,expected", [
    ("cramps", BuiltinSymptom(id="cramps")),
    ("period_pain_4", BuiltinSymptom(id="period_pain_4")),
    ("custom_3", CustomSymptom(id=3)),
    ({"kind": "custom", "id": 7}, CustomSymptom(id=7)),
    ({"kind": "builtin", "id": "fatigue"}, BuiltinSymptom(id="fatigue")),
])
def test_parse_symptom_identifier(value, expected):
    """Both the structured and the legacy string forms are accepted."""
    assert parse_symptom_identifier(value) == expected

@pytest.mark.parametrize("value", ["", None, "custom_", "custom_abc", 42])
def test_parse_symptom_identifier_rejects_malformed(value):
    """Empty or malformed identifiers raise ValueError."""
    with pytest.raises(ValueError):
        parse_symptom_identifier(value)

def test_cycle_from_item():
    """ISO strings become dates; blank optionals become None."""
    cycle = cycle_from_item({
        "id": Decimal(1),
        "period_start_date": "2024-01-01",
        "period_end_date": "2024-01-05",
        "ovulation_date": "",
        "created_at": "2024-01-01T08:30:00"
    })
    assert cycle.id == "1"
    assert cycle.period_start_date == date(2024, 1, 1)
    assert cycle.period_end_date == date(2024, 1, 5)
    assert cycle.ovulation_date is None
    assert cycle.created_at == datetime(2024, 1, 1, 8, 30)

def test_symptom_from_item():
    """Legacy symptom_type strings are resolved at the boundary."""
    occurrence = symptom_from_item({
        "id": "s1",
        "date": "2024-01-02",
        "symptom_type": "custom_2",
        "cycle_id": 1
    })
    assert occurrence.date == date(2024, 1, 2)
    assert occurrence.symptom == CustomSymptom(id=2)
    assert occurrence.cycle_id == "1"

def test_custom_symptom_type_from_item():
    """Category defaults to physical."""
    custom_type = custom_symptom_type_from_item({"id": Decimal(4), "name": "Joint pain"})
    assert custom_type.id == 4
    assert custom_type.name == "Joint pain"
    assert custom_type.category == "physical"

def test_convert_items_skips_malformed_records():
    """One bad record doesn't hide the rest of the history."""
    items = [
        {"id": "1", "period_start_date": "2024-01-01"},
        {"id": "2"},
        {"id": "3", "period_start_date": "not-a-date"},
        {"id": "4", "period_start_date": "2024-01-29"},
    ]
    cycles = convert_items(items, cycle_from_item, "cycle")
    assert [cycle.id for cycle in cycles] == ["1", "4"]

def test_key_builders():
    """Partition and sort key formats."""
    assert create_pk("123") == "USER#123"
    assert create_cycle_sk("2024-01-01", "c1") == "CYCLE#2024-01-01#c1"
    assert create_symptom_sk("2024-01-02", "s1") == "SYMPTOM#2024-01-02#s1"
    assert create_custom_symptom_sk(3) == "CUSTOM_SYMPTOM#3"

def test_in_memory_store_returns_copies():
    """Mutating a returned list leaves the store untouched."""
    store = InMemoryRecordStore(
        cycles=[make_cycle("1", date(2024, 1, 1))],
        symptoms=[make_symptom("s1", date(2024, 1, 2), "cramps")]
    )
    cycles = store.get_all_cycles()
    cycles.clear()

    assert len(store.get_all_cycles()) == 1
    assert len(store.get_all_symptoms()) == 1
    assert store.get_custom_symptom_types() == []

def test_dynamo_store_queries_by_prefix():
    """Each record type is read from the user's partition by prefix."""
    client = Mock()
    client.query_items.return_value = [
        {"PK": "USER#123", "SK": "CYCLE#2024-01-01#1", "id": "1", "period_start_date": "2024-01-01"}
    ]
    store = DynamoRecordStore(client, "123")

    cycles = store.get_all_cycles()

    assert [cycle.id for cycle in cycles] == ["1"]
    client.query_items.assert_called_once_with(
        partition_key="PK",
        partition_value="USER#123",
        sort_key_prefix="CYCLE#"
    )

def test_dynamo_store_symptoms_and_custom_types():
    """Symptoms and custom types are converted from their items."""
    client = Mock()
    client.query_items.side_effect = [
        [{"id": "s1", "date": "2024-01-02", "symptom_type": "cramps"}],
        [{"id": 3, "name": "Joint pain", "category": "physical"}],
    ]
    store = DynamoRecordStore(client, "123")

    assert store.get_all_symptoms()[0].symptom == BuiltinSymptom(id="cramps")
    assert store.get_custom_symptom_types()[0].name == "Joint pain"
    assert client.query_items.call_args_list[1].kwargs["sort_key_prefix"] == "CUSTOM_SYMPTOM#"

def test_dynamo_store_wraps_client_errors():
    """A rejected read surfaces as RecordStoreAccessError."""
    client = Mock()
    client.query_items.side_effect = ClientError(
        {"Error": {"Code": "AccessDeniedException", "Message": "Access denied"}},
        "Query"
    )
    store = DynamoRecordStore(client, "123")

    with pytest.raises(RecordStoreAccessError) as exc_info:
        store.get_all_cycles()
    assert "Access denied" in str(exc_info.value)

@patch('cyclekit.storage.dynamo.boto3')
def test_query_items_follows_pages(mock_boto3):
    """Pagination continues until LastEvaluatedKey is absent."""
    table = mock_boto3.resource.return_value.Table.return_value
    table.query.side_effect = [
        {"Items": [{"id": "1"}], "LastEvaluatedKey": {"PK": "USER#123", "SK": "CYCLE#a"}},
        {"Items": [{"id": "2"}]},
    ]
    client = DynamoDBClient("tracker")

    items = client.query_items("PK", "USER#123", "CYCLE#")

    assert items == [{"id": "1"}, {"id": "2"}]
    assert table.query.call_count == 2
    assert "ExclusiveStartKey" not in table.query.call_args_list[0].kwargs
    assert table.query.call_args_list[1].kwargs["ExclusiveStartKey"] == {"PK": "USER#123", "SK": "CYCLE#a"}
    mock_boto3.resource.return_value.Table.assert_called_once_with("tracker")

def test_resolve_in_memory_store():
    """Without a table name records live in memory."""
    store = resolve_record_store("123", environ={})
    assert isinstance(store, InMemoryRecordStore)
    assert store.get_all_cycles() == []

@patch('cyclekit.storage.dynamo.boto3')
def test_resolve_dynamo_store(mock_boto3):
    """A configured table name selects DynamoDB."""
    store = resolve_record_store("123", environ={"TRACKER_TABLE_NAME": "tracker"})

    assert isinstance(store, DynamoRecordStore)
    assert store.user_id == "123"
    mock_boto3.resource.return_value.Table.assert_called_once_with("tracker")

def test_get_dynamo_requires_table_name(monkeypatch):
    """The singleton can't be built without TRACKER_TABLE_NAME."""
    monkeypatch.setattr(dynamo, "_dynamo_instance", None)
    monkeypatch.delenv("TRACKER_TABLE_NAME", raising=False)

    with pytest.raises(StoreConfigurationError):
        dynamo.get_dynamo()
