"""
DynamoDB-backed record store.

All of a user's records share one partition. Sort keys carry the record type
so each type is read with a single begins_with query:

    PK = USER#<user_id>
    SK = CYCLE#<period_start_date>#<id>
         SYMPTOM#<date>#<id>
         CUSTOM_SYMPTOM#<id>
"""
import os
from typing import Any, Dict, List, Optional
import boto3
import botocore.exceptions
from boto3.dynamodb.conditions import Key

from cyclekit.models.cycle import Cycle
from cyclekit.models.symptom import CustomSymptomType, SymptomOccurrence
from cyclekit.services.exceptions import RecordStoreAccessError, StoreConfigurationError
from cyclekit.storage.base import (
    RecordStore,
    convert_items,
    custom_symptom_type_from_item,
    cycle_from_item,
    symptom_from_item
)
from cyclekit.utils.logging import logger, log_exception

CYCLE_SK_PREFIX = "CYCLE#"
SYMPTOM_SK_PREFIX = "SYMPTOM#"
CUSTOM_SYMPTOM_SK_PREFIX = "CUSTOM_SYMPTOM#"

# Singleton instance
_dynamo_instance = None

def get_dynamo() -> 'DynamoDBClient':
    """
    Get or create singleton DynamoDB client instance.

    Returns:
        DynamoDBClient: Singleton instance of DynamoDB client

    Raises:
        StoreConfigurationError: If TRACKER_TABLE_NAME environment variable is not set
    """
    global _dynamo_instance
    if _dynamo_instance is None:
        try:
            table_name = os.environ['TRACKER_TABLE_NAME']
        except KeyError:
            raise StoreConfigurationError(
                "TRACKER_TABLE_NAME environment variable not set. "
                "This variable must be set to the DynamoDB table name."
            )
        _dynamo_instance = DynamoDBClient(table_name)
    return _dynamo_instance

class DynamoDBClient:
    """Client for reading from the tracker DynamoDB table."""

    def __init__(self, table_name: str):
        self.dynamodb = boto3.resource('dynamodb')
        self.table = self.dynamodb.Table(table_name)

    def query_items(
        self,
        partition_key: str,
        partition_value: str,
        sort_key_prefix: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """
        Query items by partition key and optional sort key prefix.

        Follows LastEvaluatedKey until every page has been read.

        Args:
            partition_key: Name of partition key
            partition_value: Value of partition key
            sort_key_prefix: Optional prefix the sort key must begin with

        Returns:
            List of matching items
        """
        key_condition = Key(partition_key).eq(partition_value)
        if sort_key_prefix:
            key_condition = key_condition & Key("SK").begins_with(sort_key_prefix)

        items: List[Dict[str, Any]] = []
        query_kwargs: Dict[str, Any] = {"KeyConditionExpression": key_condition}
        while True:
            response = self.table.query(**query_kwargs)
            items.extend(response.get('Items', []))
            last_key = response.get('LastEvaluatedKey')
            if not last_key:
                return items
            query_kwargs["ExclusiveStartKey"] = last_key

def create_pk(user_id: str) -> str:
    """Create partition key from user ID."""
    return f"USER#{user_id}"

def create_cycle_sk(period_start_date: str, cycle_id: str) -> str:
    """Create sort key for cycles."""
    return f"{CYCLE_SK_PREFIX}{period_start_date}#{cycle_id}"

def create_symptom_sk(date_str: str, symptom_id: str) -> str:
    """Create sort key for symptom occurrences."""
    return f"{SYMPTOM_SK_PREFIX}{date_str}#{symptom_id}"

def create_custom_symptom_sk(custom_type_id: int) -> str:
    """Create sort key for custom symptom types."""
    return f"{CUSTOM_SYMPTOM_SK_PREFIX}{custom_type_id}"

class DynamoRecordStore(RecordStore):
    """Record store reading one user's partition of the tracker table."""

    def __init__(self, client: DynamoDBClient, user_id: str):
        self.client = client
        self.user_id = user_id

    def _query(self, sort_key_prefix: str) -> List[Dict[str, Any]]:
        try:
            return self.client.query_items(
                partition_key="PK",
                partition_value=create_pk(self.user_id),
                sort_key_prefix=sort_key_prefix
            )
        except botocore.exceptions.ClientError as e:
            error_code = e.response.get('Error', {}).get('Code')
            error_msg = e.response.get('Error', {}).get('Message')
            log_exception(logger, "DynamoDB access error", error=e, extra={
                "user_id": self.user_id,
                "error_code": error_code,
                "error_message": error_msg,
                "operation": "query",
                "sort_key_prefix": sort_key_prefix
            })
            raise RecordStoreAccessError(
                f"Failed to read {sort_key_prefix.rstrip('#')} records: {error_msg}"
            ) from e

    def get_all_cycles(self) -> List[Cycle]:
        return convert_items(self._query(CYCLE_SK_PREFIX), cycle_from_item, "cycle")

    def get_all_symptoms(self) -> List[SymptomOccurrence]:
        return convert_items(self._query(SYMPTOM_SK_PREFIX), symptom_from_item, "symptom")

    def get_custom_symptom_types(self) -> List[CustomSymptomType]:
        return convert_items(
            self._query(CUSTOM_SYMPTOM_SK_PREFIX),
            custom_symptom_type_from_item,
            "custom_symptom_type"
        )
