"""
Record store selection.

The backend is chosen once, at application start-up, and the resulting store
is passed to whatever needs records. Engine functions never select a store
themselves.
"""
import os
from typing import Mapping, Optional
from aws_lambda_powertools import Logger

from cyclekit.storage.base import RecordStore
from cyclekit.storage.dynamo import DynamoDBClient, DynamoRecordStore, get_dynamo
from cyclekit.storage.memory import InMemoryRecordStore

logger = Logger()

def resolve_record_store(user_id: str, environ: Optional[Mapping[str, str]] = None) -> RecordStore:
    """
    Pick the record store for this process.

    DynamoDB is used when TRACKER_TABLE_NAME is configured; otherwise an empty
    in-memory store is returned.

    Args:
        user_id: Owner of the records
        environ: Mapping to inspect, os.environ by default

    Returns:
        Concrete RecordStore
    """
    environ = os.environ if environ is None else environ
    table_name = environ.get("TRACKER_TABLE_NAME")

    if table_name:
        logger.info("Using DynamoDB record store", extra={"table": table_name, "user_id": user_id})
        client = get_dynamo() if environ is os.environ else DynamoDBClient(table_name)
        return DynamoRecordStore(client, user_id)

    logger.info("Using in-memory record store", extra={"user_id": user_id})
    return InMemoryRecordStore()

__all__ = [
    "RecordStore",
    "DynamoRecordStore",
    "InMemoryRecordStore",
    "resolve_record_store",
]
