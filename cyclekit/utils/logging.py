"""
Shared structured logger.

Tracebacks are flattened onto one line so every record stays a single JSON
document in CloudWatch.
"""
import os
import sys
import json
import traceback
from functools import partial
from types import TracebackType
from typing import Optional, Tuple, Type, Union
from aws_lambda_powertools import Logger

ExcInfo = Tuple[Type[BaseException], BaseException, TracebackType]

TRACE_SEPARATOR = " | "

def format_exception(exc_info: Union[bool, BaseException, ExcInfo, None]) -> Optional[str]:
    """
    Flatten a traceback onto a single line.

    Args:
        exc_info: True for the exception being handled, an exception
            instance, or a sys.exc_info() tuple

    Returns:
        The flattened traceback, or None when there is no exception
    """
    if exc_info is True:
        exc_info = sys.exc_info()
    elif isinstance(exc_info, BaseException):
        exc_info = (type(exc_info), exc_info, exc_info.__traceback__)

    if not isinstance(exc_info, tuple) or exc_info[0] is None:
        return None
    trace = ''.join(traceback.format_exception(*exc_info))
    return TRACE_SEPARATOR.join(line for line in trace.splitlines() if line.strip())

class SingleLineLogger(Logger):
    """Powertools logger whose exception() output stays on one line."""

    def exception(self, msg, *args, **kwargs):
        extra = dict(kwargs.pop('extra', None) or {})
        extra['exception'] = format_exception(kwargs.pop('exc_info', True))
        super().error(msg, *args, extra=extra, **kwargs)

def _build_logger() -> SingleLineLogger:
    service_logger = SingleLineLogger(
        service=os.environ.get('POWERTOOLS_SERVICE_NAME', 'cyclekit'),
        level=os.environ.get('LOG_LEVEL', 'INFO'),
        # DynamoDB numbers arrive as Decimal
        json_serializer=partial(json.dumps, default=str),
        use_rfc3339=True
    )
    table_name = os.environ.get('TRACKER_TABLE_NAME')
    if table_name:
        service_logger.append_keys(storage_table=table_name)
    return service_logger

logger = _build_logger()

def log_exception(
    target: Logger,
    message: str,
    error: Optional[BaseException] = None,
    **kwargs
) -> None:
    """Log an error with its flattened traceback under the `exception` key."""
    extra = dict(kwargs.pop('extra', None) or {})
    extra['exception'] = format_exception(error if error is not None else True)
    target.error(message, extra=extra, **kwargs)
