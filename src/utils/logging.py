"""
Shared logging configuration.

Every service logs through the one ``logger`` defined here so that records
from a single recompute carry the same service name.
"""
import os
from typing import Any, Dict, List, Mapping
from aws_lambda_powertools import Logger
from pydantic import ValidationError

SERVICE_NAME = os.environ.get('POWERTOOLS_SERVICE_NAME', 'cycle_tracker')

logger = Logger(
    service=SERVICE_NAME,
    level=os.environ.get('LOG_LEVEL', 'INFO'),
    use_rfc3339=True
)

if os.environ.get('APP_VERSION'):
    logger.append_keys(version=os.environ['APP_VERSION'])

def describe_validation_errors(error: ValidationError) -> List[Dict[str, str]]:
    """
    Flatten pydantic errors into field/type/message entries.

    Nested locations are joined with dots, e.g. ``symptoms.2``.
    """
    return [
        {
            "field": ".".join(str(part) for part in detail["loc"]),
            "type": detail["type"],
            "message": detail["msg"]
        }
        for detail in error.errors()
    ]

def row_error_record(
    error: ValidationError,
    table: str,
    row_index: int,
    row: Mapping[str, Any]
) -> Dict[str, Any]:
    """
    Build the log record for a stored row that failed to parse.

    Args:
        error: Validation error raised while building the model
        table: Source table, ``cycle_entries`` or ``daily_logs``
        row_index: Position of the row in the loaded batch
        row: The raw row

    Returns:
        Dictionary suitable for ``extra=`` with the row id and offending fields
    """
    errors = describe_validation_errors(error)
    return {
        "table": table,
        "row_index": row_index,
        "row_id": row.get("id"),
        "fields": [entry["field"] for entry in errors],
        "errors": errors
    }
