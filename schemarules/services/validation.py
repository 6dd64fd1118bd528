"""
Schema validation helpers for batches of decoded records.

- Collecting all issues for a record rather than raising on the first one
- Splitting a batch into normalized valid records and rejected ones
"""

from __future__ import annotations

import logging
from typing import Any

from schemarules.rules.json_schema import JsonSchema

logger = logging.getLogger(__name__)


def validate_against_schema(data: Any, schema: dict[str, Any]) -> list[str]:
    """
    Validate a value against a schema node.
    Returns a list of issue messages (empty list = valid).
    """
    return JsonSchema.validate(data, schema).messages()


def validate_records(records: list[Any], schema: dict[str, Any], **options: Any) -> dict[str, Any]:
    """
    Validate every record of a batch with one validator instance.
    Invalid records are collected but do not halt the batch.
    """
    validator = JsonSchema(**options)
    valid, invalid = [], []

    for record in records:
        report = validator.run(record, schema)
        if report.valid:
            valid.append(report.value)
        else:
            invalid.append({"record": record, "errors": report.messages()})

    logger.info("Validation: %d valid, %d invalid", len(valid), len(invalid))
    return {
        "valid_records": valid,
        "validation_errors": invalid,
        "valid_count": len(valid),
    }
