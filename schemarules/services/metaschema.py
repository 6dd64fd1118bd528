"""
Schema self-check against the JSON Schema Draft 4 meta-schema.

Draft 4 is the draft whose ``exclusiveMinimum``/``exclusiveMaximum`` are
boolean flags next to ``minimum``/``maximum``, which is how the JsonSchema
flavor reads them. Keys the meta-schema does not know (``divisibleBy``) pass.
"""

from typing import Any, Mapping

import jsonschema

_META_VALIDATOR = jsonschema.Draft4Validator(jsonschema.Draft4Validator.META_SCHEMA)


def schema_errors(schema: Mapping[str, Any]) -> list[str]:
    """
    Check a schema node against the meta-schema.
    Returns a list of error messages (empty list = well formed).
    """
    return [
        f"{'/'.join(str(p) for p in error.absolute_path) or '<root>'}: {error.message}"
        for error in _META_VALIDATOR.iter_errors(schema)
    ]


def check_schema(schema: Mapping[str, Any]) -> None:
    """Raise ``jsonschema.SchemaError`` for the first meta-schema violation."""
    jsonschema.Draft4Validator.check_schema(schema)
