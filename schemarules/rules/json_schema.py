"""
The JsonSchema flavor.

Rules are registered in the order they run on a field. ``exclusiveMinimum``,
``exclusiveMaximum`` and ``additionalProperties`` are markers: they are read
by ``minimum``, ``maximum`` and ``properties`` and never fire on their own.
"""

from schemarules.engine.validator import Validator
from schemarules.rules import composition, containers, scalar


class JsonSchema(Validator):
    """Validator for JSON-Schema-like schema nodes."""


JsonSchema.add_rule("type", validate=scalar.validate_type)
JsonSchema.add_rule("default", filter=scalar.filter_default)
JsonSchema.add_rule("enum", validate=scalar.validate_enum)

# String rules

JsonSchema.add_rule("minLength", validate=scalar.validate_min_length)
JsonSchema.add_rule("maxLength", validate=scalar.validate_max_length)
JsonSchema.add_rule("pattern", validate=scalar.validate_pattern)

# Numeric rules

JsonSchema.add_rule("minimum", validate=scalar.validate_minimum)
JsonSchema.add_rule("exclusiveMinimum")
JsonSchema.add_rule("maximum", validate=scalar.validate_maximum)
JsonSchema.add_rule("exclusiveMaximum")
JsonSchema.add_rule("divisibleBy", validate=scalar.validate_divisible_by)

# Object rules

JsonSchema.add_rule("properties", validate=composition.validate_properties)
JsonSchema.add_rule("additionalProperties")
JsonSchema.add_rule("minProperties", validate=containers.validate_min_properties)
JsonSchema.add_rule("maxProperties", validate=containers.validate_max_properties)
JsonSchema.add_rule("required", validate=containers.validate_required)

# Array rules

JsonSchema.add_rule("items", validate=composition.validate_items)
JsonSchema.add_rule("minItems", validate=containers.validate_min_items)
JsonSchema.add_rule("maxItems", validate=containers.validate_max_items)
JsonSchema.add_rule("uniqueItems", validate=containers.validate_unique_items)
