"""
Validator flavors.

A flavor is a ``Validator`` subclass. Defining one gives it its own empty
rule registry and its own copy of the base options, so rules added to one
flavor never leak into another:

    class Strict(Validator):
        pass

    Strict.add_rule("even", validate=lambda accept, value, field: value % 2 == 0)
    report = Strict.validate(4, {"even": True})
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Mapping

from schemarules.config import settings
from schemarules.engine.errors import InvalidSchemaError
from schemarules.engine.field import MISSING, Field
from schemarules.engine.registry import FilterFn, RuleDescriptor, RuleRegistry, ValidateFn
from schemarules.schemas.options import ValidatorOptions
from schemarules.schemas.report import ValidationReport
from schemarules.services.metaschema import schema_errors

logger = logging.getLogger(__name__)


def field_property(rule_name: str, default: Any = None) -> Callable[[Field], Any]:
    """Accessor reading a sibling rule's argument from a field's resolved rules."""

    def accessor(field: Field) -> Any:
        return field.rules.get(rule_name, default)

    accessor.__name__ = f"field_property_{rule_name}"
    return accessor


class Validator:
    rules: RuleRegistry = RuleRegistry("Validator")
    options: ValidatorOptions = ValidatorOptions(
        strict=settings.STRICT_RULES,
        check_schema=settings.CHECK_SCHEMA,
    )

    field_property = staticmethod(field_property)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.rules = RuleRegistry(cls.__name__)
        cls.options = Validator.options.model_copy()

    def __init__(self, **overrides: Any):
        self.options = type(self).options.merged(**overrides)

    @classmethod
    def add_rule(
        cls,
        name: str,
        descriptor: RuleDescriptor | None = None,
        *,
        validate: ValidateFn | None = None,
        filter: FilterFn | None = None,
    ) -> RuleDescriptor:
        if descriptor is None:
            descriptor = RuleDescriptor(validate=validate, filter=filter)
        elif validate is not None or filter is not None:
            raise TypeError("Pass either a descriptor or validate/filter callables, not both")
        cls.rules.add(name, descriptor)
        return descriptor

    @classmethod
    def validate(cls, value: Any = MISSING, schema: Mapping[str, Any] | None = None, **overrides: Any) -> ValidationReport:
        """Validate ``value`` with a one-off instance of this flavor."""
        return cls(**overrides).run(value, schema if schema is not None else {})

    def run(self, value: Any = MISSING, schema: Mapping[str, Any] | None = None) -> ValidationReport:
        return asyncio.run(self.arun(value, schema))

    async def arun(self, value: Any = MISSING, schema: Mapping[str, Any] | None = None) -> ValidationReport:
        schema = schema if schema is not None else {}
        if self.options.check_schema:
            errors = schema_errors(schema)
            if errors:
                raise InvalidSchemaError(errors)

        root = Field(type(self).rules, value, schema, options=self.options)
        result = await root.validate()
        logger.debug(
            "%s: validation finished with %d issue(s)", type(self).__name__, len(result.issues)
        )
        return ValidationReport(valid=result.valid, value=result.value, issues=result.issues)
