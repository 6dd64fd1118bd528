"""
Composition rules: ``properties`` and ``items``.

Both decompose the field's value into children, validate every child as an
independent field with its own full rule pipeline, and defer the parent's
outcome until the join settles. Results are written back by property name or
by index, never by completion order.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Hashable

from schemarules.engine.field import Field, FieldResult
from schemarules.engine.join import gather_fields
from schemarules.engine.validator import field_property

logger = logging.getLogger(__name__)

_additional_properties = field_property("additionalProperties", False)


def validate_properties(accept, value, field: Field):
    if not field.is_object():
        return None

    async def join() -> FieldResult:
        # Declared names first, then keys only the value carries.
        names = list(accept)
        names.extend(key for key in value if key not in accept)
        additional = _additional_properties(field)

        immediate: dict[Hashable, Any] = {}
        children: dict[Hashable, Field] = {}

        for name in names:
            if name not in accept:
                if additional is True:
                    immediate[name] = value[name]
                    continue
                if not additional:
                    continue
                child_schema = additional
            elif name not in value:
                if "default" in accept[name]:
                    immediate[name] = copy.deepcopy(accept[name]["default"])
                continue
            else:
                child_schema = accept[name]
            children[name] = field.child(name, value[name], child_schema, value)

        outcome = await gather_fields(children)
        if not outcome.ok:
            return FieldResult(value=value, issues=outcome.failure.issues)

        result = {}
        for name in names:
            if name in immediate:
                result[name] = immediate[name]
            elif name in outcome.values:
                result[name] = outcome.values[name]
        return FieldResult(value=result)

    field.defer(join)
    return None


def validate_items(accept, value, field: Field):
    if not isinstance(value, list):
        return None
    if isinstance(accept, list):
        logger.debug("Per-index 'items' at '%s' is not supported, skipping", field.path_string)
        return None

    async def join() -> FieldResult:
        children = {
            index: field.child(index, item, accept, value)
            for index, item in enumerate(value)
        }
        outcome = await gather_fields(children)
        if not outcome.ok:
            return FieldResult(value=value, issues=outcome.failure.issues)
        return FieldResult(value=[outcome.values[index] for index in range(len(value))])

    field.defer(join)
    return None
