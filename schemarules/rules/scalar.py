"""
Leaf rules for scalar values: type, default, enum, strings and numbers.

Every rule takes ``(accept, value, field)``: the argument declared in the
schema, the value under test and the field running it. Returning ``None``
means the rule does not apply to this shape of value.
"""

from __future__ import annotations

import copy
import math
import re
from collections.abc import Mapping
from numbers import Real
from typing import Any

from schemarules.engine.field import MISSING
from schemarules.engine.validator import field_property

_exclusive_minimum = field_property("exclusiveMinimum", False)
_exclusive_maximum = field_property("exclusiveMaximum", False)


# ---------------------------------------------------------------------------
# Value helpers
# ---------------------------------------------------------------------------

def is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    if not is_number(value):
        return False
    if isinstance(value, float):
        return math.isfinite(value) and value.is_integer()
    return value == int(value)


def strict_equals(a: Any, b: Any) -> bool:
    """Equality without coercion: bools are not numbers, containers compare by identity."""
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a is b
    if is_number(a) and is_number(b):
        return a == b
    if isinstance(a, (list, dict)) or isinstance(b, (list, dict)):
        return a is b
    return type(a) is type(b) and a == b


def string_form(value: Any) -> str:
    """Render a value the way it reads in a JSON document."""
    if value is None:
        return "null"
    if value is MISSING:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and is_integer(value):
        return str(int(value))
    return str(value)


_CATEGORIES = {
    "array": lambda value: isinstance(value, list),
    "object": lambda value: isinstance(value, Mapping),
    "null": lambda value: value is None,
    "integer": is_integer,
    "number": is_number,
    "string": lambda value: isinstance(value, str),
    "boolean": lambda value: isinstance(value, bool),
    "undefined": lambda value: value is MISSING,
}


def matches_type(name: str, value: Any) -> bool:
    check = _CATEGORIES.get(name)
    return check is not None and check(value)


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

def validate_type(accept, value, field):
    if isinstance(accept, (list, tuple)):
        return any(matches_type(name, value) for name in accept)
    return matches_type(accept, value)


def filter_default(accept, value, field):
    if value is MISSING:
        return copy.deepcopy(accept)
    return value


def validate_enum(accept, value, field):
    return any(strict_equals(option, value) for option in accept)


def validate_min_length(accept, value, field):
    return len(string_form(value)) >= accept


def validate_max_length(accept, value, field):
    return len(string_form(value)) <= accept


def validate_pattern(accept, value, field):
    if not isinstance(accept, re.Pattern):
        accept = re.compile(accept)
    return accept.search(string_form(value)) is not None


def validate_minimum(accept, value, field):
    if not is_number(value):
        return None
    if _exclusive_minimum(field):
        return value > accept
    return value >= accept


def validate_maximum(accept, value, field):
    if not is_number(value):
        return None
    if _exclusive_maximum(field):
        return value < accept
    return value <= accept


def validate_divisible_by(accept, value, field):
    # Only exact for integers and floats that hold integral values.
    if not is_number(value):
        return None
    if accept == 0:
        return False
    return value % accept == 0
