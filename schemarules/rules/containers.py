"""Leaf rules over mappings and lists that do not recurse into children."""

from __future__ import annotations

from collections.abc import Mapping

from schemarules.rules.scalar import strict_equals


def validate_min_properties(accept, value, field):
    if not isinstance(value, Mapping):
        return None
    return len(value) >= accept


def validate_max_properties(accept, value, field):
    if not isinstance(value, Mapping):
        return None
    return len(value) <= accept


def validate_required(accept, value, field):
    """One issue per missing name, all reported in the same pass."""
    if not isinstance(value, Mapping):
        return None
    for name in accept:
        if name not in value:
            field.issue("required", path=name)
    return None


def validate_min_items(accept, value, field):
    if not isinstance(value, list):
        return None
    return len(value) >= accept


def validate_max_items(accept, value, field):
    if not isinstance(value, list):
        return None
    return len(value) <= accept


def validate_unique_items(accept, value, field):
    """One issue per repeated index; the first occurrence is never flagged."""
    if not accept or not isinstance(value, list):
        return None
    seen: list = []
    for index, item in enumerate(value):
        if any(strict_equals(item, other) for other in seen):
            field.issue("uniqueItems", path=index, accept=True)
        else:
            seen.append(item)
    return None
