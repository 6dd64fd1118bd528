"""Exceptions for schema and programming defects.

Constraint violations are never raised; they are reported as ``Issue`` data.
"""

from __future__ import annotations


class UnknownRuleError(ValueError):
    """A schema node uses keys that are not registered for the flavor (strict mode)."""

    def __init__(self, path: str, keys: list[str]):
        self.path = path
        self.keys = keys
        super().__init__(f"Unknown schema keys at '{path or '<root>'}': {', '.join(keys)}")


class InvalidSchemaError(ValueError):
    """A schema failed the meta-schema check."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("Invalid schema: " + "; ".join(errors))
