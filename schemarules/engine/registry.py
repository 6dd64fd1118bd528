"""
Rule registry for a validator flavor.

A rule is a tagged pair of optional callables:

- ``validate(accept, value, field)`` returns ``True``/``False``, or ``None``
  when the value's shape does not apply to the rule;
- ``filter(accept, value, field)`` returns the (possibly substituted) value.

A rule with neither is a marker: its key is legal in schemas and readable by
sibling rules, but it never fires.

Registries are filled when a flavor is defined and must not be modified while
validations are running.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterator, Mapping

logger = logging.getLogger(__name__)

ValidateFn = Callable[[Any, Any, Any], "bool | None"]
FilterFn = Callable[[Any, Any, Any], Any]


class RuleKind(str, Enum):
    VALIDATOR = "validator"
    FILTER = "filter"
    BOTH = "both"
    MARKER = "marker"


@dataclass(frozen=True)
class RuleDescriptor:
    validate: ValidateFn | None = None
    filter: FilterFn | None = None

    def __post_init__(self):
        for attr in ("validate", "filter"):
            fn = getattr(self, attr)
            if fn is not None and not callable(fn):
                raise TypeError(f"Rule '{attr}' must be callable, got {type(fn).__name__}")

    @property
    def kind(self) -> RuleKind:
        if self.validate and self.filter:
            return RuleKind.BOTH
        if self.validate:
            return RuleKind.VALIDATOR
        if self.filter:
            return RuleKind.FILTER
        return RuleKind.MARKER


class RuleRegistry:
    """Ordered mapping of rule name to descriptor, owned by one flavor."""

    def __init__(self, flavor: str):
        self.flavor = flavor
        self._rules: dict[str, RuleDescriptor] = {}

    def add(self, name: str, descriptor: RuleDescriptor) -> RuleRegistry:
        if not name:
            raise ValueError("Rule name must be a non-empty string")
        if name in self._rules:
            logger.debug("Flavor '%s': replacing rule '%s'", self.flavor, name)
        # Re-registration keeps the original position in the run order.
        self._rules[name] = descriptor
        return self

    def get(self, name: str) -> RuleDescriptor | None:
        return self._rules.get(name)

    def __getitem__(self, name: str) -> RuleDescriptor:
        return self._rules[name]

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def names(self) -> list[str]:
        return list(self._rules)

    def resolve(self, schema: Mapping[str, Any]) -> dict[str, Any]:
        """Registered keys of ``schema`` with their arguments, in run order."""
        return {name: schema[name] for name in self._rules if name in schema}

    def unknown(self, schema: Mapping[str, Any]) -> list[str]:
        return [key for key in schema if key not in self._rules]
