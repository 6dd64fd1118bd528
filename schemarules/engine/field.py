"""
Field runtime: one value checked against one schema node.

A field runs its resolved rules in registration order. Filters shape the
value first, then validators check it. A rule that needs to recurse calls
``field.defer(continuation)``; the field's outcome is then decided by
awaiting the continuation, which usually fans out to child fields.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from typing import Any, Awaitable, Callable, Hashable, Mapping

from schemarules.engine.errors import UnknownRuleError
from schemarules.engine.registry import RuleRegistry
from schemarules.schemas.options import ValidatorOptions
from schemarules.schemas.report import Issue

logger = logging.getLogger(__name__)


class _Missing(Enum):
    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"


# An absent value, as opposed to an explicit None.
MISSING = _Missing.MISSING


class FieldStatus(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    DEFERRED = "deferred"
    VALID = "valid"
    INVALID = "invalid"


@dataclass
class FieldResult:
    """Final value of a field plus every issue reported for it and below it."""

    value: Any
    issues: list[Issue] = dataclass_field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.issues


Continuation = Callable[[], Awaitable[FieldResult]]


def join_path(segments: tuple[Hashable, ...]) -> str:
    return ".".join(str(segment) for segment in segments)


class Field:
    def __init__(
        self,
        registry: RuleRegistry,
        value: Any,
        schema: Mapping[str, Any],
        *,
        options: ValidatorOptions,
        path: tuple[Hashable, ...] = (),
        parent: Any = None,
    ):
        if not isinstance(schema, Mapping):
            raise TypeError(
                f"Schema node at '{join_path(path) or '<root>'}' must be a mapping, "
                f"got {type(schema).__name__}"
            )
        self.registry = registry
        self.options = options
        self.value = value
        self.schema = schema
        self.path = path
        self.parent = parent
        self.rules: dict[str, Any] = registry.resolve(schema)
        self.issues: list[Issue] = []
        self.status = FieldStatus.PENDING
        self._continuation: Continuation | None = None

    def __repr__(self) -> str:
        return f"<Field '{self.path_string or '<root>'}' {self.status.value}>"

    @property
    def path_string(self) -> str:
        return join_path(self.path)

    # -- shape predicates -------------------------------------------------

    def is_object(self) -> bool:
        return isinstance(self.value, Mapping)

    def is_array(self) -> bool:
        return isinstance(self.value, list)

    # -- protocol used by rules -------------------------------------------

    def issue(self, rule: str, path: Hashable | None = None, accept: Any = None) -> Issue:
        """Record a failed rule. ``path`` is a segment below this field."""
        segments = self.path if path is None else self.path + (path,)
        entry = Issue(path=join_path(segments), rule=rule, accept=accept)
        self.issues.append(entry)
        return entry

    def defer(self, continuation: Continuation) -> None:
        if self.status is not FieldStatus.RUNNING:
            raise RuntimeError(f"{self!r}: defer() is only allowed while rules are running")
        if self._continuation is not None:
            raise RuntimeError(f"{self!r}: only one rule per field may defer its outcome")
        self._continuation = continuation

    def child(self, segment: Hashable, value: Any, schema: Mapping[str, Any], parent_value: Any) -> Field:
        return Field(
            self.registry,
            value,
            schema,
            options=self.options,
            path=self.path + (segment,),
            parent=parent_value,
        )

    # -- pipeline ----------------------------------------------------------

    async def validate(self) -> FieldResult:
        if self.status is not FieldStatus.PENDING:
            raise RuntimeError(f"{self!r}: a field can only be validated once")

        unknown = self.registry.unknown(self.schema)
        if unknown:
            if self.options.strict:
                raise UnknownRuleError(self.path_string, unknown)
            logger.debug("Ignoring unregistered keys at '%s': %s", self.path_string, unknown)

        self.status = FieldStatus.RUNNING
        logger.debug("Validating '%s' with rules %s", self.path_string, list(self.rules))

        for name, accept in self.rules.items():
            rule = self.registry[name]
            if rule.filter is not None:
                self.value = rule.filter(accept, self.value, self)

        for name, accept in self.rules.items():
            rule = self.registry[name]
            if rule.validate is None:
                continue
            if rule.validate(accept, self.value, self) is False:
                self.issue(name, accept=accept)

        issues = list(self.issues)
        value = self.value

        if self._continuation is not None:
            self.status = FieldStatus.DEFERRED
            outcome = await self._continuation()
            issues.extend(outcome.issues)
            value = outcome.value

        self.status = FieldStatus.VALID if not issues else FieldStatus.INVALID
        if issues:
            logger.debug("'%s' failed with %d issue(s)", self.path_string, len(issues))
        return FieldResult(value=value, issues=issues)
