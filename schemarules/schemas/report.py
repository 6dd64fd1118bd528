"""Pydantic models for validation issues and reports."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Issues
# ---------------------------------------------------------------------------

class Issue(BaseModel):
    """A single failed rule, attributed to the path of the value it checked."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    path: str = ""
    rule: str
    accept: Any = None

    @property
    def message(self) -> str:
        where = self.path or "<root>"
        if self.accept is None:
            return f"{where}: failed '{self.rule}'"
        return f"{where}: failed '{self.rule}' (expected {self.accept!r})"


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------

class ValidationReport(BaseModel):
    """Outcome of validating one value against one schema.

    ``value`` is the normalized copy of the input. When ``valid`` is false it
    holds whatever normalization completed before the first failure.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    valid: bool
    value: Any = None
    issues: list[Issue] = Field(default_factory=list)

    def messages(self) -> list[str]:
        return [issue.message for issue in self.issues]
