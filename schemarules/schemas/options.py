"""Per-flavor validator options."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ValidatorOptions(BaseModel):
    """Options recognised by the field runtime.

    strict: unregistered schema keys raise ``UnknownRuleError`` instead of
        being ignored.
    check_schema: run the Draft 4 meta-schema check on the root schema before
        validating.
    """
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    strict: bool = False
    check_schema: bool = False

    def merged(self, **overrides) -> ValidatorOptions:
        """Shallow merge of ``overrides`` over these options."""
        return ValidatorOptions(**{**self.model_dump(), **overrides})
