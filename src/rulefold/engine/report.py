"""ValidationReport — serializable view of an outcome.

Outcomes hold arbitrary entities and are not meant to cross process
boundaries. A report keeps only what a remote caller needs: whether the
entity passed and the per-property messages.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from rulefold.domain.outcome import Invalid, Outcome


class ValidationReport(BaseModel):
    """Frozen, JSON-serializable summary of a validation outcome.

    Attributes:
        ok: Whether the entity passed every rule.
        errors: Property name (or dotted path) to failure messages.
        error_count: Total number of failure messages across properties.
    """

    model_config = {"frozen": True}

    ok: bool
    errors: dict[str, list[str]] = Field(default_factory=dict)
    error_count: int = 0


def build_report(outcome: Outcome[Any]) -> ValidationReport:
    """Summarize *outcome* as a :class:`ValidationReport`."""
    if isinstance(outcome, Invalid):
        errors = {key: list(messages) for key, messages in outcome.errors.items()}
        return ValidationReport(
            ok=False,
            errors=errors,
            error_count=sum(len(m) for m in errors.values()),
        )
    return ValidationReport(ok=True)
