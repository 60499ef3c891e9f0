"""Rule — one predicate paired with one failure message.

Rules carry no state. A predicate that raises propagates its exception
to whoever invoked the validator; nothing here catches it.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

DEFAULT_MESSAGE = "Validation failed"


@dataclass(frozen=True)
class Rule[T]:
    """An immutable ``(predicate, message)`` pair for a property value."""

    predicate: Callable[[T], bool]
    message: str = DEFAULT_MESSAGE

    def check(self, value: T) -> bool:
        return bool(self.predicate(value))


@dataclass(frozen=True)
class PropertyFailure:
    """One failing rule for one property, consumed by the evaluator fold."""

    property: str
    message: str


def make_rule[T](predicate: Callable[[T], bool], message: str | None = None) -> Rule[T]:
    """Build a :class:`Rule`; *message* defaults to ``"Validation failed"``.

    Examples:
        >>> make_rule(str.isdigit).message
        'Validation failed'
        >>> make_rule(str.isdigit, "Digits only").message
        'Digits only'
    """
    return Rule(predicate, DEFAULT_MESSAGE if message is None else message)
