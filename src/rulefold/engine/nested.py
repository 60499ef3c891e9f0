"""Nested rule set binder — validate a sub-property with its own rule set.

Failures from the nested validator are re-keyed under the parent property,
so ``Bar`` failing inside ``Foo`` reports as ``"Foo.Bar"``. Deeper nesting
composes the same way (``"Foo.Bar.Baz"``).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from rulefold.domain.outcome import ErrorMap, Invalid, Outcome, Valid
from rulefold.domain.selectors import Selector, property_for
from rulefold.engine.validator import Validator, as_callable

PATH_SEPARATOR = "."


def rekey(prefix: str, errors: ErrorMap) -> dict[str, tuple[str, ...]]:
    """Prefix every key of *errors* with ``"{prefix}."``, keeping order.

    Examples:
        >>> rekey("Foo", {"Bar": ("empty",)})
        {'Foo.Bar': ('empty',)}
    """
    return {f"{prefix}{PATH_SEPARATOR}{key}": messages for key, messages in errors.items()}


def rule_set_for[A, B](
    selector: Selector | str | tuple[str, Callable[[A], B]],
    nested_validator: Callable[[B], Outcome[B]] | Validator[B],
) -> Callable[[A], Outcome[A]]:
    """Bind *nested_validator* to the property picked by *selector*.

    The returned evaluator yields ``Valid(entity)`` for the parent when the
    nested value is valid, and the re-keyed failures otherwise.
    """
    resolved = property_for(selector)
    validate_child = as_callable(nested_validator)

    def evaluate(entity: A) -> Outcome[A]:
        child: Outcome[Any] = validate_child(resolved.accessor(entity))
        if isinstance(child, Invalid):
            return Invalid(rekey(resolved.name, child.errors))
        return Valid(entity)

    evaluate.__qualname__ = f"rule_set_for({resolved.name})"
    return evaluate
