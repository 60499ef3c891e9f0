"""Property evaluator — every rule for one property, no short-circuit."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from rulefold.domain.outcome import Invalid, Outcome, Valid
from rulefold.domain.rules import PropertyFailure, Rule
from rulefold.domain.selectors import Selector, property_for

type Evaluator[A] = Callable[[A], Outcome[A]]


def _collect_failures[B](
    name: str,
    value: B,
    rules: tuple[Rule[B], ...],
) -> list[PropertyFailure]:
    return [PropertyFailure(name, rule.message) for rule in rules if not rule.check(value)]


def property_evaluator[A, B](
    name: str,
    accessor: Callable[[A], B],
    rules: Iterable[Rule[B]],
) -> Evaluator[A]:
    """Build an evaluator for the property *name* read by *accessor*.

    Each rule receives the accessed value in declaration order. Every failing
    rule contributes its message, so ``Invalid`` lists them in that order.
    """
    selector = Selector(name, accessor)
    frozen_rules = tuple(rules)

    def evaluate(entity: A) -> Outcome[A]:
        if not frozen_rules:
            return Valid(entity)
        failures = _collect_failures(selector.name, selector.accessor(entity), frozen_rules)
        if not failures:
            return Valid(entity)
        return Invalid({selector.name: [f.message for f in failures]})

    evaluate.__qualname__ = f"rule_for({selector.name})"
    return evaluate


def rule_for[A](
    selector: Selector | str | tuple[str, Callable[[A], Any]],
    rules: Iterable[Rule[Any]],
) -> Evaluator[A]:
    """Resolve *selector* now and build a :func:`property_evaluator` for it.

    Usage::

        check_bar = rule_for("bar", [not_empty, min_length(5)])
        check_bar(Foo(bar=""))
        # Invalid({'bar': ('Value cannot be empty', 'Value is too short. ...')})
    """
    resolved = property_for(selector)
    return property_evaluator(resolved.name, resolved.accessor, rules)
