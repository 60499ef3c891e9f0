"""Rule set — fold many evaluators into one outcome for an entity.

All evaluators run, even after the first failure. Their outcomes fold
left-to-right starting from ``Valid(entity)``; error maps merge by key with
messages from earlier-declared evaluators first.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from typing import Any

from rulefold.domain.outcome import Invalid, Outcome, Valid
from rulefold.engine.evaluator import Evaluator
from rulefold.engine.tracing import rule_set_scope, trace_failures
from rulefold.engine.validator import as_callable


def combine[A](acc: Outcome[A], outcome: Outcome[A]) -> Outcome[A]:
    """Fold step: any ``Invalid`` wins, two ``Invalid`` maps merge."""
    match acc, outcome:
        case Invalid() as left, Invalid() as right:
            return left.merge(right)
        case Invalid(), Valid():
            return acc
        case Valid(), Invalid():
            return outcome
        case _:
            return acc


def rule_set[A](evaluators: Iterable[Evaluator[A] | Any]) -> Evaluator[A]:
    """Build a validator that runs every evaluator against one entity.

    *evaluators* may mix property evaluators, nested binders, other rule
    sets, and :class:`~rulefold.engine.validator.Validator` objects.

    Usage::

        validate_bar = rule_set([
            rule_set_for("foo", validate_foo),
            rule_for("baz", [not_empty]),
        ])
    """
    steps = tuple(as_callable(e) for e in evaluators)

    def validate(entity: A) -> Outcome[A]:
        with rule_set_scope() as outermost:
            outcomes = [step(entity) for step in steps]
            result = reduce(combine, outcomes, Valid(entity))
        if outermost and isinstance(result, Invalid):
            trace_failures(entity, result)
        return result

    return validate
