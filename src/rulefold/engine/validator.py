"""Validator adapter — a single-method object around a validation function.

For callers that want an interface instead of a bare callable (dependency
injection containers, typed service constructors)::

    foo_validator = to_validator(rule_set([rule_for("bar", [not_empty])]))
    foo_validator.validate(Foo(bar="Hello, World!"))
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from rulefold.domain.outcome import Outcome


@runtime_checkable
class Validator[A](Protocol):
    """Protocol for anything exposing ``validate(entity) -> Outcome``."""

    def validate(self, entity: A) -> Outcome[A]:
        """Validate *entity* and return its outcome."""
        ...


class DefaultValidator[A]:
    """Pass-through :class:`Validator` over a validation function.

    Also callable, so it can sit directly inside ``rule_set`` or
    ``rule_set_for``.
    """

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[A], Outcome[A]]) -> None:
        if not callable(fn):
            msg = f"Expected a validation function, got {type(fn).__name__}"
            raise TypeError(msg)
        self._fn = fn

    def validate(self, entity: A) -> Outcome[A]:
        return self._fn(entity)

    def __call__(self, entity: A) -> Outcome[A]:
        return self._fn(entity)

    def __repr__(self) -> str:
        return f"DefaultValidator({self._fn!r})"


def to_validator[A](fn: Callable[[A], Outcome[A]]) -> Validator[A]:
    """Wrap *fn* as a :class:`Validator`."""
    return DefaultValidator(fn)


def as_callable(validator: Callable[[Any], Any] | Validator[Any]) -> Callable[[Any], Any]:
    """Return a plain callable for a function or a ``Validator`` object."""
    if callable(validator):
        return validator
    if isinstance(validator, Validator):
        return validator.validate
    msg = f"Expected a validation function or Validator, got {type(validator).__name__}"
    raise TypeError(msg)
