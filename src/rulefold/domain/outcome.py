"""Outcome — the tagged result of running a validator.

An outcome is exactly one of two variants:
- ``Valid(value)``: the entity passed every rule; ``value`` is the entity
  itself, never a copy.
- ``Invalid(errors)``: at least one rule failed; ``errors`` maps property
  names (dotted paths for nested properties) to the ordered messages of
  every failing rule.

INVARIANT: A key in ``Invalid.errors`` never maps to an empty message tuple.

Known quirk: ``filter`` and ``from_optional`` produce ``Invalid({})``, an
error map with no keys. The validation engine itself never builds one.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal

type ErrorMap = Mapping[str, tuple[str, ...]]


def _freeze_errors(errors: Mapping[str, Iterable[str]]) -> ErrorMap:
    frozen: dict[str, tuple[str, ...]] = {}
    for key, messages in errors.items():
        if isinstance(messages, str):
            msg = f"Messages for {key!r} must be a sequence of strings, not a string"
            raise TypeError(msg)
        values = tuple(messages)
        if not values:
            msg = f"Property {key!r} has an empty message list"
            raise ValueError(msg)
        frozen[key] = values
    return MappingProxyType(frozen)


def merge_errors(left: ErrorMap, right: ErrorMap) -> ErrorMap:
    """Union two error maps, concatenating messages for shared keys.

    Messages from *left* come first. Keys keep first-seen order, so every
    key of *left* precedes the keys only *right* has.

    Examples:
        >>> dict(merge_errors({"a": ("x",)}, {"a": ("y",), "b": ("z",)}))
        {'a': ('x', 'y'), 'b': ('z',)}
    """
    if not right:
        return left
    if not left:
        return right
    merged: dict[str, tuple[str, ...]] = dict(left)
    for key, messages in right.items():
        merged[key] = merged.get(key, ()) + messages
    return MappingProxyType(merged)


@dataclass(frozen=True)
class Valid[T]:
    """Successful outcome carrying the validated entity unchanged."""

    value: T

    @property
    def is_valid(self) -> Literal[True]:
        return True

    @property
    def is_invalid(self) -> Literal[False]:
        return False

    def __bool__(self) -> bool:
        return True

    def map[U](self, f: Callable[[T], U]) -> Valid[U]:
        return Valid(f(self.value))

    def bind[U](self, f: Callable[[T], Outcome[U]]) -> Outcome[U]:
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Outcome[T]:
        """Keep this outcome when *predicate* holds, else ``Invalid({})``."""
        if predicate(self.value):
            return self
        return Invalid({})

    def iterate(self, f: Callable[[T], Any]) -> None:
        f(self.value)

    def to_optional(self) -> T | None:
        return self.value

    def to_pair(self) -> tuple[T, None]:
        return self.value, None

    def to_list(self) -> list[T]:
        return [self.value]

    def to_tuple(self) -> tuple[T]:
        return (self.value,)

    def default_value(self, default: T) -> T:
        return self.value

    def default_with(self, f: Callable[[ErrorMap], T]) -> T:
        return self.value

    def or_else(self, other: Outcome[T]) -> Outcome[T]:
        return self

    def or_else_with(self, f: Callable[[ErrorMap], Outcome[T]]) -> Outcome[T]:
        return self

    def fold[S](self, folder: Callable[[S, T], S], state: S) -> S:
        return folder(state, self.value)

    def fold_back[S](self, folder: Callable[[T, S], S], state: S) -> S:
        return folder(self.value, state)

    def exists(self, predicate: Callable[[T], bool]) -> bool:
        return bool(predicate(self.value))

    def for_all(self, predicate: Callable[[T], bool]) -> bool:
        """Same as :meth:`exists`, including ``False`` for ``Invalid``."""
        return self.exists(predicate)

    def contains(self, value: object) -> bool:
        return bool(self.value == value)

    def flatten(self) -> Outcome[Any]:
        """Unwrap ``Valid(Valid(x))`` / ``Valid(Invalid(e))`` one level."""
        if isinstance(self.value, (Valid, Invalid)):
            return self.value
        return self

    def count(self) -> int:
        return 1


@dataclass(frozen=True, eq=True, repr=False)
class Invalid:
    """Failed outcome carrying per-property failure messages.

    Attributes:
        errors: Read-only, insertion-ordered mapping of property name to
            the tuple of failure messages for that property.
    """

    errors: ErrorMap = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", _freeze_errors(self.errors))

    def __hash__(self) -> int:
        return hash(tuple(self.errors.items()))

    def __repr__(self) -> str:
        return f"Invalid({dict(self.errors)!r})"

    @property
    def is_valid(self) -> Literal[False]:
        return False

    @property
    def is_invalid(self) -> Literal[True]:
        return True

    def __bool__(self) -> bool:
        return False

    def merge(self, other: Invalid) -> Invalid:
        """Combine with *other*; this outcome's messages come first."""
        return Invalid(merge_errors(self.errors, other.errors))

    def map(self, f: Callable[[Any], Any]) -> Invalid:
        return self

    def bind(self, f: Callable[[Any], Outcome[Any]]) -> Invalid:
        return self

    def filter(self, predicate: Callable[[Any], bool]) -> Invalid:
        return self

    def iterate(self, f: Callable[[Any], Any]) -> None:
        return None

    def to_optional(self) -> None:
        return None

    def to_pair(self) -> tuple[None, ErrorMap]:
        return None, self.errors

    def to_list(self) -> list[Any]:
        return []

    def to_tuple(self) -> tuple[()]:
        return ()

    def default_value[T](self, default: T) -> T:
        return default

    def default_with[T](self, f: Callable[[ErrorMap], T]) -> T:
        return f(self.errors)

    def or_else[T](self, other: Outcome[T]) -> Outcome[T]:
        return other

    def or_else_with[T](self, f: Callable[[ErrorMap], Outcome[T]]) -> Outcome[T]:
        return f(self.errors)

    def fold[S](self, folder: Callable[[S, Any], S], state: S) -> S:
        return state

    def fold_back[S](self, folder: Callable[[Any, S], S], state: S) -> S:
        return state

    def exists(self, predicate: Callable[[Any], bool]) -> bool:
        return False

    def for_all(self, predicate: Callable[[Any], bool]) -> bool:
        return False

    def contains(self, value: object) -> bool:
        return False

    def flatten(self) -> Invalid:
        return self

    def count(self) -> int:
        return 0


type Outcome[T] = Valid[T] | Invalid


def from_optional[T](value: T | None) -> Outcome[T]:
    """``None`` becomes ``Invalid({})``; anything else is ``Valid``."""
    if value is None:
        return Invalid({})
    return Valid(value)


def from_pair[T](pair: tuple[T | None, Mapping[str, Iterable[str]] | None]) -> Outcome[T]:
    """Inverse of ``to_pair``: a non-``None`` error map wins over the value."""
    value, errors = pair
    if errors is not None:
        return Invalid(errors)
    return Valid(value)  # type: ignore[arg-type]
