"""Property selectors — the (accessor, name) pair every evaluator needs.

A selector turns "which property?" into a pure accessor function plus the
stable name used as the error-map key. Selectors are resolved when a
validator is defined, so a malformed one fails before any entity is seen.
"""

from __future__ import annotations

import keyword
import operator
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any

from rulefold.errors import SelectorError


@dataclass(frozen=True)
class Selector:
    """Resolved property selector.

    Attributes:
        name: Error-map key for failures on this property.
        accessor: Pure function from entity to property value.
    """

    name: str
    accessor: Callable[[Any], Any]

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            msg = f"Selector name must be a non-empty string, got {self.name!r}"
            raise SelectorError(msg)
        if not callable(self.accessor):
            msg = f"Accessor for {self.name!r} is not callable: {self.accessor!r}"
            raise SelectorError(msg)

    def __call__(self, entity: Any) -> Any:
        return self.accessor(entity)


def attr(name: str) -> Selector:
    """Select a single attribute by name (``attr("bar")`` reads ``entity.bar``).

    Dotted paths are rejected: nest a rule set with ``rule_set_for`` instead
    so failures get re-keyed per level.
    """
    if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
        msg = (
            "Ensure that the selector names a single attribute "
            f"(e.g. 'bar' for entity.bar). Found: {name!r}"
        )
        raise SelectorError(msg)
    return Selector(name, operator.attrgetter(name))


def item(key: Hashable, name: str | None = None) -> Selector:
    """Select ``entity[key]`` from a mapping entity.

    *name* overrides the error-map key; it defaults to ``str(key)``.
    """
    label = str(key) if name is None else name
    return Selector(label, operator.itemgetter(key))


def property_for(selector: Selector | str | tuple[str, Callable[[Any], Any]]) -> Selector:
    """Resolve any accepted selector form into a :class:`Selector`.

    Accepts a ready :class:`Selector`, an attribute name, or an explicit
    ``(name, accessor)`` pair. Raises :class:`SelectorError` otherwise.
    """
    if isinstance(selector, Selector):
        return selector
    if isinstance(selector, str):
        return attr(selector)
    if isinstance(selector, tuple) and len(selector) == 2:
        name, accessor = selector
        return Selector(name, accessor)
    msg = (
        "Ensure that the selector is an attribute name, a (name, accessor) pair, "
        f"or a Selector. Found: {selector!r}"
    )
    raise SelectorError(msg)
