"""Failure tracing — optional DEBUG events for every failing property.

Near-zero overhead when disabled (single ContextVar.get per rule set call).
Enabled through :func:`rulefold.config.configure` or directly via
:func:`enable_failure_tracing`.

Only the outermost rule set of a validation call traces, so a failure
inside a nested rule set is reported once, under its dotted path.
"""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

import structlog

from rulefold.domain.outcome import Invalid

log = structlog.get_logger(__name__)

_tracing_enabled: ContextVar[bool] = ContextVar("_tracing_enabled", default=False)
_rule_set_depth: ContextVar[int] = ContextVar("_rule_set_depth", default=0)


def enable_failure_tracing() -> None:
    _tracing_enabled.set(True)


def disable_failure_tracing() -> None:
    _tracing_enabled.set(False)


def is_tracing() -> bool:
    return _tracing_enabled.get()


@contextmanager
def rule_set_scope() -> Generator[bool]:
    """Track rule set nesting; yields True only for the outermost scope.

    Yields False without touching the depth when tracing is disabled.
    """
    if not _tracing_enabled.get():
        yield False
        return

    depth = _rule_set_depth.get()
    token = _rule_set_depth.set(depth + 1)
    try:
        yield depth == 0
    finally:
        _rule_set_depth.reset(token)


def trace_failures(entity: Any, outcome: Invalid) -> None:
    """Emit one ``validation.failed`` event per failing property of *outcome*."""
    if not _tracing_enabled.get():
        return
    entity_type = type(entity).__name__
    for prop, messages in outcome.errors.items():
        log.debug(
            "validation.failed",
            entity=entity_type,
            property=prop,
            messages=list(messages),
        )
