"""Shared pytest fixtures and sample entities for rulefold tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from dataclasses import dataclass

import pytest

from rulefold.engine.tracing import disable_failure_tracing


@dataclass(frozen=True)
class Foo:
    Bar: str


@dataclass(frozen=True)
class Bar:
    Foo: Foo
    Baz: str


@dataclass(frozen=True)
class FooBar:
    Bar: str
    Baz: str


@dataclass(frozen=True)
class Wrapper:
    Value: str


@dataclass(frozen=True)
class Holder:
    Bar: Wrapper


@pytest.fixture(autouse=True)
def _reset_tracing() -> Generator[None]:
    """Keep failure tracing off between tests."""
    yield
    disable_failure_tracing()


@pytest.fixture
def package_logger() -> Generator[logging.Logger]:
    """The ``rulefold`` logger, with its handlers, level and propagation restored afterwards."""
    logger = logging.getLogger("rulefold")
    original_handlers = logger.handlers[:]
    original_level = logger.level
    original_propagate = logger.propagate
    yield logger
    for handler in logger.handlers:
        if handler not in original_handlers:
            handler.close()
    logger.handlers = original_handlers
    logger.setLevel(original_level)
    logger.propagate = original_propagate
