"""Tests for the Validator adapter."""

from __future__ import annotations

import pytest

from rulefold.domain.outcome import Invalid, Outcome, Valid
from rulefold.engine.evaluator import rule_for
from rulefold.engine.ruleset import rule_set
from rulefold.engine.validator import DefaultValidator, Validator, as_callable, to_validator
from rulefold.rules.strings import not_empty
from tests.conftest import Foo


class TestToValidator:
    def test_rule_set_to_validator_is_valid(self) -> None:
        foo = Foo(Bar="Hello, World!")
        validator = to_validator(rule_set([rule_for("Bar", [not_empty])]))
        match validator.validate(foo):
            case Valid(value):
                assert value == foo
            case Invalid():
                pytest.fail("Expected success")

    def test_passes_failures_through(self) -> None:
        validator = to_validator(rule_set([rule_for("Bar", [not_empty])]))
        assert validator.validate(Foo(Bar="")) == Invalid({"Bar": ["Value cannot be empty"]})

    def test_satisfies_protocol(self) -> None:
        validator = to_validator(rule_for("Bar", [not_empty]))
        assert isinstance(validator, Validator)
        assert isinstance(validator, DefaultValidator)

    def test_is_callable_inside_rule_set(self) -> None:
        inner = to_validator(rule_for("Bar", [not_empty]))
        assert rule_set([inner])(Foo(Bar="")).is_invalid

    def test_rejects_non_callable(self) -> None:
        with pytest.raises(TypeError, match="validation function"):
            to_validator(42)  # type: ignore[arg-type]


class _ProtocolOnly:
    """Implements ``validate`` without being callable."""

    def validate(self, entity: Foo) -> Outcome[Foo]:
        return Valid(entity)


class TestAsCallable:
    def test_function_returned_unchanged(self) -> None:
        fn = rule_for("Bar", [not_empty])
        assert as_callable(fn) is fn

    def test_protocol_object_uses_validate(self) -> None:
        foo = Foo(Bar="")
        assert as_callable(_ProtocolOnly())(foo) == Valid(foo)

    def test_rule_set_accepts_protocol_object(self) -> None:
        foo = Foo(Bar="")
        assert rule_set([_ProtocolOnly()])(foo) == Valid(foo)

    def test_rejects_other_objects(self) -> None:
        with pytest.raises(TypeError):
            as_callable(object())  # type: ignore[arg-type]
