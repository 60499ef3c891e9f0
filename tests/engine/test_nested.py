"""Tests for nested rule sets and error re-keying."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from rulefold.domain.outcome import Invalid, Valid
from rulefold.engine.evaluator import rule_for
from rulefold.engine.nested import rekey, rule_set_for
from rulefold.engine.ruleset import rule_set
from rulefold.engine.validator import to_validator
from rulefold.errors import SelectorError
from rulefold.rules.strings import max_length, not_empty
from tests.conftest import Bar, Foo, Holder, Wrapper


@dataclass(frozen=True)
class Outer:
    Foo: Bar


class TestRuleSetFor:
    def test_with_validator_for_and_rule(self) -> None:
        foo_validator = rule_set([rule_for("Bar", [max_length(5)])])
        bar_validator = rule_set(
            [
                rule_set_for("Foo", foo_validator),
                rule_for("Baz", [not_empty]),
            ]
        )
        result = bar_validator(Bar(Foo=Foo(Bar="Hello, World!"), Baz=""))
        assert isinstance(result, Invalid)
        assert len(result.errors["Baz"]) == 1
        assert len(result.errors["Foo.Bar"]) == 1

    def test_nested_and_sibling_failures(self) -> None:
        validator = rule_set(
            [
                rule_set_for("Foo", rule_set([rule_for("Bar", [not_empty])])),
                rule_for("Baz", [not_empty]),
            ]
        )
        result = validator(Bar(Foo=Foo(Bar=""), Baz=""))
        assert result == Invalid(
            {
                "Foo.Bar": ["Value cannot be empty"],
                "Baz": ["Value cannot be empty"],
            }
        )

    def test_single_nested_property(self) -> None:
        wrapper_validator = rule_set([rule_for("Value", [not_empty])])
        validator = rule_set([rule_set_for("Bar", wrapper_validator)])
        result = validator(Holder(Bar=Wrapper(Value="")))
        assert result == Invalid({"Bar.Value": ["Value cannot be empty"]})

    def test_valid_child_returns_parent(self) -> None:
        holder = Holder(Bar=Wrapper(Value="set"))
        evaluate = rule_set_for("Bar", rule_set([rule_for("Value", [not_empty])]))
        result = evaluate(holder)
        assert isinstance(result, Valid)
        assert result.value is holder

    def test_multi_level_paths(self) -> None:
        foo_validator = rule_set([rule_for("Bar", [not_empty])])
        bar_validator = rule_set([rule_set_for("Foo", foo_validator), rule_for("Baz", [not_empty])])
        outer_validator = rule_set([rule_set_for("Foo", bar_validator)])
        result = outer_validator(Outer(Foo=Bar(Foo=Foo(Bar=""), Baz="")))
        assert result == Invalid(
            {
                "Foo.Foo.Bar": ["Value cannot be empty"],
                "Foo.Baz": ["Value cannot be empty"],
            }
        )

    def test_accepts_validator_object(self) -> None:
        wrapper_validator = to_validator(rule_set([rule_for("Value", [not_empty])]))
        evaluate = rule_set_for("Bar", wrapper_validator)
        assert evaluate(Holder(Bar=Wrapper(Value=""))) == Invalid(
            {"Bar.Value": ["Value cannot be empty"]}
        )

    def test_bad_selector_fails_at_definition(self) -> None:
        with pytest.raises(SelectorError):
            rule_set_for(object(), rule_set([]))  # type: ignore[arg-type]

    def test_non_callable_validator_rejected(self) -> None:
        with pytest.raises(TypeError):
            rule_set_for("Bar", "not a validator")  # type: ignore[arg-type]


class TestRekey:
    def test_prefixes_every_key_in_order(self) -> None:
        result = rekey("Foo", {"Bar": ("a",), "Baz": ("b", "c")})
        assert result == {"Foo.Bar": ("a",), "Foo.Baz": ("b", "c")}
        assert list(result) == ["Foo.Bar", "Foo.Baz"]

    def test_empty_map(self) -> None:
        assert rekey("Foo", {}) == {}
