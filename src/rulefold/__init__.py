"""rulefold — declarative validation that reports every failing property.

Usage::

    from rulefold import rule_for, rule_set, rule_set_for
    from rulefold.rules.strings import max_length, not_empty

    validate_foo = rule_set([rule_for("bar", [max_length(5)])])
    validate_bar = rule_set([
        rule_set_for("foo", validate_foo),
        rule_for("baz", [not_empty]),
    ])
    validate_bar(bar)
    # Invalid({'foo.bar': ('Value is too long. Must be less than 5',),
    #          'baz': ('Value cannot be empty',)})
"""

from rulefold.domain.outcome import (
    ErrorMap,
    Invalid,
    Outcome,
    Valid,
    from_optional,
    from_pair,
    merge_errors,
)
from rulefold.domain.rules import DEFAULT_MESSAGE, PropertyFailure, Rule, make_rule
from rulefold.domain.selectors import Selector, attr, item, property_for
from rulefold.engine.evaluator import Evaluator, property_evaluator, rule_for
from rulefold.engine.nested import rekey, rule_set_for
from rulefold.engine.report import ValidationReport, build_report
from rulefold.engine.ruleset import rule_set
from rulefold.engine.validator import DefaultValidator, Validator, to_validator
from rulefold.errors import ConfigError, RulefoldError, SelectorError

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MESSAGE",
    "ConfigError",
    "DefaultValidator",
    "ErrorMap",
    "Evaluator",
    "Invalid",
    "Outcome",
    "PropertyFailure",
    "Rule",
    "RulefoldError",
    "Selector",
    "SelectorError",
    "Valid",
    "ValidationReport",
    "Validator",
    "attr",
    "build_report",
    "from_optional",
    "from_pair",
    "item",
    "make_rule",
    "merge_errors",
    "property_evaluator",
    "property_for",
    "rekey",
    "rule_for",
    "rule_set",
    "rule_set_for",
    "to_validator",
]
