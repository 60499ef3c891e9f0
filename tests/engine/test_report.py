"""Tests for ValidationReport serialization."""

import json

import pytest
from pydantic import ValidationError

from rulefold.domain.outcome import Invalid, Valid
from rulefold.engine.report import ValidationReport, build_report


class TestBuildReport:
    def test_valid(self) -> None:
        report = build_report(Valid("entity"))
        assert report.ok is True
        assert report.errors == {}
        assert report.error_count == 0

    def test_invalid(self) -> None:
        report = build_report(Invalid({"Bar": ["a", "b"], "Foo.Baz": ["c"]}))
        assert report.ok is False
        assert report.errors == {"Bar": ["a", "b"], "Foo.Baz": ["c"]}
        assert report.error_count == 3

    def test_filtered_invalid_has_no_keys(self) -> None:
        report = build_report(Valid(1).filter(lambda _: False))
        assert report.ok is False
        assert report.errors == {}

    def test_json_serialization(self) -> None:
        raw = build_report(Invalid({"Bar": ["a"]})).model_dump_json()
        parsed = json.loads(raw)
        assert parsed == {"ok": False, "errors": {"Bar": ["a"]}, "error_count": 1}

    def test_frozen(self) -> None:
        report = ValidationReport(ok=True)
        with pytest.raises(ValidationError):
            report.ok = False  # type: ignore[misc]
