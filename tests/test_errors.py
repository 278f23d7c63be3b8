"""Tests for tenor.core.errors — error value hierarchy."""

from __future__ import annotations

import dataclasses
import json

import pytest

from tenor.core.errors import (
    CalculationError,
    FieldViolation,
    ParseError,
    ScheduleError,
    TenorError,
    TypeMismatchError,
    UnknownPropertyError,
    UnsupportedOperationError,
    ValidationError,
)
from tenor.core.types import UtcDatetime


def _ts() -> UtcDatetime:
    return UtcDatetime.now()


class TestTenorError:
    def test_is_frozen(self) -> None:
        err = TenorError(message="m", code="C", timestamp=_ts(), source="s")
        with pytest.raises(dataclasses.FrozenInstanceError):
            err.message = "changed"  # type: ignore[misc]

    def test_to_dict_keys(self) -> None:
        d = TenorError(message="m", code="C", timestamp=_ts(), source="s").to_dict()
        assert set(d) == {"message", "code", "timestamp", "source"}

    def test_with_context_preserves_subclass(self) -> None:
        err = UnknownPropertyError(
            message="unknown", code="C", timestamp=_ts(), source="s",
            bean_name="Leg", property_name="x",
        )
        ctx = err.with_context("reading leg")
        assert isinstance(ctx, UnknownPropertyError)
        assert ctx.message == "reading leg: unknown"
        assert ctx.property_name == "x"


class TestSubclassDicts:
    def test_validation_error(self) -> None:
        err = ValidationError(
            message="m", code="C", timestamp=_ts(), source="s",
            fields=(FieldViolation("Leg.calculation", "must not be None", "None"),),
            missing_field="calculation",
        )
        d = err.to_dict()
        assert d["missing_field"] == "calculation"
        assert d["fields"] == [{
            "path": "Leg.calculation",
            "constraint": "must not be None",
            "actual_value": "None",
        }]
        json.dumps(d)

    def test_type_mismatch(self) -> None:
        d = TypeMismatchError(
            message="m", code="C", timestamp=_ts(), source="s",
            property_name="p", expected="Period", actual="str",
        ).to_dict()
        assert (d["expected"], d["actual"]) == ("Period", "str")

    def test_unsupported_operation(self) -> None:
        d = UnsupportedOperationError(
            message="m", code="C", timestamp=_ts(), source="s",
            operation="set", target="Leg",
        ).to_dict()
        assert d["operation"] == "set"

    def test_parse_error(self) -> None:
        d = ParseError(
            message="m", code="C", timestamp=_ts(), source="s",
            property_name="frequency", text="3Q", reason="bad",
        ).to_dict()
        assert d["text"] == "3Q"
        assert d["property_name"] == "frequency"

    @pytest.mark.parametrize("cls", [ScheduleError, CalculationError])
    def test_collaborator_errors(self, cls: type[ScheduleError] | type[CalculationError]) -> None:
        d = cls(message="m", code="C", timestamp=_ts(), source="s", reason="r").to_dict()
        assert d["reason"] == "r"
        assert isinstance(cls(message="m", code="C", timestamp=_ts(), source="s", reason="r"),
                          TenorError)
