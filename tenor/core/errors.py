"""Error values returned inside Err.

Every error is a frozen dataclass that can be matched, compared and
serialized. TenorError is the base; the subclasses are @final.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import final

from tenor.core.types import UtcDatetime


@dataclass(frozen=True, slots=True)
class TenorError:
    """Base error value. Not @final: the failure kinds subclass it."""

    message: str
    code: str
    timestamp: UtcDatetime
    source: str  # "module.function" that produced this error

    def with_context(self, context: str) -> TenorError:
        """Return a copy with context prepended to message."""
        return replace(self, message=f"{context}: {self.message}")

    def to_dict(self) -> dict[str, object]:
        return {
            "message": self.message,
            "code": self.code,
            "timestamp": self.timestamp.value.isoformat(),
            "source": self.source,
        }


@final
@dataclass(frozen=True, slots=True)
class FieldViolation:
    """Describes a single property validation failure."""

    path: str  # e.g. "OvernightRateSwapLeg.calculation"
    constraint: str  # e.g. "must not be None"
    actual_value: str


@final
@dataclass(frozen=True, slots=True)
class ValidationError(TenorError):
    """A bean could not be built from the staged property values."""

    fields: tuple[FieldViolation, ...]
    missing_field: str | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            **TenorError.to_dict(self),
            "fields": [
                {"path": f.path, "constraint": f.constraint, "actual_value": f.actual_value}
                for f in self.fields
            ],
            "missing_field": self.missing_field,
        }


@final
@dataclass(frozen=True, slots=True)
class UnknownPropertyError(TenorError):
    """A property name is not declared by the bean type."""

    bean_name: str
    property_name: str

    def to_dict(self) -> dict[str, object]:
        return {
            **TenorError.to_dict(self),
            "bean_name": self.bean_name,
            "property_name": self.property_name,
        }


@final
@dataclass(frozen=True, slots=True)
class TypeMismatchError(TenorError):
    """A value does not match the declared type of a property."""

    property_name: str
    expected: str
    actual: str

    def to_dict(self) -> dict[str, object]:
        return {
            **TenorError.to_dict(self),
            "property_name": self.property_name,
            "expected": self.expected,
            "actual": self.actual,
        }


@final
@dataclass(frozen=True, slots=True)
class UnsupportedOperationError(TenorError):
    """Operation not permitted on the target, e.g. writing to a built bean."""

    operation: str
    target: str

    def to_dict(self) -> dict[str, object]:
        return {**TenorError.to_dict(self), "operation": self.operation, "target": self.target}


@final
@dataclass(frozen=True, slots=True)
class ParseError(TenorError):
    """Text could not be converted to the declared type of a property."""

    property_name: str
    text: str
    reason: str

    def to_dict(self) -> dict[str, object]:
        return {
            **TenorError.to_dict(self),
            "property_name": self.property_name,
            "text": self.text,
            "reason": self.reason,
        }


@final
@dataclass(frozen=True, slots=True)
class ScheduleError(TenorError):
    """A periodic schedule could not be materialized into dates."""

    reason: str

    def to_dict(self) -> dict[str, object]:
        return {**TenorError.to_dict(self), "reason": self.reason}


@final
@dataclass(frozen=True, slots=True)
class CalculationError(TenorError):
    """Accrual or payment periods could not be derived."""

    reason: str

    def to_dict(self) -> dict[str, object]:
        return {**TenorError.to_dict(self), "reason": self.reason}
