"""Mutable staging for bean construction and copy-with-changes.

A builder holds its own slot storage. copy_of() snapshots every property
of an existing bean, so changing the builder never affects that bean, and
each build() returns a new independent instance. Builders are not
thread-safe; keep one per construction.
"""

from __future__ import annotations

import logging
from typing import Any, Self

from tenor.bean.meta import MetaBean, meta_bean
from tenor.bean.property import MetaProperty
from tenor.core.errors import (
    FieldViolation,
    ParseError,
    TypeMismatchError,
    UnknownPropertyError,
    ValidationError,
)
from tenor.core.result import Err, Ok
from tenor.core.types import UtcDatetime

logger = logging.getLogger(__name__)


class BeanBuilder[T]:
    """Builder for any bean type, driven by its MetaBean."""

    __slots__ = ("_meta", "_slots")

    def __init__(self, meta: MetaBean[T]) -> None:
        self._meta = meta
        self._slots: dict[str, Any] = {}

    @classmethod
    def copy_of(cls, bean: T) -> Self:
        """A builder pre-populated with every property of bean."""
        builder = cls(meta_bean(type(bean)))
        for prop in builder._meta.meta_properties():
            value = prop.get(bean)
            if value is not None:
                builder._slots[prop.name] = value
        return builder

    @property
    def meta(self) -> MetaBean[T]:
        return self._meta

    # --- reads ---

    def is_set(self, name: str) -> bool:
        return name in self._slots

    def get(self, name: str) -> Ok[Any] | Err[UnknownPropertyError]:
        """The staged value, or None if the slot is unset."""
        match self._meta.resolve(name):
            case Err(e):
                return Err(e)
            case Ok(_):
                return Ok(self._slots.get(name))

    # --- writes ---

    def set_typed[V](self, prop: MetaProperty[V], value: V | None) -> Self:
        """Stage a value through its descriptor. None clears the slot."""
        if value is None:
            self._slots.pop(prop.name, None)
        else:
            self._slots[prop.name] = value
        return self

    def set(
        self, name: str, value: object,
    ) -> Ok[Self] | Err[UnknownPropertyError | TypeMismatchError]:
        """Stage a value by property name after checking its runtime type."""
        match self._meta.resolve(name):
            case Err(e):
                return Err(e)
            case Ok(prop):
                pass
        if value is not None and not prop.accepts(value):
            return Err(TypeMismatchError(
                message=(
                    f"{self._meta.bean_name}.{name} expects {prop.type_name}, "
                    f"got {type(value).__name__}"
                ),
                code="BEAN_TYPE_MISMATCH",
                timestamp=UtcDatetime.now(),
                source="bean.builder.BeanBuilder.set",
                property_name=name,
                expected=prop.type_name,
                actual=type(value).__name__,
            ))
        return Ok(self.set_typed(prop, value))

    def set_from_string(
        self, name: str, text: str,
    ) -> Ok[Self] | Err[UnknownPropertyError | ParseError]:
        """Parse text with the property's canonical converter and stage it."""
        match self._meta.resolve(name):
            case Err(e):
                return Err(e)
            case Ok(prop):
                pass
        converter = prop.converter
        if converter is None:
            return Err(self._parse_error(name, text, f"{prop.type_name} has no text form"))
        match converter.parse(text):
            case Err(reason):
                return Err(self._parse_error(name, text, reason))
            case Ok(value):
                return Ok(self.set_typed(prop, value))

    def _parse_error(self, name: str, text: str, reason: str) -> ParseError:
        return ParseError(
            message=f"Cannot parse {text!r} for {self._meta.bean_name}.{name}: {reason}",
            code="BEAN_PARSE",
            timestamp=UtcDatetime.now(),
            source="bean.builder.BeanBuilder.set_from_string",
            property_name=name,
            text=text,
            reason=reason,
        )

    # --- build ---

    def _values(self) -> dict[str, Any]:
        values: dict[str, Any] = {}
        for prop in self._meta.meta_properties():
            if prop.name in self._slots:
                values[prop.name] = self._slots[prop.name]
            else:
                values[prop.name] = prop.default_value()
        return values

    def build(self) -> Ok[T] | Err[ValidationError]:
        """Validate the staged values and create a new bean.

        The builder stays usable afterwards.
        """
        values = self._values()
        violation = self._meta.validate(values)
        if violation is None:
            try:
                return Ok(self._meta.bean_type(**values))
            except TypeError as exc:
                # cross-property checks in the bean's own __post_init__
                violation = FieldViolation(
                    path=self._meta.bean_name, constraint=str(exc), actual_value="",
                )
        missing = self._meta.missing_property(values)
        logger.debug("Rejected build of %s: %s", self._meta.bean_name, violation.path)
        return Err(ValidationError(
            message=f"{violation.path} {violation.constraint}",
            code="BEAN_VALIDATION",
            timestamp=UtcDatetime.now(),
            source="bean.builder.BeanBuilder.build",
            fields=(violation,),
            missing_field=missing,
        ))

    def __repr__(self) -> str:
        from tenor.bean.bean import builder_to_string

        return builder_to_string(self)

    __str__ = __repr__
