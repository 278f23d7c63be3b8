"""Per-type bean metadata and the process-wide registry.

A MetaBean owns the ordered MetaProperty table of one bean type plus a
name index, both built once. meta_bean(cls) creates it on first use under
a lock and publishes it; later lookups read the registry without locking
and always return the same object.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, final, get_type_hints

from tenor.bean.property import MetaProperty
from tenor.core.errors import (
    FieldViolation,
    TypeMismatchError,
    UnknownPropertyError,
    UnsupportedOperationError,
)
from tenor.core.result import Err, Ok
from tenor.core.types import UtcDatetime

if TYPE_CHECKING:
    from tenor.bean.builder import BeanBuilder

logger = logging.getLogger(__name__)


@final
class MetaBean[T]:
    """Metadata for one bean type: its properties in declaration order."""

    __slots__ = ("_bean_type", "_index", "_properties")

    def __init__(self, bean_type: type[T], properties: tuple[MetaProperty[Any], ...]) -> None:
        self._bean_type = bean_type
        self._properties = properties
        self._index: Mapping[str, MetaProperty[Any]] = MappingProxyType(
            {p.name: p for p in properties}
        )

    @property
    def bean_type(self) -> type[T]:
        return self._bean_type

    @property
    def bean_name(self) -> str:
        return self._bean_type.__name__

    def meta_properties(self) -> tuple[MetaProperty[Any], ...]:
        return self._properties

    def property_names(self) -> tuple[str, ...]:
        """Property names in declaration order."""
        return tuple(p.name for p in self._properties)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __getitem__(self, name: str) -> MetaProperty[Any]:
        """Descriptor lookup for code that knows the name statically."""
        return self._index[name]

    def resolve(self, name: str) -> Ok[MetaProperty[Any]] | Err[UnknownPropertyError]:
        prop = self._index.get(name)
        if prop is None:
            return Err(self._unknown(name, "resolve"))
        return Ok(prop)

    def get(self, bean: T, name: str) -> Ok[Any] | Err[UnknownPropertyError]:
        """Read a property of a built bean by name."""
        match self.resolve(name):
            case Err(e):
                return Err(e)
            case Ok(prop):
                return Ok(prop.get(bean))

    def set(
        self, target: BeanBuilder[T] | T, name: str, value: object,
    ) -> Ok[BeanBuilder[T]] | Err[
        UnknownPropertyError | TypeMismatchError | UnsupportedOperationError
    ]:
        """Write a property by name. Only builders can be written to."""
        from tenor.bean.builder import BeanBuilder

        if not isinstance(target, BeanBuilder):
            return Err(UnsupportedOperationError(
                message=f"{self.bean_name} is immutable; use a builder to change {name!r}",
                code="BEAN_IMMUTABLE",
                timestamp=UtcDatetime.now(),
                source="bean.meta.MetaBean.set",
                operation="set",
                target=type(target).__name__,
            ))
        if target.meta is not self:
            return Err(UnsupportedOperationError(
                message=f"{self.bean_name} cannot write to a {target.meta.bean_name} builder",
                code="BEAN_BUILDER_MISMATCH",
                timestamp=UtcDatetime.now(),
                source="bean.meta.MetaBean.set",
                operation="set",
                target=target.meta.bean_name,
            ))
        return target.set(name, value)

    def builder(self) -> BeanBuilder[T]:
        from tenor.bean.builder import BeanBuilder

        return BeanBuilder(self)

    def missing_property(self, values: Mapping[str, object]) -> str | None:
        """First required property (declaration order) whose value is None."""
        for prop in self._properties:
            if prop.required and values.get(prop.name) is None:
                return prop.name
        return None

    def validate(self, values: Mapping[str, object]) -> FieldViolation | None:
        """First violation: missing required values, then type mismatches."""
        missing = self.missing_property(values)
        if missing is not None:
            return FieldViolation(
                path=f"{self.bean_name}.{missing}",
                constraint="must not be None",
                actual_value="None",
            )
        for prop in self._properties:
            value = values.get(prop.name)
            if not prop.accepts(value):
                return FieldViolation(
                    path=f"{self.bean_name}.{prop.name}",
                    constraint=f"must be {prop.type_name}",
                    actual_value=type(value).__name__,
                )
        return None

    def _unknown(self, name: str, operation: str) -> UnknownPropertyError:
        return UnknownPropertyError(
            message=f"Unknown property {name!r} on {self.bean_name}",
            code="BEAN_UNKNOWN_PROPERTY",
            timestamp=UtcDatetime.now(),
            source=f"bean.meta.MetaBean.{operation}",
            bean_name=self.bean_name,
            property_name=name,
        )

    def __repr__(self) -> str:
        return f"MetaBean:{self.bean_name}"


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_REGISTRY: dict[type, MetaBean[Any]] = {}
_BY_NAME: dict[str, MetaBean[Any]] = {}
_LOCK = threading.Lock()


def _create_meta_bean[T](bean_type: type[T]) -> MetaBean[T]:
    if not dataclasses.is_dataclass(bean_type):
        raise TypeError(f"{bean_type.__name__} must be a dataclass to have bean metadata")
    hints = get_type_hints(bean_type)
    properties = tuple(
        MetaProperty(
            name=f.name,
            declaring_type=bean_type,
            value_type=hints[f.name],
            default=f.default,
            default_factory=f.default_factory,
        )
        for f in dataclasses.fields(bean_type)
    )
    return MetaBean(bean_type, properties)


def meta_bean[T](bean_type: type[T]) -> MetaBean[T]:
    """Return the MetaBean for a bean type, creating it once on first use."""
    meta = _REGISTRY.get(bean_type)
    if meta is not None:
        return meta
    with _LOCK:
        meta = _REGISTRY.get(bean_type)
        if meta is None:
            meta = _create_meta_bean(bean_type)
            _BY_NAME[bean_type.__name__] = meta
            _REGISTRY[bean_type] = meta
            logger.debug(
                "Registered meta-bean %s with properties %s",
                meta.bean_name, meta.property_names(),
            )
    return meta


def lookup_meta_bean(bean_name: str) -> Ok[MetaBean[Any]] | Err[UnknownPropertyError]:
    """Find an already-registered MetaBean by simple class name."""
    meta = _BY_NAME.get(bean_name)
    if meta is None:
        return Err(UnknownPropertyError(
            message=f"No bean registered under {bean_name!r}",
            code="BEAN_NOT_REGISTERED",
            timestamp=UtcDatetime.now(),
            source="bean.meta.lookup_meta_bean",
            bean_name=bean_name,
            property_name="",
        ))
    return Ok(meta)


def registered_beans() -> tuple[str, ...]:
    return tuple(sorted(_BY_NAME))
