"""ImmutableBean base class and structural services.

Bean types are declared as

    @final
    @dataclass(frozen=True, slots=True, eq=False, repr=False)
    class Thing(ImmutableBean):
        ...

Equality, hashing and string rendering are derived from the MetaProperty
table in declaration order, so every bean type behaves the same way:

- equality: same concrete type, every property equal
- hash: h = h * 31 + stable_hash(value), seeded by the type name, 64-bit
- text: "Thing{a=1, b=2}"; builders render as "Thing.Builder{a=1, b=<unset>}"
"""

from __future__ import annotations

from typing import Any, Self

from tenor.bean.builder import BeanBuilder
from tenor.bean.convert import find_converter
from tenor.bean.meta import MetaBean, meta_bean
from tenor.core.errors import UnknownPropertyError
from tenor.core.result import Err, Ok
from tenor.core.serialization import stable_hash
from tenor.infra.config import DEFAULT_RENDERING, BeanRenderingConfig

_MASK_64 = (1 << 64) - 1
_HASH_MULTIPLIER = 31


class ImmutableBean:
    """Base for frozen dataclass value types with generated metadata."""

    __slots__ = ()

    def __post_init__(self) -> None:
        meta = meta_bean(type(self))
        values = {p.name: p.get(self) for p in meta.meta_properties()}
        violation = meta.validate(values)
        if violation is not None:
            raise TypeError(
                f"{violation.path} {violation.constraint}, got {violation.actual_value}"
            )

    @classmethod
    def meta_bean(cls) -> MetaBean[Self]:
        return meta_bean(cls)

    @classmethod
    def builder_class(cls) -> type[BeanBuilder[Any]]:
        return BeanBuilder

    @classmethod
    def builder(cls) -> BeanBuilder[Self]:
        """An empty builder for this type."""
        return cls.builder_class()(meta_bean(cls))

    def to_builder(self) -> BeanBuilder[Self]:
        """A builder seeded with a snapshot of this bean."""
        return type(self).builder_class().copy_of(self)

    @classmethod
    def property_names(cls) -> tuple[str, ...]:
        return meta_bean(cls).property_names()

    def get_property(self, name: str) -> Ok[Any] | Err[UnknownPropertyError]:
        """Generic read by property name."""
        return meta_bean(type(self)).get(self, name)

    def __eq__(self, other: object) -> bool:
        return bean_equals(self, other)

    def __hash__(self) -> int:
        return bean_hash(self)

    def __repr__(self) -> str:
        return bean_to_string(self)

    __str__ = __repr__


# ---------------------------------------------------------------------------
# Structural services
# ---------------------------------------------------------------------------


def bean_equals(a: object, b: object) -> bool:
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    return all(p.get(a) == p.get(b) for p in meta_bean(type(a)).meta_properties())


def bean_hash(bean: object) -> int:
    bean_type = type(bean)
    h = stable_hash(f"{bean_type.__module__}.{bean_type.__qualname__}")
    for prop in meta_bean(bean_type).meta_properties():
        h = (h * _HASH_MULTIPLIER + stable_hash(prop.get(bean))) & _MASK_64
    return h


def render_value(value: object) -> str:
    """Canonical text of a nested value."""
    if isinstance(value, ImmutableBean):
        return str(value)
    if isinstance(value, tuple):
        return "[" + ", ".join(render_value(v) for v in value) + "]"
    if value is None:
        return "None"
    converter = find_converter(type(value))
    if converter is not None:
        return converter.format(value)
    return str(value)


def bean_to_string(bean: object) -> str:
    meta = meta_bean(type(bean))
    body = ", ".join(f"{p.name}={render_value(p.get(bean))}" for p in meta.meta_properties())
    return f"{meta.bean_name}{{{body}}}"


def builder_to_string(
    builder: BeanBuilder[Any], config: BeanRenderingConfig = DEFAULT_RENDERING,
) -> str:
    meta = builder.meta
    parts: list[str] = []
    for prop in meta.meta_properties():
        if builder.is_set(prop.name):
            parts.append(f"{prop.name}={render_value(builder.get(prop.name).unwrap())}")
        else:
            parts.append(f"{prop.name}={config.unset_marker}")
    return f"{meta.bean_name}{config.builder_suffix}{{{', '.join(parts)}}}"
