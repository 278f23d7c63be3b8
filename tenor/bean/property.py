"""Property descriptors: one named, typed property of a bean type.

A MetaProperty is created once per declaring type when its MetaBean is
built and is shared by every instance and builder of that type.
"""

from __future__ import annotations

import dataclasses
import types
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal, TypeAliasType, Union, final, get_args, get_origin

from tenor.bean.convert import StringConverter, find_converter


def conforms(value: object, declared: Any) -> bool:  # noqa: PLR0911
    """Runtime check of a value against a resolved type annotation.

    Covers plain classes, X | None, Literal[...], tuple[X, ...],
    fixed tuples, frozenset[X] and `type` aliases. Other typing forms
    are accepted unchecked.
    """
    if declared is Any:
        return True
    if declared is None or declared is type(None):
        return value is None
    if isinstance(declared, TypeAliasType):
        return conforms(value, declared.__value__)
    origin = get_origin(declared)
    if origin is None:
        if isinstance(declared, type):
            if declared is int and isinstance(value, bool):
                return False
            return isinstance(value, declared)
        return True
    args = get_args(declared)
    if origin is Union or origin is types.UnionType:
        return any(conforms(value, a) for a in args)
    if origin is Literal:
        return value in args
    if origin is tuple:
        if not isinstance(value, tuple):
            return False
        if len(args) == 2 and args[1] is Ellipsis:
            return all(conforms(v, args[0]) for v in value)
        if args == ((),):
            return value == ()
        return len(value) == len(args) and all(
            conforms(v, a) for v, a in zip(value, args, strict=True)
        )
    if origin is frozenset:
        return isinstance(value, frozenset) and all(conforms(v, args[0]) for v in value)
    if isinstance(origin, type):
        return isinstance(value, origin)
    return True


def type_name(declared: Any) -> str:
    if isinstance(declared, type):
        return declared.__name__
    if isinstance(declared, TypeAliasType):
        return declared.__name__
    return str(declared).replace("typing.", "")


def _value_class(declared: Any) -> Any:
    """The non-None member of an optional annotation, else the annotation."""
    if isinstance(declared, TypeAliasType):
        return _value_class(declared.__value__)
    if get_origin(declared) in (Union, types.UnionType):
        members = [a for a in get_args(declared) if a is not type(None)]
        if len(members) == 1:
            return members[0]
    return declared


@final
@dataclass(frozen=True, slots=True, eq=False)
class MetaProperty[V]:
    """Name, declared type and owning type of one bean property.

    Descriptors compare by identity: each exists once per declaring type.
    """

    name: str
    declaring_type: type
    value_type: Any
    default: Any = dataclasses.MISSING
    default_factory: Callable[[], Any] | Any = dataclasses.MISSING

    @property
    def required(self) -> bool:
        """True when the declared type does not admit None."""
        return not conforms(None, self.value_type)

    @property
    def has_default(self) -> bool:
        return (
            self.default is not dataclasses.MISSING
            or self.default_factory is not dataclasses.MISSING
        )

    def default_value(self) -> V | None:
        if self.default is not dataclasses.MISSING:
            return self.default
        if self.default_factory is not dataclasses.MISSING:
            return self.default_factory()
        return None

    @property
    def type_name(self) -> str:
        return type_name(self.value_type)

    @property
    def converter(self) -> StringConverter[Any] | None:
        return find_converter(_value_class(self.value_type))

    def get(self, bean: object) -> V:
        return getattr(bean, self.name)

    def accepts(self, value: object) -> bool:
        return conforms(value, self.value_type)

    def __repr__(self) -> str:
        return f"MetaProperty({self.declaring_type.__name__}.{self.name}: {self.type_name})"
