from __future__ import annotations

import inspect
import typing
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from synthwire._internal.type_checks import is_mangled_name
from synthwire.exceptions import SynthWireReflectionError
from synthwire.markers import is_private_constructor


class Visibility(str, Enum):
    """Name-based member visibility as seen from a descendant class."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


@dataclass(frozen=True, slots=True)
class ConstructorDescriptor:
    """Constructor metadata read from a class ``__init__`` or one of its overloads."""

    declaring_type: type[Any]
    function: Callable[..., Any]
    signature: inspect.Signature
    """Signature without the instance parameter."""
    parameter_types: tuple[Any, ...]
    instance_parameter_name: str
    is_overload: bool


@dataclass(frozen=True, slots=True)
class PropertyDescriptor:
    """Readable property metadata read from a class hierarchy."""

    declaring_type: type[Any]
    name: str
    value_type: Any
    visibility: Visibility
    prop: property


def accessible_constructors(base: type[Any]) -> tuple[ConstructorDescriptor, ...]:
    """Return constructors of base that a descendant class may call.

    ``typing.overload`` variants of ``__init__`` are treated as separate
    constructors. Constructors marked with ``private_constructor`` are excluded.

    Args:
        base: Class whose constructors are reflected.

    """
    init = base.__init__
    if init is object.__init__:
        return (
            ConstructorDescriptor(
                declaring_type=object,
                function=init,
                signature=inspect.Signature(),
                parameter_types=(),
                instance_parameter_name="self",
                is_overload=False,
            ),
        )

    declaring_type = _declaring_type(base, "__init__")
    if is_private_constructor(init):
        return ()

    overloads = typing.get_overloads(init) if inspect.isfunction(init) else []
    functions = overloads or [init]
    return tuple(
        _describe_constructor(
            declaring_type=declaring_type,
            function=function,
            is_overload=bool(overloads),
        )
        for function in functions
        if not is_private_constructor(function)
    )


def all_properties(base: type[Any]) -> tuple[PropertyDescriptor, ...]:
    """Return readable properties a descendant class may override.

    The nearest declaration of each name in the MRO wins. Write-only and
    class-private (name-mangled) properties are excluded.

    Args:
        base: Class whose properties are reflected.

    """
    seen_names: set[str] = set()
    descriptors: list[PropertyDescriptor] = []
    for klass in base.__mro__:
        if klass is object:
            continue
        for name, member in vars(klass).items():
            if name in seen_names:
                continue
            seen_names.add(name)
            if not isinstance(member, property) or member.fget is None:
                continue
            visibility = member_visibility(name, klass)
            if visibility is Visibility.PRIVATE:
                continue
            descriptors.append(
                PropertyDescriptor(
                    declaring_type=klass,
                    name=name,
                    value_type=_type_hints(member.fget).get("return", Any),
                    visibility=visibility,
                    prop=member,
                ),
            )
    return tuple(descriptors)


def member_visibility(name: str, owner: type[Any]) -> Visibility:
    """Return the visibility implied by a member name.

    Args:
        name: Attribute name as stored in the owner namespace.
        owner: Class whose namespace declares the attribute.

    """
    if is_mangled_name(name, owner):
        return Visibility.PRIVATE
    if name.startswith("__") and name.endswith("__"):
        return Visibility.PUBLIC
    if name.startswith("_"):
        return Visibility.PROTECTED
    return Visibility.PUBLIC


def _describe_constructor(
    *,
    declaring_type: type[Any],
    function: Callable[..., Any],
    is_overload: bool,
) -> ConstructorDescriptor:
    try:
        signature = inspect.signature(function)
    except (TypeError, ValueError) as e:
        raise SynthWireReflectionError(function, e) from e

    parameters = list(signature.parameters.values())
    if not parameters:
        msg = "constructor has no instance parameter"
        raise SynthWireReflectionError(function, TypeError(msg))

    hints = _type_hints(function)
    instance_parameter, *call_parameters = parameters
    return ConstructorDescriptor(
        declaring_type=declaring_type,
        function=function,
        signature=signature.replace(parameters=call_parameters),
        parameter_types=tuple(hints.get(parameter.name, Any) for parameter in call_parameters),
        instance_parameter_name=instance_parameter.name,
        is_overload=is_overload,
    )


def _declaring_type(base: type[Any], name: str) -> type[Any]:
    for klass in base.__mro__:
        if name in vars(klass):
            return klass
    return object


def _type_hints(function: Callable[..., Any]) -> dict[str, Any]:
    if not inspect.isfunction(function):
        return {}
    try:
        return typing.get_type_hints(function, include_extras=True)
    except (TypeError, NameError) as e:
        raise SynthWireReflectionError(function, e) from e


__all__ = [
    "ConstructorDescriptor",
    "PropertyDescriptor",
    "Visibility",
    "accessible_constructors",
    "all_properties",
    "member_visibility",
]
