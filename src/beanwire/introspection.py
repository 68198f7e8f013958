"""Structural queries over component classes.

This module is the only place that touches ``inspect``/``typing`` introspection
primitives; the scanner, the injector and the container work with the
``ComponentType`` description it produces.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated, Any, get_args, get_origin, get_type_hints

from beanwire.exceptions import BeanwireInvalidMetadataError
from beanwire.markers import (
    is_component,
    is_inject_annotation,
    is_inject_constructor,
    strip_inject_annotation,
)

_CONSTRUCTOR_PARAMETER_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
)


@dataclass(frozen=True, slots=True)
class InjectableField:
    """Class attribute annotated with ``Inject[T]``."""

    name: str
    declared_type: Any


@dataclass(frozen=True, slots=True)
class ConstructorParameter:
    name: str
    kind: inspect._ParameterKind
    declared_type: Any
    default: Any = inspect.Parameter.empty

    @property
    def has_default(self) -> bool:
        return self.default is not inspect.Parameter.empty


@dataclass(frozen=True, slots=True)
class ConstructorInfo:
    """Declared constructor of a component.

    ``name`` is ``"__init__"`` for the regular constructor or the attribute
    name of an alternative ``classmethod``/``staticmethod`` constructor.
    """

    name: str
    parameters: tuple[ConstructorParameter, ...]
    injectable: bool

    def bind(self, cls: type[Any]) -> Callable[..., Any]:
        """Return the callable creating an instance of ``cls`` through this constructor."""
        if self.name == "__init__":
            return cls
        return getattr(cls, self.name)


@dataclass(frozen=True, slots=True)
class ComponentType:
    """Read-only description of a discovered class."""

    cls: type[Any]
    is_component: bool
    fields: tuple[InjectableField, ...]
    constructors: tuple[ConstructorInfo, ...]

    @property
    def name(self) -> str:
        return self.cls.__name__

    @property
    def qualified_name(self) -> str:
        return f"{self.cls.__module__}.{self.cls.__qualname__}"

    @property
    def has_dependencies(self) -> bool:
        return bool(self.fields)

    def injectable_constructor(self) -> ConstructorInfo | None:
        for constructor in self.constructors:
            if constructor.injectable:
                return constructor
        return None


def describe(cls: type[Any]) -> ComponentType:
    """Build the ``ComponentType`` description of ``cls``.

    Raises:
        BeanwireInvalidMetadataError: If the class annotations or constructor
            annotations cannot be evaluated.

    """
    return ComponentType(
        cls=cls,
        is_component=is_component(cls),
        fields=injectable_fields(cls),
        constructors=declared_constructors(cls),
    )


def injectable_fields(cls: type[Any]) -> tuple[InjectableField, ...]:
    """Return the ``Inject[T]`` attributes declared on ``cls`` itself, in declaration order."""
    own_annotations = inspect.get_annotations(cls)
    if not own_annotations:
        return ()

    hints = _type_hints(cls, owner=cls)
    return tuple(
        InjectableField(name=name, declared_type=strip_inject_annotation(hints[name]))
        for name in own_annotations
        if name in hints and is_inject_annotation(hints[name])
    )


def declared_constructors(cls: type[Any]) -> tuple[ConstructorInfo, ...]:
    """Return ``__init__`` (when defined on ``cls``) and the alternative constructors marked with ``@inject``."""
    constructors: list[ConstructorInfo] = []
    for name, attribute in cls.__dict__.items():
        if name == "__init__" and inspect.isfunction(attribute):
            constructors.append(
                ConstructorInfo(
                    name=name,
                    parameters=_constructor_parameters(attribute, owner=cls, skip_first=True),
                    injectable=is_inject_constructor(attribute),
                ),
            )
        elif isinstance(attribute, classmethod | staticmethod) and is_inject_constructor(attribute):
            constructors.append(
                ConstructorInfo(
                    name=name,
                    parameters=_constructor_parameters(
                        attribute.__func__,
                        owner=cls,
                        skip_first=isinstance(attribute, classmethod),
                    ),
                    injectable=True,
                ),
            )
    return tuple(constructors)


def accepts_no_arguments(cls: type[Any]) -> bool:
    """Return whether ``cls()`` can be called without arguments."""
    try:
        signature = inspect.signature(cls)
    except (TypeError, ValueError):
        return False
    return all(
        parameter.default is not inspect.Parameter.empty
        or parameter.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        for parameter in signature.parameters.values()
    )


def _constructor_parameters(
    function: Callable[..., Any],
    *,
    owner: type[Any],
    skip_first: bool,
) -> tuple[ConstructorParameter, ...]:
    parameters = list(inspect.signature(function).parameters.values())
    if skip_first:
        parameters = parameters[1:]

    hints = _type_hints(function, owner=owner)
    return tuple(
        ConstructorParameter(
            name=parameter.name,
            kind=parameter.kind,
            declared_type=_unwrap_annotated(hints.get(parameter.name, inspect.Parameter.empty)),
            default=parameter.default,
        )
        for parameter in parameters
        if parameter.kind in _CONSTRUCTOR_PARAMETER_KINDS
    )


def _unwrap_annotated(hint: Any) -> Any:
    if get_origin(hint) is Annotated:
        return get_args(hint)[0]
    return hint


def _type_hints(obj: Any, *, owner: type[Any]) -> dict[str, Any]:
    try:
        return get_type_hints(obj, include_extras=True)
    except Exception as e:
        msg = f"Cannot evaluate annotations of {owner.__module__}.{owner.__qualname__}: {e}"
        raise BeanwireInvalidMetadataError(msg) from e


__all__ = [
    "ComponentType",
    "ConstructorInfo",
    "ConstructorParameter",
    "InjectableField",
    "accepts_no_arguments",
    "declared_constructors",
    "describe",
    "injectable_fields",
]
