from __future__ import annotations

import inspect
import logging
from typing import Any

from beanwire._internal.type_checks import is_assignable
from beanwire.exceptions import (
    BeanwireBeanCreationError,
    BeanwireDependencyNotFoundError,
    BeanwireInvalidMetadataError,
    BeanwireNoSuitableConstructorError,
)
from beanwire.introspection import (
    ComponentType,
    ConstructorInfo,
    ConstructorParameter,
    accepts_no_arguments,
)
from beanwire.registry import BeanRegistry

logger = logging.getLogger(__name__)

_ZERO_ARGUMENT_CONSTRUCTOR = ConstructorInfo(name="__init__", parameters=(), injectable=False)


class Injector:
    """Create component instances from beans already present in a registry.

    Lookups scan the registry values in insertion order and take the first
    bean assignable to the declared type. Nothing is cached between beans.
    """

    def __init__(self, registry: BeanRegistry) -> None:
        self._registry = registry

    def create_instance(self, component_type: ComponentType) -> object:
        """Construct ``component_type`` and fill its ``Inject[T]`` fields.

        Raises:
            BeanwireBeanCreationError: For any failure; the original error is
                chained as ``__cause__``.

        """
        try:
            constructor = self.select_constructor(component_type)
            arguments, keyword_arguments = self._resolve_arguments(constructor)
            instance = constructor.bind(component_type.cls)(*arguments, **keyword_arguments)
            self.inject_fields(instance, component_type)
        except Exception as e:
            logger.error("Error creating instance of %s: %s", component_type.qualified_name, e)  # noqa: TRY400
            raise BeanwireBeanCreationError(component_type.cls) from e
        return instance

    def select_constructor(self, component_type: ComponentType) -> ConstructorInfo:
        """Return the constructor marked with ``@inject`` or fall back to the zero-argument call."""
        constructor = component_type.injectable_constructor()
        if constructor is not None:
            return constructor
        if accepts_no_arguments(component_type.cls):
            return _ZERO_ARGUMENT_CONSTRUCTOR
        raise BeanwireNoSuitableConstructorError(component_type.cls)

    def inject_fields(self, instance: object, component_type: ComponentType) -> None:
        for field in component_type.fields:
            dependency = self.find_bean(field.declared_type)
            if dependency is None:
                raise BeanwireDependencyNotFoundError(field.name, field.declared_type, kind="field")
            # object.__setattr__ also writes into frozen dataclasses
            object.__setattr__(instance, field.name, dependency)
            logger.debug("Injected dependency into field: %s", field.name)

    def find_bean(self, declared_type: Any) -> object | None:
        """Return the first registered bean assignable to ``declared_type``."""
        for bean in self._registry.values():
            if is_assignable(bean, declared_type):
                return bean
        return None

    def _resolve_arguments(self, constructor: ConstructorInfo) -> tuple[list[Any], dict[str, Any]]:
        arguments: list[Any] = []
        keyword_arguments: dict[str, Any] = {}
        for parameter in constructor.parameters:
            value = self._resolve_parameter(parameter)
            if parameter.kind is inspect.Parameter.POSITIONAL_ONLY:
                arguments.append(value)
            else:
                keyword_arguments[parameter.name] = value
        return arguments, keyword_arguments

    def _resolve_parameter(self, parameter: ConstructorParameter) -> Any:
        type_name = getattr(parameter.declared_type, "__qualname__", repr(parameter.declared_type))
        logger.debug("Resolving dependency for parameter: %s (%s)", parameter.name, type_name)

        if parameter.declared_type is inspect.Parameter.empty:
            msg = f"Constructor parameter '{parameter.name}' has no type annotation."
            raise BeanwireInvalidMetadataError(msg)

        dependency = self.find_bean(parameter.declared_type)
        if dependency is not None:
            return dependency
        raise BeanwireDependencyNotFoundError(
            parameter.name,
            parameter.declared_type,
            kind="constructor parameter",
        )


__all__ = ["Injector"]
