from __future__ import annotations

from typing import Any


class BeanwireError(Exception):
    """Represent a base class for all beanwire-specific failures.

    Catch this type when you want to handle any beanwire error path without
    matching each concrete exception class individually.
    """


class BeanwireScanError(BeanwireError):
    """Signal that the root namespace of a scan cannot be derived.

    Raised by ``PackageScanner.discover`` when the root object is not defined
    inside a package, for example a top-level script module.

    Typical fix is moving the entry point into a package and passing a class or
    function defined there.
    """


class BeanwireInvalidMetadataError(BeanwireError):
    """Signal that component annotations cannot be evaluated.

    Raised while describing a component when ``typing.get_type_hints`` fails,
    usually because a forward reference names a type that is not importable
    from the component's module.
    """


class BeanwireNoSuitableConstructorError(BeanwireError):
    """Signal that no constructor can be selected for a component.

    Raised when none of the declared constructors is marked with ``@inject``
    and the class cannot be called without arguments.
    """

    def __init__(self, component: type[Any]) -> None:
        self.component = component
        super().__init__(f"No suitable constructor found for class: {component.__qualname__}")


class BeanwireDependencyNotFoundError(BeanwireError):
    """Signal that no registered bean is assignable to a declared dependency.

    ``target`` names the constructor parameter or field being resolved and
    ``dependency_type`` is its declared type.

    Typical fixes include declaring the dependency as a component in the
    scanned package, or keeping dependency chains shallow enough for the
    registration order (beans without injectable fields first, then the rest).
    """

    def __init__(self, target: str, dependency_type: Any, *, kind: str) -> None:
        self.target = target
        self.dependency_type = dependency_type
        self.kind = kind
        type_name = getattr(dependency_type, "__qualname__", repr(dependency_type))
        super().__init__(f"Dependency not found for {kind} '{target}': {type_name}")


class BeanwireBeanCreationError(BeanwireError):
    """Signal that a single bean could not be created.

    The original failure is available as ``__cause__``. The container logs this
    error and continues with the remaining components.
    """

    def __init__(self, component: type[Any]) -> None:
        self.component = component
        super().__init__(f"Failed to create bean for class: {component.__module__}.{component.__qualname__}")
