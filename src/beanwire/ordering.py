from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from beanwire.introspection import ComponentType


@dataclass(frozen=True, slots=True)
class RegistrationOrder:
    """Two-bucket registration order.

    Components without ``Inject[T]`` fields are created first, then every
    component with such fields, each bucket in encounter order. A component
    whose field needs another component that itself has fields is only
    satisfied if that one happens to come earlier in ``with_dependencies``;
    chains of three or more levels are not ordered.
    """

    no_dependencies: tuple[ComponentType, ...]
    with_dependencies: tuple[ComponentType, ...]

    def __iter__(self) -> Iterator[ComponentType]:
        yield from self.no_dependencies
        yield from self.with_dependencies

    def __len__(self) -> int:
        return len(self.no_dependencies) + len(self.with_dependencies)


def classify(component_types: Iterable[ComponentType]) -> RegistrationOrder:
    no_dependencies: list[ComponentType] = []
    with_dependencies: list[ComponentType] = []
    for component_type in component_types:
        if component_type.has_dependencies:
            with_dependencies.append(component_type)
        else:
            no_dependencies.append(component_type)
    return RegistrationOrder(
        no_dependencies=tuple(no_dependencies),
        with_dependencies=tuple(with_dependencies),
    )


__all__ = ["RegistrationOrder", "classify"]
