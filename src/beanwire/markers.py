from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any, TypeVar, Union, get_args, get_origin

T = TypeVar("T")
C = TypeVar("C", bound=type[Any])
F = TypeVar("F")

_COMPONENT_ATTR = "__beanwire_component__"
_INJECT_ATTR = "__beanwire_inject__"
_ANNOTATED_MARKER_MIN_ARGS = 2


class InjectMarker:
    """A marker used to indicate a class attribute should be filled by the container.

    Attached to ``typing.Annotated`` metadata by ``Inject[T]``.
    """

    def __repr__(self) -> str:
        return "InjectMarker()"


def component(cls: C) -> C:
    """Mark a class as a managed component.

    Package scanning picks up every class decorated with ``@component`` and
    registers a single instance of it under its simple class name.

    The marker is not inherited: subclasses of a component must be decorated
    themselves to be discovered.

    Examples:
        .. code-block:: python

            @component
            class EmailService:
                def send_email(self, message: str) -> None: ...

    """
    setattr(cls, _COMPONENT_ATTR, cls)
    return cls


def is_component(candidate: type[Any]) -> bool:
    """Return whether ``candidate`` itself was decorated with ``@component``."""
    return candidate.__dict__.get(_COMPONENT_ATTR) is candidate


def inject(constructor: F) -> F:
    """Designate a constructor for injection.

    Applies to ``__init__`` or to an alternative constructor declared as a
    ``classmethod`` or ``staticmethod``. Parameters of the designated
    constructor are resolved from the registered beans by type.

    Examples:
        .. code-block:: python

            @component
            class UserRepository:
                @inject
                def __init__(self, database: DatabaseService) -> None:
                    self.database = database

    """
    target = constructor.__func__ if isinstance(constructor, classmethod | staticmethod) else constructor
    setattr(target, _INJECT_ATTR, True)
    return constructor


def is_inject_constructor(candidate: object) -> bool:
    """Return whether a function, classmethod or staticmethod is marked with ``@inject``."""
    if isinstance(candidate, classmethod | staticmethod):
        candidate = candidate.__func__
    return getattr(candidate, _INJECT_ATTR, False) is True


if TYPE_CHECKING:
    Inject = Union[T, T]  # noqa: UP007,PYI016
    """Mark a class attribute for field injection.

    At runtime ``Inject[T]`` becomes ``Annotated[T, InjectMarker()]``.
    """

else:

    class Inject:
        """Mark a class attribute for field injection.

        At runtime ``Inject[T]`` resolves to ``Annotated[T, InjectMarker()]``.

        Examples:
            .. code-block:: python

                @component
                class UserComponent:
                    database_service: Inject[DatabaseService]

        """

        def __class_getitem__(cls, item: T) -> Annotated[T, InjectMarker]:
            if get_origin(item) is Annotated:
                args = get_args(item)
                return Annotated[(args[0], *args[1:], InjectMarker())]  # type: ignore[return-value]
            return Annotated[item, InjectMarker()]  # type: ignore[return-value]


def is_inject_annotation(annotation: Any) -> bool:
    """Return whether an annotation carries the ``Inject`` marker."""
    if get_origin(annotation) is not Annotated:
        return False
    args = get_args(annotation)
    if len(args) < _ANNOTATED_MARKER_MIN_ARGS:
        return False  # pragma: no cover - Annotated requires at least 2 args
    return any(isinstance(metadata, InjectMarker) for metadata in args[1:])


def strip_inject_annotation(annotation: Any) -> Any:
    """Return the declared type behind ``Inject[T]``, dropping any other metadata."""
    return get_args(annotation)[0]


__all__ = [
    "Inject",
    "InjectMarker",
    "component",
    "inject",
    "is_component",
    "is_inject_annotation",
    "is_inject_constructor",
    "strip_inject_annotation",
]
