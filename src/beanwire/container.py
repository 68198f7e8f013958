from __future__ import annotations

import logging
from collections.abc import Iterable
from types import TracebackType
from typing import Any

from beanwire._internal.log_setup import configure_logging
from beanwire._internal.type_checks import is_concrete_class
from beanwire.exceptions import BeanwireBeanCreationError
from beanwire.injector import Injector
from beanwire.introspection import ComponentType, describe
from beanwire.ordering import classify
from beanwire.registry import BeanRegistry
from beanwire.scanner import DiscoveryStrategy, PackageScanner
from beanwire.settings import BeanwireSettings

logger = logging.getLogger(__name__)


class Container:
    """Scan a package for components and hold one instance of each.

    ``run`` discovers every class decorated with ``@component`` in the package
    of the given root, creates them (components without ``Inject[T]`` fields
    first, then the others) and registers each instance under its simple class
    name. ``get_bean`` returns the registered instance or ``None``.

    Failures are contained: a module that cannot be imported or a component
    that cannot be created is logged and skipped, and ``run`` itself never
    raises. Inspect the log or ``bean_names`` to see what was registered.

    Examples:
        .. code-block:: python

            with Container() as container:
                container.run(Main)
                user_component = container.get_bean("UserComponent")

    """

    def __init__(
        self,
        settings: BeanwireSettings | None = None,
        *,
        discovery: DiscoveryStrategy | None = None,
        registry: BeanRegistry | None = None,
    ) -> None:
        """Initialize an empty container.

        Args:
            settings: Container configuration. Read from ``BEANWIRE_*``
                environment variables when omitted.
            discovery: Strategy used by ``run`` to find components. Defaults
                to a ``PackageScanner`` honoring ``settings.ignored_directories``.
            registry: Registry receiving the beans. A new one is created when
                omitted.

        """
        self.settings = settings if settings is not None else BeanwireSettings()
        if self.settings.configure_logging:
            configure_logging(self.settings)

        self.discovery = (
            discovery
            if discovery is not None
            else PackageScanner(ignored_directories=self.settings.ignored_directories)
        )
        self.registry = registry if registry is not None else BeanRegistry()
        self._injector = Injector(self.registry)

    def run(self, root: Any) -> None:
        """Scan the package of ``root`` and register every component found.

        Any error escaping the pipeline is logged with its traceback and
        swallowed; the registry keeps whatever was registered before it.

        Args:
            root: Class, function or module whose enclosing package is scanned.

        """
        try:
            components = self.discovery.discover(root)
            logger.info(
                "Found components:%s",
                "".join(f"\n  {cls.__module__}.{cls.__qualname__}" for cls in components),
            )

            self.create_and_register_beans(components)
            self.log_registered_beans()
        except Exception as e:
            logger.exception("Error starting container: %s", e)  # noqa: TRY401

    def get_bean(self, name: str) -> Any | None:
        """Return the bean registered under ``name`` (the simple class name) or ``None``."""
        return self.registry.get(name)

    def bean_names(self) -> list[str]:
        return self.registry.names()

    def create_and_register_beans(self, components: Iterable[type[Any]]) -> None:
        """Create and register ``components`` in two passes.

        Components without ``Inject[T]`` fields are created first, then the
        ones with fields, each group in the iteration order of ``components``.
        Abstract classes, protocols and classes whose annotations cannot be
        evaluated are logged and skipped.
        """
        component_types: list[ComponentType] = []
        for cls in components:
            if not is_concrete_class(cls):
                logger.warning("Skipping non-concrete class: %s.%s", cls.__module__, cls.__qualname__)
                continue
            try:
                component_types.append(describe(cls))
            except Exception:
                logger.exception("Failed to read metadata of class: %s.%s", cls.__module__, cls.__qualname__)

        for component_type in classify(component_types):
            self.create_and_register_bean(component_type)

    def create_and_register_bean(self, component: type[Any] | ComponentType) -> Any | None:
        """Create one bean and register it under its simple class name.

        Returns:
            The created instance, or ``None`` when creation failed. The instance
            is returned even when its name was already taken and the registry
            kept the earlier bean.

        Raises:
            BeanwireInvalidMetadataError: If a class is passed and its
                annotations cannot be evaluated.

        """
        component_type = component if isinstance(component, ComponentType) else describe(component)
        try:
            instance = self._injector.create_instance(component_type)
        except BeanwireBeanCreationError as e:
            logger.exception("%s", e)  # noqa: TRY401
            return None

        self.registry.register(generate_bean_name(component_type.cls), instance)
        return instance

    def log_registered_beans(self) -> None:
        logger.info(
            "Registered beans:%s",
            "".join(
                f"\n  - {name} ({type(bean).__module__}.{type(bean).__qualname__})"
                for name, bean in self.registry.items()
            ),
        )

    def close(self) -> None:
        """Drop every registered bean. ``get_bean`` returns ``None`` afterwards."""
        self.registry.clear()

    def __enter__(self) -> Container:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


def generate_bean_name(cls: type[Any]) -> str:
    """Return the registry key of ``cls`` (``UserComponent`` for ``app.users.UserComponent``)."""
    return cls.__name__


__all__ = ["Container", "generate_bean_name"]
