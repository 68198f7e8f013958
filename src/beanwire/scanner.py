from __future__ import annotations

import importlib
import inspect
import logging
import os
import sys
from collections.abc import Iterable
from types import ModuleType
from typing import Any, Protocol

from beanwire._internal.type_checks import is_runtime_class
from beanwire.exceptions import BeanwireScanError
from beanwire.markers import is_component

logger = logging.getLogger(__name__)

_MODULE_SUFFIX = ".py"
_PACKAGE_INIT = "__init__"


class DiscoveryStrategy(Protocol):
    """Find component classes starting from a root object."""

    def discover(self, root: Any) -> set[type[Any]]: ...


class PackageScanner:
    """Discover components by walking the directories of the root's package.

    Only directory-backed packages are scanned. ``__path__`` entries that are
    not directories (zip archives, eggs) contribute nothing.
    """

    def __init__(self, ignored_directories: Iterable[str] = ("__pycache__",)) -> None:
        self._ignored_directories = frozenset(ignored_directories)

    def discover(self, root: Any) -> set[type[Any]]:
        """Return the component classes defined in the root's package tree.

        Args:
            root: Class, function or module whose enclosing package is scanned.
                A package passed directly is scanned itself.

        Raises:
            BeanwireScanError: If the root is not defined inside a package.

        """
        package_name = root_namespace(root)
        components: set[type[Any]] = set()
        for module_name in sorted(self.scan_package(package_name)):
            try:
                module = importlib.import_module(module_name)
            except Exception:  # noqa: BLE001
                logger.warning("Module not loadable, skipping: %s", module_name, exc_info=True)
                continue
            components.update(_module_components(module))
        return components

    def scan_package(self, package_name: str) -> set[str]:
        """Return the fully qualified names of every module below ``package_name``."""
        package = importlib.import_module(package_name)
        module_names: set[str] = set()
        for location in getattr(package, "__path__", ()):
            if os.path.isdir(location):
                self._scan_directory(location, package_name, module_names)
        return module_names

    def _scan_directory(self, directory: str, package_name: str, module_names: set[str]) -> None:
        try:
            entries = list(os.scandir(directory))
        except OSError:
            logger.warning("Directory not readable, skipping: %s", directory)
            return

        for entry in entries:
            if entry.is_dir():
                if entry.name not in self._ignored_directories:
                    self._scan_directory(entry.path, f"{package_name}.{entry.name}", module_names)
            elif entry.name.endswith(_MODULE_SUFFIX):
                base_name = entry.name.removesuffix(_MODULE_SUFFIX)
                if base_name == _PACKAGE_INIT:
                    module_names.add(package_name)
                else:
                    module_names.add(f"{package_name}.{base_name}")


def root_namespace(root: Any) -> str:
    """Return the name of the package enclosing ``root``."""
    if inspect.ismodule(root):
        module: ModuleType | None = root
    else:
        module = sys.modules.get(getattr(root, "__module__", None) or "")
    if module is None:
        msg = f"Cannot determine the module of {root!r}."
        raise BeanwireScanError(msg)

    if hasattr(module, "__path__"):
        return module.__name__
    if module.__package__:
        return module.__package__
    msg = f"Module '{module.__name__}' is not part of a package; nothing to scan."
    raise BeanwireScanError(msg)


def _module_components(module: ModuleType) -> Iterable[type[Any]]:
    for value in vars(module).values():
        if is_runtime_class(value) and value.__module__ == module.__name__ and is_component(value):
            yield value


__all__ = ["DiscoveryStrategy", "PackageScanner", "root_namespace"]
