from __future__ import annotations

import threading
from typing import Any

from beanwire.container import Container


class ContainerContext:
    """Process-wide holder of the default container.

    The binding is global for this ``ContainerContext`` instance, not task-local
    or thread-local. A container is created on first use when none was set.
    """

    def __init__(self) -> None:
        self._container: Container | None = None
        self._lock = threading.Lock()

    def set_current(self, container: Container) -> None:
        with self._lock:
            self._container = container

    def get_current(self) -> Container:
        """Return the shared container, creating it with default settings if needed."""
        with self._lock:
            if self._container is None:
                self._container = Container()
            return self._container

    def reset(self) -> None:
        """Close and forget the shared container."""
        with self._lock:
            container, self._container = self._container, None
        if container is not None:
            container.close()

    def run(self, root: Any) -> None:
        self.get_current().run(root)

    def get_bean(self, name: str) -> Any | None:
        return self.get_current().get_bean(name)


container_context = ContainerContext()


def run(root: Any) -> None:
    """Scan the package of ``root`` into the shared container. See ``Container.run``."""
    container_context.run(root)


def get_bean(name: str) -> Any | None:
    """Return a bean of the shared container by simple class name, or ``None``."""
    return container_context.get_bean(name)


__all__ = ["ContainerContext", "container_context", "get_bean", "run"]
