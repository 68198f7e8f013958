from __future__ import annotations

import logging
import threading
from collections.abc import Iterator

logger = logging.getLogger(__name__)


class BeanRegistry:
    """Thread-safe mapping from bean name to its single instance.

    Entries are never replaced: the first registration of a name wins and
    later ones are logged and dropped. ``values`` and ``items`` return
    snapshots, so iterating them never races with concurrent registrations.
    """

    def __init__(self) -> None:
        self._beans: dict[str, object] = {}
        self._lock = threading.Lock()

    def register(self, name: str, instance: object) -> bool:
        """Store ``instance`` under ``name`` unless the name is already taken.

        Returns:
            ``True`` when the instance was stored, ``False`` when it was
            discarded because of a duplicate name.

        """
        with self._lock:
            if name not in self._beans:
                self._beans[name] = instance
                return True
            existing = self._beans[name]

        logger.warning(
            "Bean with name '%s' already exists (%s). Skipping: %s.%s",
            name,
            type(existing).__qualname__,
            type(instance).__module__,
            type(instance).__qualname__,
        )
        return False

    def get(self, name: str) -> object | None:
        """Return the bean registered under ``name`` or ``None``."""
        return self._beans.get(name)

    def values(self) -> list[object]:
        with self._lock:
            return list(self._beans.values())

    def items(self) -> list[tuple[str, object]]:
        with self._lock:
            return list(self._beans.items())

    def names(self) -> list[str]:
        with self._lock:
            return list(self._beans)

    def clear(self) -> None:
        with self._lock:
            self._beans.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._beans

    def __len__(self) -> int:
        return len(self._beans)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())


__all__ = ["BeanRegistry"]
