from abc import ABC, abstractmethod
from threading import Lock
from typing import Dict, Generic, Hashable, List, Optional, TypeVar
import logging

from creational.core.patterns.exceptions import PrototypeNotFoundError


class Prototype(ABC):
    """An object that can produce an independent copy of itself."""

    @abstractmethod
    def clone(self):
        """
        Return a new object with the same field values.

        Mutating the copy must never affect the original, and vice versa.
        """


PrototypeType = TypeVar("PrototypeType", bound=Prototype)


class PrototypeRegistry(Generic[PrototypeType]):
    """
    Thread-safe mapping from a key (role, category) to one canonical prototype.

    The registry owns the canonical instances and only ever hands out clones
    of them; callers own the copies they receive.
    """

    def __init__(self) -> None:
        self._prototypes: Dict[Hashable, PrototypeType] = {}
        self._lock = Lock()
        self._logger = logging.getLogger(__name__)

    def add_prototype(self, key: Hashable, prototype: PrototypeType) -> Optional[PrototypeType]:
        """
        Register ``prototype`` as the canonical instance for ``key``.

        Args:
            key: The role or category the prototype stands for
            prototype: The template; the registry keeps a private clone of it

        Returns:
            The prototype previously registered under ``key``, or None
        """
        if not isinstance(prototype, Prototype):
            raise TypeError(f"{type(prototype).__name__} does not implement Prototype")

        with self._lock:
            previous = self._prototypes.get(key)
            self._prototypes[key] = prototype.clone()

        if previous is not None:
            self._logger.info(f"Prototype for '{key}' replaced")
        else:
            self._logger.debug(f"Prototype for '{key}' registered")
        return previous

    def get_prototype(self, key: Hashable) -> PrototypeType:
        """
        Return a fresh clone of the canonical prototype for ``key``.

        Raises:
            PrototypeNotFoundError: If nothing is registered under ``key``
        """
        with self._lock:
            prototype = self._prototypes.get(key)
        if prototype is None:
            raise PrototypeNotFoundError(key)
        return prototype.clone()

    def has_prototype(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._prototypes

    def remove_prototype(self, key: Hashable) -> bool:
        """
        Drop the prototype registered under ``key``.

        Returns:
            True if a prototype was removed, False if none was registered
        """
        with self._lock:
            removed = self._prototypes.pop(key, None) is not None
        if removed:
            self._logger.debug(f"Prototype for '{key}' removed")
        return removed

    def keys(self) -> List[Hashable]:
        with self._lock:
            return list(self._prototypes.keys())

    def __len__(self) -> int:
        with self._lock:
            return len(self._prototypes)

    def __contains__(self, key: Hashable) -> bool:
        return self.has_prototype(key)
