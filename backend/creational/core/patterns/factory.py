from typing import Callable, Dict, Generic, Hashable, List, TypeVar
import logging

from creational.core.patterns.exceptions import UnknownProductError


CreatorType = TypeVar("CreatorType")

logger = logging.getLogger(__name__)


class CreatorRegistry(Generic[CreatorType]):
    """
    Keyed lookup of creators (factories, factory classes, callables).

    Lets callers pick a factory variant by a discriminant without the caller,
    or any existing factory, knowing the concrete creator. New variants are
    added with ``register`` instead of editing a selection branch.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._creators: Dict[Hashable, CreatorType] = {}

    def register(self, key: Hashable) -> Callable[[CreatorType], CreatorType]:
        """Class decorator registering the decorated creator under ``key``."""

        def decorator(creator: CreatorType) -> CreatorType:
            self.add(key, creator)
            return creator

        return decorator

    def add(self, key: Hashable, creator: CreatorType) -> None:
        if key in self._creators:
            logger.warning(f"{self._name}: creator for '{key}' replaced")
        self._creators[key] = creator

    def get(self, key: Hashable) -> CreatorType:
        try:
            return self._creators[key]
        except KeyError:
            raise UnknownProductError(key, supported=self.keys()) from None

    def keys(self) -> List[Hashable]:
        return list(self._creators.keys())

    def __contains__(self, key: Hashable) -> bool:
        return key in self._creators
