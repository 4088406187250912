from abc import ABC
from typing import Any, ClassVar, Dict, Generic, List, Tuple, Type, TypeVar
import logging

from pydantic import BaseModel, ValidationError

from creational.core.patterns.exceptions import BuilderValidationError


ProductType = TypeVar("ProductType", bound=BaseModel)

logger = logging.getLogger(__name__)


class Builder(ABC, Generic[ProductType]):
    """
    Base class for fluent builders of pydantic models.

    Subclasses declare the ``product`` model and its ``required`` fields, and
    expose one setter per field that stages a value through ``_set`` and
    returns the builder, so calls can be chained:

        account = AccountBuilder().with_username("jdoe").with_email(...).build()

    ``build()`` validates the staged values and returns a new product; it
    raises ``BuilderValidationError`` and produces nothing when a required
    field is missing or a value is rejected by the model.
    """

    product: ClassVar[Type[BaseModel]]
    required: ClassVar[Tuple[str, ...]] = ()

    def __init__(self) -> None:
        self._fields: Dict[str, Any] = {}

    def _set(self, field: str, value: Any) -> "Builder[ProductType]":
        self._fields[field] = value
        return self

    def _snapshot(self) -> Dict[str, Any]:
        """Values handed to the product; hook for builders that stage containers."""
        return dict(self._fields)

    def missing_fields(self) -> List[str]:
        return [name for name in self.required if self._fields.get(name) is None]

    def build(self) -> ProductType:
        missing = self.missing_fields()
        if missing:
            raise BuilderValidationError(
                f"Cannot build {self.product.__name__}: missing required field(s) {', '.join(missing)}",
                missing_fields=missing,
            )

        try:
            product = self.product(**self._snapshot())
        except ValidationError as e:
            errors = [
                {"field": ".".join(str(part) for part in error["loc"]), "message": error["msg"]}
                for error in e.errors()
            ]
            raise BuilderValidationError(
                f"Cannot build {self.product.__name__}: {e.error_count()} invalid field(s)",
                errors=errors,
            ) from e

        logger.debug(f"Built {self.product.__name__} from {len(self._fields)} staged field(s)")
        return product

    def reset(self) -> "Builder[ProductType]":
        """Discard every staged value."""
        self._fields.clear()
        return self
