from typing import Any, Dict, List, Optional, Sequence


class CreationalPatternError(Exception):
    """Base class for errors raised by the pattern implementations."""


class BuilderValidationError(CreationalPatternError):
    """Raised by ``Builder.build()`` when the staged fields cannot produce a valid product."""

    def __init__(
        self,
        message: str,
        missing_fields: Optional[Sequence[str]] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ):
        super().__init__(message)
        self.missing_fields = list(missing_fields or [])
        self.errors = list(errors or [])

    def to_dict(self) -> dict:
        return {
            "message": str(self),
            "missing_fields": self.missing_fields,
            "errors": self.errors,
        }


class PrototypeNotFoundError(CreationalPatternError, KeyError):
    """Raised when a registry has no prototype for the requested key."""

    def __init__(self, key: Any):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"No prototype registered for {self.key!r}"


class UnknownProductError(CreationalPatternError, ValueError):
    """Raised when a factory is asked for a product kind it does not know."""

    def __init__(self, kind: Any, supported: Optional[Sequence[Any]] = None):
        self.kind = kind
        self.supported = list(supported or [])
        message = f"Unknown product kind: {kind!r}"
        if self.supported:
            message += f" (supported: {', '.join(str(s) for s in self.supported)})"
        super().__init__(message)
