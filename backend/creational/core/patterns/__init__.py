"""
Design Patterns Module

This module contains the creational design pattern implementations used throughout the application.
Currently includes:
- Singleton Pattern: eager, synchronized and double-checked variants for process-wide managers
- Builder Pattern: fluent staging objects that validate and produce immutable models
- Prototype Pattern: cloneable objects and a registry that hands out copies
- Factory Pattern: keyed creator lookup shared by the factory variants
"""

from .builder import Builder
from .exceptions import (
    BuilderValidationError,
    CreationalPatternError,
    PrototypeNotFoundError,
    UnknownProductError,
)
from .factory import CreatorRegistry
from .prototype import Prototype, PrototypeRegistry
from .singleton import (
    DoubleCheckedSingleton,
    DoubleCheckedSingletonMeta,
    EagerSingleton,
    EagerSingletonMeta,
    Singleton,
    SingletonABCMeta,
    SingletonMeta,
)

__all__ = [
    "Builder",
    "BuilderValidationError",
    "CreationalPatternError",
    "CreatorRegistry",
    "DoubleCheckedSingleton",
    "DoubleCheckedSingletonMeta",
    "EagerSingleton",
    "EagerSingletonMeta",
    "Prototype",
    "PrototypeNotFoundError",
    "PrototypeRegistry",
    "Singleton",
    "SingletonABCMeta",
    "SingletonMeta",
    "UnknownProductError",
]
