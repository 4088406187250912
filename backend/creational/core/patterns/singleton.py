from abc import ABC, ABCMeta
import threading


class SingletonMeta(type):
    """
    Thread-safe Singleton metaclass with a fully synchronized accessor.

    Every instantiation takes the lock before checking for an existing
    instance. Simple and correct, but all callers are serialized on every
    access, even long after the instance exists.
    """

    _instances = {}
    _lock: threading.RLock = threading.RLock()

    def __call__(cls, *args, **kwargs):
        """
        Possible changes to the value of the `__init__` argument do not affect
        the returned instance.
        """
        with cls._lock:
            if cls not in cls._instances:
                instance = super().__call__(*args, **kwargs)
                cls._instances[cls] = instance
        return cls._instances[cls]


class DoubleCheckedSingletonMeta(SingletonMeta):
    """
    Singleton metaclass using double-checked locking.

    The existence check runs unguarded; only when it fails is the lock taken
    and the check repeated before constructing. After the first construction
    no caller touches the lock. The instance is stored only once `__init__`
    has returned, so no thread can see it half built.
    """

    def __call__(cls, *args, **kwargs):
        instance = cls._instances.get(cls)
        if instance is None:
            with cls._lock:
                instance = cls._instances.get(cls)
                if instance is None:
                    instance = super(SingletonMeta, cls).__call__(*args, **kwargs)
                    cls._instances[cls] = instance
        return instance


class EagerSingletonMeta(type):
    """
    Singleton metaclass with eager static instantiation.

    The instance is created when the class statement runs, so the class must
    be constructible without arguments. Pass ``eager=False`` in the class
    statement to skip instantiation (for abstract bases).
    """

    def __new__(mcls, name, bases, namespace, eager=True, **kwargs):
        return super().__new__(mcls, name, bases, namespace, **kwargs)

    def __init__(cls, name, bases, namespace, eager=True, **kwargs):
        super().__init__(name, bases, namespace, **kwargs)
        cls._eager_instance = None
        if eager:
            cls._eager_instance = super().__call__()

    def __call__(cls, *args, **kwargs):
        if cls._eager_instance is None:
            raise TypeError(f"{cls.__name__} was declared with eager=False and cannot be instantiated")
        return cls._eager_instance


class SingletonABCMeta(SingletonMeta, ABCMeta):
    """
    Metaclass that combines Singleton and ABC metaclasses to avoid conflicts.
    """
    pass


class DoubleCheckedSingletonABCMeta(DoubleCheckedSingletonMeta, ABCMeta):
    pass


class EagerSingletonABCMeta(EagerSingletonMeta, ABCMeta):
    pass


class _SingletonLifecycle:
    """Shared lifecycle: `_setup` runs once, `reset` re-runs it in place."""

    def __init__(self):
        """Initialize the singleton instance."""
        if hasattr(self, '_initialized'):
            return
        self._initialized = True
        self._setup()

    def _setup(self):
        """
        Override this method to perform actual initialization.
        This method will only be called once during the lifetime of the singleton.
        """
        pass

    @classmethod
    def get_instance(cls):
        """
        Get the singleton instance.

        Returns:
            The singleton instance of the class.
        """
        return cls()

    def reset(self):
        """
        Reset the singleton instance.
        This method should be used carefully, mainly for testing purposes.
        """
        if hasattr(self, '_initialized'):
            delattr(self, '_initialized')
        self._setup()
        self._initialized = True


class Singleton(_SingletonLifecycle, ABC, metaclass=SingletonABCMeta):
    """
    Abstract base class for implementing Singleton pattern.

    Any class that inherits from this will automatically become a singleton
    with thread-safe, lazily synchronized initialization.
    """


class DoubleCheckedSingleton(_SingletonLifecycle, ABC, metaclass=DoubleCheckedSingletonABCMeta):
    """Lazily created singleton whose accessor only locks until the first construction."""


class EagerSingleton(_SingletonLifecycle, ABC, metaclass=EagerSingletonABCMeta, eager=False):
    """Singleton built as soon as its class is defined."""
