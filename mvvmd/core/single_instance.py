"""Process-wide single-instance store."""

from typing import Any, TypeVar

T = TypeVar('T')


class SingleInstanceError(Exception):
    """Raised when a type already has a live instance in the store."""

    def __init__(self, cls: type):
        self.cls = cls
        super().__init__(f"{cls.__name__} is already instantiated")


class SingleInstanceStore:
    """Holds at most one instance per concrete type.

    The store owns the instances it creates; anything else holding them
    (a DataManager, application code) only borrows the reference.
    """

    def __init__(self):
        self._instances: dict[type, Any] = {}

    def create(self, cls: type[T], *args: Any, **kwargs: Any) -> T:
        """Construct `cls` and keep it as that type's single instance.

        Raises:
            SingleInstanceError: If `cls` already has an instance here.
        """
        if cls in self._instances:
            raise SingleInstanceError(cls)
        instance = cls(*args, **kwargs)
        self._instances[cls] = instance
        return instance

    def claim(self, obj: Any) -> None:
        """Record an already-built object as the single instance of its type."""
        cls = type(obj)
        if cls in self._instances:
            raise SingleInstanceError(cls)
        self._instances[cls] = obj

    def get(self, cls: type[T]) -> T | None:
        return self._instances.get(cls)

    def release(self, cls: type) -> None:
        """Forget the instance of `cls`, allowing it to be created again."""
        self._instances.pop(cls, None)

    def clear(self) -> None:
        self._instances.clear()

    def __contains__(self, cls: type) -> bool:
        return cls in self._instances

    def __len__(self) -> int:
        return len(self._instances)


# Global store instance
_store = SingleInstanceStore()


def get_instance_store() -> SingleInstanceStore:
    """Get the process-wide single-instance store."""
    return _store
