from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class ListenerCollection(Generic[T]):
    """Insertion-ordered set of listeners.

    Adding a listener that is already registered and removing one that isn't are both no-ops. Iteration runs over a
    snapshot, so listeners may be added or removed while a notification is in progress.
    """

    def __init__(self) -> None:
        # dict instead of set to keep registration order
        self._listeners: dict[T, None] = {}

    def add(self, listener: T) -> None:
        self._listeners.setdefault(listener, None)

    def remove(self, listener: T) -> None:
        self._listeners.pop(listener, None)

    def __contains__(self, listener: object) -> bool:
        return listener in self._listeners

    def __len__(self) -> int:
        return len(self._listeners)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._listeners))
