"""Minimal event primitives shared by providers and tree nodes.

Listeners are plain callables invoked synchronously during ``fire``. Anything
slow must be handed off to the event loop by the listener itself.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Disposable:
    """Handle that releases a resource (usually an event subscription) once."""

    def __init__(self, on_dispose: Callable[[], None] | None = None) -> None:
        self._on_dispose = on_dispose
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        if self._on_dispose is not None:
            self._on_dispose()


class CompositeDisposable(Disposable):
    """Disposes a group of handles together."""

    def __init__(self, disposables: Iterable[Disposable] = ()) -> None:
        super().__init__(self._dispose_all)
        self._items: list[Disposable] = list(disposables)

    def add(self, disposable: Disposable) -> None:
        if self.disposed:
            disposable.dispose()
            return
        self._items.append(disposable)

    def __len__(self) -> int:
        return len(self._items)

    def _dispose_all(self) -> None:
        items, self._items = self._items, []
        for item in items:
            item.dispose()


class EventEmitter(Generic[T]):
    """Single-event fan-out with disposable listener registrations."""

    def __init__(self, name: str = "event") -> None:
        self.name = name
        self._listeners: list[Callable[[T], None]] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Callable[[T], None]) -> Disposable:
        self._listeners.append(listener)

        def _remove() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

        return Disposable(_remove)

    # Allows ``provider.on_filters_changed(listener)`` style registration
    __call__ = subscribe

    def fire(self, value: T) -> None:
        # Snapshot so listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            listener(value)
        logger.debug("Fired %s to %d listener(s)", self.name, len(self._listeners))
