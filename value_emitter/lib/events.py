"""Typed single-event emitter for decoupling components."""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

Listener = Callable[[T], Any]


class Subscription(Generic[T]):
    """Handle for one listener registration.

    Each handle is its own slot in the emitter's listener list, so releasing it
    removes exactly this registration even if the same callback was added more
    than once.
    """

    def __init__(self, emitter: ValueEmitter[T] | None, listener: Listener[T] | None) -> None:
        self._emitter = emitter
        self._listener = listener

    @property
    def active(self) -> bool:
        """True while this registration still receives emitted values."""
        return self._emitter is not None and self._emitter._has(self)

    def dispose(self) -> None:
        """Remove this registration. Safe to call any number of times."""
        if self._emitter is not None:
            self._emitter._remove(self)
        self._emitter = None
        self._listener = None

    release = dispose

    def __enter__(self) -> Subscription[T]:
        return self

    def __exit__(self, *exc_info) -> None:
        self.dispose()


class ValueEmitter(Generic[T]):
    """Like an event system, but for a single event with a typed payload.

    Create one instance per logical event instead of dispatching on string
    names. Listeners are called synchronously in registration order and
    exceptions bubble up to the caller of emit().

    Each emit() iterates over a copy of the listener list taken on entry, so
    listeners may add or release registrations, or dispose the emitter,
    without affecting the emission in progress.
    """

    def __init__(self) -> None:
        self._listeners: list[Subscription[T]] = []
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def add_listener(self, listener: Listener[T]) -> Subscription[T]:
        """Register a listener and return a handle that removes it."""
        if not callable(listener):
            raise TypeError(f"Listener must be callable, got {type(listener).__name__}")

        # Disposed emitters are inert: hand back a handle that is already released
        if self._disposed:
            logging.debug(f"Ignoring listener {listener!r} added to a disposed emitter")
            return Subscription(None, None)

        subscription = Subscription(self, listener)
        self._listeners.append(subscription)
        return subscription

    register = add_listener

    def emit(self, value: T) -> None:
        """Call every listener registered when this emission started."""
        # Resolve callbacks up front so releases during this emission don't skip anyone
        listeners = [s._listener for s in self._listeners]
        for listener in listeners:
            listener(value)

    def dispose(self) -> None:
        """Drop all listeners. The emitter stays inert afterwards."""
        if not self._disposed:
            logging.debug(f"Disposing emitter, dropping {len(self._listeners)} listener(s)")
        self._disposed = True
        dropped, self._listeners = self._listeners, []
        # Outstanding handles must not keep a disposed emitter alive
        for subscription in dropped:
            subscription._emitter = None
            subscription._listener = None

    def _has(self, subscription: Subscription[T]) -> bool:
        # Subscription has no __eq__, so membership is by identity
        return subscription in self._listeners

    def _remove(self, subscription: Subscription[T]) -> None:
        if subscription in self._listeners:
            self._listeners.remove(subscription)

    def __enter__(self) -> ValueEmitter[T]:
        return self

    def __exit__(self, *exc_info) -> None:
        self.dispose()
