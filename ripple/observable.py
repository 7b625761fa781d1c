"""
Ripple Observable - Subscriber Registry and Notification
========================================================

This module provides the publish/subscribe core every reactive wrapper is
built on.

An Observable keeps a registry mapping each callback to the chain of
predicates that must accept a value before the callback sees it. The
registry is an insertion-ordered dict, so observers are notified in the
order they were first registered.

Key Features:
- Synchronous fan-out: `notify` calls every observer before returning
- Filter views: `filter(pred)` returns a view sharing the same registry
- Chained predicates are evaluated left to right and short-circuit
- Removal by callback identity: an equivalent callable is a different key

Usage:
    numbers = Observable()
    numbers.filter(lambda n: n % 2 == 0).filter(lambda n: n > 5).add_observer(print)

    for i in range(10):
        numbers.notify(i)  # prints 6, 8

Callbacks are matched by identity, never by equality. Lambdas and nested
functions created anew are distinct registrations, and so is each fresh
`obj.method` lookup: keep the bound method in a variable to remove it later.
"""

import logging
from typing import Dict, Generic, Tuple

from .common_types import Callback, Predicate, T

logger = logging.getLogger(__name__)


class _Registration:
    """One registered callback and the predicates guarding it."""

    __slots__ = ("callback", "predicates")

    def __init__(self, callback: Callback, predicates: Tuple[Predicate, ...]):
        self.callback = callback
        self.predicates = predicates


# Keyed by id(callback). The registration holds a strong reference to the
# callback, so the id cannot be reused while it is registered.
Registry = Dict[int, _Registration]


class FilterObservable(Generic[T]):
    """
    A view onto an Observable's registry with a predicate chain attached.

    Only `filter` and `add_observer` are available here. Removing, clearing
    and notifying remain operations of the root Observable.
    """

    __slots__ = ("_source", "_predicates")

    def __init__(self, source: "Observable", predicates: Tuple[Predicate, ...]):
        self._source = source
        self._predicates = predicates

    def filter(self, predicate: Predicate) -> "FilterObservable":
        """Return a new view whose chain is this one plus `predicate`."""
        return FilterObservable(self._source, self._predicates + (predicate,))

    def add_observer(self, callback: Callback) -> None:
        """Register `callback` on the shared registry under this chain."""
        self._source._register(callback, self._predicates)

    def __repr__(self) -> str:
        return f"FilterObservable(predicates={len(self._predicates)})"


class Observable(Generic[T]):
    """
    Registry of observers with synchronous, ordered notification.

    Callbacks are matched by identity only; `__eq__` and `__hash__` on a
    callable object are never consulted. Registering the same callback
    twice keeps a single entry (at its original position) and replaces its
    predicate chain.
    """

    def __init__(self) -> None:
        self._observers: Registry = {}
        self._generation = 0

    def _register(self, callback: Callback, predicates: Tuple[Predicate, ...]) -> None:
        registration = self._observers.get(id(callback))
        if registration is not None:
            registration.predicates = predicates
            return
        self._observers[id(callback)] = _Registration(callback, predicates)
        self._generation += 1

    def filter(self, predicate: Predicate) -> FilterObservable[T]:
        """
        Start a filter chain.

        The returned view writes into this Observable's registry, so
        observers added through it are removed by `remove_observer` and
        `clear_observers` on this object like any other.
        """
        return FilterObservable(self, (predicate,))

    def add_observer(self, callback: Callback) -> None:
        """Register `callback` unconditionally."""
        self._register(callback, ())

    def remove_observer(self, callback: Callback) -> None:
        """Unregister `callback`. Unknown callbacks are ignored."""
        self._observers.pop(id(callback), None)

    def clear_observers(self) -> None:
        self._observers.clear()

    def has_observer(self, callback: Callback) -> bool:
        return id(callback) in self._observers

    def notify(self, arg: T) -> None:
        """
        Send `arg` to every observer whose predicates all accept it.

        Observers run synchronously in registration order against the live
        registry: an observer removed by an earlier one in the same pass is
        skipped, and one added during the pass is called before `notify`
        returns.

        An observer that raises stops the fan-out: the exception reaches the
        caller and the observers after it are skipped.
        """
        pending = list(self._observers.values())
        queued = {id(registration) for registration in pending}
        generation = self._generation
        index = 0
        while index < len(pending):
            registration = pending[index]
            index += 1
            if self._observers.get(id(registration.callback)) is not registration:
                continue
            if all(predicate(arg) for predicate in registration.predicates):
                try:
                    registration.callback(arg)
                except Exception:
                    logger.debug("Observer %r raised during notify", registration.callback)
                    raise
            if self._generation != generation:
                generation = self._generation
                for later in self._observers.values():
                    if id(later) not in queued:
                        queued.add(id(later))
                        pending.append(later)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(observers={len(self._observers)})"
