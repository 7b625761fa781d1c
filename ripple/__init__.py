"""
Ripple - Observable Values with Change Propagation
==================================================

A small observer library: a publish/subscribe core (`Observable`) and
reactive wrappers (`ReactiveProperty`, `ReactiveArray`, `ReactiveObject`)
that notify their subscribers whenever they are mutated. Notification is
synchronous; changes in nested wrappers bubble up to their parents.
"""

from typing import Any

from .observable import FilterObservable, Observable
from .protocols import (
    FilterObservableProtocol,
    ObservableProtocol,
    ObserveOnlyObservable,
    ObserveOnlyReactive,
    ObserveOnlyReactiveArray,
    ObserveOnlyReactiveObject,
    ReactiveProtocol,
)
from .reactive import Reactive
from .reactive_array import ReactiveArray
from .reactive_object import ReactiveObject, ReactiveValue, wrap
from .reactive_property import ReactiveProperty
from .shape import Shape, classify

__version__ = "0.1.0"


def reactive(value: Any) -> ReactiveValue:
    """
    Wrap a plain value in the reactive type matching its shape.

    Lists and tuples give a ReactiveArray, dicts a ReactiveObject and any
    other value a ReactiveProperty.
    """
    return wrap(value)


__all__ = [
    # Core
    "Observable",
    "FilterObservable",
    # Reactive wrappers
    "Reactive",
    "ReactiveProperty",
    "ReactiveArray",
    "ReactiveObject",
    "ReactiveValue",
    # Factory functions
    "reactive",
    "wrap",
    "classify",
    "Shape",
    # Protocols
    "ObservableProtocol",
    "FilterObservableProtocol",
    "ReactiveProtocol",
    "ObserveOnlyObservable",
    "ObserveOnlyReactive",
    "ObserveOnlyReactiveArray",
    "ObserveOnlyReactiveObject",
]
