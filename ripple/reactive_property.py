"""
Ripple ReactiveProperty - Scalar Value Wrapper
==============================================

Holds a single value and notifies with it whenever it is replaced.

Only replacement is tracked. If the held value is itself mutable (a list
kept as a scalar, a custom object), changing its internals does not notify;
`to_unreactive()` hands back the same reference, not a copy.

Example:
    count = ReactiveProperty(0)
    count.add_observer(lambda n: print(f"notified: {n}"))
    count.set(1)     # notified: 1
    count.value = 2  # notified: 2
    count.value += 1 # notified: 3
"""

from typing import Generic

from .common_types import T
from .reactive import Reactive


class ReactiveProperty(Reactive[T, T], Generic[T]):
    """Reactive wrapper around a single value."""

    def __init__(self, initial_value: T) -> None:
        super().__init__()
        self._value = initial_value

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        self.set(new_value)

    def to_unreactive(self) -> T:
        return self._value

    def set_without_notifying(self, new_value: T) -> None:
        self._value = new_value
