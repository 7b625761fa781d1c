"""
Ripple Reactive - Abstract Base for Value Wrappers
==================================================

A Reactive couples an Observable to a value it owns. Subscribers are
managed exactly as on a plain Observable, but `notify()` takes no argument:
it always sends the wrapper's current value.

Subclasses must implement:
- `value` - the held value (possibly made of nested reactive wrappers)
- `to_unreactive()` - a plain copy with every reactive layer stripped
- `set_without_notifying(new_value)` - replace the held value silently

`set(new_value)` is defined here as a silent replace followed by exactly
one notification.

Notification is synchronous and reentrant. An observer that mutates the
wrapper it observes triggers a nested notification before the outer one
returns; with no guard in the observer this recurses until Python raises
RecursionError.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic

from .common_types import T, V
from .observable import Observable


class Reactive(ABC, Observable[V], Generic[V, T]):
    """
    Observable that notifies with its own held value.

    V is the type subscribers receive (and `value` returns); T is the plain
    type accepted by `set` and returned by `to_unreactive()`.
    """

    def __init__(self) -> None:
        super().__init__()
        # The one handle this wrapper subscribes to its channels and children.
        # Registration is by identity, so removal must pass this same object.
        self._notify_observer = self._relay

    @property
    @abstractmethod
    def value(self) -> V:
        pass

    @abstractmethod
    def to_unreactive(self) -> T:
        pass

    @abstractmethod
    def set_without_notifying(self, new_value: T) -> None:
        """Replace the held value without notifying anyone."""
        pass

    def set(self, new_value: T) -> None:
        """Replace the held value, then notify once."""
        self.set_without_notifying(new_value)
        self.notify()

    def notify(self) -> None:  # type: ignore[override]
        """Send the current value to all subscribers."""
        super().notify(self.value)

    def _relay(self, _arg: Any = None) -> None:
        self.notify()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_unreactive()!r})"
