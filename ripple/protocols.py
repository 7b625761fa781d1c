"""
Ripple Protocols - Structural Interfaces
========================================

Protocol-based descriptions of the capabilities the concrete classes
provide. Nothing here exists at runtime beyond `isinstance` support: the
concrete classes satisfy these protocols structurally.

Two families are defined:

Full interfaces:
- `ObservableProtocol` - filter, subscribe, unsubscribe, clear, notify
- `FilterObservableProtocol` - what a filter view allows
- `ReactiveProtocol` - adds value access and replacement

Read-only projections (`ObserveOnly*`):
Hand one of these to code that should watch a wrapper but never change it.
They keep filtering, subscription management, `value` reads,
`to_unreactive()` and the per-operation channels, and leave out every
method that mutates or notifies. The narrowing is enforced by the type
checker only; the object passed around is the wrapper itself.

Example:
    def show(count: ObserveOnlyReactive[int]) -> None:
        count.add_observer(print)
        print(count.value)
        # count.set(1)  -> rejected by the type checker
"""

from typing import (
    Any,
    Dict,
    Mapping,
    Optional,
    Protocol,
    Sequence,
    TypeVar,
    runtime_checkable,
)

from .common_types import Callback, Predicate

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

# ============================================================================
# FULL INTERFACES
# ============================================================================


@runtime_checkable
class FilterObservableProtocol(Protocol[T]):
    def filter(self, predicate: Predicate) -> "FilterObservableProtocol[Any]": ...

    def add_observer(self, callback: Callback) -> None: ...


@runtime_checkable
class ObservableProtocol(Protocol[T]):
    def filter(self, predicate: Predicate) -> FilterObservableProtocol[Any]: ...

    def add_observer(self, callback: Callback) -> None: ...

    def remove_observer(self, callback: Callback) -> None: ...

    def clear_observers(self) -> None: ...

    def notify(self, arg: T) -> None: ...


@runtime_checkable
class ReactiveProtocol(Protocol[T]):
    @property
    def value(self) -> Any: ...

    def to_unreactive(self) -> T: ...

    def set(self, new_value: T) -> None: ...

    def set_without_notifying(self, new_value: T) -> None: ...

    def add_observer(self, callback: Callback) -> None: ...

    def remove_observer(self, callback: Callback) -> None: ...

    def notify(self) -> None: ...


# ============================================================================
# READ-ONLY PROJECTIONS
# ============================================================================


@runtime_checkable
class ObserveOnlyObservable(Protocol[T_co]):
    def filter(self, predicate: Predicate) -> FilterObservableProtocol[Any]: ...

    def add_observer(self, callback: Callback) -> None: ...

    def remove_observer(self, callback: Callback) -> None: ...

    def clear_observers(self) -> None: ...


@runtime_checkable
class ObserveOnlyReactive(ObserveOnlyObservable[T_co], Protocol[T_co]):
    @property
    def value(self) -> T_co: ...

    def to_unreactive(self) -> Any: ...


@runtime_checkable
class ObserveOnlyReactiveArray(ObserveOnlyReactive[Sequence[T_co]], Protocol[T_co]):
    @property
    def on_set_at(self) -> ObserveOnlyObservable[int]: ...

    @property
    def on_copy_within(self) -> ObserveOnlyObservable[Sequence[T_co]]: ...

    @property
    def on_fill(self) -> ObserveOnlyObservable[Sequence[T_co]]: ...

    @property
    def on_pop(self) -> ObserveOnlyObservable[Optional[T_co]]: ...

    @property
    def on_push(self) -> ObserveOnlyObservable[Sequence[T_co]]: ...

    @property
    def on_reverse(self) -> ObserveOnlyObservable[Sequence[T_co]]: ...

    @property
    def on_shift(self) -> ObserveOnlyObservable[Optional[T_co]]: ...

    @property
    def on_sort(self) -> ObserveOnlyObservable[Sequence[T_co]]: ...

    @property
    def on_splice(self) -> ObserveOnlyObservable[Sequence[T_co]]: ...

    @property
    def on_unshift(self) -> ObserveOnlyObservable[Sequence[T_co]]: ...


@runtime_checkable
class ObserveOnlyReactiveObject(ObserveOnlyReactive[Mapping[str, Any]], Protocol):
    @property
    def on_set_value_of(self) -> ObserveOnlyObservable[Any]: ...

    @property
    def on_delete(self) -> ObserveOnlyObservable[Any]: ...

    def to_unreactive(self) -> Dict[str, Any]: ...
