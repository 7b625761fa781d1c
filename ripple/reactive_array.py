"""
Ripple ReactiveArray - Sequence Wrapper with Per-Operation Channels
===================================================================

Wraps a list and mirrors the in-place list mutators. Every mutator fires a
dedicated sub-observable, and every sub-observable is wired to the array's
own aggregate channel, so one mutation produces:

1. the sub-observable notification with an operation-specific payload
2. the aggregate notification with the full backing list

Channels and payloads:

    on_set_at       index that was assigned
    on_copy_within  full list after the copy
    on_fill         full list after the fill
    on_pop          removed element, or None when the list was empty
    on_push         the appended items
    on_reverse      full list after reversing
    on_shift        removed first element, or None when the list was empty
    on_sort         full list after sorting
    on_splice       the removed elements
    on_unshift      the prepended items

`copy_within`, `fill` and `splice` take JavaScript-style positions:
negative values count from the end and anything out of range is clamped.
`set_at` follows plain list assignment and raises IndexError past the end.

`value` is the live backing list. Mutating it directly bypasses every
channel; use the methods here instead.
"""

from functools import cmp_to_key
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional

from .common_types import CompareFunction, T
from .observable import Observable
from .reactive import Reactive


def _position(index: int, length: int) -> int:
    """Resolve a relative index the way Array.prototype methods do."""
    if index < 0:
        return max(length + index, 0)
    return min(index, length)


class ReactiveArray(Reactive[List[T], List[T]], Generic[T]):
    """Reactive wrapper around a list."""

    def __init__(self, initial_value: Iterable[T] = ()) -> None:
        super().__init__()
        self._value: List[T] = list(initial_value)

        self.on_set_at: Observable[int] = Observable()
        self.on_copy_within: Observable[List[T]] = Observable()
        self.on_fill: Observable[List[T]] = Observable()
        self.on_pop: Observable[Optional[T]] = Observable()
        self.on_push: Observable[List[T]] = Observable()
        self.on_reverse: Observable[List[T]] = Observable()
        self.on_shift: Observable[Optional[T]] = Observable()
        self.on_sort: Observable[List[T]] = Observable()
        self.on_splice: Observable[List[T]] = Observable()
        self.on_unshift: Observable[List[T]] = Observable()

        for channel in self.channels():
            channel.add_observer(self._notify_observer)

    def channels(self) -> List[Observable]:
        """All sub-observables, in a fixed order."""
        return [
            self.on_set_at,
            self.on_copy_within,
            self.on_fill,
            self.on_pop,
            self.on_push,
            self.on_reverse,
            self.on_shift,
            self.on_sort,
            self.on_splice,
            self.on_unshift,
        ]

    @property
    def value(self) -> List[T]:
        return self._value

    @value.setter
    def value(self, new_value: Iterable[T]) -> None:
        self.set(new_value)

    def to_unreactive(self) -> List[T]:
        return list(self._value)

    def set_without_notifying(self, new_value: Iterable[T]) -> None:
        self._value = list(new_value)

    def set_at(self, index: int, new_value: T) -> None:
        self._value[index] = new_value
        self.on_set_at.notify(index)

    # ------------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------------

    def copy_within(self, target: int, start: int = 0, end: Optional[int] = None) -> List[T]:
        """Copy the slice [start, end) over the elements starting at `target`."""
        length = len(self._value)
        to = _position(target, length)
        begin = _position(start, length)
        final = length if end is None else _position(end, length)
        count = min(final - begin, length - to)
        if count > 0:
            self._value[to : to + count] = self._value[begin : begin + count]
        self.on_copy_within.notify(self._value)
        return self._value

    def fill(self, value: T, start: int = 0, end: Optional[int] = None) -> List[T]:
        length = len(self._value)
        final = length if end is None else _position(end, length)
        for i in range(_position(start, length), final):
            self._value[i] = value
        self.on_fill.notify(self._value)
        return self._value

    def pop(self) -> Optional[T]:
        removed = self._value.pop() if self._value else None
        self.on_pop.notify(removed)
        return removed

    def push(self, *items: T) -> int:
        """Append `items` and return the new length."""
        self._value.extend(items)
        self.on_push.notify(list(items))
        return len(self._value)

    def reverse(self) -> List[T]:
        self._value.reverse()
        self.on_reverse.notify(self._value)
        return self._value

    def shift(self) -> Optional[T]:
        removed = self._value.pop(0) if self._value else None
        self.on_shift.notify(removed)
        return removed

    def sort(
        self,
        compare: Optional[CompareFunction] = None,
        *,
        key: Optional[Callable[[T], Any]] = None,
        reverse: bool = False,
    ) -> List[T]:
        """
        Sort in place.

        `compare` is a two-argument comparator returning a negative, zero or
        positive number; when given it takes precedence over `key`. Without
        either, elements are ordered with `<`.
        """
        if compare is not None:
            key = cmp_to_key(compare)
        self._value.sort(key=key, reverse=reverse)
        self.on_sort.notify(self._value)
        return self._value

    def splice(self, start: int, delete_count: Optional[int] = None, *items: T) -> List[T]:
        """
        Remove `delete_count` elements at `start`, insert `items` there.

        Without `delete_count` everything from `start` onwards is removed.
        Returns the removed elements.
        """
        length = len(self._value)
        begin = _position(start, length)
        if delete_count is None:
            count = length - begin
        else:
            count = min(max(delete_count, 0), length - begin)
        removed = self._value[begin : begin + count]
        self._value[begin : begin + count] = items
        self.on_splice.notify(removed)
        return removed

    def unshift(self, *items: T) -> int:
        """Prepend `items` and return the new length."""
        self._value[0:0] = items
        self.on_unshift.notify(list(items))
        return len(self._value)

    # ------------------------------------------------------------------------
    # Sequence protocol (reads, plus item assignment through set_at)
    # ------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._value)

    def __iter__(self) -> Iterator[T]:
        return iter(self._value)

    def __getitem__(self, index: int) -> T:
        return self._value[index]

    def __setitem__(self, index: int, new_value: T) -> None:
        self.set_at(index, new_value)

    def __contains__(self, item: object) -> bool:
        return item in self._value
