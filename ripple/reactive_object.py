"""
Ripple ReactiveObject - Recursively Reactive Mapping
====================================================

Wraps a dict so that every value becomes a reactive child chosen by shape:
lists and tuples become ReactiveArray, dicts become nested ReactiveObject
and everything else becomes ReactiveProperty.

The object subscribes its aggregate channel to every child it owns, so a
change anywhere in the tree bubbles up level by level to the root. Two
dedicated channels cover changes to the key set itself:

    on_set_value_of  the key passed to `set_value_of`
    on_delete        the wrapper removed by `delete`

A deleted child is unsubscribed before `on_delete` fires. It stays usable
on its own but can no longer reach this object's observers.

Bulk replacement comes in three strengths:

- `set(new)` updates every child silently, then notifies once here
- `set_without_notifying(new)` is the same without the final notification
- `set_with_notifying_all(new)` notifies through every child and level,
  then once more here at the end

None of them compare old and new values: every explicit set notifies.
Assigning a value whose shape differs from the existing child's (a dict to
a ReactiveArray, say) is not checked and leaves the tree inconsistent.

Example:
    vector = ReactiveObject({"x": 0, "y": 0, "z": 0})
    vector.add_observer(lambda children: print({k: c.value for k, c in children.items()}))
    vector["x"].set(1)            # {'x': 1, 'y': 0, 'z': 0}
    vector.delete("z")            # {'x': 1, 'y': 0}
    vector.set_value_of("z", 3)   # {'x': 1, 'y': 0, 'z': 3}
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, Generic, Hashable, Iterator, Mapping, Optional, Union

from .common_types import K
from .observable import Observable
from .reactive import Reactive
from .reactive_array import ReactiveArray
from .reactive_property import ReactiveProperty
from .shape import Shape, classify

logger = logging.getLogger(__name__)

ReactiveValue = Union["ReactiveObject", ReactiveArray, ReactiveProperty]


def wrap(value: Any) -> ReactiveValue:
    """Build the reactive wrapper matching the shape of `value`."""
    shape = classify(value)
    if shape is Shape.ARRAY:
        return ReactiveArray(value)
    if shape is Shape.OBJECT:
        return ReactiveObject(value)
    return ReactiveProperty(value)


class ReactiveObject(
    Reactive[Mapping[K, ReactiveValue], Dict[K, Any]], Generic[K]
):
    """Reactive wrapper around a dict whose values are reactive children."""

    def __init__(self, initial_value: Optional[Mapping[K, Any]] = None) -> None:
        super().__init__()
        self._value: Dict[K, ReactiveValue] = {}
        for key, item in (initial_value or {}).items():
            self._value[key] = self._adopt(wrap(item))

        self.on_set_value_of: Observable[K] = Observable()
        self.on_delete: Observable[ReactiveValue] = Observable()
        self.on_set_value_of.add_observer(self._notify_observer)
        self.on_delete.add_observer(self._notify_observer)

    def _adopt(self, child: ReactiveValue) -> ReactiveValue:
        child.add_observer(self._notify_observer)
        return child

    def _release(self, child: ReactiveValue) -> None:
        child.remove_observer(self._notify_observer)

    @property
    def value(self) -> Mapping[K, ReactiveValue]:
        """Live read-only view of the key to child mapping."""
        return MappingProxyType(self._value)

    def to_unreactive(self) -> Dict[K, Any]:
        return {key: child.to_unreactive() for key, child in self._value.items()}

    def set_value_of(self, key: K, new_value: Any) -> None:
        """
        Assign one key and fire `on_set_value_of` once.

        An existing child is updated silently, whatever its size, so the
        key channel is the only notification. A new key gets a freshly
        wrapped and subscribed child.
        """
        if key in self._value:
            self._value[key].set_without_notifying(new_value)
        else:
            self._value[key] = self._adopt(wrap(new_value))
            logger.debug("Added key %r to %s", key, type(self).__name__)
        self.on_set_value_of.notify(key)

    def delete(self, key: K) -> ReactiveValue:
        """
        Remove `key`, detach its child and fire `on_delete` with it.

        Raises KeyError if the key is absent. Returns the detached child.
        """
        child = self._value.pop(key)
        self._release(child)
        logger.debug("Deleted key %r from %s", key, type(self).__name__)
        self.on_delete.notify(child)
        return child

    def set_with_notifying_all(self, new_value: Mapping[K, Any]) -> None:
        """
        Replace the whole tree, notifying at every level touched.

        Keys missing from `new_value` are deleted, nested objects are
        replaced recursively, arrays and properties are set, and new keys go
        through `set_value_of`. Each of those notifies on its own; this
        object notifies once more after all of them.
        """
        for key, child in list(self._value.items()):
            if key not in new_value:
                self.delete(key)
            elif isinstance(child, ReactiveObject):
                child.set_with_notifying_all(new_value[key])
            else:
                child.set(new_value[key])

        for key, item in new_value.items():
            if key not in self._value:
                self.set_value_of(key, item)

        self.notify()

    def set_without_notifying(self, new_value: Mapping[K, Any]) -> None:
        for key, child in list(self._value.items()):
            if key in new_value:
                child.set_without_notifying(new_value[key])
            else:
                del self._value[key]
                self._release(child)

        for key, item in new_value.items():
            if key not in self._value:
                self._value[key] = self._adopt(wrap(item))

        logger.debug("Replaced contents of %s with keys %r", type(self).__name__, list(new_value))

    # ------------------------------------------------------------------------
    # Mapping-style reads
    # ------------------------------------------------------------------------

    def __getitem__(self, key: K) -> ReactiveValue:
        return self._value[key]

    def __contains__(self, key: Hashable) -> bool:
        return key in self._value

    def __iter__(self) -> Iterator[K]:
        return iter(self._value)

    def __len__(self) -> int:
        return len(self._value)
