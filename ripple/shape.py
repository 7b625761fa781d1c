"""
Shape classification for plain values.

Decides which reactive wrapper a plain value gets: lists and tuples become
ReactiveArray, dicts become ReactiveObject and everything else, including
strings, bytes and None, becomes ReactiveProperty.
"""

from enum import Enum
from typing import Any


class Shape(Enum):
    PROPERTY = "property"
    ARRAY = "array"
    OBJECT = "object"


def classify(value: Any) -> Shape:
    if isinstance(value, (list, tuple)):
        return Shape.ARRAY
    if isinstance(value, dict):
        return Shape.OBJECT
    return Shape.PROPERTY
