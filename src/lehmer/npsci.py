"""
Numpy and scipy utilities.
"""

import numbers
from typing import Any

from lehmer.core import IndexOutOfRangeError


def item(value: Any) -> Any:
    """
    Meant to return the single value from a numpy array if it's defined.
    """
    try:
        return value.item()
    except AttributeError:
        pass
    return value


def as_index(value: Any) -> int:
    """
    Converts python or numpy integers into a non-negative index.

    Raises:
        TypeError: if the value isn't an integer.
        IndexOutOfRangeError: if the value is negative.
    """
    value = item(value)
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"Index must be an integer. Got: {value!r}")
    if value < 0:
        raise IndexOutOfRangeError(f"Index must be non-negative. Got: {value}")
    return int(value)
