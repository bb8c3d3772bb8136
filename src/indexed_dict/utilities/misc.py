"""Assorted other utilities"""

import numpy as np

from numbers import Integral

from ..errors import InvalidArgumentError, PositionOutOfRangeError


def check_position(position, upper: int) -> int:
    """Validate `position` against the closed range [0, upper] and return it as an int.

    Callers pass upper = len - 1 for get/set/remove and upper = len for insert,
    so an empty container rejects every position except insert at 0.
    Negative positions are never wrapped around.
    """
    if isinstance(position, bool) or not isinstance(position, Integral):
        raise InvalidArgumentError(f'Position must be an integer, not {type(position).__name__}')
    position = int(position)
    if position < 0 or position > upper:
        raise PositionOutOfRangeError(position, upper)
    return position


def check_key(key):
    if key is None:
        raise InvalidArgumentError('Key must not be None')
    return key


def make_pair(x):
    """Split a 2-item sequence into (key, value).

    Wrapping with this allows user to write, e.g.:
    "d.add_pair(['a', 1])" as well as "d.add_pair(('a', 1))"
    """
    try:
        key, value = x
    except (TypeError, ValueError):
        raise InvalidArgumentError(f'Expected a (key, value) pair, got {x!r}')
    return key, value


def values_equal(a, b):
    """Default value equality, with numpy arrays compared elementwise in full"""
    if a is b:
        return True
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return np.array_equal(a, b)
    return bool(a == b)
