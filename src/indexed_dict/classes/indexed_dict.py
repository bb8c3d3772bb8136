"""IndexedDict class: an insertion-ordered dictionary with positional access."""

import warnings

import numpy as np

from collections.abc import Mapping, MutableMapping
from numbers import Integral
from typing import Optional, Tuple

from ..core.index import PositionIndex
from ..core.sequence import EntrySequence
from ..errors import (DuplicateKeyError, EnumerationInvalidatedError, InvalidArgumentError, KeyNotFoundError,
                      PositionOutOfRangeError)
from ..utilities.comparers import KeyComparer
from ..utilities.misc import check_key, make_pair, values_equal
from .views import IndexedItemsView, IndexedKeysView, IndexedValuesView, PairList, ReadOnlyIndexedDict


class IndexedDict(MutableMapping):
    """Dictionary that keeps insertion order and supports positional access.

    Keys and values live in two parallel lists (an EntrySequence), and a PositionIndex maps each
    key to its current position in those lists. Every mutation updates both together: appending
    and overwriting are O(1), while inserting or removing at position p re-indexes the keys after p.

    Positions are not stable handles: they shift whenever an earlier entry is inserted or removed.

    Enumeration is fail-fast: adding, removing, inserting, clearing, or replacing the key at a
    position invalidates live iterators, which then raise EnumerationInvalidatedError.
    Overwriting a value does not.
    """

    def __init__(self, data=None, capacity: Optional[int] = None, comparer: Optional[KeyComparer] = None):
        if capacity is not None and (isinstance(capacity, bool) or not isinstance(capacity, Integral)
                                     or capacity < 0):
            raise InvalidArgumentError(f'capacity must be a non-negative integer, got {capacity!r}')
        if isinstance(data, IndexedDict) and comparer is None:
            comparer = data.comparer

        # Python lists and dicts have no reserve operation, so capacity is only recorded
        self.capacity = capacity
        self._index = PositionIndex(comparer)
        self._sequence = EntrySequence()
        self._version = 0

        if data is not None:
            if isinstance(data, (set, frozenset)):
                warnings.warn(f'Initializing {type(self).__name__} from a {type(data).__name__}: '
                              'the resulting order is arbitrary.')
            self.update(data)

    @property
    def comparer(self):
        return self._index.comparer

    def __repr__(self):
        return f'{type(self).__name__}({list(self._sequence)})'

    def __len__(self):
        return len(self._sequence)

    def __iter__(self):
        return (key for key, _ in self._entries())

    def __reversed__(self):
        return (key for key, _ in self._entries(reverse=True))

    def __contains__(self, key):
        return key in self._index

    def __eq__(self, other):
        # against another IndexedDict order matters, against any other mapping it does not
        if isinstance(other, IndexedDict):
            if len(self) != len(other):
                return False
            return all(self._index.keys_equal(k1, k2) and values_equal(v1, v2)
                       for (k1, v1), (k2, v2) in zip(self._sequence, other._sequence))
        return Mapping.__eq__(self, other)

    __hash__ = None

    def _entries(self, reverse=False):
        """Fail-fast generator over (key, value) pairs, bound to the current version"""
        version = self._version

        def generate():
            keys, values = self._sequence.keys, self._sequence.values
            step = 0
            while True:
                if self._version != version:
                    raise EnumerationInvalidatedError()
                if step >= len(keys):
                    return
                position = len(keys) - 1 - step if reverse else step
                yield keys[position], values[position]
                step += 1

        return generate()

    """Key-based access"""

    def __getitem__(self, key):
        position = self._index.lookup(key)
        if position is None:
            raise KeyNotFoundError(key)
        return self._sequence.values[position]

    def __setitem__(self, key, value):
        position = self._index.lookup(key)
        if position is None:
            self.add(key, value)
        else:
            self._sequence.set_value(position, value)

    def __delitem__(self, key):
        if not self.remove(key):
            raise KeyNotFoundError(key)

    def get(self, key, default=None):
        position = self._index.lookup(key)
        return default if position is None else self._sequence.values[position]

    def add(self, key, value):
        """Append a new entry at the tail; raises DuplicateKeyError if `key` is present"""
        check_key(key)
        self._index.insert(key, len(self._sequence))
        self._sequence.append(key, value)
        self._version += 1

    def remove(self, key):
        """Remove the entry for `key` and return True, or return False if `key` is absent"""
        position = self._index.lookup(key)
        if position is None:
            return False
        self._remove_entry(position)
        return True

    def index_of(self, key) -> Optional[int]:
        """Current position of `key`, or None"""
        return self._index.lookup(key)

    def _remove_entry(self, position):
        key, value = self._sequence.remove_at(position)
        self._index.remove(key)
        # everything after the removal point moved one slot left
        self._index.reindex(self._sequence.keys, position)
        self._version += 1
        return key, value

    """Position-based access"""

    def get_at(self, position: int) -> Tuple:
        """(key, value) at `position`"""
        return self._sequence.get(position)

    def set_at(self, position: int, key, value):
        """Replace the entry at `position` in place. No other entry moves.

        Raises DuplicateKeyError if `key` differs from the key at `position` but is present elsewhere.
        """
        position = self._sequence.check(position)
        check_key(key)
        old_key = self._sequence.keys[position]
        same_key = self._index.keys_equal(old_key, key)
        if not same_key and key in self._index:
            raise DuplicateKeyError(key)

        self._index.remove(old_key)
        self._sequence.set_key_and_value(position, key, value)
        self._index.insert(key, position)
        if not same_key:
            self._version += 1

    def insert_at(self, position: int, key, value):
        """Insert a new entry at `position` in [0, len]; entries from `position` on shift right"""
        position = self._sequence.check(position, inserting=True)
        check_key(key)
        if key in self._index:
            raise DuplicateKeyError(key)

        self._sequence.insert_at(position, key, value)
        self._index.insert(key, position)
        self._index.reindex(self._sequence.keys, position + 1)
        self._version += 1

    def remove_at(self, position: int) -> Tuple:
        """Remove and return the (key, value) at `position`; later entries shift left"""
        position = self._sequence.check(position)
        return self._remove_entry(position)

    def reinsert_at(self, position, key, value):
        """Replace the entry at `position` by removing it and inserting (key, value) in its place.

        This is the replace used by the `pairs` list view. When `key` equals the current key only
        the value is overwritten. The end state matches set_at, at the cost of re-indexing the
        suffix twice.
        """
        position = self._sequence.check(position)
        check_key(key)
        if self._index.keys_equal(self._sequence.keys[position], key):
            self._sequence.set_value(position, value)
            return
        if key in self._index:
            raise DuplicateKeyError(key)

        self._remove_entry(position)
        self.insert_at(position, key, value)

    """Pair-based access"""

    def _find_pair(self, pair):
        key, value = make_pair(pair)
        position = self._index.lookup(key)
        if position is None or not values_equal(self._sequence.values[position], value):
            return None
        return position

    def add_pair(self, pair):
        self.add(*make_pair(pair))

    def contains_pair(self, pair):
        return self._find_pair(pair) is not None

    def index_of_pair(self, pair):
        """Position of `pair`, or None if its key is absent or maps to a different value"""
        return self._find_pair(pair)

    def remove_pair(self, pair):
        position = self._find_pair(pair)
        if position is None:
            return False
        self._remove_entry(position)
        return True

    """Views"""

    def keys(self):
        return IndexedKeysView(self)

    def values(self):
        return IndexedValuesView(self)

    def items(self):
        return IndexedItemsView(self)

    def as_readonly(self):
        return ReadOnlyIndexedDict(self)

    @property
    def pairs(self):
        return PairList(self)

    """Whole-container operations"""

    def clear(self):
        self._index.clear()
        self._sequence.clear()
        self._version += 1

    def popitem(self, last=True):
        if not self._sequence:
            raise KeyError(f'popitem(): {type(self).__name__} is empty')
        return self._remove_entry(len(self._sequence) - 1 if last else 0)

    def copy(self):
        return type(self)(self, capacity=self.capacity)

    def copy_into(self, destination, start=0):
        """Copy all (key, value) pairs in order into `destination`, beginning at `start`.

        `destination` is a mutable sequence receiving tuples, or a 2-D numpy array with two
        columns receiving keys in column 0 and values in column 1.
        """
        if destination is None:
            raise InvalidArgumentError('copy_into needs a destination, got None')
        if isinstance(start, bool) or not isinstance(start, Integral):
            raise InvalidArgumentError(f'start must be an integer, not {type(start).__name__}')
        if start < 0:
            raise PositionOutOfRangeError(start, len(destination))

        is_array = isinstance(destination, np.ndarray)
        if is_array and (destination.ndim != 2 or destination.shape[1] != 2):
            raise InvalidArgumentError(f'numpy destination must have shape (n, 2), got {destination.shape}')
        room = len(destination) - start
        if room < len(self):
            raise InvalidArgumentError(f'Destination has room for {max(room, 0)} entries from offset {start}, '
                                       f'but {len(self)} are needed')

        for offset, (key, value) in enumerate(self._sequence, start):
            if is_array:
                destination[offset, 0] = key
                destination[offset, 1] = value
            else:
                destination[offset] = (key, value)
