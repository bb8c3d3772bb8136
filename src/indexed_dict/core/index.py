"""PositionIndex: the authoritative key -> position table of an IndexedDict"""

from typing import Optional

from ..errors import DuplicateKeyError
from ..utilities.comparers import DEFAULT_COMPARER, ComparedKey, KeyComparer


class PositionIndex:
    def __init__(self, comparer: Optional[KeyComparer] = None):
        self.comparer = DEFAULT_COMPARER if comparer is None else comparer
        self._positions = {}

    def _token(self, key):
        # plain KeyComparer: the key is its own dict key; subclasses and other comparers get wrapped
        if type(self.comparer) is KeyComparer:
            return key
        return ComparedKey(key, self.comparer)

    def __repr__(self):
        return f'PositionIndex({len(self)} keys, comparer={self.comparer!r})'

    def __len__(self):
        return len(self._positions)

    def __contains__(self, key):
        return self._token(key) in self._positions

    def keys_equal(self, a, b):
        return self.comparer.equals(a, b)

    def lookup(self, key) -> Optional[int]:
        """Position of `key`, or None if it is not mapped"""
        return self._positions.get(self._token(key))

    def insert(self, key, position):
        token = self._token(key)
        if token in self._positions:
            raise DuplicateKeyError(key)
        self._positions[token] = position

    def remove(self, key):
        """Unmap `key`; callers confirm presence first, so an absent key is a no-op"""
        self._positions.pop(self._token(key), None)

    def reassign(self, key, position):
        self._positions[self._token(key)] = position

    def reindex(self, keys, start: int):
        """Reassign keys[start:] to their list positions after a shift"""
        for position in range(start, len(keys)):
            self.reassign(keys[position], position)

    def clear(self):
        self._positions.clear()
