"""Key-equality strategies used by PositionIndex.

A comparer decides when two keys are the same key. It provides `hash(key)` and
`equals(a, b)`, and the two must agree: keys that are equal must hash alike.
"""


class KeyComparer:
    """Default comparer: the key's own __hash__ and __eq__."""

    def hash(self, key):
        return hash(key)

    def equals(self, a, b):
        # identity first, as dict lookups do, so keys like nan still match themselves
        return a is b or a == b

    def __repr__(self):
        return f'{type(self).__name__}()'


class KeyFunctionComparer(KeyComparer):
    """Keys are equal when func(key) values are equal, e.g. KeyFunctionComparer(str.lower)"""

    def __init__(self, func):
        if not callable(func):
            raise TypeError(f'{type(self).__name__} needs a callable, not {type(func).__name__}')
        self.func = func

    def hash(self, key):
        return hash(self.func(key))

    def equals(self, a, b):
        return a is b or self.func(a) == self.func(b)

    def __repr__(self):
        return f'{type(self).__name__}({self.func!r})'


def _casefold(key):
    return key.casefold() if isinstance(key, str) else key


class CaseInsensitiveComparer(KeyFunctionComparer):
    """String keys compared by str.casefold; other keys unchanged"""

    def __init__(self):
        super().__init__(_casefold)

    def __repr__(self):
        return f'{type(self).__name__}()'


DEFAULT_COMPARER = KeyComparer()


class ComparedKey:
    """Wraps a key so that dict hashing and equality go through a comparer"""

    __slots__ = ('key', 'comparer', '_hash')

    def __init__(self, key, comparer):
        self.key = key
        self.comparer = comparer
        self._hash = comparer.hash(key)

    def __hash__(self):
        return self._hash

    def __eq__(self, other):
        if not isinstance(other, ComparedKey):
            return NotImplemented
        return self.comparer.equals(self.key, other.key)

    def __repr__(self):
        return f'ComparedKey({self.key!r})'
