"""Views over an IndexedDict: ordered key/value/item views, a read-only mapping, and an ordered pair list.

All views read through to the live IndexedDict they were created from.
"""

from collections.abc import ItemsView, KeysView, Mapping, MutableSequence, ValuesView

from ..utilities.misc import make_pair, values_equal


class IndexedKeysView(KeysView):
    def __iter__(self):
        return iter(self._mapping)

    def __reversed__(self):
        return reversed(self._mapping)

    def __getitem__(self, position):
        return self._mapping.get_at(position)[0]

    def __repr__(self):
        return f'{type(self).__name__}({list(self)})'


class IndexedValuesView(ValuesView):
    def __iter__(self):
        return (value for _, value in self._mapping._entries())

    def __contains__(self, value):
        return any(values_equal(v, value) for v in self)

    def __reversed__(self):
        return (value for _, value in self._mapping._entries(reverse=True))

    def __getitem__(self, position):
        return self._mapping.get_at(position)[1]

    def __repr__(self):
        return f'{type(self).__name__}({list(self)})'


class IndexedItemsView(ItemsView):
    def __iter__(self):
        return self._mapping._entries()

    def __reversed__(self):
        return self._mapping._entries(reverse=True)

    def __contains__(self, item):
        if not isinstance(item, tuple) or len(item) != 2:
            return False
        return self._mapping.contains_pair(item)

    def __getitem__(self, position):
        return self._mapping.get_at(position)

    def __repr__(self):
        return f'{type(self).__name__}({list(self)})'


class ReadOnlyIndexedDict(Mapping):
    """Read-only mapping over an IndexedDict, with the same lookups and no mutators"""

    def __init__(self, data):
        self._data = data

    def __repr__(self):
        return f'<{type(self).__name__}: {list(self._data.items())}>'

    def __getitem__(self, key):
        return self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __reversed__(self):
        return reversed(self._data)

    def __len__(self):
        return len(self._data)

    def __contains__(self, key):
        return key in self._data

    @property
    def comparer(self):
        return self._data.comparer

    def get(self, key, default=None):
        return self._data.get(key, default)

    def keys(self):
        return self._data.keys()

    def values(self):
        return self._data.values()

    def items(self):
        return self._data.items()

    def index_of(self, key):
        return self._data.index_of(key)

    def get_at(self, position):
        return self._data.get_at(position)

    def contains_pair(self, pair):
        return self._data.contains_pair(pair)

    def index_of_pair(self, pair):
        return self._data.index_of_pair(pair)


class PairList(MutableSequence):
    """An IndexedDict seen as a list of (key, value) tuples.

    Keys stay unique: assigning, inserting or appending a pair whose key is already present
    elsewhere raises DuplicateKeyError. Assigning to a position goes through
    IndexedDict.reinsert_at.
    """

    def __init__(self, data):
        self._data = data

    def __repr__(self):
        return f'{type(self).__name__}({list(self)})'

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return self._data._entries()

    def __reversed__(self):
        return self._data._entries(reverse=True)

    def __contains__(self, pair):
        return self._data.contains_pair(pair)

    def __getitem__(self, position):
        return self._data.get_at(position)

    def __setitem__(self, position, pair):
        self._data.reinsert_at(position, *make_pair(pair))

    def __delitem__(self, position):
        self._data.remove_at(position)

    def insert(self, position, pair):
        self._data.insert_at(position, *make_pair(pair))

    def append(self, pair):
        self._data.add_pair(pair)

    def index_of(self, pair):
        return self._data.index_of_pair(pair)

    def index(self, pair, start=0, stop=None):
        position = self._data.index_of_pair(pair)
        if position is None or position < start or (stop is not None and position >= stop):
            raise ValueError(f'{pair!r} is not in {type(self).__name__}')
        return position

    def count(self, pair):
        return int(pair in self)

    def remove(self, pair):
        """Remove `pair` and return True, or return False when it is not present"""
        return self._data.remove_pair(pair)

    def pop(self, position=None):
        if position is None:
            position = len(self._data) - 1
        return self._data.remove_at(position)

    def reverse(self):
        # swapping in place would momentarily duplicate keys, so rebuild instead
        entries = list(self)
        self._data.clear()
        for pair in reversed(entries):
            self._data.add_pair(pair)

    def clear(self):
        self._data.clear()
