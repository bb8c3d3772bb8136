"""Fixtures used by tests."""

import pytest

from indexed_dict import IndexedDict


@pytest.fixture
def abcd():
    return IndexedDict([('A', 1), ('B', 2), ('C', 3), ('D', 4)])


@pytest.fixture
def abc():
    return IndexedDict([('A', 1), ('B', 2), ('C', 3)])


@pytest.fixture(scope='session')
def check_invariants():
    def check(d):
        keys, values = d._sequence.keys, d._sequence.values
        assert len(keys) == len(values) == len(d._index) == len(d)
        for position, key in enumerate(keys):
            assert d._index.lookup(key) == position
            assert d.get_at(position) == (key, values[position])
            assert d[key] == values[position]
        # keys pairwise distinct under the comparer
        assert len({d.index_of(key) for key in keys}) == len(keys)
    return check
