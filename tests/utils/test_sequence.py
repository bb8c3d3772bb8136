import numpy as np
import pytest

from indexed_dict.core.sequence import EntrySequence
from indexed_dict.errors import PositionOutOfRangeError


@pytest.fixture
def seq():
    s = EntrySequence()
    s.append('a', 1)
    s.append('b', 2)
    return s


def test_append_get_set(seq):
    assert len(seq) == 2
    assert seq.get(1) == ('b', 2)
    assert list(seq) == [('a', 1), ('b', 2)]

    seq.set_value(0, 10)
    seq.set_key_and_value(1, 'c', 3)
    assert list(seq) == [('a', 10), ('c', 3)]


def test_insert_remove_shift(seq):
    seq.insert_at(0, 'z', 0)
    seq.insert_at(len(seq), 'y', 9)
    assert seq.keys == ['z', 'a', 'b', 'y']
    assert seq.values == [0, 1, 2, 9]

    assert seq.remove_at(1) == ('a', 1)
    assert list(seq) == [('z', 0), ('b', 2), ('y', 9)]


@pytest.mark.parametrize('operation', [
    lambda s: s.get(2),
    lambda s: s.get(-1),
    lambda s: s.set_value(2, 0),
    lambda s: s.set_key_and_value(-1, 'x', 0),
    lambda s: s.insert_at(3, 'x', 0),
    lambda s: s.insert_at(-1, 'x', 0),
    lambda s: s.remove_at(2),
])
def test_bounds(seq, operation):
    with pytest.raises(PositionOutOfRangeError):
        operation(seq)
    assert list(seq) == [('a', 1), ('b', 2)]


def test_check(seq):
    assert seq.check(2, inserting=True) == 2
    position = seq.check(np.int64(1))
    assert position == 1 and type(position) is int


def test_clear(seq):
    seq.clear()
    assert len(seq) == 0 and list(seq) == []
    with pytest.raises(PositionOutOfRangeError):
        seq.get(0)
