"""Test position-based behaviour of IndexedDict"""

import numpy as np
import pytest

from indexed_dict import (IndexedDict, DuplicateKeyError, InvalidArgumentError, PositionOutOfRangeError)


def test_get_at(abcd):
    assert abcd.get_at(0) == ('A', 1)
    assert abcd.get_at(3) == ('D', 4)


@pytest.mark.parametrize('position', [-1, 4, 100])
def test_get_at_out_of_range(abcd, position):
    with pytest.raises(PositionOutOfRangeError):
        abcd.get_at(position)


def test_position_errors_are_index_errors(abcd):
    with pytest.raises(IndexError):
        abcd.get_at(4)


@pytest.mark.parametrize('position', ['1', 1.0, True, None])
def test_non_integer_position(abcd, position):
    with pytest.raises(InvalidArgumentError):
        abcd.get_at(position)


def test_numpy_integer_position(abcd, check_invariants):
    assert abcd.get_at(np.int64(2)) == ('C', 3)
    abcd.insert_at(np.int32(0), 'Z', 0)
    assert abcd.index_of('Z') == 0
    assert type(abcd.index_of('A')) is int
    check_invariants(abcd)


def test_insert_at_reindexes(abc, check_invariants):
    abc.insert_at(1, 'X', 9)
    assert list(abc) == ['A', 'X', 'B', 'C']
    assert [abc.index_of(k) for k in ['A', 'X', 'B', 'C']] == [0, 1, 2, 3]
    check_invariants(abc)


def test_insert_at_front_and_end(abcd, check_invariants):
    abcd.insert_at(0, 'Z', 0)
    abcd.insert_at(len(abcd), 'E', 5)
    assert list(abcd.items()) == [('Z', 0), ('A', 1), ('B', 2), ('C', 3), ('D', 4), ('E', 5)]
    check_invariants(abcd)


def test_insert_at_into_empty():
    d = IndexedDict()
    with pytest.raises(PositionOutOfRangeError):
        d.insert_at(1, 'a', 1)
    d.insert_at(0, 'a', 1)
    assert list(d.items()) == [('a', 1)]


@pytest.mark.parametrize('position', [-1, 5])
def test_insert_at_out_of_range(abcd, position):
    with pytest.raises(PositionOutOfRangeError):
        abcd.insert_at(position, 'Z', 0)
    assert list(abcd) == ['A', 'B', 'C', 'D']
    assert 'Z' not in abcd


def test_insert_at_duplicate(abcd, check_invariants):
    with pytest.raises(DuplicateKeyError):
        abcd.insert_at(0, 'C', 0)
    assert list(abcd.items()) == [('A', 1), ('B', 2), ('C', 3), ('D', 4)]
    check_invariants(abcd)


def test_remove_at(abcd, check_invariants):
    assert abcd.remove_at(1) == ('B', 2)
    assert list(abcd) == ['A', 'C', 'D']
    assert [abcd.index_of(k) for k in 'ACD'] == [0, 1, 2]
    check_invariants(abcd)

    with pytest.raises(PositionOutOfRangeError):
        abcd.remove_at(3)
    assert abcd.remove_at(2) == ('D', 4)
    assert abcd.remove_at(0) == ('A', 1)
    assert list(abcd) == ['C'] and abcd.index_of('C') == 0


@pytest.mark.parametrize('position', [-1, 4])
def test_remove_at_out_of_range(abcd, position):
    with pytest.raises(PositionOutOfRangeError):
        abcd.remove_at(position)
    assert len(abcd) == 4


def test_set_at_replaces_in_place(abc, check_invariants):
    abc.set_at(1, 'X', 9)
    assert list(abc.items()) == [('A', 1), ('X', 9), ('C', 3)]
    assert 'B' not in abc
    assert [abc.index_of(k) for k in 'AXC'] == [0, 1, 2]
    check_invariants(abc)


def test_set_at_same_key_updates_value(abc):
    abc.set_at(1, 'B', 20)
    assert list(abc.items()) == [('A', 1), ('B', 20), ('C', 3)]


def test_set_at_duplicate(abc, check_invariants):
    with pytest.raises(DuplicateKeyError):
        abc.set_at(0, 'C', 0)
    assert list(abc.items()) == [('A', 1), ('B', 2), ('C', 3)]
    check_invariants(abc)


@pytest.mark.parametrize('position', [-1, 3])
def test_set_at_out_of_range(abc, position):
    with pytest.raises(PositionOutOfRangeError):
        abc.set_at(position, 'X', 0)
    assert 'X' not in abc


def test_reinsert_at_matches_set_at(abcd, check_invariants):
    replaced = abcd.copy()
    abcd.set_at(1, 'X', 9)
    replaced.reinsert_at(1, 'X', 9)

    assert list(replaced.items()) == list(abcd.items()) == [('A', 1), ('X', 9), ('C', 3), ('D', 4)]
    check_invariants(abcd)
    check_invariants(replaced)


def test_reinsert_at_same_key_only_updates_value(abc):
    it = iter(abc.items())
    assert next(it) == ('A', 1)

    # value-only change keeps live iterators valid
    abc.reinsert_at(1, 'B', 20)
    assert list(it) == [('B', 20), ('C', 3)]


def test_reinsert_at_duplicate(abc, check_invariants):
    with pytest.raises(DuplicateKeyError):
        abc.reinsert_at(2, 'A', 0)
    assert list(abc.items()) == [('A', 1), ('B', 2), ('C', 3)]
    check_invariants(abc)


def test_last_position(abcd):
    abcd.set_at(3, 'Z', 26)
    assert abcd.get_at(3) == ('Z', 26)
    abcd.reinsert_at(3, 'Y', 25)
    assert list(abcd) == ['A', 'B', 'C', 'Y']
