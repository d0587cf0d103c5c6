import pytest
from pfunctional import some, nothing, from_nullable, Option, unit


def test_some_and_nothing():
    assert some(1).is_some()
    assert not some(1).is_empty()
    assert nothing().is_empty()
    assert nothing() is nothing()
    assert isinstance(some(1), Option)
    assert isinstance(nothing(), Option)


def test_from_nullable():
    assert from_nullable(None) is nothing()
    assert from_nullable(0) == some(0)
    assert from_nullable(False) == some(False)


def test_some_of_falsy_value_is_truthy():
    assert some(0)
    assert some(None)
    assert not nothing()


def test_get():
    assert some(1).get() == 1

    with pytest.raises(ValueError):
        nothing().get()


def test_get_or_else():
    assert some(1).get_or_else(2) == 1
    assert nothing().get_or_else(2) == 2
    assert nothing().get_or_call(lambda: 3) == 3


def test_map_and_flat_map():
    assert some(1).map(lambda x: x + 1) == some(2)
    assert nothing().map(lambda x: x + 1) is nothing()
    assert some(1).flat_map(lambda x: some(x * 3)) == some(3)
    assert some(1).flat_map(lambda x: nothing()) is nothing()
    assert nothing().flat_map(lambda x: some(x)) is nothing()


def test_filter_and_fold():
    assert some(2).filter(lambda x: x > 1) == some(2)
    assert some(0).filter(lambda x: x > 1) is nothing()
    assert some(2).fold(lambda: 'empty', str) == '2'
    assert nothing().fold(lambda: 'empty', str) == 'empty'


def test_iteration():
    assert some(1).to_list() == [1]
    assert list(nothing()) == []


def test_equality_and_hash():
    assert some(1) == some(1)
    assert some(1) != some(2)
    assert some(1) != nothing()
    assert some(1) != 1
    assert hash(some(1)) == hash(some(1))
    assert {nothing(): 1}[nothing()] == 1


def test_repr():
    assert repr(some('a')) == "some('a')"
    assert repr(nothing()) == 'nothing()'
    assert repr(unit) == 'unit'
