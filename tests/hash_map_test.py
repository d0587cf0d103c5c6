import pickle
import pytest
from pfunctional import phashmap, hm, PHashMap, HashContract, plist, some, nothing


class CollidingKey(object):
    """ Key with a deliberately poor hash code, every instance lands in the same bucket """
    def __init__(self, name):
        self.name = name

    def hash_code(self):
        return 42

    def equals(self, other):
        return isinstance(other, CollidingKey) and self.name == other.name

    def __repr__(self):
        return 'CollidingKey({0!r})'.format(self.name)


class PlainKey(object):
    pass


def test_literalish_works():
    assert hm(a=1, b=2) == phashmap({'a': 1, 'b': 2})
    assert hm() == phashmap()


def test_empty_initialization():
    m = phashmap()
    assert len(m) == 0
    assert not m
    assert m.get('a') == nothing()


def test_collect_from_pairs():
    m = PHashMap.collect([('a', 1), ('b', 2)])

    assert len(m) == 2
    assert m.get('a') == some(1)
    assert m('b') == some(2)
    assert m.get('c') == nothing()


def test_collect_last_write_wins():
    m = PHashMap.collect([('a', 1), ('b', 2), ('a', 3)])

    assert len(m) == 2
    assert m.get('a') == some(3)


def test_collect_iterable():
    assert PHashMap.collect_iterable(['x', 'y']).get(1) == some('y')
    assert PHashMap.collect_iterable({'a': 1}).get('a') == some(1)


def test_updated_last_write_wins():
    m = phashmap().updated('k', 1).updated('k', 2)

    assert m.get('k') == some(2)
    assert len(m) == 1


def test_updated_does_not_change_original():
    m1 = hm(a=1)
    m2 = m1.updated('b', 2)

    assert m1.get('b') == nothing()
    assert m2.get('b') == some(2)
    assert len(m1) == 1
    assert len(m2) == 2


def test_removed():
    m1 = hm(a=1, b=2)
    m2 = m1.removed('a')

    assert m2.get('a') == nothing()
    assert m2.get('b') == some(2)
    assert len(m2) == 1
    assert m1.get('a') == some(1)
    assert len(m2.removed('b')) == 0


def test_removed_absent_key_is_noop():
    m = hm(a=1, b=2)

    assert m.removed('c') is m
    assert m.removed('c') == m


def test_contains():
    m = hm(a=1)

    assert 'a' in m
    assert 'b' not in m


def test_colliding_keys_are_kept_apart():
    a = CollidingKey('a')
    b = CollidingKey('b')
    m = phashmap([(a, 1), (b, 2)])

    assert len(m) == 2
    assert m.get(CollidingKey('a')) == some(1)
    assert m.get(CollidingKey('b')) == some(2)
    assert m.get(CollidingKey('c')) == nothing()


def test_colliding_keys_update_and_remove():
    m = phashmap([(CollidingKey('a'), 1), (CollidingKey('b'), 2)])

    m2 = m.updated(CollidingKey('a'), 3)
    assert len(m2) == 2
    assert m2.get(CollidingKey('a')) == some(3)
    assert m2.get(CollidingKey('b')) == some(2)

    m3 = m2.removed(CollidingKey('b'))
    assert len(m3) == 1
    assert m3.get(CollidingKey('b')) == nothing()
    assert m3.get(CollidingKey('a')) == some(3)


def test_most_recent_write_first_in_bucket():
    m = phashmap([(CollidingKey('a'), 1), (CollidingKey('b'), 2)])

    assert [k.name for k, _ in m] == ['b', 'a']
    assert [k.name for k, _ in m.updated(CollidingKey('a'), 3)] == ['a', 'b']


def test_hash_contract_is_recognised_without_inheritance():
    assert isinstance(CollidingKey('a'), HashContract)
    assert not isinstance(PlainKey(), HashContract)
    assert not isinstance('a', HashContract)


def test_plain_object_keys_use_identity():
    k1 = PlainKey()
    k2 = PlainKey()
    m = phashmap([(k1, 1), (k2, 2)])

    assert len(m) == 2
    assert m.get(k1) == some(1)
    assert m.get(k2) == some(2)
    assert m.get(PlainKey()) == nothing()


def test_scalar_keys_with_equal_builtin_hash_are_kept_apart():
    # hash(-1) == hash(-2) in CPython
    m = phashmap([(-1, 'a'), (-2, 'b')])

    assert len(m) == 2
    assert m.get(-1) == some('a')
    assert m.get(-2) == some('b')


def test_tuple_keys_use_value_equality():
    m = phashmap([((1, 2), 'a')])

    assert m.get((1, 2)) == some('a')


def test_unhashable_key():
    with pytest.raises(TypeError):
        phashmap([([1], 'a')])


def test_filter():
    m = hm(a=1, b=2, c=3)

    assert m.filter(lambda v, k: v > 1) == hm(b=2, c=3)
    assert m.filter(lambda v, k: k == 'a') == hm(a=1)
    assert len(m.filter(lambda v, k: False)) == 0


def test_filter_always_true_is_identity():
    m = phashmap([(CollidingKey('a'), 1), (CollidingKey('b'), 2), ('c', 3)])
    filtered = m.filter(lambda v, k: True)

    assert filtered == m
    assert filtered.to_list() == m.to_list()


def test_filter_keeps_bucket_order():
    m = phashmap([(CollidingKey('a'), 1), (CollidingKey('b'), 2), (CollidingKey('c'), 3)])
    filtered = m.filter(lambda v, k: k.name != 'b')

    assert [k.name for k, _ in filtered] == ['c', 'a']


def test_map_values():
    m = hm(a=1, b=2).map_values(lambda v, k: v * 10)

    assert m == hm(a=10, b=20)


def test_keys_values_items():
    m = hm(a=1, b=2)

    assert sorted(m.keys()) == ['a', 'b']
    assert sorted(m.values()) == [1, 2]
    assert sorted(m.items()) == [('a', 1), ('b', 2)]
    assert sorted(m) == [('a', 1), ('b', 2)]


def test_fold_exists_every():
    m = hm(a=1, b=2)

    assert m.fold(0, lambda acc, pair: acc + pair[1]) == 3
    assert m.exists(lambda v, k: k == 'b')
    assert not m.exists(lambda v, k: v > 2)
    assert m.every(lambda v, k: v > 0)


def test_equality():
    assert hm(a=1, b=2) == hm(b=2, a=1)
    assert hm(a=1) != hm(a=2)
    assert hm(a=1) != hm(a=1, b=2)
    assert hm(a=1) != {'a': 1}


def test_not_hashable():
    with pytest.raises(TypeError):
        hash(hm(a=1))


def test_iteration_order_is_stable():
    m = phashmap((str(i), i) for i in range(100))

    assert list(m) == list(m)


def test_many_elements():
    m = phashmap((str(x), x) for x in range(1700))

    assert len(m) == 1700
    assert m.get('16') == some(16)
    assert m.get('1699') == some(1699)

    m2 = m.removed('1600')
    assert len(m2) == 1699
    assert m2.get('1600') == nothing()
    assert m2.get('1601') == some(1601)


def test_repr():
    assert repr(hm(a=1)) == "phashmap([('a', 1)])"


def test_pickling():
    m = hm(a=1, b=2)

    assert pickle.loads(pickle.dumps(m, -1)) == m



def test_keys_and_values_are_plists():
    m = phashmap([(CollidingKey('a'), 1)])

    assert m.values() == plist([1])
    assert m.keys().head.name == 'a'
