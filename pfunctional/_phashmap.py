from collections.abc import Mapping

from immutables import Map as _IMap

from pfunctional._hash_contract import key_hash, key_equals
from pfunctional._option import some, nothing
from pfunctional._plist import PList, Nil


def _without_key(bucket, key):
    return bucket.filter(lambda pair: not key_equals(pair[0], key))


class PHashMap(object):
    """
    Persistent hash map. Keys may implement the :py:class:`HashContract` to control how
    they are hashed and compared, other keys use the builtin hash and equality.

    Do not instantiate directly, instead use the factory functions :py:func:`hm` or
    :py:func:`phashmap` or the :py:meth:`PHashMap.collect` class method.

    The map is a table of buckets keyed by key hash. A bucket is a :py:class:`PList` of
    (key, value) pairs whose keys share the hash but never compare equal, so keys with
    colliding hashes are kept apart. The table itself is an immutable HAMT, updating
    a key rebuilds the one bucket it lives in while every other bucket is shared with
    the map the update started from.

    Lookups return an :py:class:`Option` instead of raising on missing keys.

    >>> m1 = hm(a=1, b=3)
    >>> m2 = m1.updated('c', 3)
    >>> m3 = m2.removed('a')
    >>> m1.get('a')
    some(1)
    >>> m3.get('a')
    nothing()
    >>> m3('c')
    some(3)
    """
    __slots__ = ('_size', '_table', '__weakref__')

    def __new__(cls, size, table):
        self = super(PHashMap, cls).__new__(cls)
        self._size = size
        self._table = table
        return self

    @staticmethod
    def collect(pairs):
        """
        Create a map from an iterable of (key, value) pairs. When a key occurs more than
        once the last value wins.

        >>> PHashMap.collect([('a', 1), ('b', 2), ('a', 3)]).get('a')
        some(3)
        """
        mutation = _EMPTY_IMAP.mutate()
        size = 0
        for key, value in pairs:
            h = key_hash(key)
            bucket = mutation.get(h, Nil)
            deduplicated = _without_key(bucket, key)
            if len(deduplicated) == len(bucket):
                size += 1

            mutation[h] = deduplicated.prepended((key, value))

        if not size:
            return _EMPTY_PHASHMAP

        return PHashMap(size, mutation.finish())

    @staticmethod
    def collect_iterable(source):
        """
        Create a map from a Mapping, or from any other iterable using the
        position of each element as its key.

        >>> PHashMap.collect_iterable(['a', 'b']).get(1)
        some('b')
        """
        if isinstance(source, Mapping):
            return PHashMap.collect(source.items())

        return PHashMap.collect(enumerate(source))

    def _bucket(self, key):
        return self._table.get(key_hash(key), Nil)

    def get(self, key):
        for k, v in self._bucket(key):
            if key_equals(k, key):
                return some(v)

        return nothing()
    __call__ = get

    def __contains__(self, key):
        return any(key_equals(k, key) for k, _ in self._bucket(key))

    def updated(self, key, value):
        """
        Return a new map with key associated to value.

        >>> m1 = hm(a=1, b=2)
        >>> m2 = m1.updated('a', 3)
        >>> m1.get('a'), m2.get('a')
        (some(1), some(3))
        """
        h = key_hash(key)
        bucket = self._table.get(h, Nil)
        deduplicated = _without_key(bucket, key)
        size = self._size + (1 if len(deduplicated) == len(bucket) else 0)
        return PHashMap(size, self._table.set(h, deduplicated.prepended((key, value))))

    def removed(self, key):
        """
        Return a new map without key. The map itself is returned when key is not present.

        >>> m1 = hm(a=1, b=2)
        >>> m1.removed('a')
        phashmap([('b', 2)])
        >>> m1.removed('c') is m1
        True
        """
        h = key_hash(key)
        bucket = self._table.get(h, Nil)
        remaining = _without_key(bucket, key)
        if len(remaining) == len(bucket):
            return self

        if not remaining:
            if self._size == 1:
                return _EMPTY_PHASHMAP
            return PHashMap(self._size - 1, self._table.delete(h))

        return PHashMap(self._size - 1, self._table.set(h, remaining))

    def filter(self, predicate):
        """
        Return a new map with the pairs for which predicate(value, key) holds.

        >>> hm(a=1, b=2).filter(lambda v, k: v > 1)
        phashmap([('b', 2)])
        """
        mutation = self._table.mutate()
        size = 0
        for h, bucket in self._table.items():
            kept = bucket.filter(lambda pair: predicate(pair[1], pair[0]))
            if not kept:
                del mutation[h]
            else:
                size += len(kept)
                if len(kept) != len(bucket):
                    mutation[h] = kept

        if size == self._size:
            return self

        if not size:
            return _EMPTY_PHASHMAP

        return PHashMap(size, mutation.finish())

    def map_values(self, fn):
        """
        Return a new map with every value replaced by fn(value, key).

        >>> hm(a=1).map_values(lambda v, k: k * v)
        phashmap([('a', 'a')])
        """
        mutation = _EMPTY_IMAP.mutate()
        for h, bucket in self._table.items():
            mutation[h] = bucket.map(lambda pair: (pair[0], fn(pair[1], pair[0])))

        return PHashMap(self._size, mutation.finish())

    def keys(self):
        return PList.collect(k for k, _ in self)

    def values(self):
        return PList.collect(v for _, v in self)

    def items(self):
        return list(self)

    to_list = items

    def fold(self, init, fn):
        """
        Fold the (key, value) pairs into one value, fn takes the accumulator and a pair.

        >>> hm(a=1, b=2).fold(0, lambda acc, pair: acc + pair[1])
        3
        """
        acc = init
        for pair in self:
            acc = fn(acc, pair)

        return acc

    def exists(self, predicate):
        return any(predicate(v, k) for k, v in self)

    def every(self, predicate):
        return all(predicate(v, k) for k, v in self)

    def __iter__(self):
        for bucket in self._table.values():
            for pair in bucket:
                yield pair

    def __len__(self):
        return self._size

    def __bool__(self):
        return self._size > 0

    def __eq__(self, other):
        if self is other:
            return True

        if not isinstance(other, PHashMap):
            return NotImplemented

        if len(self) != len(other):
            return False

        return all(other.get(k) == some(v) for k, v in self)

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    # Keys implementing the hash contract are not necessarily hashable
    __hash__ = None

    def __repr__(self):
        return 'phashmap({0})'.format(list(self))

    def __str__(self):
        return self.__repr__()

    def __reduce__(self):
        # Pickling support
        return phashmap, (list(self),)


_EMPTY_IMAP = _IMap()
_EMPTY_PHASHMAP = PHashMap(0, _EMPTY_IMAP)


def phashmap(initial=()):
    """
    Create new persistent hash map from a Mapping or an iterable of (key, value) pairs.

    >>> phashmap({'a': 13}).get('a')
    some(13)
    >>> phashmap([(1, 'x'), (1, 'y')])
    phashmap([(1, 'y')])
    """
    if isinstance(initial, Mapping):
        initial = initial.items()

    return PHashMap.collect(initial)


def hm(**kwargs):
    """
    Creates a new persistent hash map. Inserts all key value arguments into the newly created map.

    >>> hm(a=13).get('a')
    some(13)
    """
    return phashmap(kwargs)
