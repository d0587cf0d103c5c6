from pfunctional._phashmap import PHashMap, _EMPTY_PHASHMAP
from pfunctional._plist import PList


class PHashSet(object):
    """
    Persistent hash set. Elements are hashed and compared the same way as the keys of
    a :py:class:`PHashMap`, that is through the :py:class:`HashContract` when they
    implement it and with the builtin hash and equality otherwise.

    Do not instantiate directly, instead use the factory functions :py:func:`hs` or
    :py:func:`phashset` or the :py:meth:`PHashSet.collect` class method.

    >>> s1 = hs(1, 2)
    >>> s2 = s1.updated(3)
    >>> s1.contains(3), s2.contains(3)
    (False, True)
    """
    __slots__ = ('_map', '__weakref__')

    def __new__(cls, m):
        self = super(PHashSet, cls).__new__(cls)
        self._map = m
        return self

    @staticmethod
    def collect(iterable):
        return PHashSet(PHashMap.collect((elem, True) for elem in iterable))

    def contains(self, element):
        return element in self._map
    __contains__ = contains

    def __call__(self, element):
        return self.contains(element)

    def updated(self, element):
        if element in self._map:
            return self

        return PHashSet(self._map.updated(element, True))

    def removed(self, element):
        m = self._map.removed(element)
        return self if m is self._map else PHashSet(m)

    def filter(self, predicate):
        m = self._map.filter(lambda _, elem: predicate(elem))
        return self if m is self._map else PHashSet(m)

    def map(self, fn):
        return PHashSet.collect(fn(elem) for elem in self)

    def to_list(self):
        return list(self)

    def to_plist(self):
        return PList.collect(self)

    def __iter__(self):
        for elem, _ in self._map:
            yield elem

    def __len__(self):
        return len(self._map)

    def __bool__(self):
        return bool(self._map)

    def __eq__(self, other):
        if not isinstance(other, PHashSet):
            return NotImplemented

        return len(self) == len(other) and all(elem in other for elem in self)

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None

    def __repr__(self):
        return 'phashset({0})'.format(list(self))
    __str__ = __repr__

    def __reduce__(self):
        # Pickling support
        return phashset, (list(self),)


_EMPTY_PHASHSET = PHashSet(_EMPTY_PHASHMAP)


def phashset(iterable=()):
    """
    Creates a persistent hash set from iterable.

    >>> phashset([1, 2, 3, 2])
    phashset([1, 2, 3])
    """
    s = PHashSet.collect(iterable)
    return s if s else _EMPTY_PHASHSET


def hs(*elements):
    """
    Create a persistent hash set.

    Takes an arbitrary number of arguments to insert into the new set.

    >>> hs(1, 2, 3, 2)
    phashset([1, 2, 3])
    """
    return phashset(elements)
