from abc import ABCMeta, abstractmethod


class HashContract(metaclass=ABCMeta):
    """
    Capability a key type may implement to customize how it is hashed and compared
    by :py:class:`PHashMap` and :py:class:`PHashSet`.

    Inheriting is not required, any class that defines both ``hash_code`` and ``equals``
    is considered to implement the contract.

    >>> class Point(object):
    ...     def __init__(self, x, y):
    ...         self.x, self.y = x, y
    ...     def hash_code(self):
    ...         return 'point:{0}:{1}'.format(self.x, self.y)
    ...     def equals(self, other):
    ...         return (self.x, self.y) == (other.x, other.y)
    >>> isinstance(Point(1, 2), HashContract)
    True

    Keys that do not implement the contract are hashed with the builtin hash, which
    is identity based for plain objects and value based for scalars and tuples.
    """
    __slots__ = ()

    @abstractmethod
    def hash_code(self):
        """ Return a hashable value, equal for keys that are equal """

    @abstractmethod
    def equals(self, other):
        """ Return True if other is the same key as self """

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is HashContract:
            mro = subclass.__mro__
            if all(any(callable(b.__dict__.get(name)) for b in mro) for name in ('hash_code', 'equals')):
                return True

        return NotImplemented


def key_hash(key):
    if isinstance(key, HashContract):
        return key.hash_code()

    return hash(key)


def key_equals(lhs, rhs):
    if isinstance(lhs, HashContract) and isinstance(rhs, HashContract):
        return lhs.equals(rhs)

    # Keys in the same bucket may still differ, the hash alone does not decide
    return lhs is rhs or (key_hash(lhs) == key_hash(rhs) and lhs == rhs)
