"""Helpers for use with type annotation.

Use the empty classes in this module when annotating the types of Pfunctional
objects, instead of using the actual collection class.

For example,

    from pfunctional import phashmap
    from pfunctional.typing import PHashMap

    def foo(x: PHashMap[str, int]) -> None:
        ...

    foo(phashmap({'a': 1}))
"""


class SubscriptableType(type):
    def __getitem__(self, key):
        return self


class Option(metaclass=SubscriptableType):
    pass


class PList(metaclass=SubscriptableType):
    pass


class NonEmptyPList(metaclass=SubscriptableType):
    pass


class PHashMap(metaclass=SubscriptableType):
    pass


class PHashSet(metaclass=SubscriptableType):
    pass


class Stream(metaclass=SubscriptableType):
    pass
