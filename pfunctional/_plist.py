from collections.abc import Sequence, Hashable
from functools import reduce
from numbers import Integral

from pfunctional._errors import EmptyCollectionError, EmptySequenceError
from pfunctional._option import some, nothing


class _PListBuilder(object):
    """
    Helper class to allow construction of a list without
    having to reverse it in the end.
    """
    __slots__ = ('_head', '_last')

    def __init__(self):
        self._head = Nil
        self._last = Nil

    def _append(self, elem, constructor):
        if not self._last:
            self._head = constructor(elem)
            self._last = self._head
        else:
            # Only nodes that have not been handed out yet are touched here
            self._last.tail = constructor(elem)
            self._last = self._last.tail

        return self._head

    def append_elem(self, elem):
        return self._append(elem, lambda e: Cons(e, Nil))

    def append_plist(self, pl):
        return self._append(pl, lambda l: l)

    def build(self):
        return self._head


class PList(object):
    """
    Persistent singly linked list, either a :py:class:`Cons` cell or the empty :py:data:`Nil`.

    Prepending is O(1) and shares the existing list as tail of the new one, several
    lists may therefore share a common suffix. Element access is O(k) where k is the
    position of the element in the list. Taking the length of the list is O(n).

    Traversal is restartable and side effect free, iterating a PList any number of
    times always gives the same elements.

    Do not instantiate directly, instead use the factory functions :py:func:`l` or
    :py:func:`plist` or the :py:meth:`PList.collect` class method.

    >>> x = plist([1, 2])
    >>> y = x.prepended(3)
    >>> x
    plist([1, 2])
    >>> y
    plist([3, 1, 2])
    >>> y.head
    3
    >>> y.tail is x
    True
    """
    __slots__ = ()

    # Selected implementations can be taken straight from the Sequence
    # class, other are less suitable. Especially those that work with
    # index lookups.
    count = Sequence.count
    index = Sequence.index

    @staticmethod
    def collect(iterable):
        """
        Create a list holding the elements of iterable in the same order.

        >>> PList.collect(x * 2 for x in range(3))
        plist([0, 2, 4])
        >>> PList.collect([]) is Nil
        True
        """
        builder = _PListBuilder()
        for elem in iterable:
            builder.append_elem(elem)

        return builder.build()

    def __reduce__(self):
        # Pickling support
        return plist, (list(self),)

    def __len__(self):
        # This is obviously O(n) but with the current implementation
        # where a list is also a node the overhead of storing the length
        # in every node would be quite significant.
        return sum(1 for _ in self)

    def __repr__(self):
        return "plist({0})".format(list(self))
    __str__ = __repr__

    def prepended(self, elem):
        """
        Return a new list with elem inserted as new head.

        >>> plist([1, 2]).prepended(3)
        plist([3, 1, 2])
        """
        return Cons(elem, self)
    cons = prepended

    def prepended_all(self, iterable):
        """
        Return a new list with the elements of iterable in front of the current list.
        Runs in O(len(iterable)), the current list is shared.

        >>> plist([3, 4]).prepended_all([1, 2])
        plist([1, 2, 3, 4])
        """
        builder = _PListBuilder()
        for elem in iterable:
            builder.append_elem(elem)

        if not builder.build():
            return self

        return builder.append_plist(self)

    def appended(self, elem):
        """
        Return a new list with elem added last. O(n), nothing is shared with the current list.

        >>> plist([1, 2]).appended(3)
        plist([1, 2, 3])
        """
        return self.appended_all((elem,))

    def appended_all(self, iterable):
        """
        >>> plist([1, 2]).appended_all([3, 4])
        plist([1, 2, 3, 4])
        """
        builder = _PListBuilder()
        for elem in self:
            builder.append_elem(elem)

        for elem in iterable:
            builder.append_elem(elem)

        return builder.build()

    def reverse(self):
        """
        Return a reversed version of list. Runs in O(n) where n is the length of the list.

        >>> plist([1, 2, 3]).reverse()
        plist([3, 2, 1])

        Also supports the standard reversed function.

        >>> reversed(plist([1, 2, 3]))
        plist([3, 2, 1])
        """
        result = Nil
        head = self
        while head:
            result = result.prepended(head.head)
            head = head.tail

        return result
    __reversed__ = reverse

    def map(self, fn):
        """
        >>> plist([1, 2, 3]).map(lambda x: x * 10)
        plist([10, 20, 30])
        """
        return PList.collect(fn(elem) for elem in self)

    def filter(self, predicate):
        """
        >>> plist([1, 2, 3, 4]).filter(lambda x: x % 2 == 0)
        plist([2, 4])
        """
        return PList.collect(elem for elem in self if predicate(elem))

    def filter_map(self, fn):
        """
        Map every element with fn, which returns an Option, and keep the present values.

        >>> plist([1, 2, 3]).filter_map(lambda x: some(x) if x > 1 else nothing())
        plist([2, 3])
        """
        return PList.collect(value for elem in self for value in fn(elem))

    def flat_map(self, fn):
        """
        >>> plist([1, 2]).flat_map(lambda x: [x, x])
        plist([1, 1, 2, 2])
        """
        return PList.collect(value for elem in self for value in fn(elem))

    def take(self, count):
        builder = _PListBuilder()
        head = self
        while head and count > 0:
            builder.append_elem(head.head)
            head = head.tail
            count -= 1

        if not head:
            # Nothing was left out, keep the original
            return self

        return builder.build()

    def drop(self, count):
        """
        Return the list without its first count elements. Runs in O(count) and shares the remainder.

        >>> plist([1, 2, 3]).drop(2)
        plist([3])
        """
        head = self
        while head and count > 0:
            head = head.tail
            count -= 1

        return head

    def head_option(self):
        return some(self.head) if self else nothing()

    def first(self, predicate):
        """
        Return the first element matching predicate.

        >>> plist([1, 2, 3]).first(lambda x: x > 1)
        some(2)
        """
        for elem in self:
            if predicate(elem):
                return some(elem)

        return nothing()

    def last_element(self):
        result = nothing()
        for elem in self:
            result = some(elem)

        return result

    def fold(self, init, fn):
        """
        >>> plist(['1', '2']).fold('0', lambda acc, cur: acc + cur)
        '012'
        """
        return reduce(fn, self, init)

    def reduce(self, fn):
        """
        Like fold but uses the head as initial value. Returns nothing() for an empty list.

        >>> plist([1, 2, 3]).reduce(lambda acc, cur: acc + cur)
        some(6)
        """
        if not self:
            return nothing()

        return some(reduce(fn, self.tail, self.head))

    def exists(self, predicate):
        return any(predicate(elem) for elem in self)

    def every(self, predicate):
        return all(predicate(elem) for elem in self)

    def to_list(self):
        return list(self)

    def __iter__(self):
        li = self
        while li:
            yield li.head
            li = li.tail

    def __lt__(self, other):
        if not isinstance(other, PList):
            return NotImplemented

        return tuple(self) < tuple(other)

    def __eq__(self, other):
        if not isinstance(other, PList):
            return NotImplemented

        self_head = self
        other_head = other
        while self_head and other_head:
            if self_head is other_head:
                # Shared suffix
                return True
            if not self_head.head == other_head.head:
                return False
            self_head = self_head.tail
            other_head = other_head.tail

        return not self_head and not other_head

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __getitem__(self, index):
        # Don't use this this data structure if you plan to do a lot of indexing

        if isinstance(index, slice):
            if index.start is not None and index.stop is None and (index.step is None or index.step == 1):
                return self.drop(index.start) if index.start >= 0 else plist(tuple(self)[index])

            return plist(tuple(self)[index])

        if not isinstance(index, Integral):
            raise TypeError("'%s' object cannot be interpreted as an index" % type(index).__name__)

        if index < 0:
            # NB: O(n)!
            index += len(self)

        if index < 0:
            raise IndexError("PList index out of range")

        node = self.drop(index)
        if not node:
            raise IndexError("PList index out of range")

        return node.head

    def __hash__(self):
        return hash(tuple(self))


class Cons(PList):
    """
    A non-empty list cell, a head element followed by a tail list.
    """
    __slots__ = ('head', 'tail')

    def __new__(cls, head, tail):
        instance = super(Cons, cls).__new__(cls)
        instance.head = head
        instance.tail = tail
        return instance

    def __bool__(self):
        return True


Sequence.register(Cons)
Hashable.register(Cons)


class _Nil(PList):
    __slots__ = ()

    def __bool__(self):
        return False

    @property
    def head(self):
        raise EmptySequenceError("Empty PList has no head")

    @property
    def tail(self):
        raise EmptySequenceError("Empty PList has no tail")

    def __iter__(self):
        return iter(())

    def __reduce__(self):
        return plist, ()


Sequence.register(_Nil)
Hashable.register(_Nil)

Nil = _Nil()


class NonEmptyPList(object):
    """
    Persistent list that is guaranteed to hold at least one element.

    >>> NonEmptyPList.collect([1, 2, 3]).head
    1
    >>> NonEmptyPList.collect([])
    Traceback (most recent call last):
    ...
    pfunctional._errors.EmptyCollectionError: Non empty collection must contain at least one element
    """
    __slots__ = ('head', 'tail')

    def __new__(cls, head, tail):
        instance = super(NonEmptyPList, cls).__new__(cls)
        instance.head = head
        instance.tail = tail
        return instance

    @staticmethod
    def collect(iterable):
        collected = PList.collect(iterable)
        if not collected:
            raise EmptyCollectionError("Non empty collection must contain at least one element")

        return NonEmptyPList(collected.head, collected.tail)

    def map(self, fn):
        return NonEmptyPList.collect(fn(elem) for elem in self)

    def to_plist(self):
        return Cons(self.head, self.tail)

    def to_list(self):
        return list(self)

    def __iter__(self):
        yield self.head
        for elem in self.tail:
            yield elem

    def __len__(self):
        return 1 + len(self.tail)

    def __eq__(self, other):
        if not isinstance(other, NonEmptyPList):
            return NotImplemented

        return self.head == other.head and self.tail == other.tail

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self):
        return hash(tuple(self))

    def __repr__(self):
        return "NonEmptyPList({0})".format(list(self))
    __str__ = __repr__


def plist(iterable=(), reverse=False):
    """
    Creates a new persistent list containing all elements of iterable.
    Optional parameter reverse specifies if the elements should be inserted in
    reverse order or not.

    >>> plist([1, 2, 3])
    plist([1, 2, 3])
    >>> plist([1, 2, 3], reverse=True)
    plist([3, 2, 1])
    """
    if reverse:
        return reduce(lambda pl, elem: pl.prepended(elem), iterable, Nil)

    return PList.collect(iterable)


def l(*elements):
    """
    Creates a new persistent list containing all arguments.

    >>> l(1, 2, 3)
    plist([1, 2, 3])
    """
    return plist(elements)
