class Option(object):
    """
    Container for a value that may be absent. Has two variants, a Some holding a value
    and the Nothing singleton.

    Do not instantiate directly, instead use the factory functions :py:func:`some`,
    :py:func:`nothing` or :py:func:`from_nullable`.

    >>> some(1).map(lambda x: x + 1)
    some(2)
    >>> nothing().map(lambda x: x + 1)
    nothing()
    >>> from_nullable(None).get_or_else(5)
    5
    """
    __slots__ = ()

    def is_some(self):
        return bool(self)

    def is_empty(self):
        return not self

    def get_or_else(self, default):
        return self.get() if self else default

    def get_or_call(self, fn):
        return self.get() if self else fn()

    def map(self, fn):
        return _Some(fn(self.get())) if self else self

    def flat_map(self, fn):
        """
        Apply fn, which must return an Option, to the value if there is one.

        >>> some(4).flat_map(lambda x: some(x * 2) if x > 3 else nothing())
        some(8)
        """
        return fn(self.get()) if self else self

    def filter(self, predicate):
        return self if self and predicate(self.get()) else _NOTHING

    def fold(self, if_empty, if_some):
        return if_some(self.get()) if self else if_empty()

    def to_list(self):
        return list(self)

    def __iter__(self):
        if self:
            yield self.get()


class _Some(Option):
    __slots__ = ('_value',)

    def __new__(cls, value):
        instance = super(_Some, cls).__new__(cls)
        instance._value = value
        return instance

    def get(self):
        return self._value

    def __bool__(self):
        return True

    def __eq__(self, other):
        if not isinstance(other, Option):
            return NotImplemented

        return isinstance(other, _Some) and self._value == other._value

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self):
        return hash(('some', self._value))

    def __repr__(self):
        return 'some({0!r})'.format(self._value)
    __str__ = __repr__


class _Nothing(Option):
    __slots__ = ()

    def get(self):
        raise ValueError('Nothing has no value')

    def __bool__(self):
        return False

    def __eq__(self, other):
        if not isinstance(other, Option):
            return NotImplemented

        return other is self

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self):
        return hash('nothing')

    def __repr__(self):
        return 'nothing()'
    __str__ = __repr__


_NOTHING = _Nothing()


def some(value):
    """
    Create an Option holding value. None is a legal value.

    >>> some(3)
    some(3)
    """
    return _Some(value)


def nothing():
    """
    Return the empty Option.

    >>> nothing() is nothing()
    True
    """
    return _NOTHING


def from_nullable(value):
    """
    Create an Option that is empty when value is None.

    >>> from_nullable(None)
    nothing()
    >>> from_nullable(0)
    some(0)
    """
    return _NOTHING if value is None else _Some(value)


class Unit(object):
    """
    The type with a single value, :py:data:`unit`.
    """
    __slots__ = ()

    def __repr__(self):
        return 'unit'

    def __reduce__(self):
        return 'unit'


unit = Unit()
