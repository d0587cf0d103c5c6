import logging
import time

from pfunctional import _operations as ops
from pfunctional import _reducers as reducers
from pfunctional._errors import StreamReuseError
from pfunctional._option import unit
from pfunctional._phashmap import PHashMap
from pfunctional._phashset import PHashSet
from pfunctional._plist import PList

logger = logging.getLogger(__name__)


class Emitter(object):
    """
    One-shot iterator over a source iterable.

    The source iterator is obtained on the first pull. Once the source has signalled
    its end the emitter stays exhausted, even for sources that could be resumed.
    """
    __slots__ = ('_source', '_it', 'exhausted')

    def __init__(self, source):
        self._source = source
        self._it = None
        self.exhausted = False

    def __iter__(self):
        return self

    def __next__(self):
        if self.exhausted:
            raise StopIteration

        if self._it is None:
            self._it = iter(self._source)
            self._source = None

        try:
            return next(self._it)
        except StopIteration:
            self.exhausted = True
            self._it = None
            raise


class Stream(object):
    """
    Lazy, single use stream of elements.

    A stream wraps one lazily evaluated sequence. Combinators such as :py:meth:`map`
    and :py:meth:`filter` hand that sequence to an operation and return a new stream
    wrapping the result, terminal operations such as :py:meth:`fold` or
    :py:meth:`to_list` pull the sequence. Either way the stream is spent afterwards,
    using it again raises :py:class:`StreamReuseError`. Iterating a stream with a
    for loop is a terminal operation as well.

    Do not instantiate directly, use one of the constructors :py:meth:`emit`,
    :py:meth:`emits`, :py:meth:`constant`, :py:meth:`infinite`, :py:meth:`range`
    or :py:meth:`awake_every`.

    >>> Stream.emits([1, 2, 3]).map(lambda x: x * 2).to_list()
    [2, 4, 6]
    >>> Stream.constant(7).take(3).to_list()
    [7, 7, 7]
    >>> s = Stream.emits([1, 2])
    >>> s.to_list()
    [1, 2]
    >>> s.to_list()
    Traceback (most recent call last):
    ...
    pfunctional._errors.StreamReuseError: Can not drain already drained stream
    """
    __slots__ = ('_emitter', '_forked', '_drained')

    def __init__(self, source):
        self._emitter = Emitter(source)
        self._forked = False
        self._drained = False

    @property
    def forked(self):
        return self._forked

    @property
    def drained(self):
        return self._drained

    def __repr__(self):
        return 'Stream(forked={0}, drained={1})'.format(self._forked, self._drained)

    def iter(self):
        """
        Hand out the underlying sequence for a single traversal.
        """
        if self._drained:
            logger.debug('Rejected drain of already drained stream %r', self)
            raise StreamReuseError('Can not drain already drained stream')

        self._drained = True
        return self._emitter

    def __iter__(self):
        return self.iter()

    def _fork(self, seq):
        """
        Wrap seq, a sequence taken from this stream, in a new stream. The public
        combinators already fail in iter() on a second use, this guard covers internal
        callers that fork a sequence they are still holding.
        """
        if self._forked:
            logger.debug('Rejected second fork of stream %r', self)
            raise StreamReuseError('multiple stream forks detected')

        self._forked = True
        return Stream(seq)

    # Constructors

    @staticmethod
    def emit(elem):
        """
        Create a stream with a single element.

        >>> Stream.emit(1).to_list()
        [1]
        """
        return Stream((elem,))

    @staticmethod
    def emits(source):
        """
        Create a stream pulling its elements from source, which may be infinite.

        >>> Stream.emits(x for x in 'ab').to_list()
        ['a', 'b']
        """
        return Stream(source)

    @staticmethod
    def constant(const):
        return Stream(_constant(const))

    @staticmethod
    def infinite():
        """
        Infinite stream of :py:data:`unit`. Handy as a ticker to zip with.
        """
        return Stream.constant(unit)

    @staticmethod
    def range(start, stop_exclusive, by=1):
        """
        Half open arithmetic progression from start up to stop_exclusive, by must be
        positive but need not be an integer.

        >>> Stream.range(0, 10, 3).to_list()
        [0, 3, 6, 9]
        """
        if by <= 0:
            raise ValueError('Range step must be positive, was {0}'.format(by))

        return Stream(_range(start, stop_exclusive, by))

    @staticmethod
    def awake_every(seconds, clock=time.monotonic, sleep=time.sleep):
        """
        Infinite stream of elapsed time. Before each element the stream sleeps for
        seconds, the element is the total time passed since the first pull.

        clock and sleep can be replaced, mostly to avoid real waiting in tests.
        """
        return Stream(_awake_every(seconds, clock, sleep))

    # Combinators

    def map(self, fn):
        return self._fork(ops.map_values(self.iter(), fn))

    def tap(self, fn):
        """
        Call fn on every element as it passes, the elements are left unchanged.
        """
        return self._fork(ops.tap(self.iter(), fn))

    def lines(self):
        """
        Print every element as it passes.
        """
        return self._fork(ops.tap(self.iter(), print))

    def filter(self, predicate):
        return self._fork(ops.filter_values(self.iter(), predicate))

    def filter_map(self, fn):
        """
        Map with fn, which returns an :py:class:`Option`, and keep the present values.
        """
        return self._fork(ops.filter_map(self.iter(), fn))

    def filter_not_none(self):
        return self._fork(ops.filter_not_none(self.iter()))

    def filter_of(self, cls, invariant=False):
        return self._fork(ops.filter_of(self.iter(), cls, invariant))

    def flat_map(self, fn):
        return self._fork(ops.flat_map(self.iter(), fn))

    def appended(self, elem):
        return self._fork(ops.appended(self.iter(), elem))

    def appended_all(self, suffix):
        return self._fork(ops.appended_all(self.iter(), suffix))

    def prepended(self, elem):
        return self._fork(ops.prepended(self.iter(), elem))

    def prepended_all(self, prefix):
        return self._fork(ops.prepended_all(self.iter(), prefix))

    def tail(self):
        return self._fork(ops.tail(self.iter()))

    def take(self, length):
        return self._fork(ops.take(self.iter(), length))

    def drop(self, length):
        return self._fork(ops.drop(self.iter(), length))

    def take_while(self, predicate):
        return self._fork(ops.take_while(self.iter(), predicate))

    def drop_while(self, predicate):
        return self._fork(ops.drop_while(self.iter(), predicate))

    def repeat(self):
        """
        Repeat the stream forever.

        >>> Stream.emits([1, 2]).repeat().take(5).to_list()
        [1, 2, 1, 2, 1]
        """
        return self._fork(ops.repeat(self.iter()))

    def repeat_n(self, times):
        """
        >>> Stream.emit(1).repeat_n(3).to_list()
        [1, 1, 1]
        """
        return self._fork(ops.repeat_n(self.iter(), times))

    def intersperse(self, separator):
        """
        >>> Stream.emits(['a', 'b', 'c']).intersperse(',').to_list()
        ['a', ',', 'b', ',', 'c']
        """
        return self._fork(ops.intersperse(self.iter(), separator))

    def interleave(self, that):
        """
        Alternate between this stream and that, stops when either side runs out. When
        that is a stream it is claimed right away.

        >>> Stream.emits([1, 2, 3]).interleave(['a', 'b']).to_list()
        [1, 'a', 2, 'b']
        """
        seq = self.iter()
        return self._fork(ops.interleave(seq, iter(that)))

    def zip(self, that):
        """
        Pair up the elements of this stream and that, stops at the shorter one. When
        that is a stream it is claimed right away.

        >>> Stream.emits([1, 2, 3, 4]).zip(['a', 'b']).to_list()
        [(1, 'a'), (2, 'b')]
        """
        seq = self.iter()
        return self._fork(ops.zip_values(seq, iter(that)))

    def chunks(self, size):
        """
        Group the elements into PLists of size elements, the last chunk may be smaller.

        >>> Stream.emits([1, 2, 3]).chunks(2).to_list()
        [plist([1, 2]), plist([3])]
        """
        if size < 1:
            raise ValueError('Chunk size must be positive, was {0}'.format(size))

        return self._fork(ops.chunks(self.iter(), size))

    def group_adjacent_by(self, discriminator):
        """
        >>> Stream.emits([1, 1, 2, 1]).group_adjacent_by(lambda x: x).to_list()
        [(1, plist([1, 1])), (2, plist([2])), (1, plist([1]))]
        """
        return self._fork(ops.group_adjacent_by(self.iter(), discriminator))

    # Terminal operations

    def every(self, predicate):
        return reducers.every(self.iter(), predicate)

    def every_of(self, cls, invariant=False):
        return reducers.every_of(self.iter(), cls, invariant)

    def exists(self, predicate):
        """
        >>> Stream.emits([1, 2]).exists(lambda x: x == 2)
        True
        """
        return reducers.exists(self.iter(), predicate)

    def exists_of(self, cls, invariant=False):
        return reducers.exists_of(self.iter(), cls, invariant)

    def first(self, predicate):
        return reducers.first(self.iter(), predicate)

    def first_of(self, cls, invariant=False):
        return reducers.first_of(self.iter(), cls, invariant)

    def fold(self, init, fn):
        """
        >>> Stream.emits(['1', '2']).fold('0', lambda acc, cur: acc + cur)
        '012'
        """
        return reducers.fold(self.iter(), init, fn)

    def reduce(self, fn):
        return reducers.reduce(self.iter(), fn)

    def head(self):
        return reducers.head(self.iter())

    def last(self, predicate):
        return reducers.last(self.iter(), predicate)

    def first_element(self):
        return reducers.first(self.iter())

    def last_element(self):
        return reducers.last(self.iter())

    def drain(self):
        """
        Run the stream for its side effects only.
        """
        for _ in self:
            pass

    def to_list(self):
        return list(self.iter())

    def to_plist(self):
        return PList.collect(self.iter())

    def to_hash_set(self):
        return PHashSet.collect(self.iter())

    def to_hash_map(self, fn):
        """
        Collect into a :py:class:`PHashMap`, fn turns each element into a (key, value) pair.
        """
        return PHashMap.collect(ops.map_values(self.iter(), fn))

    def to_file(self, path, append=False):
        """
        Write the string form of every element to the file at path, which is truncated
        first unless append is set. No separators are added.
        """
        count = 0
        with open(path, 'a' if append else 'w', encoding='utf-8') as f:
            for elem in self:
                f.write(str(elem))
                count += 1

        logger.debug('Wrote %d stream elements to %s', count, path)


def _constant(const):
    while True:
        yield const


def _range(start, stop_exclusive, by):
    i = start
    while i < stop_exclusive:
        yield i
        i += by


def _awake_every(seconds, clock, sleep):
    elapsed = 0
    prev_time = clock()
    while True:
        sleep(seconds)
        cur_time = clock()
        elapsed += cur_time - prev_time
        prev_time = cur_time
        yield elapsed
