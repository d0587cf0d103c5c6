"""
Lazy sequence operations that the :py:class:`Stream` combinators are built from.

Every operation takes the sequence(s) it transforms followed by its parameters and
returns a new lazy sequence. Input is only pulled when the next output element is
requested, so operations compose over infinite sources without materializing
anything. ``chunks`` and ``group_adjacent_by`` buffer a single window at a time.
"""
from pfunctional._plist import PList


def map_values(seq, fn):
    for elem in seq:
        yield fn(elem)


def tap(seq, fn):
    for elem in seq:
        fn(elem)
        yield elem


def filter_values(seq, predicate):
    for elem in seq:
        if predicate(elem):
            yield elem


def filter_map(seq, fn):
    for elem in seq:
        option = fn(elem)
        if option:
            yield option.get()


def filter_not_none(seq):
    for elem in seq:
        if elem is not None:
            yield elem


def filter_of(seq, cls, invariant=False):
    """
    Keep the elements that are instances of cls. With invariant set subclasses are rejected.
    """
    for elem in seq:
        if (type(elem) is cls) if invariant else isinstance(elem, cls):
            yield elem


def flat_map(seq, fn):
    for elem in seq:
        for value in fn(elem):
            yield value


def appended(seq, elem):
    for value in seq:
        yield value
    yield elem


def appended_all(seq, suffix):
    for value in seq:
        yield value
    for value in suffix:
        yield value


def prepended(seq, elem):
    yield elem
    for value in seq:
        yield value


def prepended_all(seq, prefix):
    for value in prefix:
        yield value
    for value in seq:
        yield value


def tail(seq):
    first = True
    for elem in seq:
        if first:
            first = False
            continue
        yield elem


def take(seq, length):
    if length <= 0:
        return

    taken = 0
    for elem in seq:
        yield elem
        taken += 1
        if taken >= length:
            # Stop before pulling another element from the source
            return


def drop(seq, length):
    dropped = 0
    for elem in seq:
        if dropped < length:
            dropped += 1
            continue
        yield elem


def take_while(seq, predicate):
    for elem in seq:
        if not predicate(elem):
            return
        yield elem


def drop_while(seq, predicate):
    dropping = True
    for elem in seq:
        if dropping and predicate(elem):
            continue
        dropping = False
        yield elem


def repeat(seq):
    """
    Replay the source forever. The elements are buffered while the source is pulled
    the first time.
    """
    buffer = []
    for elem in seq:
        buffer.append(elem)
        yield elem

    if not buffer:
        return

    while True:
        for elem in buffer:
            yield elem


def repeat_n(seq, times):
    if times <= 0:
        return

    buffer = []
    for elem in seq:
        buffer.append(elem)
        yield elem

    for _ in range(times - 1):
        for elem in buffer:
            yield elem


def intersperse(seq, separator):
    first = True
    for elem in seq:
        if not first:
            yield separator
        first = False
        yield elem


def zip_values(seq, that):
    that = iter(that)
    for left in seq:
        try:
            right = next(that)
        except StopIteration:
            return
        yield left, right


def interleave(seq, that):
    for left, right in zip_values(seq, that):
        yield left
        yield right


def chunks(seq, size):
    if size < 1:
        raise ValueError('Chunk size must be positive, was {0}'.format(size))

    return _chunks(seq, size)


def _chunks(seq, size):
    buffer = []
    for elem in seq:
        buffer.append(elem)
        if len(buffer) == size:
            yield PList.collect(buffer)
            buffer = []

    if buffer:
        yield PList.collect(buffer)


def group_adjacent_by(seq, discriminator):
    """
    Group runs of adjacent elements with the same discriminator value into
    (discriminator value, PList of elements) pairs.
    """
    buffer = []
    current = None
    for elem in seq:
        key = discriminator(elem)
        if buffer and key != current:
            yield current, PList.collect(buffer)
            buffer = []

        current = key
        buffer.append(elem)

    if buffer:
        yield current, PList.collect(buffer)
