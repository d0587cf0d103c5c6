"""
Terminal operations that consume a sequence into a single value.

``exists``, ``first`` and friends return as soon as the answer is known and leave
the rest of the sequence unpulled, which keeps them usable on infinite sources.
"""
from pfunctional._option import some, nothing


def _is_of(elem, cls, invariant):
    return type(elem) is cls if invariant else isinstance(elem, cls)


def every(seq, predicate):
    for elem in seq:
        if not predicate(elem):
            return False

    return True


def every_of(seq, cls, invariant=False):
    return every(seq, lambda elem: _is_of(elem, cls, invariant))


def exists(seq, predicate):
    for elem in seq:
        if predicate(elem):
            return True

    return False


def exists_of(seq, cls, invariant=False):
    return exists(seq, lambda elem: _is_of(elem, cls, invariant))


def first(seq, predicate=None):
    for elem in seq:
        if predicate is None or predicate(elem):
            return some(elem)

    return nothing()


def first_of(seq, cls, invariant=False):
    return first(seq, lambda elem: _is_of(elem, cls, invariant))


def head(seq):
    return first(seq)


def last(seq, predicate=None):
    result = nothing()
    for elem in seq:
        if predicate is None or predicate(elem):
            result = some(elem)

    return result


def fold(seq, init, fn):
    acc = init
    for elem in seq:
        acc = fn(acc, elem)

    return acc


def reduce(seq, fn):
    it = iter(seq)
    for acc in it:
        return some(fold(it, acc, fn))

    return nothing()
