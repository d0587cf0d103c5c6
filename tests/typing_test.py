from pfunctional import phashmap, plist, Stream
from pfunctional import typing as ptyping


def _sum_values(m: ptyping.PHashMap[str, int]) -> int:
    return m.fold(0, lambda acc, pair: acc + pair[1])


def _to_stream(xs: ptyping.PList[int]) -> ptyping.Stream[int]:
    return Stream.emits(xs)


def test_placeholder_types_are_subscriptable():
    assert ptyping.PHashMap[str, int] is ptyping.PHashMap
    assert ptyping.Option[int] is ptyping.Option
    assert ptyping.PHashSet[int] is ptyping.PHashSet
    assert ptyping.NonEmptyPList[int] is ptyping.NonEmptyPList


def test_annotated_functions():
    assert _sum_values(phashmap({'a': 1, 'b': 2})) == 3
    assert _to_stream(plist([1, 2])).to_list() == [1, 2]
