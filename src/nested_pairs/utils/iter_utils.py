from typing import Iterable, List, Tuple, TypeVar

from nested_pairs.structures.pairing import Pair

A = TypeVar("A")
B = TypeVar("B")


def zip_pairs(lefts: Iterable[A], rights: Iterable[B]) -> List[Pair[A, B]]:
    """
    Pairs up two sequences position by position.

    The result stops at the end of the shorter input, so extra trailing
    items of the longer one are ignored.

    Parameters
    ----------
    lefts : Iterable[A]
        Values for the first slots.
    rights : Iterable[B]
        Values for the second slots.

    Returns
    -------
    List[Pair[A, B]]
        One pair per index present in both inputs.
    """
    return [Pair(left, right) for left, right in zip(lefts, rights)]


def unzip_pairs(pairs: Iterable[Pair[A, B]]) -> Pair[Tuple[A, ...], Tuple[B, ...]]:
    """
    Splits a sequence of pairs into a pair of sequences.

    Parameters
    ----------
    pairs : Iterable[Pair[A, B]]
        The pairs to split.

    Returns
    -------
    Pair[Tuple[A, ...], Tuple[B, ...]]
        All first components, then all second components, each in the
        original order and of the same length as `pairs`.
    """
    firsts: List[A] = []
    seconds: List[B] = []
    for pair in pairs:
        firsts.append(pair.first)
        seconds.append(pair.second)
    return Pair(tuple(firsts), tuple(seconds))
