"""
Capabilities of `Pair` that depend on a monoid for one or both components.

Every function here takes the required `Monoid` instances explicitly. The
first slot plays the role of an accumulated log/cost: `apply` and `bind`
combine first slots left to right in call order while the second slot
carries the value being computed.
"""
from __future__ import annotations
from typing import Any, Callable, TypeVar

from nested_pairs.algebra.monoids import Monoid
from nested_pairs.structures.deferred import DeferredPair
from nested_pairs.structures.pairing import Pair

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
X = TypeVar("X")
Y = TypeVar("Y")


def combine(left: Pair[A, B], right: Pair[A, B],
            first_monoid: Monoid[A], second_monoid: Monoid[B]) -> Pair[A, B]:
    """
    Component-wise combination of two pairs.

    Parameters
    ----------
    left, right : Pair
        Operands, combined in this order.
    first_monoid : Monoid
        Combination for the first components.
    second_monoid : Monoid
        Combination for the second components.

    Returns
    -------
    Pair
        ``Pair(first_monoid.combine(l1, r1), second_monoid.combine(l2, r2))``.
    """
    return Pair(
        first_monoid.combine(left.first, right.first),
        second_monoid.combine(left.second, right.second),
    )


def empty(first_monoid: Monoid[A], second_monoid: Monoid[B]) -> Pair[A, B]:
    """Identity pair for `combine`."""
    return Pair(first_monoid.identity, second_monoid.identity)


def pair_monoid(first_monoid: Monoid[A], second_monoid: Monoid[B]) -> Monoid[Pair[A, B]]:
    """
    Lift two component monoids to a monoid over pairs.

    The result is itself a `Monoid`, so it can be nested to combine nested
    tuples component by component.
    """
    return Monoid(
        lambda left, right: combine(left, right, first_monoid, second_monoid),
        empty(first_monoid, second_monoid),
        f"pair({first_monoid.name}, {second_monoid.name})",
    )


def fmap(func: Callable[[B], C], pair: Pair[A, B]) -> Pair[A, C]:
    return pair.map(func)


def pure(value: B, monoid: Monoid[A]) -> Pair[A, B]:
    """Wrap `value` with the identity of `monoid` in the first slot."""
    return Pair(monoid.identity, value)


def apply(func_pair: Pair[A, Callable[[X], Y]], value_pair: Pair[A, X], monoid: Monoid[A]) -> Pair[A, Y]:
    """
    Apply the function held in `func_pair` to the value held in `value_pair`.

    The first slots are combined with `func_pair` on the left.
    """
    return Pair(
        monoid.combine(func_pair.first, value_pair.first),
        func_pair.second(value_pair.second),
    )


def bind(pair: Pair[A, B], func: Callable[[B], Pair[A, C]], monoid: Monoid[A]) -> Pair[A, C]:
    """
    Sequence `func` after `pair`, accumulating the first slots.

    Parameters
    ----------
    pair : Pair
        Starting pair ``(a1, b)``.
    func : Callable[[B], Pair]
        Continuation receiving ``b`` and producing ``(a2, c)``.
    monoid : Monoid
        Combination for the first slot.

    Returns
    -------
    Pair
        ``Pair(monoid.combine(a1, a2), c)``.

    Raises
    ------
    TypeError
        If `func` does not return a `Pair`.
    """
    result = func(pair.second)
    if not isinstance(result, (Pair, DeferredPair)):
        raise TypeError(f"bind continuation must return a Pair, got {type(result).__name__}.")
    return Pair(monoid.combine(pair.first, result.first), result.second)


def compose(outer: Pair[A, B], inner: Pair[X, A]) -> Pair[X, B]:
    """Function form of `Pair.compose`: ``Pair(inner.first, outer.second)``."""
    return outer.compose(inner)


def extend(func: Callable[[Pair[A, B]], C], pair: Pair[A, B]) -> Pair[A, C]:
    return pair.extend(func)


def extract(pair: Pair[Any, B]) -> B:
    return pair.extract()
