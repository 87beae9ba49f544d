"""
Fixed-arity tuples encoded as nested pairs.

A k-tuple ``(v1, ..., vk)`` is stored as ``Pair(<(k-1)-tuple>, vk)``, bottoming
out at ``Pair(v1, v2)``. The newest value is therefore always the outermost
``second`` and the history nests down the ``first`` spine::

    construct4(1, "x", True, 3.5) == Pair(Pair(Pair(1, "x"), True), 3.5)

Constructors, appliers and curried adapters for arities 2 through 10 are all
produced by the same inductive factories, so every arity shares one nesting
order.
"""
from __future__ import annotations
from functools import lru_cache
from typing import Any, Callable, Tuple, TypeVar

from nested_pairs.structures.deferred import DeferredPair
from nested_pairs.structures.pairing import Pair

MIN_ARITY = 2
MAX_ARITY = 10

Z = TypeVar("Z")
T1 = TypeVar("T1")
T2 = TypeVar("T2")
T3 = TypeVar("T3")
T4 = TypeVar("T4")
T5 = TypeVar("T5")
T6 = TypeVar("T6")
T7 = TypeVar("T7")
T8 = TypeVar("T8")
T9 = TypeVar("T9")
T10 = TypeVar("T10")

NestedTuple2 = Pair[T1, T2]
NestedTuple3 = Pair[NestedTuple2[T1, T2], T3]
NestedTuple4 = Pair[NestedTuple3[T1, T2, T3], T4]
NestedTuple5 = Pair[NestedTuple4[T1, T2, T3, T4], T5]
NestedTuple6 = Pair[NestedTuple5[T1, T2, T3, T4, T5], T6]
NestedTuple7 = Pair[NestedTuple6[T1, T2, T3, T4, T5, T6], T7]
NestedTuple8 = Pair[NestedTuple7[T1, T2, T3, T4, T5, T6, T7], T8]
NestedTuple9 = Pair[NestedTuple8[T1, T2, T3, T4, T5, T6, T7, T8], T9]
NestedTuple10 = Pair[NestedTuple9[T1, T2, T3, T4, T5, T6, T7, T8, T9], T10]

Constructor = Callable[..., Pair[Any, Any]]
Applier = Callable[[Callable[..., Z]], Callable[[Pair[Any, Any]], Z]]
Curried = Callable[[Callable[[Pair[Any, Any]], Z]], Callable[..., Z]]


def _check_arity(arity: int) -> None:
    """Reject arities outside the supported ``[MIN_ARITY, MAX_ARITY]`` range."""
    if not isinstance(arity, int) or isinstance(arity, bool) or not MIN_ARITY <= arity <= MAX_ARITY:
        raise ValueError(f"Nested tuple arity must be an int in [{MIN_ARITY}, {MAX_ARITY}], got {arity!r}.")


def _check_pair(value: Any, arity: int) -> None:
    if not isinstance(value, (Pair, DeferredPair)):
        raise TypeError(
            f"Expected a nested tuple of arity {arity}, found {type(value).__name__} at that level."
        )


@lru_cache(maxsize=None)
def make_constructor(arity: int) -> Constructor:
    """
    Build the constructor for nested tuples of `arity` components.

    Parameters
    ----------
    arity : int
        Number of components, between `MIN_ARITY` and `MAX_ARITY`.

    Returns
    -------
    Callable[..., Pair]
        A function taking exactly `arity` positional values and returning
        ``Pair(construct_{arity-1}(v1, ..., v_{arity-1}), v_arity)``.

    Raises
    ------
    ValueError
        If `arity` is out of range.
    """
    _check_arity(arity)
    previous = make_constructor(arity - 1) if arity > MIN_ARITY else None

    def construct_k(*values: Any) -> Pair[Any, Any]:
        if len(values) != arity:
            raise TypeError(f"construct{arity} takes {arity} values, got {len(values)}.")
        if previous is None:
            return Pair(values[0], values[1])
        return Pair(previous(*values[:-1]), values[-1])

    construct_k.__name__ = construct_k.__qualname__ = f"construct{arity}"
    return construct_k


@lru_cache(maxsize=None)
def make_applier(arity: int) -> Applier:
    """
    Build the destructuring adapter for nested tuples of `arity` components.

    The returned adapter takes ``fn(v1, ..., vk)`` and gives back a function
    of one nested tuple. It peels the outermost ``second`` as the last
    argument and recurses into ``first`` with arity ``k - 1``.

    Raises
    ------
    ValueError
        If `arity` is out of range.
    """
    _check_arity(arity)
    previous = make_applier(arity - 1) if arity > MIN_ARITY else None

    def apply_to_tuple_k(func: Callable[..., Z]) -> Callable[[Pair[Any, Any]], Z]:
        def applied(nested: Pair[Any, Any]) -> Z:
            _check_pair(nested, arity)
            last = nested.second
            if previous is None:
                return func(nested.first, last)
            return previous(lambda *init: func(*init, last))(nested.first)

        return applied

    apply_to_tuple_k.__name__ = apply_to_tuple_k.__qualname__ = f"apply_to_tuple{arity}"
    return apply_to_tuple_k


@lru_cache(maxsize=None)
def make_curried(arity: int) -> Curried:
    """
    Build the adapter turning a function of one nested tuple into a function
    of `arity` positional values.

    Raises
    ------
    ValueError
        If `arity` is out of range.
    """
    constructor = make_constructor(arity)

    def curry_to_tuple_k(func: Callable[[Pair[Any, Any]], Z]) -> Callable[..., Z]:
        def curried(*values: Any) -> Z:
            return func(constructor(*values))

        return curried

    curry_to_tuple_k.__name__ = curry_to_tuple_k.__qualname__ = f"curry_to_tuple{arity}"
    return curry_to_tuple_k


construct2 = make_constructor(2)
construct3 = make_constructor(3)
construct4 = make_constructor(4)
construct5 = make_constructor(5)
construct6 = make_constructor(6)
construct7 = make_constructor(7)
construct8 = make_constructor(8)
construct9 = make_constructor(9)
construct10 = make_constructor(10)

apply_to_tuple2 = make_applier(2)
apply_to_tuple3 = make_applier(3)
apply_to_tuple4 = make_applier(4)
apply_to_tuple5 = make_applier(5)
apply_to_tuple6 = make_applier(6)
apply_to_tuple7 = make_applier(7)
apply_to_tuple8 = make_applier(8)
apply_to_tuple9 = make_applier(9)
apply_to_tuple10 = make_applier(10)

curry_to_tuple2 = make_curried(2)
curry_to_tuple3 = make_curried(3)
curry_to_tuple4 = make_curried(4)
curry_to_tuple5 = make_curried(5)
curry_to_tuple6 = make_curried(6)
curry_to_tuple7 = make_curried(7)
curry_to_tuple8 = make_curried(8)
curry_to_tuple9 = make_curried(9)
curry_to_tuple10 = make_curried(10)


def construct(*values: Any) -> Pair[Any, Any]:
    """Build a nested tuple whose arity is the number of `values`."""
    return make_constructor(len(values))(*values)


def apply_to_tuple(func: Callable[..., Z], arity: int) -> Callable[[Pair[Any, Any]], Z]:
    return make_applier(arity)(func)


def curry_to_tuple(func: Callable[[Pair[Any, Any]], Z], arity: int) -> Callable[..., Z]:
    return make_curried(arity)(func)


def destruct(nested: Pair[Any, Any], arity: int) -> Tuple[Any, ...]:
    """
    Flatten a nested tuple of `arity` components into a plain tuple.

    Parameters
    ----------
    nested : Pair
        Value produced by ``construct{arity}`` (or an equivalent ``&`` chain).
    arity : int
        Number of components to read.

    Returns
    -------
    tuple
        ``(v1, ..., v_arity)`` in construction order.

    Raises
    ------
    ValueError
        If `arity` is out of range.
    TypeError
        If `nested` is not nested deeply enough for `arity`.
    """
    return make_applier(arity)(lambda *values: values)(nested)


def arity_of(nested: Pair[Any, Any]) -> int:
    """
    Length of the ``first`` spine of `nested`, plus one.

    A pair whose first component is itself a pair always counts as a deeper
    tuple, so ``Pair(Pair(1, 2), 3)`` reports 3 even if it was built as a
    2-tuple holding a pair.

    Raises
    ------
    TypeError
        If `nested` is not a pair.
    """
    _check_pair(nested, MIN_ARITY)
    arity = 1
    node: Any = nested
    while isinstance(node, (Pair, DeferredPair)):
        arity += 1
        node = node.first
    return arity
