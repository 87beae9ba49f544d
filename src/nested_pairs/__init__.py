from nested_pairs.structures.pairing import Pair, compare, first, render, second, swap
from nested_pairs.structures.deferred import DeferredPair, deferred_construct
from nested_pairs.structures.nested_tuple import (
    MAX_ARITY,
    MIN_ARITY,
    apply_to_tuple,
    arity_of,
    construct,
    curry_to_tuple,
    destruct,
)
from nested_pairs.algebra.monoids import Monoid
from nested_pairs.algebra.pair_ops import apply, bind, combine, empty, pair_monoid, pure

__all__ = [
    "Pair",
    "compare",
    "first",
    "render",
    "second",
    "swap",
    "DeferredPair",
    "deferred_construct",
    "MAX_ARITY",
    "MIN_ARITY",
    "apply_to_tuple",
    "arity_of",
    "construct",
    "curry_to_tuple",
    "destruct",
    "Monoid",
    "apply",
    "bind",
    "combine",
    "empty",
    "pair_monoid",
    "pure",
]
