from __future__ import annotations
import operator
from dataclasses import dataclass
from functools import reduce
from typing import Callable, Generic, Iterable, Tuple, TypeVar

import numpy as np

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Monoid(Generic[T]):
    """
    An associative binary operation paired with its identity element.

    Parameters
    ----------
    combine : Callable[[T, T], T]
        Associative operation: ``combine(combine(x, y), z) == combine(x, combine(y, z))``.
    identity : T
        Unit of `combine`: ``combine(identity, x) == x == combine(x, identity)``.
    name : str
        Label used in error messages and reprs.

    Notes
    -----
    Python values do not carry a canonical unit, so operations that need one
    (`pair_ops.pure`, `pair_ops.bind`, ...) receive the monoid explicitly.
    """
    combine: Callable[[T, T], T]
    identity: T
    name: str = "monoid"

    def concat(self, values: Iterable[T]) -> T:
        """Fold `values` left to right starting from `identity`."""
        return reduce(self.combine, values, self.identity)

    def __repr__(self) -> str:
        return f"Monoid({self.name})"


SUM: Monoid[float] = Monoid(operator.add, 0, "sum")
PRODUCT: Monoid[float] = Monoid(operator.mul, 1, "product")
STRING: Monoid[str] = Monoid(operator.add, "", "string")
TUPLE: Monoid[Tuple] = Monoid(operator.add, (), "tuple")
ALL: Monoid[bool] = Monoid(lambda x, y: x and y, True, "all")
ANY: Monoid[bool] = Monoid(lambda x, y: x or y, False, "any")


def dual(monoid: Monoid[T]) -> Monoid[T]:
    """The same monoid with its operands flipped: ``combine(x, y) = m.combine(y, x)``."""
    return Monoid(lambda x, y: monoid.combine(y, x), monoid.identity, f"dual({monoid.name})")


def ndarray_sum(shape: int | Tuple[int, ...], dtype=np.float64) -> Monoid[np.ndarray]:
    """
    Element-wise addition of fixed-shape numpy arrays.

    Parameters
    ----------
    shape : int | tuple[int, ...]
        Shape of every array combined by this monoid.
    dtype : numpy dtype, optional
        Element type of the zero identity, by default ``np.float64``.

    Returns
    -------
    Monoid[np.ndarray]
        Monoid whose identity is ``np.zeros(shape, dtype)``. The identity
        array is read-only so it can be shared safely.
    """
    zeros = np.zeros(shape, dtype=dtype)
    zeros.setflags(write=False)
    return Monoid(np.add, zeros, f"ndarray_sum{zeros.shape}")
