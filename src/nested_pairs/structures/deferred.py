from __future__ import annotations
import threading
from typing import Any, Callable, Generic, TypeVar, Union

from nested_pairs.structures.pairing import Pair

A = TypeVar("A")
B = TypeVar("B")

_UNSET = object()


class DeferredPair(Generic[A, B]):
    """
    A pair whose components are computed on demand from a thunk.

    The thunk runs at most once, on the first access to either component.
    When the thunk itself returns a `DeferredPair`, each component is resolved
    independently: reading ``first`` never forces the inner pair's ``second``.
    """
    __slots__ = ("_thunk", "_result", "_lock")

    def __init__(self, thunk: Callable[[], Union[Pair[A, B], DeferredPair[A, B]]]):
        self._thunk = thunk
        self._result: Any = _UNSET
        self._lock = threading.Lock()

    @property
    def is_evaluated(self) -> bool:
        """True once the thunk has been called."""
        return self._result is not _UNSET

    def _resolve(self) -> Union[Pair[A, B], DeferredPair[A, B]]:
        """Runs the thunk once and caches its result."""
        if self._result is _UNSET:
            with self._lock:
                if self._result is _UNSET:
                    result = self._thunk()
                    if not isinstance(result, (Pair, DeferredPair)):
                        raise TypeError(
                            f"Deferred thunk must return a Pair, got {type(result).__name__}."
                        )
                    self._result = result
                    self._thunk = None
        return self._result

    @property
    def first(self) -> A:
        return self._resolve().first

    @property
    def second(self) -> B:
        return self._resolve().second

    def extract(self) -> B:
        return self.second

    def force(self) -> Pair[A, B]:
        """
        Evaluate both components and return them as a plain `Pair`.

        Returns
        -------
        Pair
            An eager pair holding the same components.
        """
        return Pair(self.first, self.second)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Pair, DeferredPair)):
            return NotImplemented
        return self.first == other.first and self.second == other.second

    def __hash__(self) -> int:
        return hash(self.force())

    def __repr__(self) -> str:
        if not self.is_evaluated:
            return "DeferredPair(<unevaluated>)"
        return f"Deferred{self.force()!r}"


def deferred_construct(thunk: Callable[[], Union[Pair[A, B], DeferredPair[A, B]]]) -> DeferredPair[A, B]:
    """
    Build a pair without calling `thunk` until one of its components is read.

    Parameters
    ----------
    thunk : Callable[[], Pair]
        Zero-argument function producing the eventual pair.

    Returns
    -------
    DeferredPair
        A lazily evaluated pair. Safe to share between threads.
    """
    return DeferredPair(thunk)
