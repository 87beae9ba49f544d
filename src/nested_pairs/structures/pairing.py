from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

from nested_pairs.config import DEFAULT_RENDER_STYLE, RenderStyle

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
X = TypeVar("X")


@dataclass(frozen=True, slots=True, order=True, repr=False)
class Pair(Generic[A, B]):
    """
    Immutable two-component product of possibly different types.

    Parameters
    ----------
    first : A
        Left component. Acts as the inert "environment" slot for `map`,
        `extend` and the monoid-driven sequencing in `algebra.pair_ops`.
    second : B
        Right component. The slot that mapping and extension replace.

    Notes
    -----
    - Equality and hashing are structural, component by component.
    - Ordering is lexicographic with the first component deciding and the
      second only breaking ties.
    - ``Pair(a, b) & c`` builds ``Pair(Pair(a, b), c)``, so chained ``&``
      grows nested tuples with the newest value as the outermost ``second``.
    """
    first: A
    second: B

    @classmethod
    def from_tuple(cls, values: Tuple[A, B]) -> Pair[A, B]:
        """
        Build a pair from a two-element sequence.

        Raises
        ------
        ValueError
            If `values` does not hold exactly two items.
        """
        items = tuple(values)
        if len(items) != 2:
            raise ValueError(f"Pair.from_tuple expects exactly 2 values, got {len(items)}.")
        return cls(items[0], items[1])

    def as_tuple(self) -> Tuple[A, B]:
        """Pair components as a plain ``(first, second)`` tuple."""
        return self.first, self.second

    def map(self, func: Callable[[B], C]) -> Pair[A, C]:
        """
        Apply `func` to the second component, leaving the first untouched.

        Satisfies ``p.map(identity) == p`` and
        ``p.map(lambda x: g(f(x))) == p.map(f).map(g)``.
        """
        return Pair(self.first, func(self.second))

    def map_first(self, func: Callable[[A], C]) -> Pair[C, B]:
        return Pair(func(self.first), self.second)

    def bimap(self, func_first: Callable[[A], C], func_second: Callable[[B], D]) -> Pair[C, D]:
        return Pair(func_first(self.first), func_second(self.second))

    def compose(self, other: Pair[X, A]) -> Pair[X, B]:
        """
        Arrow-style composition ``self . other``.

        Reading a pair as an arrow from its first to its second slot, the
        result goes from `other.first` straight to `self.second`. The second
        of `other` and the first of `self` are dropped and never compared.
        """
        return Pair(other.first, self.second)

    def extend(self, func: Callable[[Pair[A, B]], C]) -> Pair[A, C]:
        """
        Comonadic extension: `func` sees the whole pair, its result replaces
        the second slot.
        """
        return Pair(self.first, func(self))

    def extract(self) -> B:
        return self.second

    def swap(self) -> Pair[B, A]:
        return Pair(self.second, self.first)

    def render(self, style: Optional[RenderStyle] = None) -> str:
        return render(self, style)

    def __repr__(self) -> str:
        return render(self)

    def __and__(self, other: C) -> Pair[Pair[A, B], C]:
        return Pair(self, other)


def first(pair: Pair[A, Any]) -> A:
    """Get the first element in a pair."""
    return pair.first


def second(pair: Pair[Any, B]) -> B:
    """Get the second element in a pair."""
    return pair.second


def swap(pair: Pair[A, B]) -> Pair[B, A]:
    """Exchange the two components. ``swap(swap(p)) == p``."""
    return pair.swap()


def compare(left: Pair[Any, Any], right: Pair[Any, Any]) -> int:
    """
    Three-way lexicographic comparison of two pairs.

    The first components decide; the second components are only consulted
    when the first components are neither less nor greater than each other.

    Parameters
    ----------
    left : Pair
        Left operand.
    right : Pair
        Right operand.

    Returns
    -------
    int
        ``-1`` if `left` sorts before `right`, ``1`` if after, ``0`` if
        neither.
    """
    if left.first < right.first:
        return -1
    if right.first < left.first:
        return 1
    if left.second < right.second:
        return -1
    if right.second < left.second:
        return 1
    return 0


def render(pair: Pair[Any, Any], style: Optional[RenderStyle] = None) -> str:
    """
    Deterministic textual form of a pair.

    Nested pairs in either slot are rendered with the same `style`, so a
    4-tuple renders as ``Pair(Pair(Pair(1, 'x'), True), 3.5)`` by default.
    Deferred pairs are forced and rendered like eager ones, so the text does
    not depend on whether they were already evaluated.

    Parameters
    ----------
    pair : Pair | DeferredPair
        The pair to render.
    style : RenderStyle, optional
        Delimiters and component formatting. Defaults to
        `DEFAULT_RENDER_STYLE`.

    Returns
    -------
    str
        The rendered text.
    """
    from nested_pairs.structures.deferred import DeferredPair

    if style is None:
        style = DEFAULT_RENDER_STYLE

    def _component(value: Any) -> str:
        if isinstance(value, (Pair, DeferredPair)):
            return render(value, style)
        return style.format_component(value)

    return f"{style.prefix}{_component(pair.first)}{style.separator}{_component(pair.second)}{style.suffix}"
