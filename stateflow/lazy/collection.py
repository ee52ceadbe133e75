"""Collection combinators (lazy)

Deferred versions of the strict collection combinators. Iterables are
snapshotted when the computation is built; the structurally known
sub-computations are forced when the result is forced."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .. import strict
from .monad import LazyState

def traverse[S, X, A](
    f: Callable[[X], LazyState[S, A]],
    items: Iterable[X],
) -> LazyState[S, list[A]]:
    """Monadic map: X -> LazyState[A]. f is called left to right while running."""
    snapshot = tuple(items)
    return LazyState(lambda: strict.traverse(lambda item: f(item).force(), snapshot))

def sequence[S, A](cs: Iterable[LazyState[S, A]]) -> LazyState[S, list[A]]:
    """
    Flip structure: [LazyState[A]] -> LazyState[[A]].

    Forcing the result forces every element once.
    """
    snapshot = tuple(cs)
    return LazyState(lambda: strict.sequence([c.force() for c in snapshot]))

def foldM[S, A, B](
    f: Callable[[B, A], LazyState[S, B]],
    seed: B,
    items: Iterable[A],
) -> LazyState[S, B]:
    """Left fold threading both the accumulator and the state."""
    snapshot = tuple(items)
    return LazyState(lambda: strict.foldM(lambda acc, item: f(acc, item).force(), seed, snapshot))

def replicate[S, A](m: LazyState[S, A], n: int) -> LazyState[S, list[A]]:
    """Run m n times in a row, collect all values."""
    if n < 0:
        raise ValueError(f"replicate(): n must be >= 0, got {n}")
    return sequence([m for _ in range(n)])

__all__ = ("foldM", "replicate", "sequence", "traverse")
