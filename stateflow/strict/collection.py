"""Collection combinators (strict)

Threading state across a list of computations. Each combinator is a single
loop over the items, observationally the same as the right fold of apply
(sequence) or the left fold of bind (foldM), without the nesting."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .._helpers import identity
from .monad import State

def traverse[S, X, A](
    f: Callable[[X], State[S, A]],
    items: Iterable[X],
) -> State[S, list[A]]:
    """Monadic map: X -> State[A]. f is called left to right while threading."""
    snapshot = tuple(items)

    def run(state: S) -> tuple[S, list[A]]:
        values: list[A] = []
        for item in snapshot:
            state, value = f(item).run(state)
            values.append(value)
        return state, values

    return State(run)

def sequence[S, A](cs: Iterable[State[S, A]]) -> State[S, list[A]]:
    """
    Flip structure: [State[A]] -> State[[A]].

    Runs in list order, threading state left to right, collecting values in
    the same order. sequence([]) ≡ inject([]).
    """
    return traverse(identity, cs)

def foldM[S, A, B](
    f: Callable[[B, A], State[S, B]],
    seed: B,
    items: Iterable[A],
) -> State[S, B]:
    """
    Left fold threading both the accumulator and the state.

    foldM(f, seed, []) ≡ inject(seed).
    """
    snapshot = tuple(items)

    def run(state: S) -> tuple[S, B]:
        acc = seed
        for item in snapshot:
            state, acc = f(acc, item).run(state)
        return state, acc

    return State(run)

def replicate[S, A](m: State[S, A], n: int) -> State[S, list[A]]:
    """Run m n times in a row, collect all values (Haskell's replicateM)."""
    if n < 0:
        raise ValueError(f"replicate(): n must be >= 0, got {n}")
    return sequence([m for _ in range(n)])

__all__ = ("foldM", "replicate", "sequence", "traverse")
