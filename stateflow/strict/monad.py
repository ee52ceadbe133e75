"""Strict State Monad

A computation paired with a single threaded-through state:
- State[S, A] wraps a function S -> (S, A)
- composing builds a new function, nothing runs until run_state

The state is readable and replaceable from inside the computation
(get / put / modify) without the caller passing it around by hand."""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._helpers import const
from .._types import StateFn, Unit

class State[S, A]:
    """Strict State Monad.

    Monadic laws:
    - Left identity: State.pure(a).then(f) ≡ f(a)
    - Right identity: m.then(State.pure) ≡ m
    - Associativity: m.then(f).then(g) ≡ m.then(x => f(x).then(g))

    Equivalence is observational: both sides give the same (state, value)
    pair for the same initial state.
    """

    __slots__ = ("_run",)

    def __init__(self, run: StateFn[S, A], /) -> None:
        """Create State from a function S -> (S, A)."""
        self._run = run

    @staticmethod
    def pure[St, V](value: V) -> State[St, V]:
        """Lift a value into the monad, leaving the state untouched."""
        return inject(value)

    # Functor / Applicative

    def map[B](self, f: Callable[[A], B], /) -> State[S, B]:
        """Apply f to the produced value; the state passes through."""
        return fmap(f, self)

    def ap[X, B](self: State[S, Callable[[X], B]], m: State[S, X], /) -> State[S, B]:
        """Sequential application: run self, then m, then call the function."""
        return apply(self, m)

    # Monad

    def then[B](self, f: Callable[[A], State[S, B]], /) -> State[S, B]:
        """Monadic bind (>>=)."""
        return bind(f, self)

    def then_[B](self, m: State[S, B], /) -> State[S, B]:
        """Run self, drop its value, continue with m (>>)."""
        return bind(const(m), self)

    def discard(self) -> State[S, A]:
        """Keep the value, roll back any state changes."""
        return discard(self)

    # Protocol methods

    def run(self, state: S, /) -> tuple[S, A]:
        """Execute against an initial state."""
        return self._run(state)

    def __call__(self, state: S, /) -> tuple[S, A]:
        return self._run(state)

    def __repr__(self) -> str:
        return f"State({self._run!r})"

# Constructors

def inject[S, A](value: A) -> State[S, A]:
    """Produce value, leave the state unchanged. Identity for bind."""

    def run(state: S) -> tuple[S, A]:
        return state, value

    return State(run)

def get[S]() -> State[S, S]:
    """Yield the current state as the value."""

    def run(state: S) -> tuple[S, S]:
        return state, state

    return State(run)

def gets[S, A](f: Callable[[S], A]) -> State[S, A]:
    """Yield a projection of the current state, leaving it unchanged."""

    def run(state: S) -> tuple[S, A]:
        return state, f(state)

    return State(run)

def put[S](new_state: S) -> State[S, Unit]:
    """Replace the state with new_state. The incoming state is ignored."""

    def run(state: S) -> tuple[S, Unit]:
        _ = state
        return new_state, None

    return State(run)

def modify[S](f: Callable[[S], S]) -> State[S, Unit]:
    """Replace the state s with f(s)."""

    def run(state: S) -> tuple[S, Unit]:
        return f(state), None

    return State(run)

# Composition

def bind[S, A, B](f: Callable[[A], State[S, B]], m: State[S, A]) -> State[S, B]:
    """
    Run m, feed its value to f, run the result on the state m left behind.

    f is called at run time, once per run.
    """

    def run(state: S) -> tuple[S, B]:
        next_state, value = m.run(state)
        return f(value).run(next_state)

    return State(run)

def fmap[S, A, B](f: Callable[[A], B], m: State[S, A]) -> State[S, B]:
    """Function application lifted into State (<@>). Acts on the value only."""

    def run(state: S) -> tuple[S, B]:
        next_state, value = m.run(state)
        return next_state, f(value)

    return State(run)

def apply[S, A, B](f: State[S, Callable[[A], B]], m: State[S, A]) -> State[S, B]:
    """
    Sequential application (<*>).

    f runs first against the incoming state, m runs against the state f
    left behind. Callers may rely on that order.
    """

    def run(state: S) -> tuple[S, B]:
        state_after_f, func = f.run(state)
        state_after_m, value = m.run(state_after_f)
        return state_after_m, func(value)

    return State(run)

def discard[S, A](m: State[S, A]) -> State[S, A]:
    """
    Run m and keep its value, but restore the state it started from.

    m still runs in full; only its effect on the threaded state is dropped.
    """

    def run(state: S) -> tuple[S, A]:
        _, value = m.run(state)
        return state, value

    return State(run)

# Running

def run_state[S, A](m: State[S, A], state: S) -> tuple[S, A]:
    """Run the computation against an initial state, return (state, value)."""
    return m.run(state)

def eval_state[S, A](m: State[S, A], state: S) -> A:
    """Run and keep only the produced value."""
    _, value = m.run(state)
    return value

def exec_state[S, A](m: State[S, A], state: S) -> S:
    """Run and keep only the final state."""
    final_state, _ = m.run(state)
    return final_state

def is_state(value: typing.Any) -> typing.TypeGuard[State[typing.Any, typing.Any]]:
    """Check whether value is a strict computation."""
    return isinstance(value, State)

__all__ = (
    "State",
    "inject",
    "get",
    "gets",
    "put",
    "modify",
    "bind",
    "fmap",
    "apply",
    "discard",
    "run_state",
    "eval_state",
    "exec_state",
    "is_state",
)
