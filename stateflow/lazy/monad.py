"""Lazy State Monad

Combined monad unifying:
- Lazy (deferred, memoized construction)
- State (threaded state, strict semantics once forced)

Every operation here defers the matching strict operation and applies it to
the forced sub-computations. Building a LazyState runs nothing; forcing it
builds the strict computation once and caches it."""

from __future__ import annotations

import typing
from collections.abc import Callable

from .. import strict
from .._helpers import const
from .._types import Thunk, Unit
from ..strict import State
from .memo import DEFAULT_MEMO_POLICY, Memo, MemoPolicy

class LazyState[S, A]:
    """Lazy State Monad.

    Wraps Memo[State[S, A]]. Satisfies the same laws as State:
    - Left identity: inject(a).then(f) ≡ f(a)
    - Right identity: m.then(inject) ≡ m
    - Associativity: m.then(f).then(g) ≡ m.then(x => f(x).then(g))
    """

    __slots__ = ("_memo",)

    def __init__(
        self,
        thunk: Thunk[State[S, A]],
        /,
        *,
        policy: MemoPolicy = DEFAULT_MEMO_POLICY,
    ) -> None:
        """Create LazyState from a fn building the strict computation."""
        self._memo: Memo[State[S, A]] = Memo(thunk, policy=policy)

    @staticmethod
    def pure[St, V](value: V) -> LazyState[St, V]:
        """Lift a value into the monad, leaving the state untouched."""
        return inject(value)

    # Forcing

    def force(self) -> State[S, A]:
        """Materialize the strict computation (once) and return it."""
        return self._memo.force()

    @property
    def is_forced(self) -> bool:
        return self._memo.is_forced

    # Functor / Applicative

    def map[B](self, f: Callable[[A], B], /) -> LazyState[S, B]:
        """Apply f to the produced value; the state passes through."""
        return fmap(f, self)

    def ap[X, B](self: LazyState[S, Callable[[X], B]], m: LazyState[S, X], /) -> LazyState[S, B]:
        """Sequential application: run self, then m, then call the function."""
        return apply(self, m)

    # Monad

    def then[B](self, f: Callable[[A], LazyState[S, B]], /) -> LazyState[S, B]:
        """Monadic bind (>>=)."""
        return bind(f, self)

    def then_[B](self, m: LazyState[S, B], /) -> LazyState[S, B]:
        """Run self, drop its value, continue with m (>>)."""
        return bind(const(m), self)

    def discard(self) -> LazyState[S, A]:
        """Keep the value, roll back any state changes."""
        return discard(self)

    # Protocol methods

    def run(self, state: S, /) -> tuple[S, A]:
        """Force, then execute against an initial state."""
        return self.force().run(state)

    def __call__(self, state: S, /) -> tuple[S, A]:
        return self.run(state)

    def __repr__(self) -> str:
        return f"LazyState({self._memo!r})"

# Constructors

def defer[S, A](
    thunk: Thunk[State[S, A]],
    *,
    policy: MemoPolicy | None = None,
) -> LazyState[S, A]:
    """Wrap a strict-computation builder without calling it."""
    return LazyState(thunk, policy=policy or DEFAULT_MEMO_POLICY)

def from_strict[S, A](m: State[S, A]) -> LazyState[S, A]:
    """Lift an already built strict computation."""
    return LazyState(lambda: m)

def inject[S, A](value: A) -> LazyState[S, A]:
    return LazyState(lambda: strict.inject(value))

def get[S]() -> LazyState[S, S]:
    return LazyState(strict.get)

def gets[S, A](f: Callable[[S], A]) -> LazyState[S, A]:
    return LazyState(lambda: strict.gets(f))

def put[S](new_state: S) -> LazyState[S, Unit]:
    return LazyState(lambda: strict.put(new_state))

def modify[S](f: Callable[[S], S]) -> LazyState[S, Unit]:
    return LazyState(lambda: strict.modify(f))

# Composition

def bind[S, A, B](f: Callable[[A], LazyState[S, B]], m: LazyState[S, A]) -> LazyState[S, B]:
    """
    Deferred bind.

    Forcing forces m. The continuation's result is forced when the strict
    computation runs, because it only exists once m has produced a value.
    """
    return LazyState(lambda: strict.bind(lambda x: f(x).force(), m.force()))

def fmap[S, A, B](f: Callable[[A], B], m: LazyState[S, A]) -> LazyState[S, B]:
    return LazyState(lambda: strict.fmap(f, m.force()))

def apply[S, A, B](f: LazyState[S, Callable[[A], B]], m: LazyState[S, A]) -> LazyState[S, B]:
    """Deferred sequential application. f still runs before m."""
    return LazyState(lambda: strict.apply(f.force(), m.force()))

def discard[S, A](m: LazyState[S, A]) -> LazyState[S, A]:
    return LazyState(lambda: strict.discard(m.force()))

# Running

def run_state[S, A](m: LazyState[S, A], state: S) -> tuple[S, A]:
    """Force m, then run it like strict.run_state."""
    return strict.run_state(m.force(), state)

def eval_state[S, A](m: LazyState[S, A], state: S) -> A:
    return strict.eval_state(m.force(), state)

def exec_state[S, A](m: LazyState[S, A], state: S) -> S:
    return strict.exec_state(m.force(), state)

def is_lazy_state(value: typing.Any) -> typing.TypeGuard[LazyState[typing.Any, typing.Any]]:
    """Check whether value is a lazy computation."""
    return isinstance(value, LazyState)

__all__ = (
    "LazyState",
    "defer",
    "from_strict",
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
    "is_lazy_state",
)
