"""
Generator do-notation for State computations.

@do turns a generator function into a function returning State:

    @do
    def tick(step: int):
        count = yield get()
        yield put(count + step)
        return count

Each `yield m` runs m against the current state and sends its value back
into the generator; the generator's return value is the produced value.
@do_lazy is the same over LazyState and returns an inert computation.

The generator function is called once per run, so a built computation can be
run any number of times.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable, Generator
from functools import wraps

from .lazy import LazyState, is_lazy_state
from .strict import State, is_state

type StateGenerator[S, R] = Generator[State[S, typing.Any], typing.Any, R]
type LazyStateGenerator[S, R] = Generator[LazyState[S, typing.Any], typing.Any, R]


def _drive[S, R](
    gen_or_value: typing.Any,
    state: S,
    step: Callable[[typing.Any], State[S, typing.Any]],
) -> tuple[S, R]:
    # plain functions are allowed: their result is the produced value
    if not inspect.isgenerator(gen_or_value):
        return state, gen_or_value

    gen = gen_or_value
    sent: typing.Any = None
    while True:
        try:
            yielded = gen.send(sent)
        except StopIteration as stop:
            return state, stop.value
        state, sent = step(yielded).run(state)


def _as_state(yielded: typing.Any) -> State[typing.Any, typing.Any]:
    if not is_state(yielded):
        raise TypeError(f"@do generators must yield State, got {type(yielded).__name__}")
    return yielded


def _force_lazy(yielded: typing.Any) -> State[typing.Any, typing.Any]:
    if not is_lazy_state(yielded):
        raise TypeError(f"@do_lazy generators must yield LazyState, got {type(yielded).__name__}")
    return yielded.force()


def do[**P, S, R](func: Callable[P, StateGenerator[S, R]]) -> Callable[P, State[S, R]]:
    """Convert a generator function into a State-returning function."""

    @wraps(func)
    def build(*args: P.args, **kwargs: P.kwargs) -> State[S, R]:
        def run(state: S) -> tuple[S, R]:
            return _drive(func(*args, **kwargs), state, _as_state)

        return State(run)

    return build


def do_lazy[**P, S, R](func: Callable[P, LazyStateGenerator[S, R]]) -> Callable[P, LazyState[S, R]]:
    """Convert a generator function into a LazyState-returning function."""

    @wraps(func)
    def build(*args: P.args, **kwargs: P.kwargs) -> LazyState[S, R]:
        def run(state: S) -> tuple[S, R]:
            return _drive(func(*args, **kwargs), state, _force_lazy)

        return LazyState(lambda: State(run))

    return build


__all__ = ("LazyStateGenerator", "StateGenerator", "do", "do_lazy")
