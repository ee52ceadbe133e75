"""Deferred construction and memoization of LazyState."""

from __future__ import annotations

import logging
import threading

import pytest

from stateflow import CyclicForceError, LazyState, MemoPolicy, State, lazy, strict
from stateflow._helpers import identity


class Calls:
    def __init__(self) -> None:
        self.count = 0

    def counted(self, build):
        def thunk():
            self.count += 1
            return build()
        return thunk


def test_building_runs_nothing() -> None:
    calls = Calls()
    seen: list[str] = []

    base = lazy.defer(calls.counted(lambda: strict.inject(1)))
    chain = lazy.bind(lambda x: seen.append("bind") or lazy.inject(x), base)
    chain = lazy.fmap(lambda x: seen.append("map") or x, chain)
    chain = lazy.discard(chain)
    chain = lazy.sequence([chain, lazy.modify(lambda s: seen.append("modify") or s)])
    chain = lazy.foldM(lambda acc, x: seen.append("fold") or lazy.inject(acc), 0, [chain])
    lazy.apply(lazy.inject(identity), lazy.put(1))

    assert calls.count == 0
    assert seen == []
    assert not chain.is_forced


def test_forcing_materializes_once() -> None:
    calls = Calls()
    m = lazy.defer(calls.counted(lambda: strict.modify(lambda s: s + 1)))

    first = m.force()
    second = m.force()

    assert calls.count == 1
    assert first is second
    assert isinstance(first, State)
    assert m.is_forced


def test_repeated_runs_do_not_rebuild() -> None:
    calls = Calls()
    m = lazy.defer(calls.counted(lambda: strict.gets(lambda s: s * 2)))

    assert lazy.run_state(m, 2) == (2, 4)
    assert lazy.run_state(m, 5) == (5, 10)
    assert m.run(1) == (1, 2)
    assert calls.count == 1


def test_nested_computations_are_forced_with_the_outer_one() -> None:
    calls = Calls()
    inner = lazy.defer(calls.counted(lambda: strict.inject(3)))
    outer = lazy.fmap(lambda x: x + 1, inner)

    outer.force()

    assert inner.is_forced
    assert calls.count == 1
    assert lazy.run_state(outer, None) == (None, 4)
    assert calls.count == 1


def test_shared_subcomputation_is_forced_once() -> None:
    calls = Calls()
    shared = lazy.defer(calls.counted(lambda: strict.modify(lambda s: s + 1)))
    m = lazy.sequence([shared, shared, shared])

    assert lazy.run_state(m, 0) == (3, [None, None, None])
    assert calls.count == 1


def test_bind_continuation_result_forced_at_run_time() -> None:
    built: list[int] = []

    def continuation(x: int) -> LazyState[int, int]:
        built.append(x)
        return lazy.inject(x * 2)

    m = lazy.bind(continuation, lazy.get())
    m.force()
    assert built == []

    assert lazy.run_state(m, 4) == (4, 8)
    assert lazy.run_state(m, 5) == (5, 10)
    assert built == [4, 5]


def test_sequence_snapshots_iterable_at_build_time() -> None:
    items = [lazy.inject(1)]
    m = lazy.sequence(items)
    items.append(lazy.inject(2))
    assert lazy.run_state(m, None) == (None, [1])


def test_failure_is_not_cached_by_default() -> None:
    attempts: list[int] = []

    def flaky() -> State[int, int]:
        attempts.append(1)
        if len(attempts) == 1:
            raise RuntimeError("first attempt")
        return strict.inject(7)

    m = lazy.defer(flaky)

    with pytest.raises(RuntimeError, match="first attempt"):
        m.force()
    assert not m.is_forced

    assert lazy.run_state(m, 0) == (0, 7)
    assert len(attempts) == 2


def test_failure_cached_when_policy_says_so() -> None:
    attempts: list[int] = []
    error = ValueError("broken")

    def broken() -> State[int, int]:
        attempts.append(1)
        raise error

    m = lazy.defer(broken, policy=MemoPolicy(cache_failures=True))

    for _ in range(3):
        with pytest.raises(ValueError) as info:
            m.force()
        assert info.value is error

    assert len(attempts) == 1
    assert not m.is_forced


def test_failure_in_nested_thunk_propagates_through_outer() -> None:
    def missing() -> State[int, int]:
        raise KeyError("inner")

    inner = lazy.defer(missing)
    outer = lazy.discard(inner)

    with pytest.raises(KeyError):
        lazy.run_state(outer, 0)
    assert not outer.is_forced


def test_self_referential_force_raises_cycle_error() -> None:
    holder: dict[str, LazyState[int, int]] = {}
    holder["m"] = lazy.defer(lambda: holder["m"].force())

    with pytest.raises(CyclicForceError):
        holder["m"].force()


def test_cycle_detected_without_thread_safety() -> None:
    holder: dict[str, LazyState[int, int]] = {}
    holder["m"] = lazy.defer(lambda: holder["m"].force(), policy=MemoPolicy(thread_safe=False))

    with pytest.raises(CyclicForceError):
        holder["m"].force()


def test_concurrent_first_force_evaluates_once() -> None:
    calls = Calls()
    gate = threading.Event()

    def slow_build() -> State[int, int]:
        gate.wait(timeout=1.0)
        return strict.inject(1)

    m = lazy.defer(calls.counted(slow_build))
    results: list[State[int, int]] = []

    threads = [threading.Thread(target=lambda: results.append(m.force())) for _ in range(8)]
    for thread in threads:
        thread.start()
    gate.set()
    for thread in threads:
        thread.join()

    assert calls.count == 1
    assert len(results) == 8
    assert all(r is results[0] for r in results)


def test_from_strict_wraps_existing_computation() -> None:
    m = lazy.from_strict(strict.put("new"))
    assert not m.is_forced
    assert lazy.run_state(m, "old") == ("new", None)


def test_method_chaining() -> None:
    m = (
        lazy.get()
        .then(lambda s: lazy.put(s + 1))
        .then_(lazy.gets(lambda s: s * 10))
        .map(str)
    )
    assert m(1) == (2, "20")
    assert LazyState.pure(1).discard().run("s") == ("s", 1)

    adder = lazy.inject(lambda x: x + 1)
    assert adder.ap(lazy.inject(41)).run(None) == (None, 42)


def test_forcing_logs_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    m = lazy.inject(1)
    with caplog.at_level(logging.DEBUG, logger="stateflow.lazy.memo"):
        m.force()
    assert any("Forced" in record.getMessage() for record in caplog.records)
