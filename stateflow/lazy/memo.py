"""
Memo cell
=========

Lazily initialised, single-assignment cache behind every LazyState.

A cell holds either the unevaluated thunk or the cached outcome of running
it. Forcing moves it from the first to the second at most once.
"""

from __future__ import annotations

import logging
import threading
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass
from typing import assert_never

from kungfu import Error, Ok, Result

from .._errors import CyclicForceError
from .._types import Thunk

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MemoPolicy:
    """
    Memo cell configuration.

    thread_safe: guard the first force with a lock so concurrent callers
        evaluate the thunk once.
    cache_failures: keep an exception raised by the thunk and re-raise it on
        every later force. When off, the next force runs the thunk again.
    """

    thread_safe: bool = True
    cache_failures: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.thread_safe, bool):
            raise TypeError("MemoPolicy.thread_safe must be a bool")
        if not isinstance(self.cache_failures, bool):
            raise TypeError("MemoPolicy.cache_failures must be a bool")


DEFAULT_MEMO_POLICY = MemoPolicy()


class Memo[T]:
    """Deferred value computed on first force and cached afterwards."""

    __slots__ = ("_thunk", "_outcome", "_lock", "_forcing", "_policy")

    def __init__(self, thunk: Thunk[T], /, *, policy: MemoPolicy = DEFAULT_MEMO_POLICY) -> None:
        self._thunk: Thunk[T] | None = thunk
        self._outcome: Result[T, Exception] | None = None
        self._lock: AbstractContextManager[object] = (
            threading.RLock() if policy.thread_safe else nullcontext()
        )
        self._forcing = False
        self._policy = policy

    @property
    def policy(self) -> MemoPolicy:
        return self._policy

    @property
    def is_forced(self) -> bool:
        """True once a value is cached. A cached failure does not count."""
        match self._outcome:
            case Ok(_):
                return True
            case _:
                return False

    def force(self) -> T:
        """Return the cached value, evaluating the thunk on first demand."""
        outcome = self._outcome
        if outcome is None:
            outcome = self._evaluate()
        match outcome:
            case Ok(value):
                return value
            case Error(exc):
                raise exc
            case _ as unreachable:
                assert_never(unreachable)

    def _evaluate(self) -> Result[T, Exception]:
        with self._lock:
            # another thread may have finished while we waited
            if self._outcome is not None:
                return self._outcome
            if self._forcing:
                logger.debug("Cycle detected while forcing %r", self)
                raise CyclicForceError(repr(self))

            thunk = self._thunk
            assert thunk is not None
            self._forcing = True
            try:
                value = thunk()
            except Exception as exc:
                if self._policy.cache_failures:
                    self._outcome = Error(exc)
                    self._thunk = None
                logger.debug(
                    "Forcing %r failed with %s (cached=%s)",
                    self,
                    type(exc).__name__,
                    self._policy.cache_failures,
                )
                raise
            finally:
                self._forcing = False

            logger.debug("Forced %r", self)
            self._outcome = Ok(value)
            self._thunk = None
            return self._outcome

    def __repr__(self) -> str:
        match self._outcome:
            case None:
                status = "pending"
            case Ok(_):
                status = "forced"
            case _:
                status = "failed"
        return f"<Memo {status} at {id(self):#x}>"


__all__ = ("DEFAULT_MEMO_POLICY", "Memo", "MemoPolicy")
