"""
Core type definitions for stateflow.

Aliases shared by the strict and lazy engines.
"""

from __future__ import annotations

from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# StateFn = the raw shape of a computation: state in, (state, value) out
type StateFn[S, A] = Callable[[S], tuple[S, A]]

# Thunk = deferred zero-argument producer
type Thunk[T] = Callable[[], T]

# Unit = the value produced by put/modify
type Unit = None

__all__ = (
    "StateFn",
    "Thunk",
    "Unit",
)
