"""Internal helpers for stateflow.

Small function utilities used by both engines."""

from __future__ import annotations

import typing
from collections.abc import Callable

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

def const[T](value: T) -> Callable[[typing.Any], T]:
    """
    Build a function that ignores its argument and returns value.

    Used to bind a computation that does not care about the previous value:
        m.then(const(next_step))
    """
    def constant(_: typing.Any) -> T:
        return value
    return constant

__all__ = (
    "identity",
    "const",
)
