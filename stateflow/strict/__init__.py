"""
Strict State engine.

Computations are built by composition and run immediately on run_state.
"""

from .collection import foldM, replicate, sequence, traverse
from .monad import (
    State,
    apply,
    bind,
    discard,
    eval_state,
    exec_state,
    fmap,
    get,
    gets,
    inject,
    is_state,
    modify,
    put,
    run_state,
)

__all__ = (
    "State",
    # Constructors
    "inject",
    "get",
    "gets",
    "put",
    "modify",
    # Composition
    "bind",
    "fmap",
    "apply",
    "discard",
    # Collections
    "sequence",
    "traverse",
    "foldM",
    "replicate",
    # Running
    "run_state",
    "eval_state",
    "exec_state",
    "is_state",
)
