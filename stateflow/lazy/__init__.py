"""
Lazy State engine.

Composition builds an inert description; forcing (directly or through
run_state) builds the strict computation once and caches it.
"""

from .collection import foldM, replicate, sequence, traverse
from .memo import DEFAULT_MEMO_POLICY, Memo, MemoPolicy
from .monad import (
    LazyState,
    apply,
    bind,
    defer,
    discard,
    eval_state,
    exec_state,
    fmap,
    from_strict,
    get,
    gets,
    inject,
    is_lazy_state,
    modify,
    put,
    run_state,
)

__all__ = (
    "LazyState",
    # Memo cell
    "Memo",
    "MemoPolicy",
    "DEFAULT_MEMO_POLICY",
    # Constructors
    "defer",
    "from_strict",
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
    "is_lazy_state",
)
