"""
stateflow: composable computations over a threaded-through state.

Two engines share one contract:
- strict: State[S, A] wraps S -> (S, A); composition builds functions,
  run_state executes them
- lazy: LazyState[S, A] defers and memoizes the construction of a State;
  nothing happens until it is forced or run

Architecture:
- Namespace imports (preferred): `from stateflow import strict, lazy`
- Strict sugar exported at the root without suffix
- Lazy engine reached through its namespace or the LazyState class
"""

# Core types
from ._types import StateFn, Thunk, Unit

# Internal helpers
from . import _helpers

# Engines (namespace import - preferred)
from . import strict
from . import lazy

# Strict engine
from .strict import (
    State,
    apply,
    bind,
    discard,
    eval_state,
    exec_state,
    fmap,
    foldM,
    get,
    gets,
    inject,
    modify,
    put,
    replicate,
    run_state,
    sequence,
    traverse,
)

# Lazy engine
from .lazy import DEFAULT_MEMO_POLICY, LazyState, Memo, MemoPolicy, defer, from_strict

# Do-notation
from .do import do, do_lazy

# Errors
from ._errors import CyclicForceError

__all__ = (
    # Types
    "StateFn",
    "Thunk",
    "Unit",
    "_helpers",
    # Namespaces
    "strict",
    "lazy",
    # Strict engine
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
    "sequence",
    "traverse",
    "foldM",
    "replicate",
    "run_state",
    "eval_state",
    "exec_state",
    # Lazy engine
    "LazyState",
    "Memo",
    "MemoPolicy",
    "DEFAULT_MEMO_POLICY",
    "defer",
    "from_strict",
    # Do-notation
    "do",
    "do_lazy",
    # Errors
    "CyclicForceError",
)
