"""Diagnostics and debugging utilities for qgates."""

from .core import (
    assert_normalized,
    equal_up_to_global_phase,
    fidelity,
    state_norm,
)
from .debug_mode import (
    NORM_ATOL,
    check_state,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "state_norm",
    "assert_normalized",
    "fidelity",
    "equal_up_to_global_phase",
    "NORM_ATOL",
    "check_state",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
