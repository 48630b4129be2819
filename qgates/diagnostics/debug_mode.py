"""Debug mode for qgates registers.

While debug mode is on, every state the statevector backend produces and
every state handed to ``StatevectorComputer.set_state`` is checked for
unit norm. A gate that is not unitary, such as a bad ``unitary(a, b, c, d)``
call, then fails at the operation that broke normalization instead of
producing a plausible but wrong state later on.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

import torch

from .core import assert_normalized

_DEBUG_ENV_VAR = "QGATES_DEBUG"

# Norm tolerance for complex64 states after many gates.
NORM_ATOL = 1e-4

_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").lower() in (
    "1",
    "true",
    "yes",
    "on",
)


def is_debug_enabled() -> bool:
    """Return whether register states are currently norm-checked.

    Starts from the QGATES_DEBUG environment variable (1/true/yes/on).
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Globally enable or disable debug mode."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


def check_state(state: torch.Tensor) -> None:
    """
    Assert ``state`` has unit norm within ``NORM_ATOL`` when debug mode is on.

    No-op otherwise.

    Raises
    ------
    ValueError
        If debug mode is on and the state is not normalized.
    """
    if _debug_enabled:
        assert_normalized(state, atol=NORM_ATOL)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily enable or disable debug mode.

    Example
    -------
    >>> with debug_context(True):
    ...     circuit.apply(computer)  # raises if a gate breaks normalization
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
