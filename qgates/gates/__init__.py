"""Standard gate matrices."""

from .standard import (
    CNOT,
    T_PHASE,
    H,
    I,
    T,
    X,
    Y,
    Z,
    is_unitary,
    matrix2x2,
    phase,
)

__all__ = [
    "I",
    "X",
    "Y",
    "Z",
    "H",
    "T",
    "T_PHASE",
    "phase",
    "matrix2x2",
    "CNOT",
    "is_unitary",
]
