"""Backend implementations for statevector operations."""

from .statevector import apply_gate, apply_two_qubit_gate, zero_state

__all__ = ["zero_state", "apply_gate", "apply_two_qubit_gate"]
