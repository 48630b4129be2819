"""Statevector backend for pure quantum states.

Pure functions that build the |0...0> state and contract single- and
two-qubit gate matrices into a statevector tensor.

Convention: qubit 0 is the least significant bit (LSB) of the computational
basis index. In a 2-qubit state |q1 q0>, qubit 0 is the rightmost bit.
"""

from __future__ import annotations

import math

import torch

from ..core.device import Device, resolve_device
from ..diagnostics import check_state


def zero_state(
    n_qubits: int,
    batch_shape: tuple[int, ...] | None = None,
    device: Device | torch.device | str | None = None,
    dtype: torch.dtype | None = None,
) -> torch.Tensor:
    """
    Create a zero state |0...0> for n_qubits.

    The statevector has shape (*batch_shape, 2**n_qubits) with complex dtype.
    The amplitude at index 0 is set to 1+0j, all others are 0.

    Args:
        n_qubits: Number of qubits. Must be >= 1.
        batch_shape: Optional batch dimensions. If None, no batch dimension.
        device: Device specification. Can be Device, str, torch.device, or None.
        dtype: Complex dtype. Defaults to the device's complex dtype.

    Returns:
        A complex tensor of shape (*batch_shape, 2**n_qubits).

    Raises:
        ValueError: If n_qubits < 1.
    """
    if n_qubits < 1:
        raise ValueError(f"n_qubits must be >= 1, got {n_qubits}")

    qdevice = resolve_device(device)
    if dtype is None:
        dtype = qdevice.complex_dtype

    if batch_shape is None:
        batch_shape = ()

    dim = 2**n_qubits
    state = torch.zeros((*batch_shape, dim), dtype=dtype, device=qdevice.as_torch_device())
    state[..., 0] = 1.0 + 0.0j
    return state


def _check_state(state: torch.Tensor, n_qubits: int | None) -> int:
    """Validate dtype and dimension of ``state`` and return the qubit count."""
    if not torch.is_complex(state):
        raise ValueError(f"state must be complex dtype, got {state.dtype}")

    dim = state.shape[-1]
    if n_qubits is None:
        n_qubits = int(math.log2(dim)) if dim > 0 else 0
        if n_qubits < 1 or 2**n_qubits != dim:
            raise ValueError(
                f"state dimension {dim} is not a power of 2. "
                "Please specify n_qubits explicitly."
            )
    elif 2**n_qubits != dim:
        raise ValueError(
            f"state dimension {dim} does not match 2**n_qubits = {2**n_qubits}"
        )
    return n_qubits


def _check_qubit(qubit: int, n_qubits: int, label: str = "qubit") -> None:
    if qubit < 0 or qubit >= n_qubits:
        raise ValueError(f"{label} index {qubit} out of range [0, {n_qubits})")


def apply_gate(
    state: torch.Tensor,
    gate: torch.Tensor,
    qubit: int,
    n_qubits: int | None = None,
) -> torch.Tensor:
    """
    Apply a single-qubit gate to a specific qubit in the statevector.

    Args:
        state: Statevector tensor of shape (..., 2**n_qubits) with complex dtype.
        gate: Single-qubit gate matrix of shape (2, 2).
        qubit: Index of the qubit to apply the gate to (0-indexed, 0 = LSB).
        n_qubits: Number of qubits. If None, inferred from state.shape[-1].

    Returns:
        A new statevector tensor with the gate applied.

    Raises:
        ValueError: If gate shape is not (2, 2), qubit index is invalid, or
            state dimension is not a power of 2.
    """
    if gate.shape != (2, 2):
        raise ValueError(f"gate must have shape (2, 2), got {tuple(gate.shape)}")

    n_qubits = _check_state(state, n_qubits)
    _check_qubit(qubit, n_qubits)

    dim = state.shape[-1]
    batch_shape = state.shape[:-1]
    batch_size = math.prod(batch_shape) if batch_shape else 1

    # (batch, left, 2, right) isolates the target qubit axis
    left_size = 2 ** (n_qubits - 1 - qubit)
    right_size = 2**qubit
    state_view = state.reshape(batch_size, left_size, 2, right_size).contiguous()

    gate = gate.to(dtype=state.dtype, device=state.device)
    transformed = torch.einsum("oq,blqr->blor", gate, state_view)
    new_state = transformed.reshape(*batch_shape, dim)

    check_state(new_state)

    return new_state


def _swap_gate_qubit_order(gate: torch.Tensor) -> torch.Tensor:
    """Swap qubit order in a two-qubit gate matrix."""
    gate_view = gate.reshape(2, 2, 2, 2)
    return gate_view.permute(1, 0, 3, 2).reshape(4, 4).contiguous()


def apply_two_qubit_gate(
    state: torch.Tensor,
    gate: torch.Tensor,
    qubit1: int,
    qubit2: int,
    n_qubits: int | None = None,
) -> torch.Tensor:
    """
    Apply a two-qubit gate to qubit1 and qubit2 in the statevector.

    The gate matrix is indexed as |q1 q2> where q1 = qubit1 and q2 = qubit2,
    with index = 2*b_q1 + b_q2. For CNOT, qubit1 is the control.

    Raises:
        ValueError: If gate shape is not (4, 4), the qubits coincide or are
            out of range, or the state is malformed.
    """
    if gate.shape != (4, 4):
        raise ValueError(f"gate must have shape (4, 4), got {tuple(gate.shape)}")

    n_qubits = _check_state(state, n_qubits)

    if qubit1 == qubit2:
        raise ValueError(
            f"qubit1 and qubit2 must be distinct, got {qubit1} and {qubit2}"
        )
    _check_qubit(qubit1, n_qubits, "qubit1")
    _check_qubit(qubit2, n_qubits, "qubit2")

    dim = state.shape[-1]
    batch_shape = state.shape[:-1]
    batch_size = math.prod(batch_shape) if batch_shape else 1
    state_flat = state.reshape(batch_size, dim).contiguous()

    gate = gate.to(dtype=state.dtype, device=state.device)
    q_hi, q_lo = (qubit1, qubit2) if qubit1 > qubit2 else (qubit2, qubit1)
    gate_matrix = gate if qubit1 > qubit2 else _swap_gate_qubit_order(gate)

    left_size = 2 ** (n_qubits - q_hi - 1)
    mid_size = 2 ** (q_hi - q_lo - 1)
    right_size = 2**q_lo

    state_view = state_flat.reshape(batch_size, left_size, 2, mid_size, 2, right_size)
    gate_view = gate_matrix.reshape(2, 2, 2, 2)
    transformed = torch.einsum("opij,blimjr->blompr", gate_view, state_view)
    new_state = transformed.reshape(*batch_shape, dim)

    check_state(new_state)

    return new_state


__all__ = [
    "zero_state",
    "apply_gate",
    "apply_two_qubit_gate",
]
