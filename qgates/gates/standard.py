"""Standard gate matrices as torch tensors.

Matrices are written in the computational basis {|0>, |1>}; rows index the
output amplitude and columns the input amplitude.
"""

from __future__ import annotations

import cmath
import math

import torch

# e^{i*pi/4}, the |1> phase applied by the T gate.
T_PHASE = cmath.exp(1.0j * math.pi / 4.0)


def _resolve(
    dtype: torch.dtype | None, device: torch.device | None
) -> tuple[torch.dtype, torch.device]:
    if dtype is None:
        dtype = torch.complex64
    if device is None:
        device = torch.device("cpu")
    return dtype, device


def I(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:  # noqa: E743, N802
    """Identity gate (single-qubit)."""
    dtype, device = _resolve(dtype, device)
    return torch.eye(2, dtype=dtype, device=device)


def X(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:  # noqa: N802
    """
    Pauli-X gate (bit-flip, NOT gate).

    Args:
        dtype: Complex dtype for the gate matrix. Defaults to torch.complex64.
        device: PyTorch device. Defaults to torch.device("cpu").

    Returns:
        A (2, 2) complex tensor representing the X gate.
    """
    dtype, device = _resolve(dtype, device)
    return torch.tensor([[0.0, 1.0], [1.0, 0.0]], dtype=dtype, device=device)


def Y(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:  # noqa: N802
    """Pauli-Y gate."""
    dtype, device = _resolve(dtype, device)
    return torch.tensor([[0.0, -1.0j], [1.0j, 0.0]], dtype=dtype, device=device)


def Z(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:  # noqa: N802
    """Pauli-Z gate (phase-flip)."""
    dtype, device = _resolve(dtype, device)
    return torch.tensor([[1.0, 0.0], [0.0, -1.0]], dtype=dtype, device=device)


def H(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:  # noqa: N802
    """Hadamard gate."""
    dtype, device = _resolve(dtype, device)
    sqrt2_inv = 1.0 / math.sqrt(2.0)
    return torch.tensor(
        [[sqrt2_inv, sqrt2_inv], [sqrt2_inv, -sqrt2_inv]], dtype=dtype, device=device
    )


def phase(
    theta: float,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> torch.Tensor:
    """
    Diagonal phase gate diag(1, e^{i*theta}).

    Args:
        theta: Phase angle in radians applied to the |1> amplitude.
        dtype: Complex dtype for the gate matrix. Defaults to torch.complex64.
        device: PyTorch device. Defaults to torch.device("cpu").

    Returns:
        A (2, 2) complex tensor.
    """
    dtype, device = _resolve(dtype, device)
    return torch.tensor(
        [[1.0, 0.0], [0.0, cmath.exp(1.0j * float(theta))]], dtype=dtype, device=device
    )


def T(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:  # noqa: N802
    """T gate (pi/8 gate), diag(1, e^{i*pi/4})."""
    dtype, device = _resolve(dtype, device)
    return torch.tensor([[1.0, 0.0], [0.0, T_PHASE]], dtype=dtype, device=device)


def matrix2x2(
    a: complex,
    b: complex,
    c: complex,
    d: complex,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> torch.Tensor:
    """Build the single-qubit matrix [[a, b], [c, d]]."""
    dtype, device = _resolve(dtype, device)
    return torch.tensor(
        [[complex(a), complex(b)], [complex(c), complex(d)]], dtype=dtype, device=device
    )


def CNOT(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:  # noqa: N802
    """
    CNOT gate (controlled-NOT, controlled-X).

    The matrix is ordered |00>, |01>, |10>, |11> with the control as the
    first (high) qubit and the target as the second. The target is flipped
    when the control is |1>.

    Returns:
        A (4, 4) complex tensor representing the CNOT gate.
    """
    dtype, device = _resolve(dtype, device)
    return torch.tensor(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
            [0.0, 0.0, 1.0, 0.0],
        ],
        dtype=dtype,
        device=device,
    )


def is_unitary(matrix: torch.Tensor, atol: float = 1e-6) -> bool:
    """
    Check if a matrix is unitary within a given tolerance.

    A matrix U is unitary if U†U = I, where U† is the conjugate transpose.

    Args:
        matrix: Tensor of shape (..., n, n) representing one or more matrices.
        atol: Absolute tolerance for the check.

    Returns:
        True if the matrix is unitary (within tolerance), False otherwise.
    """
    if matrix.dim() < 2 or matrix.shape[-1] != matrix.shape[-2]:
        return False

    adjoint = matrix.conj().transpose(-1, -2)
    product = torch.matmul(adjoint, matrix)

    n = matrix.shape[-1]
    identity = torch.eye(n, dtype=matrix.dtype, device=matrix.device)
    if product.ndim > 2:
        identity = identity.expand(product.shape)

    diff = torch.abs(product - identity)
    return bool(torch.all(diff < atol).item())
