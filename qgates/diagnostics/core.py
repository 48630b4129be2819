"""Diagnostic functions for register states."""

from __future__ import annotations

import torch


def state_norm(state: torch.Tensor) -> torch.Tensor:
    """
    Compute the L2 norm of a statevector.

    The last dimension is taken to hold the amplitudes.

    Parameters
    ----------
    state:
        Complex tensor with shape (..., dim).

    Returns
    -------
    torch.Tensor
        Real tensor with shape (...) giving the norm for each batch
        element.

    Raises
    ------
    ValueError
        If state has fewer than 1 dimension.
    """
    if state.dim() < 1:
        raise ValueError("state_norm expects a tensor with at least 1 dimension.")

    norm_sq = (state.conj() * state).sum(dim=-1).real
    return torch.sqrt(norm_sq)


def assert_normalized(
    state: torch.Tensor,
    atol: float = 1e-5,
) -> None:
    """
    Assert that a statevector has norm ~1 within a tolerance.

    Raises
    ------
    ValueError
        If the state is not normalized within the tolerance.
    """
    norms = state_norm(state)
    if not torch.all(torch.isfinite(norms)):
        raise ValueError("State norm contains non-finite values.")

    if not torch.allclose(norms, torch.ones_like(norms), atol=atol, rtol=0.0):
        raise ValueError(
            f"State is not normalized within tolerance {atol}. "
            f"Norms found: {norms.detach().cpu().tolist()}"
        )


def fidelity(
    state_a: torch.Tensor,
    state_b: torch.Tensor,
) -> torch.Tensor:
    """
    Fidelity |<a|b>|^2 between two pure statevectors of shape (..., dim).

    Raises
    ------
    ValueError
        If the shapes differ or the tensors are 0-dimensional.
    """
    if state_a.shape != state_b.shape:
        raise ValueError("fidelity expects tensors with the same shape.")
    if state_a.dim() < 1:
        raise ValueError("fidelity expects at least 1D tensors for pure states.")

    inner = (state_a.conj() * state_b).sum(dim=-1)
    return (inner.abs()) ** 2


def equal_up_to_global_phase(
    state_a: torch.Tensor,
    state_b: torch.Tensor,
    atol: float = 1e-5,
) -> bool:
    """
    Check whether two statevectors differ only by a global phase factor.

    The phase is estimated from the overlap <a|b>; ``state_a`` rotated by that
    phase is then compared element-wise with ``state_b``.

    Parameters
    ----------
    state_a, state_b:
        Complex tensors of identical shape (dim,).
    atol:
        Absolute tolerance for the element-wise comparison.
    """
    if state_a.shape != state_b.shape:
        return False

    inner = (state_a.conj() * state_b).sum()
    magnitude = inner.abs()
    if magnitude <= atol:
        # Orthogonal or zero vectors: only equal if both vanish.
        return bool(
            torch.allclose(state_a, torch.zeros_like(state_a), atol=atol)
            and torch.allclose(state_b, torch.zeros_like(state_b), atol=atol)
        )

    phase = inner / magnitude
    return bool(torch.allclose(state_a * phase, state_b, atol=atol, rtol=0.0))
