"""Dense statevector register backed by PyTorch."""

from __future__ import annotations

import torch

from ..backend.statevector import apply_gate, apply_two_qubit_gate, zero_state
from ..core.device import Device, resolve_device
from ..diagnostics import check_state
from ..gates import standard as stdgates
from ..logging import get_logger
from .base import Computer

logger = get_logger(__name__)


class StatevectorComputer(Computer):
    """
    Register holding 2**n_qubits complex amplitudes.

    Every operation replaces the held tensor with the transformed state, so
    the register is mutated in place from the caller's point of view. Qubit 0
    is the least significant bit of the basis index.

    Parameters
    ----------
    n_qubits:
        Number of qubits. Must be >= 1.
    device:
        Device specification (Device, name, torch.device or None).
    dtype:
        Complex dtype of the amplitudes. Defaults to the device's complex dtype.
    """

    def __init__(
        self,
        n_qubits: int,
        device: Device | torch.device | str | None = None,
        dtype: torch.dtype | None = None,
    ) -> None:
        self._device = resolve_device(device)
        self._dtype = dtype if dtype is not None else self._device.complex_dtype
        self._state = zero_state(n_qubits, device=self._device, dtype=self._dtype)
        self._n_qubits = int(n_qubits)
        logger.debug("Created %s", self)

    @property
    def n_qubits(self) -> int:
        return self._n_qubits

    @property
    def device(self) -> Device:
        return self._device

    @property
    def dtype(self) -> torch.dtype:
        return self._dtype

    @property
    def state(self) -> torch.Tensor:
        """Return a copy of the current amplitudes, shape (2**n_qubits,)."""
        return self._state.clone()

    def set_state(self, state: torch.Tensor) -> None:
        """
        Replace the amplitudes.

        Raises
        ------
        ValueError
            If ``state`` is not complex or does not have shape (2**n_qubits,),
            or, in debug mode, is not normalized.
        """
        if not torch.is_complex(state):
            raise ValueError(f"state must be complex dtype, got {state.dtype}")
        expected = (2**self._n_qubits,)
        if tuple(state.shape) != expected:
            raise ValueError(
                f"state must have shape {expected}, got {tuple(state.shape)}"
            )
        new_state = state.detach().to(
            dtype=self._dtype, device=self._device.as_torch_device()
        ).clone()
        check_state(new_state)
        self._state = new_state
        logger.debug("Replaced state of %s", self)

    def reset(self) -> None:
        """Return the register to |0...0>."""
        self._state = zero_state(self._n_qubits, device=self._device, dtype=self._dtype)

    def copy(self) -> "StatevectorComputer":
        """Return an independent register with the same amplitudes."""
        new = StatevectorComputer(self._n_qubits, device=self._device, dtype=self._dtype)
        new._state = self._state.clone()
        return new

    def _matrix_kwargs(self) -> dict:
        return {"dtype": self._dtype, "device": self._device.as_torch_device()}

    def _apply_single(self, bit: int, gate: torch.Tensor) -> None:
        self._state = apply_gate(self._state, gate, qubit=bit, n_qubits=self._n_qubits)

    def unitary(self, bit: int, a: complex, b: complex, c: complex, d: complex) -> None:
        self._apply_single(bit, stdgates.matrix2x2(a, b, c, d, **self._matrix_kwargs()))

    def hadamard(self, bit: int) -> None:
        self._apply_single(bit, stdgates.H(**self._matrix_kwargs()))

    def x(self, bit: int) -> None:
        self._apply_single(bit, stdgates.X(**self._matrix_kwargs()))

    def y(self, bit: int) -> None:
        self._apply_single(bit, stdgates.Y(**self._matrix_kwargs()))

    def z(self, bit: int) -> None:
        self._apply_single(bit, stdgates.Z(**self._matrix_kwargs()))

    def cnot(self, control: int, target: int) -> None:
        self._state = apply_two_qubit_gate(
            self._state,
            stdgates.CNOT(**self._matrix_kwargs()),
            qubit1=control,
            qubit2=target,
            n_qubits=self._n_qubits,
        )

    def __str__(self) -> str:
        return f"StatevectorComputer(n_qubits={self._n_qubits}, device={self._device.name})"

    def __repr__(self) -> str:
        return (
            f"StatevectorComputer(n_qubits={self._n_qubits}, "
            f"device={self._device!r}, dtype={self._dtype})"
        )
