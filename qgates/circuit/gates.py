"""Primitive, invertible gates.

A gate is an immutable description of a unitary acting on one or two qubits
of a :class:`~qgates.computer.Computer`. Every gate can render itself as
text, apply itself to a register and apply its exact inverse. Qubit indices
are not validated here; the register rejects bad indices.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple

from ..computer.base import Computer
from ..gates.standard import T_PHASE

_T_PHASE_CONJ = T_PHASE.conjugate()


class Gate(ABC):
    """Something that modifies a quantum computer in a primitive, invertible way."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short mnemonic used in the rendered form."""

    @property
    @abstractmethod
    def qubits(self) -> Tuple[int, ...]:
        """Qubit indices the gate touches."""

    @abstractmethod
    def render(self) -> str:
        """Return the canonical text form, e.g. ``H(2)``."""

    @abstractmethod
    def apply(self, computer: Computer) -> None:
        """Compose this gate's unitary into ``computer``."""

    @abstractmethod
    def invert(self, computer: Computer) -> None:
        """Compose the exact inverse of :meth:`apply` into ``computer``."""

    @abstractmethod
    def adjoint(self) -> "Gate":
        """Return a gate whose :meth:`apply` equals this gate's :meth:`invert`."""

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class _SingleQubitGate(Gate):
    bit: int

    @property
    def qubits(self) -> Tuple[int, ...]:
        return (self.bit,)

    def render(self) -> str:
        return f"{self.name}({self.bit})"


@dataclass(frozen=True)
class HGate(_SingleQubitGate):
    """Hadamard gate. Self-inverse."""

    @property
    def name(self) -> str:
        return "H"

    def apply(self, computer: Computer) -> None:
        computer.hadamard(self.bit)

    def invert(self, computer: Computer) -> None:
        computer.hadamard(self.bit)

    def adjoint(self) -> "HGate":
        return self


@dataclass(frozen=True)
class TGate(_SingleQubitGate):
    """
    T gate, diag(1, e^{i*pi/4}), or its conjugate T* when ``conjugate`` is set.

    T* is defined as the inverse of T: its apply runs T's invert and its
    invert runs T's apply.
    """

    conjugate: bool = False

    @property
    def name(self) -> str:
        return "T*" if self.conjugate else "T"

    def apply(self, computer: Computer) -> None:
        if self.conjugate:
            TGate(self.bit).invert(computer)
        else:
            computer.unitary(self.bit, 1, 0, 0, T_PHASE)

    def invert(self, computer: Computer) -> None:
        if self.conjugate:
            TGate(self.bit).apply(computer)
        else:
            computer.unitary(self.bit, 1, 0, 0, _T_PHASE_CONJ)

    def adjoint(self) -> "TGate":
        return TGate(self.bit, conjugate=not self.conjugate)


@dataclass(frozen=True)
class XGate(_SingleQubitGate):
    """Pauli-X (bit flip). Self-inverse."""

    @property
    def name(self) -> str:
        return "X"

    def apply(self, computer: Computer) -> None:
        computer.x(self.bit)

    def invert(self, computer: Computer) -> None:
        computer.x(self.bit)

    def adjoint(self) -> "XGate":
        return self


@dataclass(frozen=True)
class YGate(_SingleQubitGate):
    """Pauli-Y. Self-inverse, so inverting applies Y once more."""

    @property
    def name(self) -> str:
        return "Y"

    def apply(self, computer: Computer) -> None:
        computer.y(self.bit)

    def invert(self, computer: Computer) -> None:
        # Y^2 = I. Four applications would be the identity, not the inverse.
        computer.y(self.bit)

    def adjoint(self) -> "YGate":
        return self


@dataclass(frozen=True)
class ZGate(_SingleQubitGate):
    """Pauli-Z (phase flip). Self-inverse."""

    @property
    def name(self) -> str:
        return "Z"

    def apply(self, computer: Computer) -> None:
        computer.z(self.bit)

    def invert(self, computer: Computer) -> None:
        computer.z(self.bit)

    def adjoint(self) -> "ZGate":
        return self


@dataclass(frozen=True)
class CNotGate(Gate):
    """
    Controlled-NOT: flips ``target`` when ``control`` is |1>. Self-inverse.

    ``control != target`` is required but left to the register to enforce.
    """

    control: int
    target: int

    @property
    def name(self) -> str:
        return "CNot"

    @property
    def qubits(self) -> Tuple[int, ...]:
        return (self.control, self.target)

    def render(self) -> str:
        return f"CNot({self.control}, {self.target})"

    def apply(self, computer: Computer) -> None:
        computer.cnot(self.control, self.target)

    def invert(self, computer: Computer) -> None:
        computer.cnot(self.control, self.target)

    def adjoint(self) -> "CNotGate":
        return self
