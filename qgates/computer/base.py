"""Register capability contract consumed by gates."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

_SQRT2_INV = 1.0 / math.sqrt(2.0)


class Computer(ABC):
    """
    A quantum register that gates mutate in place.

    Concrete registers implement :meth:`unitary` and :meth:`cnot`. The
    named single-qubit operations default to :meth:`unitary` with the
    textbook coefficients and may be overridden with faster paths.

    Qubit validation is the register's job: implementations should raise
    ``ValueError`` for out-of-range indices and for ``control == target``.
    """

    @abstractmethod
    def unitary(self, bit: int, a: complex, b: complex, c: complex, d: complex) -> None:
        """Apply the single-qubit matrix [[a, b], [c, d]] at ``bit``."""

    @abstractmethod
    def cnot(self, control: int, target: int) -> None:
        """Flip ``target`` when ``control`` is |1>."""

    def hadamard(self, bit: int) -> None:
        self.unitary(bit, _SQRT2_INV, _SQRT2_INV, _SQRT2_INV, -_SQRT2_INV)

    def x(self, bit: int) -> None:
        self.unitary(bit, 0, 1, 1, 0)

    def y(self, bit: int) -> None:
        self.unitary(bit, 0, -1j, 1j, 0)

    def z(self, bit: int) -> None:
        self.unitary(bit, 1, 0, 0, -1)

    def __str__(self) -> str:
        return type(self).__name__
