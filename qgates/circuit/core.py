"""Circuits: ordered, composable sequences of gates."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union, overload

from ..computer.base import Computer
from ..logging import get_logger
from .gates import CNotGate, Gate

logger = get_logger(__name__)


class Circuit(Gate):
    """
    An ordered sequence of gates, itself usable as a gate.

    Insertion order is execution order. :meth:`apply` runs the members
    forward; :meth:`invert` runs each member's inverse in reverse order, so
    that (AB)^-1 = B^-1 A^-1. Circuits are immutable; composition with ``+``
    returns a new circuit.

    Parameters
    ----------
    gates:
        Gates (or nested circuits) in execution order.
    """

    def __init__(self, gates: Iterable[Gate] = ()) -> None:
        self._gates: Tuple[Gate, ...] = tuple(gates)
        for gate in self._gates:
            if not isinstance(gate, Gate):
                raise TypeError(
                    f"Circuit members must be Gate instances, got {type(gate).__name__}"
                )

    @property
    def gates(self) -> Tuple[Gate, ...]:
        """Return the member gates in execution order."""
        return self._gates

    @property
    def name(self) -> str:
        return "Circuit"

    @property
    def qubits(self) -> Tuple[int, ...]:
        """Sorted indices of every qubit touched by a member gate."""
        touched = set()
        for gate in self._gates:
            touched.update(gate.qubits)
        return tuple(sorted(touched))

    def num_qubits(self) -> int:
        """Smallest register size that can hold this circuit (0 if empty)."""
        qubits = self.qubits
        return qubits[-1] + 1 if qubits else 0

    def render(self) -> str:
        return " ".join(gate.render() for gate in self._gates)

    def apply(self, computer: Computer) -> None:
        logger.debug("Applying %d gate(s) to %s", len(self._gates), computer)
        for gate in self._gates:
            gate.apply(computer)

    def invert(self, computer: Computer) -> None:
        logger.debug("Inverting %d gate(s) on %s", len(self._gates), computer)
        for gate in reversed(self._gates):
            gate.invert(computer)

    def adjoint(self) -> "Circuit":
        return Circuit(gate.adjoint() for gate in reversed(self._gates))

    def flatten(self) -> "Circuit":
        """Return an equivalent circuit with nested circuits expanded inline."""
        return Circuit(self._iter_primitive())

    def _iter_primitive(self) -> Iterator[Gate]:
        for gate in self._gates:
            if isinstance(gate, Circuit):
                yield from gate._iter_primitive()
            else:
                yield gate

    def gate_counts(self) -> Dict[str, int]:
        """Return a dictionary mapping gate names to their counts."""
        counts: Dict[str, int] = {}
        for gate in self._iter_primitive():
            counts[gate.name] = counts.get(gate.name, 0) + 1
        return counts

    def depth(self) -> int:
        """
        Number of sequential layers when gates on disjoint qubits share a
        layer. Greedy: each gate goes one layer after the latest layer of any
        qubit it touches.
        """
        qubit_layer: Dict[int, int] = {}
        max_layer = 0

        for gate in self._iter_primitive():
            layer = 1 + max((qubit_layer.get(q, 0) for q in gate.qubits), default=0)
            for q in gate.qubits:
                qubit_layer[q] = layer
            max_layer = max(max_layer, layer)

        return max_layer

    def to_text_diagram(self, n_qubits: Optional[int] = None) -> str:
        """
        Return a simple ASCII diagram of the circuit.

        Each qubit is a horizontal wire and each primitive gate occupies one
        column. Single-qubit gates show their name; CNot uses '●' for the
        control and '⊕' for the target.

        Parameters
        ----------
        n_qubits:
            Number of wires to draw. Defaults to :meth:`num_qubits`. Qubits
            outside [0, n_qubits) are left off the diagram.
        """
        if n_qubits is None:
            n_qubits = self.num_qubits()

        wire_segments: List[List[str]] = [[] for _ in range(n_qubits)]

        for gate in self._iter_primitive():
            for q in range(n_qubits):
                wire_segments[q].append("────")

            if isinstance(gate, CNotGate):
                if 0 <= gate.control < n_qubits:
                    wire_segments[gate.control][-1] = "─●──"
                if 0 <= gate.target < n_qubits:
                    wire_segments[gate.target][-1] = "─⊕──"
            else:
                for q in gate.qubits:
                    if 0 <= q < n_qubits:
                        wire_segments[q][-1] = f"─{gate.name:─<2}─"

        return "\n".join(
            f"q{q}: " + "".join(wire_segments[q]) for q in range(n_qubits)
        )

    def __len__(self) -> int:
        return len(self._gates)

    def __iter__(self) -> Iterator[Gate]:
        return iter(self._gates)

    def __contains__(self, gate: object) -> bool:
        return gate in self._gates

    @overload
    def __getitem__(self, index: int) -> Gate: ...

    @overload
    def __getitem__(self, index: slice) -> "Circuit": ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Gate, "Circuit"]:
        if isinstance(index, slice):
            return Circuit(self._gates[index])
        return self._gates[index]

    def __add__(self, other: Gate) -> "Circuit":
        if isinstance(other, Circuit):
            return Circuit(self._gates + other._gates)
        if isinstance(other, Gate):
            return Circuit(self._gates + (other,))
        return NotImplemented

    def __radd__(self, other: Gate) -> "Circuit":
        if isinstance(other, Gate):
            return Circuit((other,) + self._gates)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Circuit):
            return NotImplemented
        return self._gates == other._gates

    def __hash__(self) -> int:
        return hash(("Circuit", self._gates))

    def __repr__(self) -> str:
        return f"Circuit({list(self._gates)!r})"
