"""Pytest configuration and shared fixtures for qgates tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- Random normalized register states
- A Computer that records the calls gates make on it
"""

import os
from typing import Callable, List, Tuple

import numpy as np
import pytest
import torch

from qgates.computer import Computer, StatevectorComputer


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG seeded from TEST_RNG_SEED (default: 0)."""
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Set global numpy and torch seeds for every test."""
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    np.random.seed(seed)
    torch.manual_seed(seed)


@pytest.fixture(scope="function")
def random_state(rng: np.random.Generator) -> Callable[[int], torch.Tensor]:
    """Return a factory producing random normalized complex64 statevectors."""

    def _make(n_qubits: int) -> torch.Tensor:
        dim = 2**n_qubits
        amps = rng.normal(size=dim) + 1j * rng.normal(size=dim)
        amps = amps / np.linalg.norm(amps)
        return torch.tensor(amps, dtype=torch.complex64)

    return _make


@pytest.fixture(scope="function")
def random_computer(
    random_state: Callable[[int], torch.Tensor],
) -> Callable[[int], StatevectorComputer]:
    """Return a factory producing registers prepared in a random state."""

    def _make(n_qubits: int) -> StatevectorComputer:
        computer = StatevectorComputer(n_qubits)
        computer.set_state(random_state(n_qubits))
        return computer

    return _make


class RecordingComputer(Computer):
    """Computer that only records the operations requested of it."""

    def __init__(self) -> None:
        self.calls: List[Tuple] = []

    def unitary(self, bit, a, b, c, d) -> None:
        self.calls.append(("unitary", bit, complex(a), complex(b), complex(c), complex(d)))

    def cnot(self, control, target) -> None:
        self.calls.append(("cnot", control, target))

    def hadamard(self, bit) -> None:
        self.calls.append(("hadamard", bit))

    def x(self, bit) -> None:
        self.calls.append(("x", bit))

    def y(self, bit) -> None:
        self.calls.append(("y", bit))

    def z(self, bit) -> None:
        self.calls.append(("z", bit))


@pytest.fixture(scope="function")
def recorder() -> RecordingComputer:
    return RecordingComputer()
