"""Quantum registers that gates and circuits act on."""

from .base import Computer
from .statevector import StatevectorComputer

__all__ = ["Computer", "StatevectorComputer"]
