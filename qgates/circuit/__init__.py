"""Gates and circuits over a quantum register."""

from .core import Circuit
from .gates import CNotGate, Gate, HGate, TGate, XGate, YGate, ZGate

__all__ = [
    "Gate",
    "HGate",
    "TGate",
    "XGate",
    "YGate",
    "ZGate",
    "CNotGate",
    "Circuit",
]
