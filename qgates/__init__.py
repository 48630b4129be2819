"""qgates - an invertible quantum gate and circuit algebra on PyTorch statevectors."""

__version__ = "0.1.0"

# Backend operations
from .backend import apply_gate, apply_two_qubit_gate, zero_state

# Gates and circuits
from .circuit import Circuit, CNotGate, Gate, HGate, TGate, XGate, YGate, ZGate

# Registers
from .computer import Computer, StatevectorComputer
from .core import Device, default_device, device

# Diagnostics
from .diagnostics import (
    assert_normalized,
    debug_context,
    equal_up_to_global_phase,
    fidelity,
    is_debug_enabled,
    set_debug_enabled,
    state_norm,
)
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    "Gate",
    "HGate",
    "TGate",
    "XGate",
    "YGate",
    "ZGate",
    "CNotGate",
    "Circuit",
    "Computer",
    "StatevectorComputer",
    "Device",
    "device",
    "default_device",
    "zero_state",
    "apply_gate",
    "apply_two_qubit_gate",
    "state_norm",
    "assert_normalized",
    "fidelity",
    "equal_up_to_global_phase",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
