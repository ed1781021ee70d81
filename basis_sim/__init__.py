"""Basis-state (Toffoli) simulator: flip-only rotations on definite bits."""

from basis_sim.errors import (
    ControlledRotationResult,
    DuplicateQubit,
    SimulatorError,
    UnallocatedQubit,
    UnsupportedControlledRotation,
)
from basis_sim.qubit_table import QubitTable
from basis_sim.rotation import Pauli, RotationClass, classify
from basis_sim.simulator import NO_QUBIT, SimulatorConfig, ToffoliSimulator
from basis_sim.validator import QubitValidator
from basis_sim.circuit import CircuitLog, GateCall, run_circuit

__version__ = "0.1.0"
