"""
Toffoli Simulator: classically exact gate execution on basis states.

Every qubit is a definite bit. Only X-equivalent rotations, X, CNOT and
Toffoli are applied; everything else is either the identity or out of reach.

Uncontrolled rotations that are neither a flip nor the identity are dropped
without an error. Controlled rotations must be the identity or they are
reported as UnsupportedControlledRotation.
"""

import logging
from dataclasses import dataclass, replace
from typing import Sequence
from basis_sim.errors import OK, ControlledRotationResult, UnsupportedControlledRotation
from basis_sim.qubit_table import QubitTable
from basis_sim.rotation import DEFAULT_TOLERANCE, Pauli, classify
from basis_sim.validator import QubitValidator

logger = logging.getLogger(__name__)

NO_QUBIT = None


@dataclass
class SimulatorConfig:
    """Configuration for a ToffoliSimulator instance."""
    initial_capacity: int = 8
    angle_tolerance: float = DEFAULT_TOLERANCE


class ToffoliSimulator:
    """Basis-state simulator for flip-only circuits.

    One instance per circuit run. Nothing here is locked; concurrent runs
    need their own simulators.
    """

    def __init__(self, config: SimulatorConfig | None = None, **overrides):
        config = config or SimulatorConfig()
        self.config = replace(config, **overrides) if overrides else config
        self.table = QubitTable(self.config.initial_capacity)
        self.validator = QubitValidator(self.table)

    # ── Qubits ──────────────────────────────────────────────────────

    def allocate(self, n: int = 1) -> list[int]:
        """Allocate ``n`` qubits, all in the False state."""
        return self.table.allocate_many(n)

    def release(self, qubit: int):
        self.table.release(qubit)

    def is_allocated(self, qubit) -> bool:
        return self.table.is_allocated(qubit)

    def reset(self):
        """Release every qubit."""
        self.table.reset()

    def value(self, qubit: int) -> bool:
        return self.table.value(qubit)

    def values(self, qubits: Sequence[int]) -> list[bool]:
        return [self.table.value(q) for q in qubits]

    def bitstring(self, qubits: Sequence[int] | None = None) -> str:
        """Qubit values as '0'/'1', in the given order (default: by handle)."""
        if qubits is None:
            qubits = self.table.allocated_qubits()
        return "".join("1" if v else "0" for v in self.values(qubits))

    # ── Rotations ───────────────────────────────────────────────────

    def rotate(self, axis, angle: float, target):
        """R(axis, angle) on ``target``.

        Flips the target when the rotation is an X flip. Any other rotation is
        treated as having no effect, including ones the model cannot represent.
        """
        if target is NO_QUBIT:
            return
        self.validator.check_target(target)

        rc = classify(axis, angle, self.config.angle_tolerance)
        if rc.is_flip:
            self.table.flip(target)
            logger.debug("R(%s, %r) flipped qubit %d", axis, angle, target)
        elif not rc.is_identity:
            logger.debug("R(%s, %r) on qubit %d is not representable; ignored",
                         axis, angle, target)

    # Flips and identities are their own inverses.
    rotate_adjoint = rotate

    def rotate_controlled(self, controls: Sequence, axis, angle: float,
                          target) -> ControlledRotationResult:
        """Controlled R(axis, angle).

        Only the identity can be controlled here, so on success nothing
        changes and the control values are never read.
        """
        if target is NO_QUBIT:
            return OK
        self.validator.check_controls(controls, target)

        rc = classify(axis, angle, self.config.angle_tolerance)
        if not rc.is_identity:
            logger.debug("controlled R(%s, %r) on qubit %d rejected", axis, angle, target)
            return ControlledRotationResult(UnsupportedControlledRotation(Pauli.parse(axis), angle))
        return OK

    rotate_controlled_adjoint = rotate_controlled

    # ── Flips ───────────────────────────────────────────────────────

    def x(self, target):
        """Pauli-X (NOT)."""
        if target is NO_QUBIT:
            return
        self.validator.check_target(target)
        self.table.flip(target)

    adjoint_x = x

    def mcx(self, controls: Sequence, target):
        """Multi-controlled X: CNOT for one control, Toffoli for two."""
        if target is NO_QUBIT:
            return
        controls = list(controls)
        self.validator.check_controls(controls, target)
        if all(self.table.value(c) for c in controls):
            self.table.flip(target)

    adjoint_mcx = mcx

    def __repr__(self):
        return f"ToffoliSimulator(n_qubits={len(self.table)}, state={self.bitstring()!r})"
