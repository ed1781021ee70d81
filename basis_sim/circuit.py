"""
Circuit runner: apply a list of gate calls to a ToffoliSimulator, in order.

The first unsupported controlled rotation ends the run with
UnsupportedControlledRotation. Precondition errors propagate unchanged.
"""

import logging
import numpy as np
from dataclasses import dataclass, field
from basis_sim.simulator import ToffoliSimulator

logger = logging.getLogger(__name__)


@dataclass
class GateCall:
    """One gate in a circuit. ``adjoint`` is accepted and ignored."""
    op: str                 # "R" or "X"
    target: int | None
    axis: str = "X"
    angle: float = 0.0
    controls: list[int] = field(default_factory=list)
    adjoint: bool = False


@dataclass
class CircuitLog:
    n_gates: int = 0
    final_state: str = ""


def apply_gate(sim: ToffoliSimulator, call: GateCall):
    op = call.op.upper()
    if op == "R":
        if call.controls:
            sim.rotate_controlled(call.controls, call.axis, call.angle, call.target).unwrap()
        else:
            sim.rotate(call.axis, call.angle, call.target)
    elif op == "X":
        if call.controls:
            sim.mcx(call.controls, call.target)
        else:
            sim.x(call.target)
    else:
        raise ValueError(f"Unknown gate: {call.op}")


def run_circuit(sim: ToffoliSimulator, calls: list[GateCall]) -> CircuitLog:
    """Apply ``calls`` in the order given and report the final bitstring."""
    log = CircuitLog()
    for call in calls:
        apply_gate(sim, call)
        log.n_gates += 1
    log.final_state = sim.bitstring()
    logger.debug("ran %d gates, final state %s", log.n_gates, log.final_state)
    return log


def demo_toffoli_circuit():
    """Half adder on two input bits, plus the rotations the model accepts."""
    print("Basis-State Simulator Demo")
    print("=" * 60)

    for a in (0, 1):
        for b in (0, 1):
            sim = ToffoliSimulator()
            qa, qb, carry = sim.allocate(3)
            calls = []
            if a:
                calls.append(GateCall("R", qa, "X", np.pi))
            if b:
                calls.append(GateCall("R", qb, "X", -np.pi, adjoint=True))
            calls += [
                GateCall("X", carry, controls=[qa, qb]),
                GateCall("X", qb, controls=[qa]),
                GateCall("R", carry, "Z", 0.3),                  # dropped
                GateCall("R", carry, "Y", 4 * np.pi, controls=[qa]),  # identity
            ]
            log = run_circuit(sim, calls)
            s = sim.values([qb, carry])
            print(f"  {a} + {b}: sum={int(s[0])} carry={int(s[1])}  "
                  f"({log.n_gates} gates, state={log.final_state})")

    sim = ToffoliSimulator()
    c, t = sim.allocate(2)
    result = sim.rotate_controlled([c], "X", np.pi, t)
    print(f"\n  Controlled R(X, pi): ok={result.ok}")
    print(f"    → {result.error}")


if __name__ == "__main__":
    demo_toffoli_circuit()
