"""
Integration Tests: circuits run end to end through the basis-state simulator.

Tests:
  1. Reversible arithmetic (half adder, ripple increment)
  2. Rotations mixed into flip circuits
  3. Unsupported controlled rotation stops the circuit
  4. Precondition errors leave the state untouched
"""

import sys
import numpy as np
import pytest


def test_half_adder():
    """Toffoli + CNOT half adder over all inputs."""
    from basis_sim.circuit import GateCall, run_circuit
    from basis_sim.simulator import ToffoliSimulator

    print("  1a. Half adder...", end=" ")
    for a in (0, 1):
        for b in (0, 1):
            sim = ToffoliSimulator()
            qa, qb, carry = sim.allocate(3)
            calls = [GateCall("X", q) for q, bit in ((qa, a), (qb, b)) if bit]
            calls += [
                GateCall("X", carry, controls=[qa, qb]),
                GateCall("X", qb, controls=[qa]),
            ]
            log = run_circuit(sim, calls)
            assert log.n_gates == len(calls)
            total = int(sim.value(qb)) + 2 * int(sim.value(carry))
            assert total == a + b, f"{a} + {b} gave {total}"

    print("PASS")


def test_ripple_increment():
    """Increment a 4-bit register with a cascade of multi-controlled X."""
    from basis_sim.simulator import ToffoliSimulator

    print("  1b. Ripple increment...", end=" ")
    n = 4
    for start in range(2 ** n):
        sim = ToffoliSimulator()
        reg = sim.allocate(n)  # little endian
        for i, q in enumerate(reg):
            if (start >> i) & 1:
                sim.rotate("X", np.pi, q)
        for i in reversed(range(n)):
            sim.mcx(reg[:i], reg[i])
        got = sum(int(v) << i for i, v in enumerate(sim.values(reg)))
        assert got == (start + 1) % 2 ** n, f"{start} + 1 gave {got}"

    print("PASS")


def test_rotations_inside_flip_circuit():
    """Rotations act as X, identity, or nothing, and never disturb the rest."""
    from basis_sim.circuit import GateCall, run_circuit
    from basis_sim.simulator import ToffoliSimulator

    print("  2a. Rotations in a flip circuit...", end=" ")
    sim = ToffoliSimulator()
    q0, q1, q2 = sim.allocate(3)
    log = run_circuit(sim, [
        GateCall("R", q0, "X", 3 * np.pi),
        GateCall("R", q1, "Y", np.pi),                      # not a flip here
        GateCall("R", q2, "X", np.pi, adjoint=True),
        GateCall("R", q2, "Z", np.pi / 4),
        GateCall("R", q1, "X", 2 * np.pi, controls=[q0, q2]),
        GateCall("R", None, "X", np.pi),
        GateCall("X", q1, controls=[q0, q2]),
    ])
    assert log.final_state == "111", f"got {log.final_state}"
    assert log.n_gates == 7

    print("PASS")


def test_unsupported_controlled_rotation_stops_circuit():
    """The failing gate is fatal; later gates never run."""
    from basis_sim.circuit import GateCall, run_circuit
    from basis_sim.errors import UnsupportedControlledRotation
    from basis_sim.simulator import ToffoliSimulator

    print("  3a. Unsupported controlled rotation...", end=" ")
    sim = ToffoliSimulator()
    c, t = sim.allocate(2)
    calls = [
        GateCall("X", c),
        GateCall("R", t, "X", np.pi, controls=[c]),
        GateCall("X", t),
    ]
    with pytest.raises(UnsupportedControlledRotation) as info:
        run_circuit(sim, calls)
    assert info.value.angle == np.pi
    assert sim.bitstring() == "10", "Gates after the failure must not run"

    print("PASS")


def test_precondition_errors_leave_state():
    """Validation happens before any mutation."""
    from basis_sim.circuit import GateCall, apply_gate
    from basis_sim.errors import DuplicateQubit, UnallocatedQubit
    from basis_sim.simulator import ToffoliSimulator

    print("  4a. Precondition errors...", end=" ")
    sim = ToffoliSimulator()
    a, b = sim.allocate(2)
    sim.x(a)

    for call, err in [
        (GateCall("X", b, controls=[a, a]), DuplicateQubit),
        (GateCall("X", b, controls=[a, 9]), UnallocatedQubit),
        (GateCall("R", 9, "X", np.pi), UnallocatedQubit),
        (GateCall("R", a, "X", 0.0, controls=[a]), DuplicateQubit),
    ]:
        with pytest.raises(err):
            apply_gate(sim, call)
        assert sim.bitstring() == "10"

    with pytest.raises(ValueError):
        apply_gate(sim, GateCall("H", a))

    print("PASS")


def run_all_tests():
    """Run the integration suite as a script."""
    print("\nBasis-State Simulator: Integration Test Suite")
    print("=" * 60)

    tests = [
        ("Reversible arithmetic", [
            test_half_adder,
            test_ripple_increment,
        ]),
        ("Rotations", [
            test_rotations_inside_flip_circuit,
            test_unsupported_controlled_rotation_stops_circuit,
        ]),
        ("Validation", [
            test_precondition_errors_leave_state,
        ]),
    ]

    total = 0
    passed = 0
    failed = 0
    errors = []

    for group_name, group_tests in tests:
        print(f"\n{group_name}:")
        for test_fn in group_tests:
            total += 1
            try:
                test_fn()
                passed += 1
            except Exception as e:
                failed += 1
                errors.append((test_fn.__name__, str(e)))
                print(f"  FAIL: {test_fn.__name__}: {e}")

    print(f"\n{'='*60}")
    print(f"  Results: {passed}/{total} passed, {failed} failed")
    if errors:
        print(f"\n  Failures:")
        for name, err in errors:
            print(f"    {name}: {err}")
    print(f"{'='*60}")

    return failed == 0


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
