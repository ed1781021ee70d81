"""
Errors for the basis-state simulator.

Precondition violations (a released qubit, a repeated qubit) are raised.
A controlled rotation the model cannot represent is reported as a value,
ControlledRotationResult, so callers can tell it apart from a caller bug.
"""

from dataclasses import dataclass


class SimulatorError(Exception):
    """Base class for everything the simulator raises on purpose."""


class UnallocatedQubit(SimulatorError, KeyError):
    """A gate referenced a qubit handle that is not currently allocated."""

    def __init__(self, qubit, role: str = "target"):
        self.qubit = qubit
        self.role = role
        super().__init__(f"{role} qubit {qubit!r} is not allocated")

    def __str__(self):
        # KeyError would repr() the message otherwise
        return self.args[0]


class DuplicateQubit(SimulatorError, ValueError):
    """A control coincides with the target or with another control."""

    def __init__(self, qubit, message: str = ""):
        self.qubit = qubit
        super().__init__(message or f"qubit {qubit} appears more than once")


class UnsupportedControlledRotation(SimulatorError):
    """A controlled rotation that is not the identity up to global phase."""

    def __init__(self, axis, angle: float):
        self.axis = axis
        self.angle = angle
        super().__init__(
            f"Controlled R({axis}, {angle!r}) is not supported: only rotations "
            f"that are multiples of a full turn (2*pi) are permitted when controlled"
        )


@dataclass(frozen=True)
class ControlledRotationResult:
    """Ok, or the UnsupportedControlledRotation that stopped the gate."""
    error: UnsupportedControlledRotation | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self):
        return self.ok

    def unwrap(self) -> None:
        """Raise the carried error, if any."""
        if self.error is not None:
            raise self.error


OK = ControlledRotationResult()
